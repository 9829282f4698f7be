"""
RFC 4514 distinguished names, optionally bound to a schema manager.

A name bound with L{DistinguishedName.apply} is "schema-aware": every
attribute type has been resolved to its OID and every value brought into
the canonical form of the attribute's equality matching rule.
"""

from functools import total_ordering
import string

# "=" is escaped as well; slapd refuses unescaped "=" in RDN values.
escapedChars = ',+"\\<>;='
escapedChars_leading = ' #'
escapedChars_trailing = ' '


def _text(value):
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return value


def escape(s):
    r = []
    for i, c in enumerate(s):
        if (c in escapedChars
                or (i == 0 and c in escapedChars_leading)
                or (i == len(s) - 1 and c in escapedChars_trailing)):
            r.append('\\' + c)
        elif ord(c) <= 31:
            r.append('\\%02X' % ord(c))
        else:
            r.append(c)
    return ''.join(r)


def unescape(s):
    r = []
    i = 0
    while i < len(s):
        c = s[i]
        if c != '\\':
            r.append(c)
            i += 1
            continue
        pair = s[i + 1:i + 3]
        if len(pair) == 2 and all(x in string.hexdigits for x in pair):
            r.append(chr(int(pair, 16)))
            i += 3
        else:
            r.append(s[i + 1:i + 2])
            i += 2
    return ''.join(r)


def _splitOnNotEscaped(s, separator):
    if not s:
        return []

    r = ['']
    i = 0
    while i < len(s):
        c = s[i]
        if c == '\\':
            r[-1] += s[i:i + 2]
            i += 2
        elif c == separator:
            r.append('')
            i += 1
            while s[i:i + 1] == ' ':
                i += 1
        else:
            r[-1] += c
            i += 1
    return r


class InvalidRelativeDistinguishedName(Exception):
    """
    Invalid relative distinguished name.
    """

    def __init__(self, rdn):
        Exception.__init__(self)
        self.rdn = rdn

    def __str__(self):
        return "Invalid relative distinguished name %s." % repr(self.rdn)


class LDAPAttributeTypeAndValue:
    attributeType = None
    value = None

    def __init__(self, stringValue=None, attributeType=None, value=None):
        if stringValue is None:
            assert attributeType is not None
            assert value is not None
            self.attributeType = _text(attributeType)
            self.value = _text(value)
        else:
            assert attributeType is None
            assert value is None

            stringValue = _text(stringValue)
            if '=' not in stringValue:
                raise InvalidRelativeDistinguishedName(stringValue)
            attributeType, value = stringValue.split('=', 1)
            if not attributeType.strip():
                raise InvalidRelativeDistinguishedName(stringValue)
            self.attributeType = attributeType.strip()
            self.value = value

    def getText(self):
        return '='.join((escape(self.attributeType), escape(self.value)))

    __str__ = getText

    def getNormText(self, schemaManager):
        oid = schemaManager.normalizeAttributeType(self.attributeType)
        value = schemaManager.normalizeValue(oid, self.value)
        return '%s=%s' % (oid, escape(value))

    def __repr__(self):
        return '%s(attributeType=%r, value=%r)' % (
            self.__class__.__name__, self.attributeType, self.value)

    def __hash__(self):
        return hash((self.attributeType.lower(), self.value.lower()))

    def __eq__(self, other):
        if not isinstance(other, LDAPAttributeTypeAndValue):
            return NotImplemented
        return (self.attributeType.lower() == other.attributeType.lower()
                and self.value.lower() == other.value.lower())

    def __ne__(self, other):
        return not (self == other)


class RelativeDistinguishedName:
    """LDAP Relative Distinguished Name."""

    attributeTypesAndValues = None

    def __init__(self, magic=None, stringValue=None, attributeTypesAndValues=None):
        if magic is not None:
            assert stringValue is None
            assert attributeTypesAndValues is None
            if isinstance(magic, RelativeDistinguishedName):
                attributeTypesAndValues = magic.split()
            elif isinstance(magic, (bytes, str)):
                stringValue = magic
            else:
                attributeTypesAndValues = magic

        if stringValue is None:
            assert attributeTypesAndValues is not None
            self.attributeTypesAndValues = tuple(attributeTypesAndValues)
        else:
            assert attributeTypesAndValues is None
            self.attributeTypesAndValues = tuple(
                LDAPAttributeTypeAndValue(stringValue=unescape(x))
                for x in _splitOnNotEscaped(_text(stringValue), '+'))

    def split(self):
        return self.attributeTypesAndValues

    def getText(self):
        return '+'.join([x.getText() for x in self.attributeTypesAndValues])

    __str__ = getText

    def getNormText(self, schemaManager):
        # multi-valued RDNs are unordered
        return '+'.join(sorted(x.getNormText(schemaManager)
                               for x in self.attributeTypesAndValues))

    def __repr__(self):
        return '%s(attributeTypesAndValues=%r)' % (
            self.__class__.__name__, self.attributeTypesAndValues)

    def __hash__(self):
        return hash(self.attributeTypesAndValues)

    def __eq__(self, other):
        if not isinstance(other, RelativeDistinguishedName):
            return NotImplemented
        return self.split() == other.split()

    def __ne__(self, other):
        return not (self == other)

    def count(self):
        return len(self.attributeTypesAndValues)


@total_ordering
class DistinguishedName:
    """LDAP Distinguished Name."""

    listOfRDNs = None
    schemaManager = None
    _normText = None

    def __init__(self, magic=None, stringValue=None, listOfRDNs=None):
        assert (magic is not None
                or stringValue is not None
                or listOfRDNs is not None)
        if magic is not None:
            assert stringValue is None
            assert listOfRDNs is None
            if isinstance(magic, DistinguishedName):
                listOfRDNs = magic.split()
            elif isinstance(magic, (bytes, str)):
                stringValue = magic
            else:
                listOfRDNs = magic

        if stringValue is None:
            for x in listOfRDNs:
                assert isinstance(x, RelativeDistinguishedName)
            self.listOfRDNs = tuple(listOfRDNs)
        else:
            assert listOfRDNs is None
            self.listOfRDNs = tuple(
                RelativeDistinguishedName(stringValue=x)
                for x in _splitOnNotEscaped(_text(stringValue), ','))

    def apply(self, schemaManager):
        """
        Bind a copy of this name to C{schemaManager}.

        @raise schemareg.errors.NotFoundError: an attribute type is not
        known to the schema manager.
        """
        normText = ','.join(rdn.getNormText(schemaManager)
                            for rdn in self.listOfRDNs)
        bound = self.__class__(listOfRDNs=self.listOfRDNs)
        bound.schemaManager = schemaManager
        bound._normText = normText
        return bound

    def isSchemaAware(self):
        return self.schemaManager is not None

    def getNormText(self):
        if not self.isSchemaAware():
            raise ValueError('%r is not bound to a schema' % (self,))
        return self._normText

    def split(self):
        return self.listOfRDNs

    def up(self):
        return DistinguishedName(listOfRDNs=self.listOfRDNs[1:])

    def isEmpty(self):
        return not self.listOfRDNs

    def getText(self):
        return ','.join([x.getText() for x in self.listOfRDNs])

    __str__ = getText

    def __repr__(self):
        return '%s(listOfRDNs=%r)' % (self.__class__.__name__, self.listOfRDNs)

    def __hash__(self):
        # equal names hash alike whatever the case of their text
        return hash(self.split())

    def __eq__(self, other):
        if isinstance(other, bytes):
            return self.getText().encode('utf-8') == other
        if isinstance(other, str):
            return self.getText() == other
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return self.split() == other.split()

    def __ne__(self, other):
        return not (self == other)

    def __lt__(self, other):
        if not isinstance(other, DistinguishedName):
            return NotImplemented
        return [x.getText() for x in self.split()] < [x.getText() for x in other.split()]

    def contains(self, other):
        """Does the tree rooted at DN contain or equal the other DN."""
        if not isinstance(other, DistinguishedName):
            other = DistinguishedName(other)
        its = list(other.split())
        mine = list(self.split())

        while mine and its:
            if mine.pop() != its.pop():
                return False
        return not mine
