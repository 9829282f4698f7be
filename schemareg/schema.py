"""
RFC 4512 schema descriptions for matching rules and attribute types.
"""

import re

NUMERICOID = re.compile(r"^[0-9]+(\.[0-9]+)*$")


def isNumericOid(text):
    return bool(text) and NUMERICOID.match(text) is not None


def extractWord(text):
    if not text:
        return "", ""
    l = text.split(None, 1)
    word = l[0]
    try:
        text = l[1]
    except IndexError:
        text = ""
    return word, text


def peekWord(text):
    if not text:
        return None
    return text.split(None, 1)[0]


class InvalidSchemaDescription(Exception):
    """
    The text is not a well formed schema description.
    """

    def __init__(self, text, reason):
        Exception.__init__(self)
        self.text = text
        self.reason = reason

    def __str__(self):
        return "Invalid schema description %r: %s." % (self.text, self.reason)


class _SchemaDescription:
    """
    Parser shared by the description kinds.

    Subclasses list the keywords they accept: C{flags} maps keywords
    that stand alone to attribute names, C{woids} maps keywords followed
    by a single oid or descriptor.
    """

    flags = {}
    woids = {}

    def __init__(self, text):
        self.oid = None
        self.name = None
        self.desc = None
        self.obsolete = 0
        for attr in self.flags.values():
            setattr(self, attr, 0)
        for attr in self.woids.values():
            setattr(self, attr, None)
        # experimental terms ("X-SOMETHING") are kept for getText
        self.x_attrs = []

        if text is not None:
            self._source = text
            self._parse(text)

    def _fail(self, reason):
        raise InvalidSchemaDescription(self._source, reason)

    def _parse(self, text):
        text = text.strip()
        if text[:1] != "(" or text[-1:] != ")":
            self._fail("must be in parentheses")
        text = text[1:-1].strip()

        self.oid, text = extractWord(text)
        if not isNumericOid(self.oid):
            self._fail("%r is not a numeric OID" % (self.oid,))

        while True:
            text = text.lstrip()
            word, text = extractWord(text)
            if not word:
                break

            if word == "NAME":
                self.name, text = self._qdescrs(text)
            elif word == "DESC":
                self.desc, text = self._qdstring(text)
            elif word == "OBSOLETE":
                self.obsolete = 1
            elif word in self.flags:
                setattr(self, self.flags[word], 1)
            elif word in self.woids:
                value, text = extractWord(text)
                if not value:
                    self._fail("%s needs a value" % word)
                setattr(self, self.woids[word], value)
            elif word.startswith("X-"):
                text = text.lstrip()
                if text[:1] == "(":
                    value, text = self._qdescrs(text)
                else:
                    value, text = self._qdstring(text)
                self.x_attrs.append((word, value))
            else:
                self._fail("unexpected term %r" % word)

        self._check()

    def _check(self):
        pass

    def _qdstring(self, text):
        text = text.lstrip()
        if text[:1] != "'":
            self._fail("expected a quoted string")
        end = text.find("'", 1)
        if end < 0:
            self._fail("unterminated quoted string")
        return text[1:end], text[end + 1 :]

    def _qdescrs(self, text):
        text = text.lstrip()
        if text[:1] == "'":
            value, text = self._qdstring(text)
            return (value,), text
        if text[:1] != "(":
            self._fail("expected a quoted name or a list of them")
        end = text.find(")")
        if end < 0:
            self._fail("unterminated list")
        inner, text = text[1:end].strip(), text[end + 1 :]
        r = []
        while inner:
            value, inner = self._qdstring(inner)
            r.append(value)
            inner = inner.strip()
        if not r:
            self._fail("empty name list")
        return tuple(r), text

    def getNames(self):
        return list(self.name or ())

    def _quoted(self, values):
        s = " ".join("'%s'" % v for v in values)
        if len(values) > 1:
            s = "( %s )" % s
        return s

    def getText(self):
        r = [self.oid]
        if self.name is not None:
            r.append("NAME %s" % self._quoted(self.name))
        if self.desc is not None:
            r.append("DESC '%s'" % self.desc)
        if self.obsolete:
            r.append("OBSOLETE")
        for keyword, attr in self.woids.items():
            value = getattr(self, attr)
            if value is not None:
                r.append("%s %s" % (keyword, value))
        for keyword, attr in self.flags.items():
            if getattr(self, attr):
                r.append(keyword)
        for keyword, value in self.x_attrs:
            if isinstance(value, str):
                value = (value,)
            r.append("%s %s" % (keyword, self._quoted(value)))
        return "( " + " ".join(r) + " )"

    def __repr__(self):
        return "<%s oid=%s name=%r>" % (self.__class__.__name__, self.oid, self.name)

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return self.getText() == other.getText()

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.getText())


class MatchingRuleDescription(_SchemaDescription):
    """
    ASN Syntax::

        MatchingRuleDescription = "(" whsp
                numericoid whsp  ; MatchingRule identifier
                [ "NAME" qdescrs ]
                [ "DESC" qdstring ]
                [ "OBSOLETE" whsp ]
                "SYNTAX" numericoid
                whsp ")"
    """

    woids = {"SYNTAX": "syntax"}

    def _check(self):
        if self.syntax is None:
            self._fail("SYNTAX is required")


class AttributeTypeDescription(_SchemaDescription):
    """
    ASN Syntax::

        AttributeTypeDescription = "(" whsp
                numericoid whsp                ; AttributeType identifier
                [ "NAME" qdescrs ]             ; name used in AttributeType
                [ "DESC" qdstring ]            ; description
                [ "OBSOLETE" whsp ]
                [ "SUP" woid ]                 ; derived from this other AttributeType
                [ "EQUALITY" woid              ; Matching Rule name
                [ "ORDERING" woid              ; Matching Rule name
                [ "SUBSTR" woid ]              ; Matching Rule name
                [ "SYNTAX" whsp noidlen whsp ] ; see section 4.3
                [ "SINGLE-VALUE" whsp ]        ; default multi-valued
                [ "COLLECTIVE" whsp ]          ; default not collective
                [ "NO-USER-MODIFICATION" whsp ]; default user modifiable
                [ "USAGE" whsp AttributeUsage ]; default userApplications
                whsp ")"
    """

    woids = {
        "SUP": "sup",
        "EQUALITY": "equality",
        "ORDERING": "ordering",
        "SUBSTR": "substr",
        "SYNTAX": "syntax",
        "USAGE": "usage",
    }
    flags = {
        "SINGLE-VALUE": "single_value",
        "COLLECTIVE": "collective",
        "NO-USER-MODIFICATION": "no_user_modification",
    }

    usages = (
        "userApplications",
        "directoryOperation",
        "distributedOperation",
        "dSAOperation",
    )

    def _check(self):
        if self.sup is None and self.syntax is None:
            self._fail("one of SUP or SYNTAX is required")
        if self.usage is not None and self.usage not in self.usages:
            self._fail("unknown USAGE %r" % self.usage)
