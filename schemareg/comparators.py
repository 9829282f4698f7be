"""
Comparators for the bootstrap matching rules.

A comparator orders two values of an attribute type.  The registries
never look inside one; anything providing L{IComparator} can be
registered.
"""

from zope.interface import implementer

from schemareg import distinguishedname, interfaces, normalizers


def _cmp(a, b):
    return (a > b) - (a < b)


@implementer(interfaces.IComparator)
class Comparator:
    """
    Compare values after passing both through C{prepare}.
    """

    def prepare(self, value):
        return value

    def compare(self, a, b):
        return _cmp(self.prepare(a), self.prepare(b))

    def __call__(self, a, b):
        return self.compare(a, b)

    def __repr__(self):
        return "%s()" % self.__class__.__name__

    def __eq__(self, other):
        return type(self) is type(other)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.__class__)


class _NormalizingComparator(Comparator):
    normalizer = None

    def prepare(self, value):
        return self.normalizer.normalize(value)


class CaseIgnoreComparator(_NormalizingComparator):
    normalizer = normalizers.DeepTrimToLowerNormalizer()


class CaseExactComparator(_NormalizingComparator):
    normalizer = normalizers.DeepTrimNormalizer()


class NumericStringComparator(_NormalizingComparator):
    normalizer = normalizers.NumericNormalizer()


class TelephoneNumberComparator(_NormalizingComparator):
    normalizer = normalizers.TelephoneNumberNormalizer()


class BooleanComparator(_NormalizingComparator):
    # FALSE sorts before TRUE
    normalizer = normalizers.BooleanNormalizer()


class IntegerComparator(Comparator):
    def prepare(self, value):
        if isinstance(value, int):
            return value
        return int(normalizers.deepTrim(value))


class OctetStringComparator(Comparator):
    def prepare(self, value):
        if isinstance(value, str):
            return value.encode("utf-8")
        return bytes(value)


class ObjectIdentifierComparator(Comparator):
    """
    Numeric OIDs order arc by arc; descriptors order case-insensitively
    after all numeric OIDs.
    """

    def prepare(self, value):
        value = normalizers.ObjectIdentifierNormalizer().normalize(value)
        if value[:1].isdigit():
            return (0, tuple(int(arc) for arc in value.split(".")), "")
        return (1, (), value)


class DistinguishedNameComparator(Comparator):
    """
    Compare DNs on their case-ignore text form.

    Values are not normalised against a schema here; callers holding a
    schema manager compare schema-aware names instead.
    """

    def prepare(self, value):
        if not isinstance(value, distinguishedname.DistinguishedName):
            value = distinguishedname.DistinguishedName(value)
        return tuple(
            tuple(
                sorted(
                    (ava.attributeType.lower(), normalizers.deepTrim(ava.value).lower())
                    for ava in rdn.split()
                )
            )
            for rdn in value.split()
        )


@implementer(interfaces.IComparator)
class DeferredComparator:
    """
    Stand-in that resolves the comparator for C{oid} through C{registry}
    the first time it is used.

    Pickling keeps only the OID; bind the unpickled copy to a registry
    with L{bind} before use.
    """

    def __init__(self, oid, registry=None):
        self.oid = oid
        self.registry = registry
        self._resolved = None

    def bind(self, registry):
        self.registry = registry
        self._resolved = None

    def _resolve(self):
        if self._resolved is None:
            if self.registry is None:
                raise ValueError(
                    "DeferredComparator for %s is not bound to a registry" % self.oid
                )
            self._resolved = self.registry.lookup(self.oid)
        return self._resolved

    def compare(self, a, b):
        return self._resolve().compare(a, b)

    def __call__(self, a, b):
        return self.compare(a, b)

    def __getstate__(self):
        return {"oid": self.oid}

    def __setstate__(self, state):
        self.oid = state["oid"]
        self.registry = None
        self._resolved = None

    def __repr__(self):
        return "%s(%r)" % (self.__class__.__name__, self.oid)
