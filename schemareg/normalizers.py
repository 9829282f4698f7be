"""
Normalizers bring attribute values into the canonical form of a
matching rule, so that equal values compare equal as plain strings.
"""

from zope.interface import implementer

from schemareg import interfaces


def _text(value):
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8")
    return str(value)


def deepTrim(value):
    """Strip leading and trailing spaces and collapse inner runs of them."""
    return " ".join(_text(value).split())


@implementer(interfaces.INormalizer)
class Normalizer:
    def normalize(self, value):
        return value

    def __call__(self, value):
        return self.normalize(value)

    def __repr__(self):
        return "%s()" % self.__class__.__name__

    def __eq__(self, other):
        return type(self) is type(other)

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(self.__class__)


class NoOpNormalizer(Normalizer):
    pass


class DeepTrimNormalizer(Normalizer):
    def normalize(self, value):
        return deepTrim(value)


class DeepTrimToLowerNormalizer(Normalizer):
    def normalize(self, value):
        return deepTrim(value).lower()


class NumericNormalizer(Normalizer):
    def normalize(self, value):
        return "".join(_text(value).split())


class TelephoneNumberNormalizer(Normalizer):
    def normalize(self, value):
        return "".join(c for c in _text(value) if c not in " -").lower()


class BooleanNormalizer(Normalizer):
    def normalize(self, value):
        return _text(value).strip().upper()


class IntegerNormalizer(Normalizer):
    def normalize(self, value):
        return str(int(_text(value).strip()))


class ObjectIdentifierNormalizer(Normalizer):
    def normalize(self, value):
        return _text(value).strip().lower()
