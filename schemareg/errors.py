"""
Errors raised by the schema registries.

Every error carries the LDAP result code a directory server would
answer with when the failure reaches a client.
"""


class SchemaRegistryError(Exception):
    resultCode = 80
    name = b'other'

    def __init__(self, message=None):
        Exception.__init__(self)
        self.message = message

    def __str__(self):
        return self.toWire().decode('utf-8')

    def toWire(self):
        if self.message:
            return b'%s: %s' % (self.name, self.message.encode('utf-8'))
        return self.name


class InvalidConfigurationError(SchemaRegistryError):
    """A registry or schema manager was set up with unusable parameters."""

    resultCode = 80
    name = b'other'


class _OidError(SchemaRegistryError):
    def __init__(self, oid, message=None):
        SchemaRegistryError.__init__(self, message)
        self.oid = oid


class AlreadyRegisteredError(_OidError):
    """The OID, or one of the element's names, is taken in some layer."""

    resultCode = 68
    name = b'entryAlreadyExists'


class NotFoundError(_OidError):
    resultCode = 32
    name = b'noSuchObject'


class InvalidOidFormatError(_OidError):
    """A symbolic name was passed where a numeric OID is required."""

    resultCode = 21
    name = b'invalidAttributeSyntax'


class InappropriateMatchingError(_OidError):
    """The attribute type has no usable matching rule."""

    resultCode = 18
    name = b'inappropriateMatching'


class NotSchemaAwareError(SchemaRegistryError):
    resultCode = 80
    name = b'other'
