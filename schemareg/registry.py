"""
Dynamic schema element registries.

A dynamic registry wraps one bootstrap catalog it does not own.  Lookups
try the elements registered at runtime first and fall back to the
catalog.  An OID may be registered only if neither layer knows it, so a
runtime registration never shadows a bootstrap element.

Reads take no lock.  Each registration is a single dict assignment of a
complete L{SchemaElementEntry}, made under the registry lock together
with the existence check, so readers see an entry either fully or not at
all.

The registry lock is re-entrant and public, so a caller can hold the
locks of several registries to make a group of registrations atomic.
"""

import threading

from twisted.python import log
from zope.interface import implementer

from schemareg import errors, interfaces, schema
from schemareg.bootstrap import SchemaElementEntry


@implementer(interfaces.IDynamicSchemaElementRegistry)
class GlobalRegistry:
    elementKind = "schema element"

    def __init__(self, bootstrap):
        if bootstrap is None:
            raise errors.InvalidConfigurationError(
                "the bootstrap %s registry cannot be None" % self.elementKind
            )
        self.bootstrap = bootstrap
        self._entries = {}
        # held for check-plus-insert
        self.lock = threading.RLock()

    def _checkAvailable(self, oid, element):
        if oid in self._entries or self.bootstrap.hasElement(oid):
            raise errors.AlreadyRegisteredError(
                oid, "%s with OID %s already registered" % (self.elementKind, oid)
            )

    def _insert(self, entry):
        self._entries[entry.oid] = entry

    def register(self, schemaName, oid, element):
        with self.lock:
            self._checkAvailable(oid, element)
            self._insert(SchemaElementEntry(oid, schemaName, element))
        log.msg(
            "registered %s with OID %r: %r" % (self.elementKind, oid, element),
            debug=True,
        )

    def lookup(self, oid):
        entry = self._entries.get(oid)
        if entry is not None:
            return entry.element
        if self.bootstrap.hasElement(oid):
            return self.bootstrap.lookup(oid)
        raise errors.NotFoundError(
            oid, "%s not found for OID: %s" % (self.elementKind, oid)
        )

    def hasElement(self, oid):
        return oid in self._entries or self.bootstrap.hasElement(oid)

    def schemaNameOf(self, oid):
        if not oid[:1].isdigit():
            raise errors.InvalidOidFormatError(
                oid, "OID %r is not a numeric OID" % (oid,)
            )
        entry = self._entries.get(oid)
        if entry is not None:
            return entry.schemaName
        if self.bootstrap.hasElement(oid):
            return self.bootstrap.schemaNameOf(oid)
        raise errors.NotFoundError(
            oid, "OID %s not found in the OID to schema name map" % (oid,)
        )

    def listOids(self):
        """
        OIDs registered at runtime; the bootstrap ones are not included.
        """
        return list(self._entries)

    def __repr__(self):
        return "<%s with %d runtime entries over %r>" % (
            self.__class__.__name__,
            len(self._entries),
            self.bootstrap,
        )


class GlobalComparatorRegistry(GlobalRegistry):
    elementKind = "comparator"


class GlobalNormalizerRegistry(GlobalRegistry):
    elementKind = "normalizer"


class GlobalDescriptionRegistry(GlobalRegistry):
    """
    Registry of schema descriptions, also addressable by their names.

    Names are case-insensitive and unique across both layers.
    """

    def __init__(self, bootstrap):
        GlobalRegistry.__init__(self, bootstrap)
        self._names = {}

    def _checkAvailable(self, oid, element):
        GlobalRegistry._checkAvailable(self, oid, element)
        if element.oid != oid:
            raise errors.InvalidConfigurationError(
                "%s %r registered under foreign OID %s" % (self.elementKind, element, oid)
            )
        for name in element.getNames():
            if self.hasName(name):
                raise errors.AlreadyRegisteredError(
                    oid, "%s name %r already registered" % (self.elementKind, name)
                )

    def _insert(self, entry):
        # entry first: a name never resolves to a missing entry
        GlobalRegistry._insert(self, entry)
        for name in entry.element.getNames():
            self._names[name.lower()] = entry.oid

    def hasName(self, name):
        return name.lower() in self._names or self.bootstrap.hasName(name)

    def oidOf(self, nameOrOid):
        """
        Resolve a descriptor or numeric OID to the numeric OID.
        """
        if schema.isNumericOid(nameOrOid):
            if nameOrOid in self._entries:
                return nameOrOid
        else:
            oid = self._names.get(nameOrOid.lower())
            if oid is not None:
                return oid
        return self.bootstrap.oidOf(nameOrOid)


class GlobalMatchingRuleRegistry(GlobalDescriptionRegistry):
    elementKind = "matching rule"


class GlobalAttributeTypeRegistry(GlobalDescriptionRegistry):
    elementKind = "attribute type"
