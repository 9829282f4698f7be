"""
Immutable bootstrap catalogs.

A bootstrap catalog is built once from static schema definitions and
never changes afterwards, so it needs no locking.  Dynamic registries
(see L{schemareg.registry}) sit on top of one and delegate to it when a
lookup misses.
"""

import collections
import types

from zope.interface import implementer

from schemareg import bootschema, errors, interfaces, schema

SchemaElementEntry = collections.namedtuple(
    "SchemaElementEntry", ["oid", "schemaName", "element"]
)


@implementer(interfaces.ISchemaElementRegistry)
class BootstrapRegistry:
    elementKind = "schema element"

    def __init__(self, entries=()):
        byOid = {}
        for entry in entries:
            if entry.oid in byOid:
                raise errors.InvalidConfigurationError(
                    "bootstrap %s with OID %s defined by both %s and %s"
                    % (
                        self.elementKind,
                        entry.oid,
                        byOid[entry.oid].schemaName,
                        entry.schemaName,
                    )
                )
            byOid[entry.oid] = entry
        self._entries = types.MappingProxyType(byOid)

    def hasElement(self, oid):
        return oid in self._entries

    def _entry(self, oid):
        try:
            return self._entries[oid]
        except KeyError:
            raise errors.NotFoundError(
                oid, "%s not found for OID: %s" % (self.elementKind, oid)
            )

    def lookup(self, oid):
        return self._entry(oid).element

    def schemaNameOf(self, oid):
        return self._entry(oid).schemaName

    def listOids(self):
        return list(self._entries)

    def __len__(self):
        return len(self._entries)

    def __repr__(self):
        return "<%s with %d entries>" % (self.__class__.__name__, len(self))


class BootstrapComparatorRegistry(BootstrapRegistry):
    elementKind = "comparator"


class BootstrapNormalizerRegistry(BootstrapRegistry):
    elementKind = "normalizer"


class BootstrapDescriptionRegistry(BootstrapRegistry):
    """
    Catalog of schema descriptions, also addressable by their names.
    """

    def __init__(self, entries=()):
        entries = list(entries)
        BootstrapRegistry.__init__(self, entries)
        names = {}
        for entry in entries:
            for name in entry.element.getNames():
                key = name.lower()
                if key in names:
                    raise errors.InvalidConfigurationError(
                        "bootstrap %s name %r used by both %s and %s"
                        % (self.elementKind, name, names[key], entry.oid)
                    )
                names[key] = entry.oid
        self._names = types.MappingProxyType(names)

    def hasName(self, name):
        return name.lower() in self._names

    def oidOf(self, nameOrOid):
        """
        Resolve a descriptor or numeric OID to the numeric OID.
        """
        if schema.isNumericOid(nameOrOid):
            if self.hasElement(nameOrOid):
                return nameOrOid
        else:
            oid = self._names.get(nameOrOid.lower())
            if oid is not None:
                return oid
        raise errors.NotFoundError(
            nameOrOid, "%s not found: %s" % (self.elementKind, nameOrOid)
        )


class BootstrapMatchingRuleRegistry(BootstrapDescriptionRegistry):
    elementKind = "matching rule"


class BootstrapAttributeTypeRegistry(BootstrapDescriptionRegistry):
    elementKind = "attribute type"


class BootstrapCatalogs:
    """
    The four bootstrap catalogs built from one set of schemas.
    """

    def __init__(self, comparators, normalizers, matchingRules, attributeTypes, schemaNames=()):
        self.comparators = comparators
        self.normalizers = normalizers
        self.matchingRules = matchingRules
        self.attributeTypes = attributeTypes
        self.schemaNames = tuple(schemaNames)

    def __repr__(self):
        return "<%s schemas=%r>" % (self.__class__.__name__, self.schemaNames)


def load(schemaNames=None, schemas=None):
    """
    Build the bootstrap catalogs of the named schemas.

    @param schemaNames: names of the schemas to load, defaulting to
    L{bootschema.DEFAULT_SCHEMAS}.

    @param schemas: mapping of schema name to definitions, defaulting
    to L{bootschema.SCHEMAS}.

    @raise schemareg.errors.InvalidConfigurationError: a name is not
    defined, or two schemas define the same OID.
    """
    if schemaNames is None:
        schemaNames = bootschema.DEFAULT_SCHEMAS
    if schemas is None:
        schemas = bootschema.SCHEMAS

    comparators = []
    normalizers = []
    matchingRules = []
    attributeTypes = []

    for schemaName in schemaNames:
        try:
            definitions = schemas[schemaName]
        except KeyError:
            raise errors.InvalidConfigurationError(
                "unknown bootstrap schema %r" % (schemaName,)
            )

        for text, comparator, normalizer in definitions.get("matchingRules", ()):
            rule = schema.MatchingRuleDescription(text)
            matchingRules.append(SchemaElementEntry(rule.oid, schemaName, rule))
            comparators.append(SchemaElementEntry(rule.oid, schemaName, comparator))
            normalizers.append(SchemaElementEntry(rule.oid, schemaName, normalizer))

        for text in definitions.get("attributeTypes", ()):
            attributeType = schema.AttributeTypeDescription(text)
            attributeTypes.append(
                SchemaElementEntry(attributeType.oid, schemaName, attributeType)
            )

    return BootstrapCatalogs(
        BootstrapComparatorRegistry(comparators),
        BootstrapNormalizerRegistry(normalizers),
        BootstrapMatchingRuleRegistry(matchingRules),
        BootstrapAttributeTypeRegistry(attributeTypes),
        schemaNames=schemaNames,
    )
