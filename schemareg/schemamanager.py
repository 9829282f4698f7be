"""
The schema manager owns one dynamic registry per element kind and
answers the questions the rest of a directory service asks of the
schema: which OID an attribute type name stands for, and how two values
of an attribute type compare.
"""

import threading

from twisted.python import log

from schemareg import bootstrap as bootstrapmod
from schemareg import config as configmod
from schemareg import errors, registry, schema


def readDefinitions(lines):
    """
    Split schema file lines into (keyword, description) pairs.

    A definition starts with its keyword at the beginning of a line and
    continues over the indented lines that follow.  Blank lines and
    lines starting with "#" are ignored.
    """
    keyword = None
    parts = []
    for line in lines:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        if line[:1].isspace():
            if keyword is None:
                raise schema.InvalidSchemaDescription(line, "continuation without a definition")
            parts.append(line.strip())
            continue
        if keyword is not None:
            yield keyword, " ".join(parts)
        keyword, rest = schema.extractWord(line.strip())
        keyword = keyword.lower()
        parts = [rest.strip()]
    if keyword is not None:
        yield keyword, " ".join(parts)


class SchemaManager:
    """
    Registries for comparators, normalizers, matching rules and
    attribute types, layered over one set of bootstrap catalogs.

    @param bootstrap: a L{schemareg.bootstrap.BootstrapCatalogs}; built
    from the configured bootstrap schemas when not given.

    @param config: a L{schemareg.config.RegistryConfig}.
    """

    def __init__(self, bootstrap=None, config=None):
        if config is None:
            config = configmod.RegistryConfig()
        self.config = config
        if bootstrap is None:
            bootstrap = bootstrapmod.load(config.getBootstrapSchemas())
        self.bootstrap = bootstrap

        self.comparators = registry.GlobalComparatorRegistry(bootstrap.comparators)
        self.normalizers = registry.GlobalNormalizerRegistry(bootstrap.normalizers)
        self.matchingRules = registry.GlobalMatchingRuleRegistry(bootstrap.matchingRules)
        self.attributeTypes = registry.GlobalAttributeTypeRegistry(
            bootstrap.attributeTypes
        )
        # serializes the multi-registry additions
        self._lock = threading.Lock()

    @classmethod
    def fromConfig(cls, config=None):
        """
        Create a schema manager and load the configured schema files.
        """
        manager = cls(config=config)
        for schemaName, path in sorted(manager.config.getSchemaFiles().items()):
            manager.loadSchemaFile(schemaName, path)
        return manager

    def _registries(self):
        return (self.attributeTypes, self.matchingRules, self.comparators, self.normalizers)

    def addMatchingRule(self, schemaName, description, comparator, normalizer):
        if isinstance(description, str):
            description = schema.MatchingRuleDescription(description)
        oid = description.oid
        registries = (self.matchingRules, self.comparators, self.normalizers)
        # the registry locks keep direct registrants out until all three
        # elements are in; always taken in this order
        with self._lock, self.matchingRules.lock:
            with self.comparators.lock, self.normalizers.lock:
                for r in registries:
                    if r.hasElement(oid):
                        raise errors.AlreadyRegisteredError(
                            oid,
                            "%s with OID %s already registered" % (r.elementKind, oid),
                        )
                self.matchingRules.register(schemaName, oid, description)
                self.comparators.register(schemaName, oid, comparator)
                self.normalizers.register(schemaName, oid, normalizer)
        return oid

    def addAttributeType(self, schemaName, description):
        if isinstance(description, str):
            description = schema.AttributeTypeDescription(description)
        with self._lock:
            for rule in (description.equality, description.ordering, description.substr):
                if rule is not None:
                    self.matchingRules.oidOf(rule)
            if description.sup is not None:
                self.attributeTypes.oidOf(description.sup)
            self.attributeTypes.register(schemaName, description.oid, description)
        return description.oid

    def loadSchema(self, schemaName, matchingRules=(), attributeTypes=(), onDuplicate=None):
        """
        Register the elements of a schema loaded after bootstrap.

        @param matchingRules: (description, comparator, normalizer) triples.

        @param attributeTypes: attribute type descriptions.

        @param onDuplicate: C{"fail"} to raise on the first element that
        is already registered, C{"skip"} to log and carry on.  Defaults to
        the configured policy.

        @return: the OIDs registered.
        """
        if onDuplicate is None:
            onDuplicate = self.config.getDuplicatePolicy()
        else:
            onDuplicate = self.config.checkDuplicatePolicy(onDuplicate)

        registered = []

        def _add(method, *args):
            try:
                registered.append(method(schemaName, *args))
            except errors.AlreadyRegisteredError as e:
                if onDuplicate != "skip":
                    raise
                log.msg("Skipping element of schema %s: %s" % (schemaName, e))

        for description, comparator, normalizer in matchingRules:
            _add(self.addMatchingRule, description, comparator, normalizer)
        for description in attributeTypes:
            _add(self.addAttributeType, description)
        return registered

    def loadSchemaFile(self, schemaName, path, onDuplicate=None):
        """
        Load the attribute types defined in the file at C{path}.
        """
        with open(path, encoding="utf-8") as f:
            definitions = list(readDefinitions(f))

        attributeTypes = []
        for keyword, text in definitions:
            if keyword != "attributetype":
                raise schema.InvalidSchemaDescription(
                    text, "%s definitions cannot be loaded from a file" % keyword
                )
            attributeTypes.append(schema.AttributeTypeDescription(text))
        return self.loadSchema(
            schemaName, attributeTypes=attributeTypes, onDuplicate=onDuplicate
        )

    def normalizeAttributeType(self, name):
        return self.attributeTypes.oidOf(name.strip())

    def getAttributeType(self, nameOrOid):
        return self.attributeTypes.lookup(self.normalizeAttributeType(nameOrOid))

    def equalityRuleOf(self, attributeType):
        """
        OID of the equality matching rule of an attribute type, inherited
        through SUP when the type does not name one itself.
        """
        at = self.getAttributeType(attributeType)
        seen = set()
        while at.equality is None:
            if at.sup is None or at.oid in seen:
                raise errors.InappropriateMatchingError(
                    at.oid, "attribute type %s has no equality matching rule" % at.oid
                )
            seen.add(at.oid)
            at = self.getAttributeType(at.sup)
        return self.matchingRules.oidOf(at.equality)

    def comparatorFor(self, attributeType):
        return self.comparators.lookup(self.equalityRuleOf(attributeType))

    def normalizerFor(self, attributeType):
        return self.normalizers.lookup(self.equalityRuleOf(attributeType))

    def compareValues(self, attributeType, a, b):
        return self.comparatorFor(attributeType).compare(a, b)

    def normalizeValue(self, attributeType, value):
        return self.normalizerFor(attributeType).normalize(value)

    def describeOid(self, oid):
        """
        Report which registries hold C{oid} and which schema contributed
        each element.

        @return: list of (element kind, schema name) pairs.
        """
        if not oid[:1].isdigit():
            raise errors.InvalidOidFormatError(oid, "OID %r is not a numeric OID" % (oid,))
        r = []
        for reg in self._registries():
            if reg.hasElement(oid):
                r.append((reg.elementKind, reg.schemaNameOf(oid)))
        if not r:
            raise errors.NotFoundError(oid, "OID %s is not defined by any schema" % oid)
        return r
