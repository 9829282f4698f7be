"""
Test cases for schemareg.bootstrap module.
"""

from twisted.trial import unittest
from zope.interface.verify import verifyObject

from schemareg import bootschema, bootstrap, comparators, errors, interfaces, normalizers
from schemareg.test import util


class TestBootstrapRegistry(unittest.TestCase):
    def setUp(self):
        self.entries = util.entries("system", "2.5.13.0", "2.5.13.2")
        self.catalog = bootstrap.BootstrapComparatorRegistry(self.entries)

    def test_interface(self):
        verifyObject(interfaces.ISchemaElementRegistry, self.catalog)

    def test_lookup(self):
        self.assertIs(self.catalog.lookup("2.5.13.2"), self.entries[1].element)
        self.assertTrue(self.catalog.hasElement("2.5.13.0"))
        self.assertEqual(self.catalog.schemaNameOf("2.5.13.0"), "system")
        self.assertEqual(sorted(self.catalog.listOids()), ["2.5.13.0", "2.5.13.2"])
        self.assertEqual(len(self.catalog), 2)

    def test_missing(self):
        self.assertFalse(self.catalog.hasElement("1.2.3"))
        e = self.assertRaises(errors.NotFoundError, self.catalog.lookup, "1.2.3")
        self.assertEqual(e.oid, "1.2.3")
        self.assertRaises(errors.NotFoundError, self.catalog.schemaNameOf, "1.2.3")

    def test_duplicate_oid(self):
        self.assertRaises(
            errors.InvalidConfigurationError,
            bootstrap.BootstrapComparatorRegistry,
            util.entries("system", "2.5.13.2") + util.entries("core", "2.5.13.2"),
        )

    def test_immutable(self):
        """
        The catalog keeps its own copy of the entries it was built from.
        """
        entries = list(self.entries)
        catalog = bootstrap.BootstrapRegistry(entries)
        entries.extend(util.entries("later", "1.2.3"))
        self.assertFalse(catalog.hasElement("1.2.3"))

        def mutate():
            catalog._entries["1.2.3"] = None

        self.assertRaises(TypeError, mutate)


class TestLoad(unittest.TestCase):
    def test_defaults(self):
        catalogs = bootstrap.load()
        self.assertEqual(catalogs.schemaNames, bootschema.DEFAULT_SCHEMAS)

        self.assertEqual(
            catalogs.comparators.lookup("2.5.13.2"), comparators.CaseIgnoreComparator()
        )
        self.assertEqual(
            catalogs.normalizers.lookup("2.5.13.2"),
            normalizers.DeepTrimToLowerNormalizer(),
        )
        self.assertEqual(catalogs.matchingRules.oidOf("caseIgnoreMatch"), "2.5.13.2")
        self.assertEqual(catalogs.attributeTypes.oidOf("uid"), "0.9.2342.19200300.100.1.1")
        self.assertEqual(
            catalogs.attributeTypes.schemaNameOf("0.9.2342.19200300.100.1.1"), "cosine"
        )
        self.assertEqual(catalogs.comparators.schemaNameOf("2.5.13.2"), "system")

    def test_subset(self):
        catalogs = bootstrap.load(["system"])
        self.assertTrue(catalogs.attributeTypes.hasName("objectClass"))
        self.assertFalse(catalogs.attributeTypes.hasName("cn"))

    def test_every_matching_rule_has_comparator_and_normalizer(self):
        catalogs = bootstrap.load()
        for oid in catalogs.matchingRules.listOids():
            verifyObject(interfaces.IComparator, catalogs.comparators.lookup(oid))
            verifyObject(interfaces.INormalizer, catalogs.normalizers.lookup(oid))

    def test_unknown_schema(self):
        self.assertRaises(errors.InvalidConfigurationError, bootstrap.load, ["nis"])

    def test_custom_schemas(self):
        schemas = {
            "tiny": {
                "matchingRules": [
                    (
                        "( 1.2.3 NAME 'tinyMatch' SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
                        util.NamedComparator("tiny"),
                        normalizers.NoOpNormalizer(),
                    ),
                ],
            },
        }
        catalogs = bootstrap.load(["tiny"], schemas=schemas)
        self.assertEqual(catalogs.comparators.listOids(), ["1.2.3"])
        self.assertEqual(catalogs.attributeTypes.listOids(), [])

    def test_duplicate_name_across_schemas(self):
        schemas = {
            "one": {"attributeTypes": ["( 1.2.3 NAME 'foo' SYNTAX 1.2.4 )"]},
            "two": {"attributeTypes": ["( 1.2.5 NAME 'FOO' SYNTAX 1.2.4 )"]},
        }
        self.assertRaises(
            errors.InvalidConfigurationError,
            bootstrap.load,
            ["one", "two"],
            schemas=schemas,
        )
