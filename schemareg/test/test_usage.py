"""
Test cases for schemareg.usage
"""

import re

from twisted.python.usage import UsageError
from twisted.trial.unittest import TestCase

from schemareg import config
from schemareg.usage import Options, Options_config, Options_schema


class SchemaOptionsImplementation(Options, Options_schema):
    """
    Minimal implementation for a command line using `Options_schema`.
    """


class TestOptions_schema(TestCase):
    def test_parseOptions_default(self):
        """
        When no explicit options are provided the configuration files
        decide.
        """
        sut = SchemaOptionsImplementation()
        sut.parseOptions(options=[])

        self.assertIsNone(sut.opts["schema"])
        self.assertIsNone(sut.opts["on-duplicate"])
        self.assertEqual({}, sut.opts["schema-file"])

        cfg = sut.getRegistryConfig()
        self.assertIsNone(cfg.bootstrapSchemas)
        self.assertIsNone(cfg.onDuplicate)

    def test_parseOptions_multiple(self):
        sut = SchemaOptionsImplementation()
        sut.parseOptions(
            options=[
                "--schema",
                "system",
                "--schema",
                "core",
                "--schema-file",
                "local:/tmp/local.schema",
                "--on-duplicate",
                "skip",
            ]
        )

        cfg = sut.getRegistryConfig()
        self.assertEqual(("system", "core"), cfg.getBootstrapSchemas())
        self.assertEqual("skip", cfg.getDuplicatePolicy())
        self.assertEqual({"local": "/tmp/local.schema"}, cfg.schemaFiles)

    def test_parseOptions_bad_schema_file(self):
        """
        It fails to parse the option when no path is given.
        """
        sut = SchemaOptionsImplementation()

        exception = self.assertRaises(
            UsageError,
            sut.parseOptions,
            options=["--schema-file", "local"],
        )

        self.assertEqual("schema-file must be given as NAME:PATH", exception.args[0])

    def test_parseOptions_bad_policy(self):
        self.assertRaisesRegex(
            UsageError,
            re.escape("on-duplicate must be one of fail, skip"),
            SchemaOptionsImplementation().parseOptions,
            options=["--on-duplicate", "ignore"],
        )


class ConfigOptionsImplementation(Options, Options_config):
    """
    Minimal implementation for a command line using `Options_config`.
    """


class TestOptions_config(TestCase):
    def test_config_file(self):
        """
        The file given with --config is read after the default ones.
        """
        path = self.mktemp()
        with open(path, "w") as f:
            f.write("[schema]\non-duplicate = skip\n")
        self.patch(config, "CONFIG_FILES", [])
        self.addCleanup(config.loadConfig, configFiles=[], reload=True)

        sut = ConfigOptionsImplementation()
        sut.parseOptions(options=["--config", path])

        self.assertEqual(config.loadConfig().get("schema", "on-duplicate"), "skip")

    def test_no_config_file(self):
        sut = ConfigOptionsImplementation()
        sut.parseOptions(options=[])
        self.assertIsNone(sut.opts["config"])
