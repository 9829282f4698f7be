"""
Command line options shared by the schemareg tools.
"""
from twisted.python import reflect, usage
from twisted.python.usage import UsageError

from schemareg import config

__all__ = [
    "Options",
    "Options_config",
    "Options_schema",
    "UsageError",
]


class Options(usage.Options):
    optParameters = ()

    def postOptions(self):
        postOpt = {}
        reflect.addMethodNamesToDict(self.__class__, postOpt, "postOptions_")
        for name in postOpt.keys():
            method = getattr(self, "postOptions_" + name)
            method()


class Options_config:
    """
    Mixin providing the --config option.
    """

    optParameters = (
        ("config", "c", None, "read configuration from this file"),
    )

    def postOptions_config(self):
        if self.opts["config"] is not None:
            config.loadConfig(
                configFiles=config.CONFIG_FILES + [self.opts["config"]],
                reload=True,
            )


class Options_schema:
    """
    Mixin providing the --schema, --schema-file and --on-duplicate options.
    """

    optParameters = (
        ("on-duplicate", None, None,
         "what to do with already registered elements (fail or skip)"),
    )

    def opt_schema(self, value):
        """Bootstrap schema to load, may be repeated"""
        self.opts.setdefault("schema", []).append(value)

    def opt_schema_file(self, value):
        """Extra schema file, in the form NAME:PATH, may be repeated"""
        if ":" not in value:
            raise usage.UsageError("schema-file must be given as NAME:PATH")
        name, path = value.split(":", 1)
        if not name or not path:
            raise usage.UsageError("schema-file must be given as NAME:PATH")
        self.opts.setdefault("schema-file", {})[name] = path

    def postOptions_schema(self):
        self.opts.setdefault("schema", None)
        self.opts.setdefault("schema-file", {})
        if self.opts["on-duplicate"] not in (None,) + config.DUPLICATE_POLICIES:
            raise usage.UsageError(
                "on-duplicate must be one of %s" % ", ".join(config.DUPLICATE_POLICIES)
            )

    def getRegistryConfig(self):
        return config.RegistryConfig(
            bootstrapSchemas=self.opts["schema"],
            onDuplicate=self.opts["on-duplicate"],
            schemaFiles=self.opts["schema-file"],
        )
