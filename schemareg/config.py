import configparser
import os.path

from schemareg import bootschema, errors

DUPLICATE_POLICIES = ("fail", "skip")

DEFAULTS = {
    "schema": {
        "bootstrap": " ".join(bootschema.DEFAULT_SCHEMAS),
        "on-duplicate": "fail",
    },
}

CONFIG_FILES = [
    "/etc/schemareg/global.cfg",
    os.path.expanduser("~/.schemareg/global.cfg"),
]

__config = None


def loadConfig(configFiles=None, reload=False):
    """
    Load configuration file.
    """
    global __config
    if __config is None or reload:
        x = configparser.ConfigParser()
        x.read_dict(DEFAULTS)

        if configFiles is None:
            configFiles = CONFIG_FILES
        x.read(configFiles)
        __config = x
    return __config


class RegistryConfig:
    """
    Settings for a schema manager.

    Values given to the constructor win over the configuration files.
    """

    bootstrapSchemas = None
    onDuplicate = None

    def __init__(self, bootstrapSchemas=None, onDuplicate=None, schemaFiles=None):
        if bootstrapSchemas is not None:
            self.bootstrapSchemas = tuple(bootstrapSchemas)
        if onDuplicate is not None:
            self.onDuplicate = self.checkDuplicatePolicy(onDuplicate)
        self.schemaFiles = {}
        if schemaFiles is not None:
            self.schemaFiles.update(schemaFiles)

    def checkDuplicatePolicy(self, policy):
        if policy not in DUPLICATE_POLICIES:
            raise errors.InvalidConfigurationError(
                "on-duplicate must be one of %s, not %r"
                % (", ".join(DUPLICATE_POLICIES), policy)
            )
        return policy

    def getBootstrapSchemas(self):
        if self.bootstrapSchemas is not None:
            return self.bootstrapSchemas

        cfg = loadConfig()
        names = cfg.get("schema", "bootstrap").replace(",", " ").split()
        if not names:
            raise errors.InvalidConfigurationError("no bootstrap schemas configured")
        return tuple(names)

    def getDuplicatePolicy(self):
        if self.onDuplicate is not None:
            return self.onDuplicate

        cfg = loadConfig()
        return self.checkDuplicatePolicy(cfg.get("schema", "on-duplicate").strip().lower())

    def getSchemaFiles(self):
        """
        Map schema names to files of attribute type definitions to load
        after bootstrap, from C{[schema-file NAME]} sections.
        """
        r = self._loadSchemaFiles()
        r.update(self.schemaFiles)
        return r

    def _loadSchemaFiles(self):
        schemaFiles = {}
        cfg = loadConfig()
        for section in cfg.sections():
            if section.lower().startswith("schema-file "):
                name = section[len("schema-file ") :].strip()
                if not cfg.has_option(section, "path"):
                    raise errors.InvalidConfigurationError(
                        "section [%s] needs a path" % section
                    )
                schemaFiles[name] = os.path.expanduser(cfg.get(section, "path"))
        return schemaFiles

    def copy(self, **kw):
        if "bootstrapSchemas" not in kw:
            kw["bootstrapSchemas"] = self.bootstrapSchemas
        if "onDuplicate" not in kw:
            kw["onDuplicate"] = self.onDuplicate
        if "schemaFiles" not in kw:
            kw["schemaFiles"] = self.schemaFiles
        r = self.__class__(**kw)
        return r
