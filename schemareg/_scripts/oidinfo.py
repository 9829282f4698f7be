"""
Report which schema contributed the elements registered for OIDs.
"""
import sys

from schemareg import errors, schema, schemamanager, usage


def main(manager, oids, out=None, err=None):
    if out is None:
        out = sys.stdout
    if err is None:
        err = sys.stderr

    exitStatus = 0
    for oid in oids:
        try:
            provenance = manager.describeOid(oid)
        except errors.SchemaRegistryError as e:
            print(f"fail: {oid}: {e}", file=err)
            exitStatus = 1
            continue
        for kind, schemaName in provenance:
            print(f"{oid}\t{kind}\t{schemaName}", file=out)
    return exitStatus


class MyOptions(usage.Options, usage.Options_config, usage.Options_schema):
    """schemareg OID provenance report"""

    synopsis = "Usage: schemareg-oidinfo [options] OID..."

    def parseArgs(self, *oids):
        if not oids:
            raise usage.UsageError("give at least one OID")
        self.opts["oids"] = oids


def console_script():
    from twisted.python import log

    log.startLogging(sys.stderr, setStdout=0)

    try:
        opts = MyOptions()
        opts.parseOptions()
    except usage.UsageError as ue:
        sys.stderr.write(f"{sys.argv[0]}: {ue}\n")
        sys.exit(1)

    try:
        manager = schemamanager.SchemaManager.fromConfig(opts.getRegistryConfig())
    except (errors.SchemaRegistryError, schema.InvalidSchemaDescription, OSError) as e:
        print(f"{sys.argv[0]}: {e}.", file=sys.stderr)
        sys.exit(1)

    sys.exit(main(manager, opts["oids"]))


if __name__ == "__main__":
    sys.exit(console_script())
