from twisted.python import log
from zope.interface import implementer

from schemareg import config, interfaces, schemamanager
from schemareg.bootstrap import SchemaElementEntry


@implementer(interfaces.IComparator)
class NamedComparator:
    """
    Comparator that is only ever compared by identity, so tests can tell
    which registered instance a lookup returned.
    """

    def __init__(self, name):
        self.name = name

    def compare(self, a, b):
        return (a > b) - (a < b)

    def __repr__(self):
        return "NamedComparator(%r)" % self.name


def entries(schemaName, *oids):
    return [
        SchemaElementEntry(oid, schemaName, NamedComparator("%s:%s" % (schemaName, oid)))
        for oid in oids
    ]


def captureLog(testCase):
    """
    Collect log events emitted for the rest of C{testCase}.
    """
    events = []
    log.addObserver(events.append)
    testCase.addCleanup(log.removeObserver, events.append)
    return events


def logMessages(events, debug=None):
    r = []
    for event in events:
        if debug is not None and bool(event.get("debug")) != debug:
            continue
        r.append(" ".join(str(x) for x in event.get("message", ())))
    return r


def makeSchemaManager(schemas=("system", "core", "cosine", "inetorgperson")):
    """
    A schema manager that does not depend on the configuration files.
    """
    return schemamanager.SchemaManager(
        config=config.RegistryConfig(bootstrapSchemas=schemas, onDuplicate="fail")
    )
