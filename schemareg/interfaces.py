from zope.interface import Interface, Attribute


class IComparator(Interface):
    """
    Ordering and equality over two values of an attribute type.
    """

    def compare(a, b):
        """
        Compare two attribute values.

        @return: a negative integer, zero or a positive integer when C{a}
        sorts before, equal to or after C{b}.
        """


class INormalizer(Interface):
    """
    Canonical form of attribute values for a matching rule.
    """

    def normalize(value):
        """
        Return the canonical form of C{value}.
        """


class ISchemaElementRegistry(Interface):
    """
    OID-addressed lookup of schema elements of one kind.
    """

    elementKind = Attribute("Human readable name of the element kind.")

    def hasElement(oid):
        """
        Is there an element registered for C{oid}.
        """

    def lookup(oid):
        """
        Get the element registered for C{oid}.

        @raise schemareg.errors.NotFoundError: no such element.
        """

    def schemaNameOf(oid):
        """
        Get the name of the schema that contributed the element.

        @raise schemareg.errors.NotFoundError: no such element.
        """

    def listOids():
        """
        List the OIDs held by this registry.
        """


class IDynamicSchemaElementRegistry(ISchemaElementRegistry):
    """
    A registry that accepts elements at runtime.
    """

    lock = Attribute(
        "Re-entrant lock held by register; hold it to keep other"
        " registrants out across several calls."
    )

    def register(schemaName, oid, element):
        """
        Add C{element} under C{oid} on behalf of the schema C{schemaName}.

        @raise schemareg.errors.AlreadyRegisteredError: C{oid} is taken.
        """
