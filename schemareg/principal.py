"""
The identity of an authenticated LDAP user.
"""

from constantly import ValueConstant, Values

from schemareg import distinguishedname, errors


class AuthenticationLevel(Values):
    """
    How strongly a principal was authenticated.
    """

    NONE = ValueConstant(0)
    UNAUTHENT = ValueConstant(1)
    SIMPLE = ValueConstant(2)
    STRONG = ValueConstant(3)


class LdapPrincipal:
    """
    An LDAP user, known by a schema-aware distinguished name.

    Without a C{dn} this is the anonymous principal.

    @raise schemareg.errors.NotSchemaAwareError: C{dn} has not been bound
    to a schema manager.
    """

    clientAddress = None
    serverAddress = None

    def __init__(self, schemaManager=None, dn=None,
                 authenticationLevel=AuthenticationLevel.NONE,
                 userPassword=None):
        self._schemaManager = schemaManager
        if dn is None:
            dn = distinguishedname.DistinguishedName('')
            authenticationLevel = AuthenticationLevel.NONE
        elif not (isinstance(dn, distinguishedname.DistinguishedName)
                  and dn.isSchemaAware()):
            raise errors.NotSchemaAwareError(
                "the principal name %s must be schema aware" % (dn,))
        self._dn = dn
        self._authenticationLevel = authenticationLevel
        self._userPassword = None
        if userPassword is not None:
            self.setUserPassword(userPassword)

    def getDn(self):
        return self._dn

    def getName(self):
        """
        The normalized name, or the empty string for the anonymous
        principal.
        """
        if self._dn.isSchemaAware():
            return self._dn.getNormText()
        return self._dn.getText()

    def getAuthenticationLevel(self):
        return self._authenticationLevel

    def getUserPassword(self):
        if self._userPassword is None:
            return None
        return bytes(self._userPassword)

    def setUserPassword(self, userPassword):
        if isinstance(userPassword, str):
            raise TypeError("user passwords are bytes, not %r" % (userPassword,))
        self._userPassword = bytes(userPassword)

    def getSchemaManager(self):
        return self._schemaManager

    def setSchemaManager(self, schemaManager):
        """
        Bind the principal to another schema manager, normalizing its name
        against it.

        On failure the error propagates and the principal keeps its
        previous schema manager and name.
        """
        dn = self._dn
        if not dn.isEmpty():
            dn = dn.apply(schemaManager)
        self._dn = dn
        self._schemaManager = schemaManager

    def copy(self):
        clone = self.__class__.__new__(self.__class__)
        clone.__dict__.update(self.__dict__)
        if self._userPassword is not None:
            clone.setUserPassword(self._userPassword)
        return clone

    __copy__ = copy

    def __repr__(self):
        r = []
        if self._dn.isSchemaAware():
            r.append('(n)')
        r.append("['%s'" % self._dn.getText())
        if self.clientAddress is not None:
            r.append(', client@%s' % (self.clientAddress,))
        if self.serverAddress is not None:
            r.append(', server@%s' % (self.serverAddress,))
        r.append(']')
        return ''.join(r)

    __str__ = __repr__
