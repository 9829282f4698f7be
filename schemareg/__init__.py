"""A layered LDAP schema element registry for Twisted directory services"""
__version__ = "0.3.0"

__title__ = "schemareg"
__description__ = "A layered LDAP schema element registry"

__license__ = "MIT"
__author__ = "The schemareg developers"
__copyright__ = "Copyright (c) 2019-2026 {}".format(__author__)
