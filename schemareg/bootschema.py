"""
Static definitions of the bootstrap schemas.

Each schema lists its matching rules, as (description, comparator,
normalizer) triples, and its attribute types.  Matching rules come from
RFC 4517, attribute types from RFC 4512, RFC 4519, RFC 4524 and
RFC 2798.
"""

from schemareg import comparators, normalizers

SYSTEM = {
    "matchingRules": [
        (
            "( 2.5.13.0 NAME 'objectIdentifierMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.38 )",
            comparators.ObjectIdentifierComparator(),
            normalizers.ObjectIdentifierNormalizer(),
        ),
        (
            "( 2.5.13.1 NAME 'distinguishedNameMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.12 )",
            comparators.DistinguishedNameComparator(),
            normalizers.DeepTrimToLowerNormalizer(),
        ),
        (
            "( 2.5.13.2 NAME 'caseIgnoreMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
            comparators.CaseIgnoreComparator(),
            normalizers.DeepTrimToLowerNormalizer(),
        ),
        (
            "( 2.5.13.3 NAME 'caseIgnoreOrderingMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
            comparators.CaseIgnoreComparator(),
            normalizers.DeepTrimToLowerNormalizer(),
        ),
        (
            "( 2.5.13.4 NAME 'caseIgnoreSubstringsMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.58 )",
            comparators.CaseIgnoreComparator(),
            normalizers.DeepTrimToLowerNormalizer(),
        ),
        (
            "( 2.5.13.5 NAME 'caseExactMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
            comparators.CaseExactComparator(),
            normalizers.DeepTrimNormalizer(),
        ),
        (
            "( 2.5.13.6 NAME 'caseExactOrderingMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
            comparators.CaseExactComparator(),
            normalizers.DeepTrimNormalizer(),
        ),
        (
            "( 2.5.13.8 NAME 'numericStringMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.36 )",
            comparators.NumericStringComparator(),
            normalizers.NumericNormalizer(),
        ),
        (
            "( 2.5.13.13 NAME 'booleanMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.7 )",
            comparators.BooleanComparator(),
            normalizers.BooleanNormalizer(),
        ),
        (
            "( 2.5.13.14 NAME 'integerMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.27 )",
            comparators.IntegerComparator(),
            normalizers.IntegerNormalizer(),
        ),
        (
            "( 2.5.13.15 NAME 'integerOrderingMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.27 )",
            comparators.IntegerComparator(),
            normalizers.IntegerNormalizer(),
        ),
        (
            "( 2.5.13.17 NAME 'octetStringMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.40 )",
            comparators.OctetStringComparator(),
            normalizers.NoOpNormalizer(),
        ),
        (
            "( 2.5.13.20 NAME 'telephoneNumberMatch' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.50 )",
            comparators.TelephoneNumberComparator(),
            normalizers.TelephoneNumberNormalizer(),
        ),
        (
            "( 1.3.6.1.4.1.1466.109.114.1 NAME 'caseExactIA5Match' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.26 )",
            comparators.CaseExactComparator(),
            normalizers.DeepTrimNormalizer(),
        ),
        (
            "( 1.3.6.1.4.1.1466.109.114.2 NAME 'caseIgnoreIA5Match' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.26 )",
            comparators.CaseIgnoreComparator(),
            normalizers.DeepTrimToLowerNormalizer(),
        ),
    ],
    "attributeTypes": [
        """( 2.5.4.0 NAME 'objectClass'
            EQUALITY objectIdentifierMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.38 )""",
        """( 2.5.4.1 NAME 'aliasedObjectName'
            EQUALITY distinguishedNameMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.12
            SINGLE-VALUE )""",
        """( 2.5.18.3 NAME 'creatorsName'
            EQUALITY distinguishedNameMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.12
            SINGLE-VALUE NO-USER-MODIFICATION
            USAGE directoryOperation )""",
        """( 2.5.18.4 NAME 'modifiersName'
            EQUALITY distinguishedNameMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.12
            SINGLE-VALUE NO-USER-MODIFICATION
            USAGE directoryOperation )""",
    ],
}

CORE = {
    "matchingRules": [],
    "attributeTypes": [
        """( 2.5.4.41 NAME 'name'
            EQUALITY caseIgnoreMatch
            SUBSTR caseIgnoreSubstringsMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )""",
        """( 2.5.4.3 NAME ( 'cn' 'commonName' )
            SUP name )""",
        """( 2.5.4.4 NAME ( 'sn' 'surname' )
            SUP name )""",
        """( 2.5.4.6 NAME ( 'c' 'countryName' )
            SUP name
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.11
            SINGLE-VALUE )""",
        """( 2.5.4.7 NAME ( 'l' 'localityName' )
            SUP name )""",
        """( 2.5.4.8 NAME ( 'st' 'stateOrProvinceName' )
            SUP name )""",
        """( 2.5.4.10 NAME ( 'o' 'organizationName' )
            SUP name )""",
        """( 2.5.4.11 NAME ( 'ou' 'organizationalUnitName' )
            SUP name )""",
        """( 2.5.4.13 NAME 'description'
            EQUALITY caseIgnoreMatch
            SUBSTR caseIgnoreSubstringsMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )""",
        """( 2.5.4.20 NAME 'telephoneNumber'
            EQUALITY telephoneNumberMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.50 )""",
        """( 2.5.4.31 NAME 'member'
            SUP distinguishedName )""",
        """( 2.5.4.49 NAME 'distinguishedName'
            EQUALITY distinguishedNameMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.12 )""",
        """( 2.5.4.35 NAME 'userPassword'
            EQUALITY octetStringMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.40 )""",
        """( 2.5.4.5 NAME 'serialNumber'
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.44 )""",
    ],
}

COSINE = {
    "matchingRules": [],
    "attributeTypes": [
        """( 0.9.2342.19200300.100.1.1 NAME ( 'uid' 'userid' )
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )""",
        """( 0.9.2342.19200300.100.1.3 NAME ( 'mail' 'rfc822Mailbox' )
            EQUALITY caseIgnoreIA5Match
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.26 )""",
        """( 0.9.2342.19200300.100.1.25 NAME ( 'dc' 'domainComponent' )
            EQUALITY caseIgnoreIA5Match
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.26
            SINGLE-VALUE )""",
    ],
}

INETORGPERSON = {
    "matchingRules": [],
    "attributeTypes": [
        """( 2.16.840.1.113730.3.1.241 NAME 'displayName'
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15
            SINGLE-VALUE )""",
        """( 2.16.840.1.113730.3.1.3 NAME 'employeeNumber'
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15
            SINGLE-VALUE )""",
        """( 2.16.840.1.113730.3.1.4 NAME 'employeeType'
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )""",
    ],
}

SCHEMAS = {
    "system": SYSTEM,
    "core": CORE,
    "cosine": COSINE,
    "inetorgperson": INETORGPERSON,
}

# Order matters: later schemas refer to matching rules and superior
# attribute types of earlier ones.
DEFAULT_SCHEMAS = ("system", "core", "cosine", "inetorgperson")
