"""
Test cases for schemareg.schema module.
"""

from twisted.trial import unittest

from schemareg import schema


class AttributeType_KnownValues(unittest.TestCase):
    knownValues = [
        (
            """( 2.5.4.4 NAME ( 'sn' 'surname' )
            DESC 'RFC2256: last (family) name(s) for which the entity is known by'
            SUP name )""",
            {
                "oid": "2.5.4.4",
                "name": ("sn", "surname"),
                "desc": "RFC2256: last (family) name(s) for which the entity is known by",
                "sup": "name",
            },
        ),
        (
            """( 2.5.4.2 NAME 'knowledgeInformation'
            DESC 'RFC2256: knowledge information'
            EQUALITY caseIgnoreMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.15{32768} )""",
            {
                "oid": "2.5.4.2",
                "name": ("knowledgeInformation",),
                "equality": "caseIgnoreMatch",
                "syntax": "1.3.6.1.4.1.1466.115.121.1.15{32768}",
            },
        ),
        (
            """( 2.5.4.6 NAME ( 'c' 'countryName' )
            DESC 'RFC2256: ISO-3166 country 2-letter code'
            SUP name SINGLE-VALUE )""",
            {
                "oid": "2.5.4.6",
                "name": ("c", "countryName"),
                "sup": "name",
                "single_value": 1,
            },
        ),
        (
            """( 2.5.18.1 NAME 'createTimestamp'
            EQUALITY generalizedTimeMatch
            ORDERING generalizedTimeOrderingMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.24
            SINGLE-VALUE NO-USER-MODIFICATION
            USAGE directoryOperation )""",
            {
                "oid": "2.5.18.1",
                "ordering": "generalizedTimeOrderingMatch",
                "no_user_modification": 1,
                "usage": "directoryOperation",
            },
        ),
        (
            """( 1.3.6.1.4.1.42.2.27.8.1.16 NAME 'pwdChangedTime'
            EQUALITY generalizedTimeMatch
            SYNTAX 1.3.6.1.4.1.1466.115.121.1.24
            X-ORIGIN 'draft-behera-ldap-password-policy' )""",
            {
                "oid": "1.3.6.1.4.1.42.2.27.8.1.16",
                "x_attrs": [("X-ORIGIN", "draft-behera-ldap-password-policy")],
            },
        ),
    ]

    def testParse(self):
        for text, expected in self.knownValues:
            a = schema.AttributeTypeDescription(text)
            for key, want in expected.items():
                got = getattr(a, key)
                self.assertEqual(got, want, "%s of %r" % (key, text))

    def testDefaults(self):
        a = schema.AttributeTypeDescription("( 1.2.3 SYNTAX 1.2.4 )")
        self.assertIsNone(a.name)
        self.assertEqual(a.getNames(), [])
        self.assertEqual(a.single_value, 0)
        self.assertEqual(a.collective, 0)
        self.assertIsNone(a.equality)

    def testTextRoundTrip(self):
        for text, expected in self.knownValues:
            a = schema.AttributeTypeDescription(text)
            b = schema.AttributeTypeDescription(a.getText())
            self.assertEqual(a, b)


class MatchingRule_KnownValues(unittest.TestCase):
    def testParse(self):
        m = schema.MatchingRuleDescription(
            "( 2.5.13.2 NAME 'caseIgnoreMatch' DESC 'RFC4517' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )"
        )
        self.assertEqual(m.oid, "2.5.13.2")
        self.assertEqual(m.getNames(), ["caseIgnoreMatch"])
        self.assertEqual(m.desc, "RFC4517")
        self.assertEqual(m.syntax, "1.3.6.1.4.1.1466.115.121.1.15")
        self.assertEqual(
            m.getText(),
            "( 2.5.13.2 NAME 'caseIgnoreMatch' DESC 'RFC4517' "
            "SYNTAX 1.3.6.1.4.1.1466.115.121.1.15 )",
        )

    def testObsolete(self):
        m = schema.MatchingRuleDescription("( 1.2.3 OBSOLETE SYNTAX 1.2.4 )")
        self.assertEqual(m.obsolete, 1)


class InvalidDescriptions(unittest.TestCase):
    invalid = [
        ("1.2.3 SYNTAX 1.2.4", schema.MatchingRuleDescription),
        ("( cn SYNTAX 1.2.4 )", schema.MatchingRuleDescription),
        ("( 1.2.3 NAME 'foo' )", schema.MatchingRuleDescription),
        ("( 1.2.3 NAME 'foo' )", schema.AttributeTypeDescription),
        ("( 1.2.3 NAME 'foo SUP name )", schema.AttributeTypeDescription),
        ("( 1.2.3 NAME foo SUP name )", schema.AttributeTypeDescription),
        ("( 1.2.3 SUP name USAGE sometimes )", schema.AttributeTypeDescription),
        ("( 1.2.3 SUP name MUST cn )", schema.AttributeTypeDescription),
        ("( 1.2.3 SUP )", schema.AttributeTypeDescription),
    ]

    def testInvalid(self):
        for text, cls in self.invalid:
            e = self.assertRaises(schema.InvalidSchemaDescription, cls, text)
            self.assertEqual(e.text, text)
            self.assertIn(repr(text), str(e))


class TestIsNumericOid(unittest.TestCase):
    def test_values(self):
        self.assertTrue(schema.isNumericOid("2.5.4.3"))
        self.assertTrue(schema.isNumericOid("0"))
        self.assertFalse(schema.isNumericOid("cn"))
        self.assertFalse(schema.isNumericOid("2.5."))
        self.assertFalse(schema.isNumericOid(""))
        self.assertFalse(schema.isNumericOid(None))
