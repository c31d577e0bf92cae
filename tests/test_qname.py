"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

import logging
import unittest

import lxml.etree as ET

from elemselect.qname import QualifiedName
from tests.utility import TypedTestCase

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


class TestQualifiedName(TypedTestCase):
    def test_equality(self) -> None:
        self.assertEqual(QualifiedName(None, "a"), QualifiedName(None, "a"))
        self.assertEqual(QualifiedName("urn:x", "a"), QualifiedName("urn:x", "a"))
        self.assertNotEqual(QualifiedName("urn:x", "a"), QualifiedName(None, "a"))
        self.assertNotEqual(QualifiedName("urn:x", "a"), QualifiedName("urn:y", "a"))
        self.assertNotEqual(QualifiedName(None, "a"), QualifiedName(None, "b"))

    def test_empty_namespace(self) -> None:
        self.assertEqual(QualifiedName("", "a"), QualifiedName(None, "a"))
        self.assertIsNone(QualifiedName("", "a").namespace_uri)

    def test_hashable(self) -> None:
        mapping = {QualifiedName("urn:x", "a"): "1"}
        self.assertEqual(mapping[QualifiedName("urn:x", "a")], "1")
        self.assertNotIn(QualifiedName(None, "a"), mapping)

    def test_parse(self) -> None:
        self.assertEqual(QualifiedName.parse("{urn:x}a"), QualifiedName("urn:x", "a"))
        self.assertEqual(QualifiedName.parse("a"), QualifiedName(None, "a"))
        self.assertEqual(QualifiedName.parse("{}a"), QualifiedName(None, "a"))
        with self.assertRaises(ValueError):
            QualifiedName.parse("{urn:x")
        with self.assertRaises(ValueError):
            QualifiedName.parse("{urn:x}")
        with self.assertRaises(ValueError):
            QualifiedName.parse("")

    def test_of(self) -> None:
        qname = QualifiedName("urn:x", "a")
        self.assertIs(QualifiedName.of(qname), qname)
        self.assertEqual(QualifiedName.of("{urn:x}a"), qname)
        self.assertEqual(QualifiedName.of(ET.QName("urn:x", "a")), qname)
        self.assertEqual(QualifiedName.of(ET.QName("a")), QualifiedName(None, "a"))

    def test_str(self) -> None:
        self.assertEqual(str(QualifiedName("urn:x", "a")), "{urn:x}a")
        self.assertEqual(str(QualifiedName(None, "a")), "a")


if __name__ == "__main__":
    unittest.main()
