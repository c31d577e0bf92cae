"""
Compare XML elements for correspondence.

Copyright 2022-2026, Levente Hunyadi
"""

import json
import logging
import unittest

import lxml.etree as ET

from elemselect.options import SelectorOptions, selector_from_options
from elemselect.selectors import ConfigurationError, by_name, by_name_and_text_rec, default
from tests.utility import TypedTestCase

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(funcName)s [%(lineno)d] - %(message)s",
)


class TestOptions(TypedTestCase):
    def test_default(self) -> None:
        self.assertIs(selector_from_options(SelectorOptions()), default)

    def test_simple_policies(self) -> None:
        self.assertIs(selector_from_options(SelectorOptions(policy="by-name")), by_name)
        self.assertIs(selector_from_options(SelectorOptions(policy="by-name-and-text-rec")), by_name_and_text_rec)

    def test_attribute_policies(self) -> None:
        selector = selector_from_options(SelectorOptions(policy="by-name-and-attributes", attributes=("id",)))
        self.assertTrue(selector(ET.fromstring('<a id="1"/>'), ET.fromstring('<a id="1"/>')))
        self.assertFalse(selector(ET.fromstring('<a id="1"/>'), ET.fromstring('<a id="2"/>')))

        selector = selector_from_options(SelectorOptions(policy="by-name-and-attributes-control-ns", attributes=("id",)))
        self.assertTrue(selector(ET.fromstring('<a id="1"/>'), ET.fromstring('<a id="1"/>')))

    def test_attributes_normalized(self) -> None:
        options = SelectorOptions(policy="by-name-and-attributes", attributes=["id", "name"])  # type: ignore[arg-type]
        self.assertEqual(options.attributes, ("id", "name"))

    def test_validation(self) -> None:
        with self.assertRaises(ConfigurationError):
            SelectorOptions(policy="by-color")  # type: ignore[arg-type]
        with self.assertRaises(ConfigurationError):
            SelectorOptions(policy="by-name-and-attributes")
        with self.assertRaises(ConfigurationError):
            SelectorOptions(policy="by-name", attributes=("id",))
        with self.assertRaises(ConfigurationError):
            SelectorOptions(policy="by-name-and-attributes", attributes="id")  # type: ignore[arg-type]

    def test_from_dict(self) -> None:
        options = SelectorOptions.from_dict(json.loads('{"policy": "by-name-and-attributes", "attributes": ["id"]}'))
        self.assertEqual(options, SelectorOptions(policy="by-name-and-attributes", attributes=("id",)))
        self.assertEqual(SelectorOptions.from_dict({}), SelectorOptions())

    def test_from_dict_unknown(self) -> None:
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name", "color": "red"})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name-and-attributes", "attributes": "id"})

    def test_from_dict_wrong_type(self) -> None:
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name-and-attributes", "attributes": 5})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name-and-attributes", "attributes": ["id", 5]})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": 5})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-color"})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict(["by-name"])

    def test_from_dict_policy_checks(self) -> None:
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name-and-attributes"})
        with self.assertRaises(ConfigurationError):
            SelectorOptions.from_dict({"policy": "by-name", "attributes": ["id"]})


if __name__ == "__main__":
    unittest.main()
