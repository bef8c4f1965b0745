#!/usr/bin/env python
# -*- coding: utf-8 -*-

"""
Configuration document tests
"""

import os
import shutil
import tempfile
import unittest

import yaml

from geyserhub.config.configuration import ConfigurationSection, FileConfiguration

SAMPLE = """
Config-Version: 3
Enable-Debug: true
Selector-Item:
  Enable: true
  Name: "&6Server Selector"
  Slot: 4
  Lore:
    - first
    - second
"""


class TestFileConfiguration(unittest.TestCase):
    """Dotted-path access to a parsed document"""

    def setUp(self):
        self.configuration = FileConfiguration.loads(SAMPLE)

    def test_get_nested_values(self):
        self.assertEqual(self.configuration.get("Selector-Item.Slot"), 4)
        self.assertEqual(self.configuration.get_string("Selector-Item.Name"), "&6Server Selector")
        self.assertEqual(self.configuration.get_list("Selector-Item.Lore"), ["first", "second"])
        self.assertTrue(self.configuration.get_boolean("Selector-Item.Enable"))

    def test_defaults_for_missing_paths(self):
        self.assertIsNone(self.configuration.get("Selector-Item.Missing"))
        self.assertEqual(self.configuration.get("Missing.Path", "fallback"), "fallback")
        self.assertEqual(self.configuration.get_int("Enable-Debug", 7), 7)
        self.assertFalse(self.configuration.get_boolean("Config-Version"))
        self.assertIsNone(self.configuration.get_list("Selector-Item.Name"))
        self.assertIsNone(self.configuration.get_section("Selector-Item.Slot"))

    def test_contains_and_is_int(self):
        self.assertTrue(self.configuration.contains("Config-Version"))
        self.assertIn("Selector-Item.Slot", self.configuration)
        self.assertFalse(self.configuration.contains("Selector-Item.Slot.Deeper"))
        self.assertTrue(self.configuration.is_int("Config-Version"))
        self.assertFalse(self.configuration.is_int("Enable-Debug"))

    def test_sections(self):
        section = self.configuration.get_section("Selector-Item")
        self.assertIsInstance(section, ConfigurationSection)
        self.assertEqual(section.path, "Selector-Item")
        self.assertEqual(section.get_int("Slot"), 4)
        self.assertEqual(section.keys(), ["Enable", "Name", "Slot", "Lore"])

    def test_deep_keys(self):
        keys = self.configuration.keys(deep=True)
        self.assertIn("Selector-Item.Lore", keys)
        self.assertIn("Config-Version", keys)

    def test_values_are_copies(self):
        lore = self.configuration.get_list("Selector-Item.Lore")
        lore.append("third")
        self.configuration.to_dict()["Config-Version"] = 99

        self.assertEqual(len(self.configuration.get_list("Selector-Item.Lore")), 2)
        self.assertEqual(self.configuration.get_int("Config-Version"), 3)

    def test_empty_document(self):
        configuration = FileConfiguration.loads("")
        self.assertEqual(len(configuration), 0)
        self.assertFalse(configuration.contains("Config-Version"))

    def test_rejects_non_mapping(self):
        with self.assertRaises(ValueError):
            FileConfiguration.loads("- a\n- b\n")

    def test_rejects_malformed_yaml(self):
        with self.assertRaises(yaml.YAMLError):
            FileConfiguration.loads("key: [unclosed\n")

    def test_load_file_and_dump(self):
        temp_dir = tempfile.mkdtemp()
        try:
            file_path = os.path.join(temp_dir, "config.yml")
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(SAMPLE)

            configuration = FileConfiguration.load(file_path)
            self.assertEqual(configuration.file_path, file_path)
            self.assertEqual(FileConfiguration.loads(configuration.dumps()), configuration)
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

    def test_load_missing_file(self):
        with self.assertRaises(OSError):
            FileConfiguration.load(os.path.join(tempfile.gettempdir(), "does-not-exist", "config.yml"))


if __name__ == '__main__':
    unittest.main()
