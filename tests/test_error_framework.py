"""
Tests for the selector error hierarchy.

Each test drives a real failure path of the package (entity payloads,
entity files, configuration files) and checks the structured error it
produces.
"""

import json
import tempfile
import unittest
from pathlib import Path

from coreselector.application import load_entities
from coreselector.core.errors import (
    SelectorError,
    DataError,
    ConfigurationError,
    ErrorCodes,
    wrap_external_error
)
from coreselector.models import EntityGraph, EntityNode, SelectorConfig, load_config


class TestPayloadErrors(unittest.TestCase):
    """DataError raised while parsing the host's entity payload."""

    def test_unknown_type_names_the_entity(self):
        with self.assertRaises(DataError) as ctx:
            EntityNode.from_payload(["P7", "Pipeline 7", [], "TASK"])

        error = ctx.exception
        self.assertEqual(error.error_code, ErrorCodes.INVALID_FORMAT)
        self.assertEqual(error.context['entity_id'], "P7")
        self.assertEqual(error.context['category'], 'DATA')
        self.assertIsInstance(error.__cause__, ValueError)

    def test_duplicate_id(self):
        with self.assertRaises(DataError) as ctx:
            EntityGraph.from_payload([
                ["C1", "Cycle", [["S1", "Scenario", [], 1]], 0],
                ["S1", "Scenario again", [], 1],
            ])

        error = ctx.exception
        self.assertEqual(error.error_code, ErrorCodes.DUPLICATE_ID)
        self.assertEqual(error.context['entity_id'], "S1")
        self.assertIsNone(error.cause)
        self.assertNotIn('original_type', error.context)

    def test_short_array_has_no_entity_id(self):
        with self.assertRaises(DataError) as ctx:
            EntityNode.from_payload(["D1"])
        self.assertNotIn('entity_id', ctx.exception.context)

    def test_log_message_carries_code_and_entity(self):
        with self.assertRaises(DataError) as ctx:
            EntityGraph.from_payload([["S1", "a", [], 1], ["S1", "b", [], 1]])

        log_msg = ctx.exception.format_log_message()
        self.assertTrue(log_msg.startswith("[4006] DataError: "))
        self.assertIn("'entity_id': 'S1'", log_msg)
        self.assertNotIn("Caused by", log_msg)


class TestFileErrors(unittest.TestCase):
    """Errors raised while reading entity and configuration files."""

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp_path = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def test_unreadable_entity_file_wraps_json_error(self):
        path = self.tmp_path / "entities.json"
        path.write_text("[[", encoding='utf-8')

        with self.assertRaises(DataError) as ctx:
            load_entities(path)

        error = ctx.exception
        self.assertEqual(error.error_code, ErrorCodes.FILE_READ_ERROR)
        self.assertEqual(error.context['file_path'], str(path))
        self.assertEqual(error.context['original_type'], 'JSONDecodeError')
        self.assertIsInstance(error.__cause__, json.JSONDecodeError)
        self.assertIn("Caused by: JSONDecodeError", error.format_log_message())

    def test_missing_config_has_suggestion(self):
        with self.assertRaises(ConfigurationError) as ctx:
            load_config(self.tmp_path / "selector.yaml")

        user_msg = ctx.exception.format_user_message()
        self.assertIn("Configuration file not found", user_msg)
        self.assertIn("  1. Check the --config path", user_msg)

    def test_bad_leaf_type_names_the_setting(self):
        with self.assertRaises(ConfigurationError) as ctx:
            SelectorConfig.from_dict({'leafType': 'TASK'})

        error = ctx.exception
        self.assertEqual(error.context['setting'], 'leaf_type')
        self.assertEqual(error.context['category'], 'CONFIGURATION')
        self.assertEqual(error.format_user_message(), error.message)


class TestWrapExternalError(unittest.TestCase):
    """Test wrapping external exceptions."""

    def test_wrap_keeps_code_and_details(self):
        original = OSError("Permission denied")
        wrapped = wrap_external_error(
            original,
            "Failed to read configuration file",
            ConfigurationError,
            error_code=ErrorCodes.CONFIG_INVALID,
            file_path='selector.yaml'
        )

        self.assertIsInstance(wrapped, ConfigurationError)
        self.assertEqual(wrapped.error_code, ErrorCodes.CONFIG_INVALID)
        self.assertIs(wrapped.__cause__, original)
        self.assertEqual(wrapped.context['file_path'], 'selector.yaml')
        self.assertEqual(wrapped.context['category'], 'CONFIGURATION')

    def test_wrap_uses_class_default_code(self):
        wrapped = wrap_external_error(ValueError("bad"), "Failed")
        self.assertIsInstance(wrapped, SelectorError)
        self.assertEqual(wrapped.error_code, ErrorCodes.UNKNOWN_ERROR)


if __name__ == '__main__':
    unittest.main()
