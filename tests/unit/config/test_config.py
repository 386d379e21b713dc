"""Tests for reading user defaults and sanitizing their values."""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from filemeta import config


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_loads_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with mock.patch("filemeta.config.CONFIG_PATH", Path(tmp) / "config.json"):
                self.assertEqual(config.load_config(), {})
                self.assertIsNone(config.load_max_concurrent_lookups())

    def test_max_concurrent_lookups_is_read_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"max_concurrent_lookups": 8}), encoding="utf-8")
            with mock.patch("filemeta.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {"max_concurrent_lookups": 8})
                self.assertEqual(config.load_max_concurrent_lookups(), 8)

    def test_invalid_limits_are_ignored(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("filemeta.config.CONFIG_PATH", config_path):
                for value in (0, -3, True, 2.5, "4", None):
                    with self.subTest(value=value):
                        config_path.write_text(json.dumps({"max_concurrent_lookups": value}), encoding="utf-8")
                        self.assertIsNone(config.load_max_concurrent_lookups())

    def test_malformed_config_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("filemeta.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

    def test_unreadable_location_falls_back_to_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            blocker = Path(tmp) / "blocker"
            blocker.write_text("", encoding="utf-8")
            with mock.patch("filemeta.config.CONFIG_PATH", blocker / "config.json"):
                self.assertEqual(config.load_config(), {})


if __name__ == "__main__":
    unittest.main()
