"""Tests for reading user preferences.

Ensures missing or malformed config data falls back to defaults.
"""

from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from millerview import config


class ConfigBehaviorTests(unittest.TestCase):
    def _with_config(self, content: str | None):
        tmp = tempfile.TemporaryDirectory()
        self.addCleanup(tmp.cleanup)
        config_path = Path(tmp.name) / "config.json"
        if content is not None:
            config_path.write_text(content, encoding="utf-8")
        patcher = mock.patch("millerview.config.CONFIG_PATH", config_path)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_missing_file_yields_empty_config(self) -> None:
        self._with_config(None)
        self.assertEqual(config.load_config(), {})
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_style_name())

    def test_theme_and_style_are_read_and_stripped(self) -> None:
        self._with_config(json.dumps({"theme": " ocean ", "style": "native"}))
        self.assertEqual(config.load_theme_name(), "ocean")
        self.assertEqual(config.load_style_name(), "native")

    def test_malformed_json_is_ignored(self) -> None:
        self._with_config("{not json")
        self.assertEqual(config.load_config(), {})

    def test_non_object_and_wrong_types_are_ignored(self) -> None:
        self._with_config("[1, 2]")
        self.assertEqual(config.load_config(), {})
        self._with_config(json.dumps({"theme": 3, "style": "  "}))
        self.assertIsNone(config.load_theme_name())
        self.assertIsNone(config.load_style_name())

    def test_config_path_lives_in_platform_config_dir(self) -> None:
        self.assertEqual(config.CONFIG_PATH.name, "config.json")
        self.assertIn("millerview", str(config.CONFIG_PATH))


if __name__ == "__main__":
    unittest.main()
