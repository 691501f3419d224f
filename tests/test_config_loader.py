import unittest
from pathlib import Path
from tempfile import TemporaryDirectory

from extraction_pipeline.core.config import AppConfig, ConfigLoader, ConfigValidationError


class TestConfigLoader(unittest.TestCase):
    def _load(self, text: str) -> AppConfig:
        with TemporaryDirectory() as td:
            path = Path(td) / "config.yaml"
            path.write_text(text, encoding="utf-8")
            return ConfigLoader(path).load()

    def test_full_config(self) -> None:
        config = self._load(
            """
api_key: "  abc123  "
channel_url: https://www.youtube.com/@ExampleChannel
api_endpoint: http://localhost:9000/
page_size: 25
stats_batch_size: 40
request_delay: 0
storage:
  root: ./data
export:
  formats: [CSV, xlsx, csv]
"""
        )
        self.assertEqual(config.api_key, "abc123")
        self.assertEqual(config.channel_url, "https://www.youtube.com/@ExampleChannel")
        self.assertEqual(config.api_endpoint, "http://localhost:9000/")
        self.assertEqual(config.page_size, 25)
        self.assertEqual(config.stats_batch_size, 40)
        self.assertEqual(config.request_delay, 0.0)
        self.assertEqual(config.storage_root, "./data")
        self.assertEqual(config.export_formats, ["csv", "xlsx"])
        self.assertNotIn("abc123", repr(config))

    def test_defaults(self) -> None:
        config = self._load("channel_url: null\n")
        self.assertIsNone(config.api_key)
        self.assertIsNone(config.channel_url)
        self.assertIsNone(config.api_endpoint)
        self.assertEqual(config.page_size, 50)
        self.assertEqual(config.stats_batch_size, 50)
        self.assertEqual(config.request_delay, 0.2)
        self.assertEqual(config.storage_root, "./storage")
        self.assertEqual(config.export_formats, ["csv"])

    def test_comment_only_file_uses_defaults(self) -> None:
        for text in ("# nothing configured yet\n", ""):
            with self.subTest(text=text):
                config = self._load(text)
                self.assertEqual(config.page_size, 50)
                self.assertEqual(config.export_formats, ["csv"])

    def test_invalid_values(self) -> None:
        cases = [
            "page_size: 0\n",
            "page_size: 51\n",
            "stats_batch_size: '50'\n",
            "page_size: true\n",
            "request_delay: -1\n",
            "api_key: 123\n",
            "export:\n  formats: [pdf]\n",
            "storage:\n  root: 5\n",
            "- just\n- a list\n",
            "key: [unclosed\n",
        ]
        for text in cases:
            with self.subTest(text=text):
                with self.assertRaises(ConfigValidationError):
                    self._load(text)

    def test_missing_file(self) -> None:
        with self.assertRaises(FileNotFoundError):
            ConfigLoader(Path("/nonexistent/config.yaml")).load()

    def test_overrides_ignore_none(self) -> None:
        config = AppConfig(channel_url="https://www.youtube.com/@a", export_formats=["md"])
        updated = config.with_overrides(channel_url=None, export_formats=["txt"], api_key="k")
        self.assertEqual(updated.channel_url, "https://www.youtube.com/@a")
        self.assertEqual(updated.export_formats, ["txt"])
        self.assertEqual(updated.api_key, "k")
        with self.assertRaises(TypeError):
            config.with_overrides(unknown="x")


if __name__ == "__main__":
    unittest.main()
