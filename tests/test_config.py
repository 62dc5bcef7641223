import tempfile
from pathlib import Path
from unittest import TestCase, mock

from batched_subscribe.config import Config


class TestConfig(TestCase):
    def setUp(self):
        self.tempdir = tempfile.TemporaryDirectory()
        self.path = Path(self.tempdir.name) / "nested" / "config.ini"

    def tearDown(self):
        self.tempdir.cleanup()

    def test_defaults_without_file(self):
        self.assertEqual(Config.read(self.path), Config())

    def test_round_trip(self):
        Config(log_level="debug", idle_delay_ms=16, window_geometry="300x200+0+0").write(
            self.path
        )

        config = Config.read(self.path)
        self.assertEqual(config.log_level, "DEBUG")
        self.assertEqual(config.idle_delay_ms, 16)
        self.assertEqual(config.window_geometry, "300x200+0+0")

    def test_partial_file(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[DEFAULT]\nidle_delay_ms = 10\n")

        config = Config.read(self.path)
        self.assertEqual(config.idle_delay_ms, 10)
        self.assertEqual(config.log_level, "INFO")
        self.assertEqual(config.window_geometry, "")

    def test_invalid_value(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[DEFAULT]\nidle_delay_ms = soon\n")

        with self.assertRaises(ValueError):
            Config.read(self.path)

    def test_default_path(self):
        with mock.patch("batched_subscribe.config.CONFIG_PATH", self.path):
            Config(idle_delay_ms=3).write()
            self.assertEqual(Config.read().idle_delay_ms, 3)
