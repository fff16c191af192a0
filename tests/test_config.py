import os
import unittest

from pydantic import ValidationError

from blocktui.config import Settings, default_db_path


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings.from_env(environ={})
        self.assertEqual(settings.capacity, 5)
        self.assertEqual(settings.log_level, "INFO")
        self.assertEqual(os.path.basename(settings.db_path), "app.db")
        self.assertEqual(settings.db_path, default_db_path())

    def test_reads_environment(self) -> None:
        settings = Settings.from_env(
            environ={
                "BLOCKTUI_CAPACITY": "3",
                "BLOCKTUI_DB_PATH": "/tmp/scores.db",
                "BLOCKTUI_LOG_LEVEL": "debug",
            }
        )
        self.assertEqual(settings.capacity, 3)
        self.assertEqual(settings.db_path, "/tmp/scores.db")
        self.assertEqual(settings.log_level, "DEBUG")

    def test_overrides_win_over_environment(self) -> None:
        settings = Settings.from_env(
            environ={"BLOCKTUI_CAPACITY": "3"}, capacity=10, db_path=None
        )
        self.assertEqual(settings.capacity, 10)

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValidationError):
            Settings.from_env(environ={"BLOCKTUI_CAPACITY": "-1"})
        with self.assertRaises(ValidationError):
            Settings.from_env(environ={"BLOCKTUI_CAPACITY": "lots"})
        with self.assertRaises(ValidationError):
            Settings.from_env(environ={"BLOCKTUI_LOG_LEVEL": "chatty"})
        with self.assertRaises(ValidationError):
            Settings.from_env(environ={"BLOCKTUI_DB_PATH": "   "})


if __name__ == "__main__":
    unittest.main()
