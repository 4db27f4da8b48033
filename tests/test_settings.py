# tests/test_settings.py

"""Tests for the Settings configuration class."""

import logging
import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_image_fetch_timeout_is_positive_int(self) -> None:
        self.assertIsInstance(Settings.IMAGE_FETCH_TIMEOUT, int)
        self.assertGreater(Settings.IMAGE_FETCH_TIMEOUT, 0)

    def test_animation_delays_are_short(self) -> None:
        """Cosmetic reverts last between a half and one second."""
        for delay in (Settings.LIKE_PULSE_DELAY, Settings.ADDED_FLASH_DELAY):
            with self.subTest(delay=delay):
                self.assertGreaterEqual(delay, 0.5)
                self.assertLess(delay, 1.0)

    def test_like_pulse_shorter_than_added_flash(self) -> None:
        self.assertLess(
            Settings.LIKE_PULSE_DELAY, Settings.ADDED_FLASH_DELAY
        )

    def test_presentation_strings(self) -> None:
        self.assertEqual(Settings.APP_TITLE, "Trending Products")
        self.assertEqual(Settings.SEARCH_PLACEHOLDER, "Search products")
        self.assertEqual(Settings.CURRENCY_SYMBOL, "$")

    def test_path_constants_are_paths(self) -> None:
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_console_log_level_is_known_level_name(self) -> None:
        self.assertIsInstance(
            logging.getLevelName(Settings.CONSOLE_LOG_LEVEL), int
        )

    def test_impersonate_browser_is_string(self) -> None:
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)

    def test_image_headers_accept_images(self) -> None:
        self.assertIn("image/", Settings.IMAGE_HEADERS["Accept"])


if __name__ == "__main__":
    unittest.main()
