"""Regression tests for display-width primitives.

These cases protect row clipping from wide and control characters in names.
"""

import unittest

from lazyfm import ansi as ansi_mod
from lazyfm.ui_theme import DEFAULT_THEME, PLAIN_THEME, normalize_theme_name, resolve_theme


class DisplayWidthTests(unittest.TestCase):
    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(ansi_mod.display_width("ab"), 2)
        self.assertEqual(ansi_mod.display_width("日本"), 4)
        self.assertEqual(ansi_mod.display_width("é"), 1)

    def test_clip_never_splits_wide_character(self) -> None:
        self.assertEqual(ansi_mod.clip_text("日本語", 3), "日")
        self.assertEqual(ansi_mod.clip_text("abc", 0), "")
        self.assertEqual(ansi_mod.clip_text("abc", 10), "abc")

    def test_printable_masks_control_characters(self) -> None:
        self.assertEqual(ansi_mod.printable("a\tb\x1b"), "a?b?")


class ThemeSelectionTests(unittest.TestCase):
    def test_unknown_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(" OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("neon"), "default")
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_no_color_forces_plain_theme(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)


if __name__ == "__main__":
    unittest.main()
