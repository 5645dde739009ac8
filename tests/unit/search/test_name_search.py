"""Wrap-around name search tests.

Checks scan order, wrap conditions in both directions and empty-query rules.
"""

from __future__ import annotations

import unittest

from lazyfm.directory import Entry
from lazyfm.search import BACKWARD, FORWARD, find_entry, name_matches


def _entries(*names: str) -> list[Entry]:
    return [Entry(name=name, containing_path="/work") for name in names]


class ForwardSearchTests(unittest.TestCase):
    def test_finds_next_substring_match(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertEqual(find_entry(entries, "an", FORWARD, 0), 1)

    def test_repeat_from_only_match_wraps_back_onto_itself(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertEqual(find_entry(entries, "an", FORWARD, 1), 1)

    def test_match_before_start_is_found_through_wrap(self) -> None:
        entries = _entries("match", "x", "y", "z")
        self.assertEqual(find_entry(entries, "match", FORWARD, 2), 0)

    def test_start_on_last_index_wraps_to_top(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertEqual(find_entry(entries, "apple", FORWARD, 2), 0)

    def test_first_hit_in_scan_order_wins(self) -> None:
        entries = _entries("ab", "ab2", "ab3")
        self.assertEqual(find_entry(entries, "ab", FORWARD, 0), 1)

    def test_matching_is_case_sensitive(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertIsNone(find_entry(entries, "Banana", FORWARD, 0))


class BackwardSearchTests(unittest.TestCase):
    def test_finds_previous_match(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertEqual(find_entry(entries, "an", BACKWARD, 2), 1)

    def test_start_on_first_index_wraps_to_bottom(self) -> None:
        entries = _entries("apple", "banana", "cherry")
        self.assertEqual(find_entry(entries, "ch", BACKWARD, 0), 2)

    def test_miss_above_wraps_from_bottom_down_to_start(self) -> None:
        entries = _entries("apple", "banana", "cherry", "mango")
        self.assertEqual(find_entry(entries, "an", BACKWARD, 1), 3)


class EmptySearchTests(unittest.TestCase):
    def test_empty_query_never_matches(self) -> None:
        entries = _entries("apple", "banana")
        self.assertIsNone(find_entry(entries, "", FORWARD, 0))
        self.assertIsNone(find_entry(entries, "", BACKWARD, 1))
        self.assertFalse(name_matches("apple", ""))

    def test_empty_listing_reports_not_found(self) -> None:
        self.assertIsNone(find_entry([], "a", FORWARD, 0))

    def test_query_longer_than_name_does_not_match(self) -> None:
        self.assertFalse(name_matches("ab", "abc"))


if __name__ == "__main__":
    unittest.main()
