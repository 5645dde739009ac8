from __future__ import annotations

import unittest

from lazyfm.directory import Entry
from lazyfm.selection import SelectionSet


class SelectionSetTests(unittest.TestCase):
    def test_toggle_twice_restores_original_state(self) -> None:
        selection = SelectionSet()
        keep = Entry("keep.txt", "/work")
        selection.toggle(keep)
        entry = Entry("a.txt", "/work")

        self.assertTrue(selection.toggle(entry))
        self.assertFalse(selection.toggle(entry))
        self.assertEqual(list(selection), [keep])

    def test_same_name_in_different_directories_is_kept_independently(self) -> None:
        selection = SelectionSet()
        first = Entry("notes.md", "/work")
        second = Entry("notes.md", "/work/docs")
        selection.toggle(first)
        selection.toggle(second)
        self.assertEqual(len(selection), 2)

        selection.toggle(first)
        self.assertEqual(list(selection), [second])

    def test_identity_ignores_entry_kind(self) -> None:
        selection = SelectionSet()
        selection.toggle(Entry("build", "/work", is_directory=True))
        self.assertIn(Entry("build", "/work", is_directory=False), selection)

    def test_drain_returns_insertion_order_and_empties(self) -> None:
        selection = SelectionSet()
        names = ["c", "a", "b"]
        for name in names:
            selection.toggle(Entry(name, "/work"))

        drained = selection.drain()

        self.assertEqual([entry.name for entry in drained], names)
        self.assertEqual(len(selection), 0)
        self.assertFalse(selection)

    def test_clear_empties_unconditionally(self) -> None:
        selection = SelectionSet()
        selection.toggle(Entry("a", "/one"))
        selection.toggle(Entry("a", "/two"))
        selection.clear()
        self.assertEqual(list(selection), [])


if __name__ == "__main__":
    unittest.main()
