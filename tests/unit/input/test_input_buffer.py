from __future__ import annotations

import unittest

from lazyfm.input_buffer import InputBuffer


class InputBufferTests(unittest.TestCase):
    def test_insert_at_cursor_in_middle(self) -> None:
        buffer = InputBuffer()
        buffer.insert("abc")
        buffer.move_left()
        buffer.move_left()
        buffer.insert("X")
        self.assertEqual(buffer.text, "aXbc")
        self.assertEqual(buffer.cursor, 2)

    def test_seed_places_cursor_at_end(self) -> None:
        buffer = InputBuffer()
        buffer.seed("report.txt")
        self.assertEqual(buffer.cursor, len("report.txt"))

    def test_edits_at_edges_are_noops(self) -> None:
        buffer = InputBuffer()
        buffer.insert("ab")
        buffer.delete()
        buffer.move_right()
        self.assertEqual((buffer.text, buffer.cursor), ("ab", 2))

        buffer.move_home()
        buffer.backspace()
        buffer.move_left()
        self.assertEqual((buffer.text, buffer.cursor), ("ab", 0))

    def test_delete_and_backspace_remove_around_cursor(self) -> None:
        buffer = InputBuffer()
        buffer.insert("abcd")
        buffer.move_left()
        buffer.backspace()
        self.assertEqual(buffer.text, "abd")
        buffer.delete()
        self.assertEqual((buffer.text, buffer.cursor), ("ab", 2))

    def test_reset_empties_buffer(self) -> None:
        buffer = InputBuffer()
        buffer.seed("name")
        buffer.reset()
        self.assertEqual((buffer.text, buffer.cursor, len(buffer)), ("", 0, 0))


if __name__ == "__main__":
    unittest.main()
