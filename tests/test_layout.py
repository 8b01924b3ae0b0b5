import unittest

from spz_engine import derive_display_layout, process_input
from spz_engine.errors import CONSECUTIVE_VOWELS, PLATE_TOO_LONG, TOO_MANY_VOWELS
from spz_engine.layout import render_vowel_row

from tests.helpers import make_candidate


def _vowels(layout):
    return [v.selected if v is not None else None for v in layout.vowel_row.data]


def _plate(layout):
    return "".join(c.selected for c in layout.plate_row.data)


class TestDisplayLayout(unittest.TestCase):
    def test_skipped_vowels_sit_between_plate_characters(self) -> None:
        layout = derive_display_layout(process_input("abecodifuh").candidates)
        self.assertEqual(_vowels(layout), [None] * 6 + ["I", "U", None])
        self.assertEqual(_plate(layout), "ABEC0DFH")
        self.assertEqual(layout.vowel_row.errors, [])
        self.assertEqual(layout.plate_row.errors, [])

    def test_adjacent_skipped_vowels_are_reported(self) -> None:
        layout = derive_display_layout(process_input("aeboddffhhh").candidates)
        self.assertIn(CONSECUTIVE_VOWELS, layout.vowel_row.errors)
        self.assertEqual(_plate(layout), "8DDFFHHH")

    def test_no_skipped_vowels(self) -> None:
        layout = derive_display_layout(process_input("ABCD1234").candidates)
        self.assertEqual(_vowels(layout), [None] * 9)
        self.assertEqual(_plate(layout), "ABCD1234")

    def test_plate_row_too_long(self) -> None:
        layout = derive_display_layout([make_candidate("d") for _ in range(9)])
        self.assertEqual(layout.plate_row.errors, [PLATE_TOO_LONG])
        self.assertEqual(layout.vowel_row.errors, [])

    def test_vowel_past_last_slot(self) -> None:
        candidates = [make_candidate("d") for _ in range(9)]
        candidates.append(make_candidate("a", is_skipped_vowel=True))
        layout = derive_display_layout(candidates)
        self.assertIn(TOO_MANY_VOWELS, layout.vowel_row.errors)
        self.assertEqual(len(layout.vowel_row.data), 10)

    def test_empty(self) -> None:
        layout = derive_display_layout([])
        self.assertEqual(_vowels(layout), [None] * 9)
        self.assertEqual(layout.plate_row.data, [])

    def test_render_vowel_row(self) -> None:
        layout = derive_display_layout(process_input("abecodifuh").candidates)
        self.assertEqual(render_vowel_row(layout), "      IU ")
        self.assertEqual(render_vowel_row(layout, empty="."), "......IU.")
