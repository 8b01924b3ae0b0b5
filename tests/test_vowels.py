import unittest

from spz_engine.errors import PlateError
from spz_engine.vowels import remove_vowels

from tests.helpers import candidates_for, visible


class TestRemoveVowels(unittest.TestCase):
    def test_fits_already(self) -> None:
        result = remove_vowels(candidates_for("platenum"))
        self.assertTrue(result.ok)
        self.assertFalse(any(c.is_skipped_vowel for c in result.value))

    def test_one_over(self) -> None:
        result = remove_vowels(candidates_for("platenumb"))
        self.assertEqual(visible(result.value), "PLATENMB")

    def test_avoids_adjacent_skips_on_first_pass(self) -> None:
        result = remove_vowels(candidates_for("platenumbe"))
        self.assertEqual(visible(result.value), "PLATENMB")

    def test_second_pass_takes_remaining_vowels(self) -> None:
        result = remove_vowels(candidates_for("aeboddffhhh"))
        skipped = [idx for idx, c in enumerate(result.value) if c.is_skipped_vowel]
        self.assertEqual(skipped, [0, 1, 3])

    def test_candidates_are_marked_not_removed(self) -> None:
        result = remove_vowels(candidates_for("platenumbers"))
        self.assertEqual(len(result.value), 12)
        self.assertEqual(visible(result.value), "PLTNMBRS")

    def test_too_many_consonants(self) -> None:
        result = remove_vowels(candidates_for("bcdfhjklmn"))
        self.assertFalse(result.ok)
        self.assertEqual(result.error, PlateError.TOO_MANY_CONSONANTS)

    def test_input_not_mutated(self) -> None:
        source = candidates_for("platenumbers")
        remove_vowels(source)
        self.assertFalse(any(c.is_skipped_vowel for c in source))
