import unittest

from spz_engine import PlateError, ShiftButtonState, ShiftDisabledReason, process_input
from spz_engine.editing import LEFT, RIGHT, select_character, separate_plate_characters, shift_candidate


class TestSelectCharacter(unittest.TestCase):
    def test_selects_and_counts_the_change(self) -> None:
        plate = select_character(process_input("ABC"), 0, "x")
        self.assertEqual(plate.plate_number, "XBCAAAA0")
        self.assertEqual(plate.metadata.last_change_counter, 1)
        self.assertEqual(plate.candidates[0].last_changed, 1)
        self.assertEqual(plate.candidates[1].last_changed, 0)

    def test_counter_keeps_growing(self) -> None:
        plate = select_character(process_input("ABC"), 0, "X")
        plate = select_character(plate, 1, "Y")
        self.assertEqual(plate.metadata.last_change_counter, 2)
        self.assertEqual(plate.candidates[1].last_changed, 2)

    def test_original_plate_untouched(self) -> None:
        original = process_input("ABC")
        select_character(original, 0, "X")
        self.assertEqual(original.plate_number, "ABCAAAA0")
        self.assertEqual(original.metadata.last_change_counter, 0)

    def test_rejects_invalid_values(self) -> None:
        plate = process_input("ABC")
        for value in ("G", "AB", "", "ö"):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    select_character(plate, 0, value)

    def test_rejects_unknown_position(self) -> None:
        with self.assertRaises(ValueError):
            select_character(process_input("ABC"), 8, "A")
        with self.assertRaises(ValueError):
            select_character(process_input("ABC"), -1, "A")

    def test_mandatory_position_only_takes_its_digit(self) -> None:
        plate = process_input("ABCO")
        with self.assertRaises(ValueError):
            select_character(plate, 3, "A")
        self.assertEqual(select_character(plate, 3, "0").candidates[3].selected, "0")

    def test_removing_the_last_digit_invalidates(self) -> None:
        plate = select_character(process_input("ABC"), 7, "A")
        self.assertFalse(plate.metadata.is_valid)
        self.assertEqual(plate.metadata.error_message, PlateError.NO_POSITION_FOR_NUMBER.message_key)

    def test_adding_a_digit_revalidates(self) -> None:
        plate = process_input("DDDDDDDD")
        self.assertFalse(plate.metadata.is_valid)
        plate = select_character(plate, 0, "1")
        self.assertTrue(plate.metadata.is_valid)
        self.assertEqual(plate.metadata.error_message, "")


class TestShiftCandidate(unittest.TestCase):
    def test_shift_into_padding(self) -> None:
        # A B _ C D _ _ 0
        plate = shift_candidate(process_input("AB CD"), 1, RIGHT)
        self.assertEqual(plate.plate_number, "AABCDAA0")
        moved = plate.candidates[2]
        self.assertEqual(moved.input.original, "B")
        self.assertEqual(moved.last_changed, 1)
        self.assertEqual(plate.metadata.last_change_counter, 1)

    def test_states_are_recomputed(self) -> None:
        plate = shift_candidate(process_input("AB CD"), 1, RIGHT)
        a, b = plate.candidates[0], plate.candidates[2]
        self.assertTrue(a.right_shift_state.can_be_enabled)
        self.assertTrue(b.left_shift_state.can_be_enabled)
        self.assertEqual(b.right_shift_state.disabled_reason, ShiftDisabledReason.NON_PADDING_CHAR_FOUND)
        self.assertTrue(a.word_group_boundary_left)
        self.assertTrue(b.word_group_boundary_right)
        self.assertFalse(a.word_group_boundary_right)

    def test_shift_back(self) -> None:
        plate = shift_candidate(process_input("AB CD"), 1, RIGHT)
        plate = shift_candidate(plate, 2, LEFT)
        self.assertEqual(plate.plate_number, "ABACDAA0")
        self.assertEqual(plate.metadata.last_change_counter, 2)

    def test_disabled_shift_raises(self) -> None:
        plate = process_input("AB CD")
        with self.assertRaises(ValueError):
            shift_candidate(plate, 0, LEFT)
        with self.assertRaises(ValueError):
            shift_candidate(plate, 0, RIGHT)
        with self.assertRaises(ValueError):
            shift_candidate(plate, 2, RIGHT)

    def test_stored_states_cannot_unlock_a_shift(self) -> None:
        plate = process_input("ABCD1234")
        plate.candidates[0].left_shift_state = ShiftButtonState(can_be_enabled=True)
        plate.candidates[7].right_shift_state = ShiftButtonState(can_be_enabled=True)
        plate.candidates[3].right_shift_state = ShiftButtonState(can_be_enabled=True)
        for index, direction in ((0, LEFT), (7, RIGHT), (3, RIGHT)):
            with self.subTest(index=index, direction=direction):
                with self.assertRaises(ValueError):
                    shift_candidate(plate, index, direction)
        self.assertEqual(plate.plate_number, "ABCD1234")

    def test_stored_states_cannot_block_a_shift(self) -> None:
        plate = process_input("AB CD")
        plate.candidates[1].right_shift_state = ShiftButtonState(
            disabled_reason=ShiftDisabledReason.BOUNDARY_REACHED
        )
        self.assertEqual(shift_candidate(plate, 1, RIGHT).plate_number, "AABCDAA0")

    def test_unknown_direction(self) -> None:
        with self.assertRaises(ValueError):
            shift_candidate(process_input("AB CD"), 1, "up")


class TestSeparatePlateCharacters(unittest.TestCase):
    def test_split(self) -> None:
        groups = separate_plate_characters(["A", "1", "B", "2"])
        self.assertEqual(groups["numbers"], ["1", "2"])
        self.assertEqual(groups["letters"], ["A", "B"])
