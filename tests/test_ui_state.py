import unittest

from spz_engine import ShiftButtonState, ShiftDisabledReason, process_input

BOUNDARY = ShiftDisabledReason.BOUNDARY_REACHED
BLOCKED = ShiftDisabledReason.NON_PADDING_CHAR_FOUND


class TestWordGroupBoundaries(unittest.TestCase):
    def test_each_group_has_one_left_and_one_right_boundary(self) -> None:
        for raw in ("AB CD", "x 12345", "a b c d", "platenumbers", "PLATE", "ellll"):
            with self.subTest(raw=raw):
                members = {}
                for c in process_input(raw).candidates:
                    if c.is_padding or c.is_skipped_vowel:
                        self.assertFalse(c.word_group_boundary_left or c.word_group_boundary_right)
                        continue
                    members.setdefault(c.word_group, []).append(c)
                for group in members.values():
                    self.assertEqual(sum(c.word_group_boundary_left for c in group), 1)
                    self.assertEqual(sum(c.word_group_boundary_right for c in group), 1)
                    self.assertTrue(group[0].word_group_boundary_left)
                    self.assertTrue(group[-1].word_group_boundary_right)


class TestShiftStates(unittest.TestCase):
    def test_states_follow_neighbours(self) -> None:
        # A B _ C D _ _ 0
        candidates = process_input("AB CD").candidates
        a, b, _, c, d = candidates[:5]
        self.assertEqual(a.left_shift_state.disabled_reason, BOUNDARY)
        self.assertEqual(a.right_shift_state.disabled_reason, BLOCKED)
        self.assertEqual(b.left_shift_state.disabled_reason, BLOCKED)
        self.assertTrue(b.right_shift_state.can_be_enabled)
        self.assertTrue(c.left_shift_state.can_be_enabled)
        self.assertEqual(c.right_shift_state.disabled_reason, BLOCKED)
        self.assertTrue(d.right_shift_state.can_be_enabled)

    def test_enabled_state_has_no_reason(self) -> None:
        b = process_input("AB CD").candidates[1]
        self.assertIsNone(b.right_shift_state.disabled_reason)

    def test_padding_gets_default_state(self) -> None:
        for c in process_input("AB CD").candidates:
            if c.is_padding:
                self.assertEqual(c.left_shift_state, ShiftButtonState())
                self.assertEqual(c.right_shift_state, ShiftButtonState())

    def test_last_position_reaches_boundary(self) -> None:
        last = process_input("ABCD1234").candidates[-1]
        self.assertEqual(last.right_shift_state.disabled_reason, BOUNDARY)

    def test_skipped_vowel_blocks_its_neighbour(self) -> None:
        candidates = process_input("abecodifuh").candidates
        self.assertTrue(candidates[6].is_skipped_vowel)
        self.assertEqual(candidates[7].left_shift_state.disabled_reason, BLOCKED)
