import unittest

from game import (
    Container,
    GameOutcome,
    Move,
    PourResult,
    apply_pour,
    can_pour,
    can_move_be_immediately_reversed,
    deal_containers,
    enumerate_moves,
    evaluate,
    is_stuck,
    is_won,
)

R, B = 'red', 'blue'


def make_containers(capacity, *stacks):
    return [Container.of(capacity, s) for s in stacks]


class TestLiquidSortBasics(unittest.TestCase):
    def test_single_full_color_with_empties_is_won(self):
        cs = make_containers(4, [R, R, R, R], [], [], [])
        self.assertTrue(is_won(cs))

    def test_pour_only_into_matching_or_empty(self):
        cs = make_containers(4, [R, B], [B, R], [], [])
        self.assertFalse(can_pour(cs, 0, 1))
        self.assertTrue(can_pour(cs, 0, 2))
        self.assertEqual(apply_pour(cs, 0, 2), PourResult(True, 1))
        self.assertEqual([c.colors() for c in cs], [[R], [B, R], [B], []])

    def test_full_containers_have_no_moves(self):
        cs = make_containers(1, [R], [R])
        self.assertEqual(enumerate_moves(cs), [])
        self.assertTrue(is_stuck(cs))

    def test_top_unit_over_other_color_is_not_reversible(self):
        cs = make_containers(4, [R, B, R, B], [])
        self.assertFalse(can_move_be_immediately_reversed(cs, Move(0, 1, 1, B)))
        self.assertEqual(evaluate(cs), GameOutcome.PLAYING)

    def test_random_play_never_loses_units(self):
        cs = deal_containers(complexity=6, difficulty=2, seed=2024)
        total = sum(len(c) for c in cs)
        for _ in range(50):
            moves = enumerate_moves(cs)
            if not moves:
                break
            m = moves[len(moves) // 2]
            self.assertEqual(apply_pour(cs, m.source, m.target), PourResult(True, m.quantity))
            self.assertEqual(sum(len(c) for c in cs), total)
            self.assertTrue(all(len(c) <= c.capacity for c in cs))


if __name__ == '__main__':
    unittest.main(verbosity=2)
