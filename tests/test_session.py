import unittest

from game import Container, GameOutcome, GameSession, GameSettings, InvalidArgument, PourResult, evaluate

R, B, G = 'red', 'blue', 'green'


def session_of(capacity, *stacks):
    return GameSession(GameSettings(), [Container.of(capacity, s) for s in stacks])


class TestGameSession(unittest.TestCase):
    def test_given_default_settings_when_new_session_then_dealt_and_playing(self):
        s = GameSession.new(seed=5)
        self.assertEqual(len(s.containers), 8)
        self.assertEqual(s.moves, 0)
        self.assertEqual(s.outcome, GameOutcome.PLAYING)
        self.assertFalse(s.is_over)
        self.assertEqual(s.status_message(), 'Moves: 0')

    def test_given_fresh_deals_when_first_pour_then_accepted(self):
        # the futility heuristic may flag an opening position; it must not lock the game
        for seed in range(20):
            s = GameSession.new(seed=seed)
            self.assertEqual(s.outcome, GameOutcome.PLAYING, msg=f'seed {seed}')
            first = s.legal_moves()[0]
            self.assertEqual(s.pour(first.source, first.target), PourResult(True, first.quantity))
            self.assertEqual(s.moves, 1)
            self.assertEqual(s.outcome, evaluate(s.containers))

    def test_given_opening_judged_stuck_when_session_starts_then_still_playing(self):
        s = session_of(4, [R], [R], [R])
        self.assertEqual(evaluate(s.containers), GameOutcome.STUCK)
        self.assertEqual(s.outcome, GameOutcome.PLAYING)
        self.assertEqual(s.pour(0, 1), PourResult(True, 1))
        self.assertEqual([c.colors() for c in s.containers], [[], [R, R], [R]])

    def test_given_sorted_deal_when_session_starts_then_won(self):
        s = session_of(2, [R, R], [], [B, B])
        self.assertEqual(s.outcome, GameOutcome.WON)
        self.assertEqual(s.legal_moves(), [])

    def test_given_near_win_when_pouring_then_won_and_locked(self):
        s = session_of(2, [R], [R], [B, B])
        self.assertEqual(s.outcome, GameOutcome.PLAYING)
        self.assertEqual(s.pour(0, 1), PourResult(True, 1))
        self.assertEqual(s.moves, 1)
        self.assertEqual(s.outcome, GameOutcome.WON)
        self.assertIn('won in 1 moves', s.status_message())
        # terminal: further pours are refused and nothing moves
        self.assertEqual(s.pour(1, 0), PourResult(False, 0))
        self.assertEqual(s.moves, 1)
        self.assertEqual(s.outcome, GameOutcome.WON)
        self.assertEqual([c.colors() for c in s.containers], [[], [R, R], [B, B]])
        self.assertEqual(s.legal_moves(), [])

    def test_given_pour_leaving_no_moves_when_applied_then_stuck(self):
        s = session_of(4, [G, R], [R])
        self.assertEqual(s.outcome, GameOutcome.PLAYING)
        self.assertEqual(len(s.legal_moves()), 2)
        s.pour(0, 1)
        self.assertEqual(s.outcome, GameOutcome.STUCK)
        self.assertTrue(s.is_over)
        self.assertIn('No more moves', s.status_message())

    def test_given_illegal_pour_when_applied_then_move_not_counted(self):
        s = session_of(4, [R, B], [B, R], [], [G, G, G, G])
        self.assertEqual(s.pour(0, 1), PourResult(False, 0))
        self.assertEqual(s.moves, 0)
        with self.assertRaises(InvalidArgument):
            s.pour(0, 0)
        with self.assertRaises(InvalidArgument):
            s.pour(0, 9)

    def test_given_session_when_reset_then_fresh_deal_and_counter(self):
        s = GameSession.new(GameSettings(difficulty=1, complexity=6), seed=3)
        first = [c.colors() for c in s.containers]
        move = s.legal_moves()[0]
        self.assertTrue(s.pour(move.source, move.target).success)
        s.reset(seed=3)
        self.assertEqual(s.moves, 0)
        self.assertEqual(s.outcome, GameOutcome.PLAYING)
        self.assertEqual([c.colors() for c in s.containers], first)

    def test_given_settings_when_applied_then_reset_only_on_change(self):
        s = GameSession.new(seed=1)
        self.assertFalse(s.apply_settings(GameSettings()))
        self.assertTrue(s.apply_settings(GameSettings(difficulty=4, complexity=7), seed=1))
        self.assertEqual(len(s.containers), 11)
        with self.assertRaises(ValueError):
            s.apply_settings(GameSettings(complexity=2))


if __name__ == '__main__':
    unittest.main(verbosity=2)
