import random
import unittest

from ludo_kick.state import new_random_game
from ludo_kick.types import PieceName


class TestRandomGame(unittest.TestCase):
    def test_every_pair_placed_once(self):
        gs = new_random_game(10, ["A", "B", "C", "D"], ["1", "2", "3"], random.Random(1))
        names = [p.name for p in gs.pieces]
        self.assertEqual(len(names), 12)
        self.assertEqual(len(set(names)), 12)
        self.assertEqual(names[0], PieceName("A", "1"))
        self.assertEqual(names[-1], PieceName("D", "3"))

    def test_positions_unique_and_in_range(self):
        for seed in range(20):
            gs = new_random_game(3, ["A", "B", "C"], ["1", "2", "3", "4"], random.Random(seed))
            positions = [p.position for p in gs.pieces]
            self.assertEqual(len(set(positions)), len(positions))
            self.assertTrue(all(0 <= pos < 12 for pos in positions))

    def test_full_track(self):
        gs = new_random_game(1, ["A", "B"], ["1", "2"], random.Random(3))
        self.assertEqual(sorted(p.position for p in gs.pieces), [0, 1, 2, 3])

    def test_seeded_rng_is_deterministic(self):
        a = new_random_game(10, ["A", "B"], ["1", "2"], random.Random(42))
        b = new_random_game(10, ["A", "B"], ["1", "2"], random.Random(42))
        self.assertEqual(a, b)

    def test_too_many_pieces(self):
        with self.assertRaises(ValueError):
            new_random_game(1, ["A", "B", "C"], ["1", "2"], random.Random(0))

    def test_default_rng(self):
        gs = new_random_game(5, ["A", "B"], ["1"])
        self.assertEqual(gs.num_players(["A", "B"]), 2)


if __name__ == "__main__":
    unittest.main()
