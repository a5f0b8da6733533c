import unittest
from datetime import date

import numpy as np

from euro_analytics.cooccurrence import (
    combination_counts,
    cooccurrence_network,
    pair_matrix,
    top_triplets,
)
from euro_analytics.draws import Draw


class TestCooccurrence(unittest.TestCase):
    """Test pair counting, lift and k-subset counting."""

    def setUp(self):
        """Set up test data."""
        self.draws = [
            Draw(date(2023, 1, 3), (1, 2, 3, 4, 5), (1, 2)),
            Draw(date(2023, 1, 6), (1, 2, 6, 7, 8), (3, 4)),
        ]

    def test_pair_matrix_counts(self):
        pairs = pair_matrix(self.draws)
        self.assertEqual(pairs.count(1, 2), 2)
        self.assertEqual(pairs.count(3, 4), 1)
        self.assertEqual(pairs.count(3, 6), 0)
        self.assertEqual(pairs.total_draws, 2)
        self.assertEqual(pairs.seen[1], 2)
        self.assertEqual(pairs.seen[8], 1)

    def test_pair_matrix_symmetric_with_zero_diagonal(self):
        pairs = pair_matrix(self.draws)
        np.testing.assert_array_equal(pairs.counts, pairs.counts.T)
        self.assertTrue(np.all(np.diag(pairs.counts) == 0))
        self.assertEqual(pairs.count(2, 2), 0)
        # 10 pairs per draw, each stored twice
        self.assertEqual(int(pairs.counts.sum()), 2 * 10 * 2)

    def test_pair_matrix_deduplicates_within_draw(self):
        draws = [Draw(date(2023, 1, 3), (1, 1, 2, 3, 4), (1, 2))]
        pairs = pair_matrix(draws)
        self.assertEqual(pairs.seen[1], 1)
        self.assertEqual(pairs.count(1, 2), 1)
        self.assertEqual(int(pairs.counts.sum()), 6 * 2)

    def test_pair_matrix_ignores_out_of_range(self):
        draws = [Draw(date(2023, 1, 3), (1, 2, 3, 4, 60), (1, 2))]
        pairs = pair_matrix(draws)
        self.assertEqual(pairs.counts.shape, (51, 51))
        self.assertEqual(int(pairs.seen.sum()), 4)

    def test_lift(self):
        pairs = pair_matrix(self.draws)
        # 1 and 2 appear in every draw: independent at P = 1
        self.assertAlmostEqual(pairs.lift(1, 2), 1.0)
        # P(3,4) = 0.5, P(3) = P(4) = 0.5
        self.assertAlmostEqual(pairs.lift(3, 4), 2.0)
        self.assertAlmostEqual(pairs.lift(4, 3), 2.0)
        self.assertEqual(pairs.lift(3, 6), 0.0)
        self.assertEqual(pairs.lift(5, 5), 0.0)

    def test_lift_never_seen_number(self):
        pairs = pair_matrix(self.draws)
        self.assertEqual(pairs.lift(9, 10), 0.0)
        self.assertEqual(pair_matrix([]).lift(1, 2), 0.0)

    def test_top_pairs(self):
        top = pair_matrix(self.draws).top_pairs(3)
        self.assertEqual(top[0], (1, 2, 2))
        self.assertEqual(top[1], (1, 3, 1))
        self.assertEqual(top[2], (1, 4, 1))

    def test_combination_counts(self):
        triplets = combination_counts(self.draws, 3)
        self.assertEqual(sum(triplets.values()), 20)
        self.assertEqual(triplets[(1, 2, 3)], 1)
        self.assertEqual(triplets[(1, 2, 6)], 1)

        pairs = combination_counts(self.draws, 2)
        self.assertEqual(pairs[(1, 2)], 2)
        self.assertEqual(pairs[(3, 4)], pair_matrix(self.draws).count(3, 4))

        with self.assertRaises(ValueError):
            combination_counts(self.draws, 0)

    def test_top_triplets(self):
        draws = self.draws + [Draw(date(2023, 1, 10), (1, 2, 3, 40, 50), (5, 6))]
        top = top_triplets(draws, top_n=2)
        self.assertEqual(top[0], ((1, 2, 3), 2))
        self.assertEqual(top[1][1], 1)

    def test_cooccurrence_network(self):
        network = cooccurrence_network(self.draws, min_weight=2, top_edges=10)
        self.assertEqual(network['edges'], [(1, 2, 2)])
        self.assertEqual(network['degrees'][1], 2)
        self.assertEqual(network['degrees'][3], 0)
        self.assertEqual(network['max_weight'], 2)
        self.assertEqual(network['max_degree'], 2)

    def test_cooccurrence_network_empty(self):
        network = cooccurrence_network([])
        self.assertEqual(network['edges'], [])
        self.assertEqual(network['max_weight'], 1)
        self.assertEqual(network['max_degree'], 1)


if __name__ == '__main__':
    unittest.main()
