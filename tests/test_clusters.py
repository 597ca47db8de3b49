"""
# dictreplace: test_clusters.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `clusters.py`.
"""

import unittest

from dictreplace.clusters import ClusterTable, build_cluster_table, compute_candidates
from dictreplace.strategies import Candidate


class TestClusters(unittest.TestCase):
    def test_build_cluster_table(self):
        self.assertEqual(build_cluster_table({}), ClusterTable({}, []))
        self.assertEqual(build_cluster_table({'': 'empty'}), ClusterTable({}, []))
        self.assertEqual(
            build_cluster_table({'A': 'B', 'AB': 'X'}),
            ClusterTable({'A': ['A', 'AB']}, [1]),
        )
        self.assertEqual(
            build_cluster_table({'AB': 'X', 'A': 'B'}),
            ClusterTable({'A': ['A', 'AB']}, [1]),
        )
        self.assertEqual(
            build_cluster_table({'as': 'x', 'assist': 'y', 'assert': 'z', '': 'w'}),
            ClusterTable({'as': ['as', 'assist', 'assert']}, [2]),
        )
        self.assertEqual(
            build_cluster_table({'A': '1', 'CDE': '2', 'C': '3', 'XYZ': '4', 'XY!': '5'}),
            ClusterTable({'A': ['A'], 'C': ['C', 'CDE'], 'XYZ': ['XYZ'], 'XY!': ['XY!']}, [1, 3]),
        )

    def test_build_cluster_table_merges_every_absorbed_anchor(self):
        cluster_table = build_cluster_table({'assisting': '1', 'assertive': '2', 'asked': '3', 'as': '4'})
        self.assertEqual(
            cluster_table.members_from_anchor,
            {'as': ['as', 'asked', 'assisting', 'assertive']},
        )
        self.assertEqual(cluster_table.anchor_lengths, [2])

    def test_build_cluster_table_anchors_are_prefix_disjoint(self):
        cluster_table = build_cluster_table({
            'abcd': '1', 'x': '2', 'abc': '3', 'xyz': '4', 'ab': '5', 'b': '6', 'bcd': '7', 'a': '8',
        })
        anchors = list(cluster_table.members_from_anchor)
        for anchor in anchors:
            for other_anchor in anchors:
                if anchor != other_anchor:
                    self.assertFalse(other_anchor.startswith(anchor))

        self.assertEqual(
            cluster_table.members_from_anchor,
            {'a': ['a', 'ab', 'abc', 'abcd'], 'x': ['x', 'xyz'], 'b': ['b', 'bcd']},
        )
        self.assertEqual(cluster_table.anchor_lengths, [1])

    def test_compute_candidates(self):
        cluster_table = build_cluster_table({'A': 'B', 'AB': 'X'})
        self.assertEqual(compute_candidates(cluster_table, 'AA AB AC', 0, 1), [Candidate('A', 1)])
        self.assertEqual(compute_candidates(cluster_table, 'AA AB AC', 2, 1), [])
        self.assertEqual(
            compute_candidates(cluster_table, 'AA AB AC', 3, 1),
            [Candidate('A', 1), Candidate('AB', 2)],
        )
        self.assertEqual(compute_candidates(cluster_table, 'AA AB AC', 7, 1), [])
        self.assertEqual(compute_candidates(cluster_table, 'AA AB AC', 8, 1), [])

    def test_compute_candidates_verifies_longer_members(self):
        cluster_table = build_cluster_table({'abcd': '1', 'ab': '2', 'abc': '3'})
        self.assertEqual(
            compute_candidates(cluster_table, 'abce', 0, 2),
            [Candidate('ab', 2), Candidate('abc', 3)],
        )
        self.assertEqual(compute_candidates(cluster_table, 'xab', 1, 2), [Candidate('ab', 2)])
        self.assertEqual(compute_candidates(cluster_table, 'xa', 1, 2), [])

    def test_compute_candidates_multi_byte(self):
        cluster_table = build_cluster_table({'私は': 'I', '私はあなた': 'I you'})
        self.assertEqual(
            compute_candidates(cluster_table, 'ええ、私はあなたが', 3, 2),
            [Candidate('私は', 2), Candidate('私はあなた', 5)],
        )


if __name__ == '__main__':
    unittest.main()
