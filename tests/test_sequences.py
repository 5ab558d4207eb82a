#!/usr/bin/env python3
"""
Tests for sequence construction and coercion.
"""

import unittest
from lazyiterate import Seq, Seq2


class TestFactories(unittest.TestCase):

    def test_from_iterable_is_replayable_for_collections(self):
        seq = Seq.from_iterable([3, 1, 2])
        self.assertEqual(seq.collect(), [3, 1, 2])
        self.assertEqual(seq.collect(), [3, 1, 2])

    def test_from_one_shot_iterator(self):
        seq = Seq.from_iterable(iter([1, 2]))
        self.assertEqual(seq.collect(), [1, 2])
        self.assertEqual(seq.collect(), [])

    def test_range(self):
        self.assertEqual(Seq.range(2, 10, 3).collect(), [2, 5, 8])

    def test_from_pairs_keeps_duplicates_and_order(self):
        pairs = [("b", 1), ("a", 2), ("b", 3)]
        self.assertEqual(Seq2.from_pairs(pairs).collect(), pairs)

    def test_from_mapping(self):
        mapping = {"z": 1, "a": 2}
        self.assertEqual(Seq2.from_mapping(mapping).collect(), [("z", 1), ("a", 2)])

    def test_enumerate(self):
        seq = Seq2.enumerate(["a", "b", "c"], start=1)
        self.assertEqual(seq.collect(), [(1, "a"), (2, "b"), (3, "c")])

    def test_enumerate_restarts_on_replay(self):
        seq = Seq2.enumerate(Seq.range(2))
        self.assertEqual(seq.collect(), [(0, 0), (1, 1)])
        self.assertEqual(seq.collect(), [(0, 0), (1, 1)])

    def test_custom_producer(self):
        def countdown(step):
            for n in (3, 2, 1):
                if not step(n):
                    return

        self.assertEqual(Seq(countdown).collect(), [3, 2, 1])


class TestCoercion(unittest.TestCase):

    def test_of_returns_same_instance(self):
        seq = Seq.range(3)
        self.assertIs(Seq.of(seq), seq)
        pairs = Seq2.from_pairs([])
        self.assertIs(Seq2.of(pairs), pairs)

    def test_of_rejects_wrong_shape(self):
        with self.assertRaises(TypeError):
            Seq.of(Seq2.from_pairs([]))
        with self.assertRaises(TypeError):
            Seq2.of(Seq.range(1))

    def test_of_rejects_non_sources(self):
        with self.assertRaises(TypeError):
            Seq.of(42)
        with self.assertRaises(TypeError):
            Seq(42)

    def test_of_wraps_mapping_and_pairs(self):
        self.assertEqual(Seq2.of({1: "x"}).collect(), [(1, "x")])
        self.assertEqual(Seq2.of([(1, "x")]).collect(), [(1, "x")])

    def test_sequences_are_producers(self):
        got = []
        Seq.range(3)(lambda v: got.append(v) or True)
        self.assertEqual(got, [0, 1, 2])

        pairs = []
        Seq2.from_pairs([("k", "v")])(lambda k, v: pairs.append((k, v)) or True)
        self.assertEqual(pairs, [("k", "v")])


if __name__ == "__main__":
    unittest.main()
