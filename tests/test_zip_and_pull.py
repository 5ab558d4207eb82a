#!/usr/bin/env python3
"""
Tests for zip and the pull cursors it is built on.
"""

import random
import threading
import unittest
from contextvars import ContextVar
from lazyiterate import Seq, Seq2, Cursor, pull, zip_, count

request_id = ContextVar("request_id", default="unset")


def tracked(values, log):
    """Producer that logs each element it produces and its own release."""
    def produce(step):
        try:
            for value in values:
                log.append(value)
                if not step(value):
                    return
        finally:
            log.append("released")
    return produce


def fails_on_stop(values):
    """Producer whose cleanup raises once it is told to stop early."""
    def produce(step):
        for value in values:
            if not step(value):
                raise RuntimeError("cleanup failed")
    return produce


class TestZip(unittest.TestCase):
    """Lockstep pairing of two sequences."""

    def setUp(self):
        self.threads_before = threading.active_count()

    def tearDown(self):
        # Every cursor thread must be joined before zip returns
        self.assertEqual(threading.active_count(), self.threads_before)

    def test_zip_discards_remainder_of_longer_source(self):
        result = zip_([1, 2, 3, 4], ["a", "b", "c"]).collect()
        self.assertEqual(result, [(1, "a"), (2, "b"), (3, "c")])

    def test_zip_returns_paired_sequence(self):
        self.assertIsInstance(Seq.range(3).zip("xyz"), Seq2)

    def test_zip_length_is_min_of_lengths(self):
        for _ in range(10):
            a = list(range(random.randint(0, 15)))
            b = list(range(random.randint(0, 15)))
            self.assertEqual(zip_(a, b).count(), min(count(a), count(b)))

    def test_zip_with_empty(self):
        self.assertEqual(zip_([], [1, 2]).collect(), [])
        self.assertEqual(zip_([1, 2], []).collect(), [])

    def test_zip_releases_both_sources_on_exhaustion(self):
        left, right = [], []
        zip_(tracked([1, 2, 3], left), tracked(["a", "b"], right)).collect()
        self.assertEqual(left[-1], "released")
        self.assertEqual(right[-1], "released")

    def test_zip_stops_shorter_first_without_advancing_other(self):
        left, right = [], []
        result = zip_(tracked([1], left), tracked(["a", "b", "c"], right)).collect()
        self.assertEqual(result, [(1, "a")])
        self.assertEqual(right, ["a", "released"])

    def test_zip_early_stop_releases_both_cursors(self):
        left, right = [], []
        result = zip_(tracked(range(100), left), tracked(range(100), right)).take(2).collect()
        self.assertEqual(result, [(0, 0), (1, 1)])
        self.assertEqual(left, [0, 1, "released"])
        self.assertEqual(right, [0, 1, "released"])

    def test_zip_step_error_releases_cursors_and_propagates(self):
        left, right = [], []
        seq = zip_(tracked([1, 2, 3], left), tracked([4, 5, 6], right))

        def step(a, b):
            raise KeyError("consumer failed")

        with self.assertRaises(KeyError):
            seq(step)
        self.assertEqual(left[-1], "released")
        self.assertEqual(right[-1], "released")

    def test_zip_callables_see_caller_context(self):
        seen = []

        def mark(n):
            seen.append(request_id.get())
            return n

        token = request_id.set("caller")
        try:
            zip_(Seq.range(2).map(mark), [1, 2]).collect()
        finally:
            request_id.reset(token)
        self.assertEqual(seen, ["caller", "caller"])

    def test_zip_step_error_not_masked_by_cleanup_error(self):
        def step(a, b):
            raise KeyError("consumer failed")

        with self.assertRaises(KeyError):
            zip_(fails_on_stop([1, 2, 3]), fails_on_stop([4, 5, 6]))(step)

    def test_zip_source_error_propagates(self):
        def broken(step):
            step(1)
            raise ValueError("source failed")

        with self.assertRaises(ValueError):
            zip_(broken, [1, 2, 3]).collect()

    def test_zip_is_replayable(self):
        seq = zip_([1, 2], ["a", "b"])
        self.assertEqual(seq.collect(), seq.collect())

    def test_zip_of_zips(self):
        inner = zip_([1, 2, 3], "abc").map(lambda n, c: f"{c}{n}")
        self.assertEqual(zip_(inner, [True, False]).collect(), [("a1", True), ("b2", False)])


class TestCursor(unittest.TestCase):
    """Converting a push producer into a pull iterator."""

    def test_cursor_iterates(self):
        with pull(Seq.range(3)) as cursor:
            self.assertEqual(list(cursor), [0, 1, 2])
            self.assertTrue(cursor.finished)

    def test_cursor_over_pairs_yields_tuples(self):
        with Cursor(Seq2.from_pairs([("a", 1)])) as cursor:
            self.assertEqual(next(cursor), ("a", 1))
            with self.assertRaises(StopIteration):
                next(cursor)

    def test_unstarted_cursor_holds_nothing(self):
        log = []
        cursor = Cursor(tracked([1, 2], log))
        cursor.close()
        self.assertEqual(log, [])

    def test_close_is_idempotent(self):
        log = []
        cursor = Cursor(tracked([1, 2, 3], log))
        self.assertEqual(cursor.next_unit(), (1,))
        cursor.close()
        cursor.close()
        self.assertEqual(log, [1, "released"])
        self.assertIsNone(cursor.next_unit())

    def test_one_element_in_flight(self):
        log = []
        with Cursor(tracked([1, 2, 3], log)) as cursor:
            next(cursor)
            self.assertEqual(log, [1])
            next(cursor)
            self.assertEqual(log, [1, 2])

    def test_close_raises_cleanup_error(self):
        cursor = Cursor(fails_on_stop([1, 2]))
        self.assertEqual(next(cursor), 1)
        with self.assertRaises(RuntimeError):
            cursor.close()

    def test_cleanup_error_does_not_replace_propagating_error(self):
        with self.assertRaises(KeyError):
            with Cursor(fails_on_stop([1, 2])) as cursor:
                next(cursor)
                raise KeyError("caller failed")

    def test_cursor_runs_producer_in_caller_context(self):
        def produce(step):
            step(request_id.get())

        token = request_id.set("caller")
        try:
            with Cursor(produce) as cursor:
                self.assertEqual(list(cursor), ["caller"])
        finally:
            request_id.reset(token)

    def test_producer_ignoring_stop_gets_no_handoff(self):
        calls = []

        def stubborn(step):
            for value in range(5):
                calls.append(step(value))

        with Cursor(stubborn) as cursor:
            self.assertEqual(next(cursor), 0)
        self.assertEqual(calls, [False] * 5)


class TestIteration(unittest.TestCase):
    """Python iteration over sequences."""

    def test_iterate_seq(self):
        self.assertEqual([x for x in Seq.range(4)], [0, 1, 2, 3])

    def test_iterate_seq2(self):
        pairs = dict(Seq2.from_mapping({"a": 1, "b": 2}))
        self.assertEqual(pairs, {"a": 1, "b": 2})

    def test_abandoned_iteration_releases_source(self):
        log = []
        iterator = iter(Seq(tracked([1, 2, 3], log)))
        self.assertEqual(next(iterator), 1)
        iterator.close()
        self.assertEqual(log, [1, "released"])

    def test_break_out_of_for_loop(self):
        log = []
        seq = Seq(tracked(range(10), log))
        iterator = iter(seq)
        for value in iterator:
            if value == 2:
                break
        iterator.close()
        self.assertEqual(log, [0, 1, 2, "released"])


if __name__ == "__main__":
    unittest.main()
