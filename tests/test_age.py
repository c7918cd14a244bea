"""
Tests for the age threshold checks
"""
import unittest
from datetime import datetime, timedelta, timezone

from aws_unused_analyzer.age import is_unused, was_created_before_cutoff

NOW = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestIsUnused(unittest.TestCase):

    def test_never_used_is_unused(self):
        for age in (0, 1, 90, 10000):
            self.assertTrue(is_unused(None, NOW, age))

    def test_older_than_threshold_is_unused(self):
        self.assertTrue(is_unused(NOW - timedelta(days=100), NOW, 90))
        self.assertTrue(is_unused(NOW - timedelta(days=90, seconds=1), NOW, 90))

    def test_within_threshold_is_used(self):
        self.assertFalse(is_unused(NOW - timedelta(days=10), NOW, 90))
        self.assertFalse(is_unused(NOW, NOW, 90))

    def test_exactly_threshold_is_used(self):
        self.assertFalse(is_unused(NOW - timedelta(days=90), NOW, 90))

    def test_naive_timestamps_are_utc(self):
        naive = (NOW - timedelta(days=91)).replace(tzinfo=None)
        self.assertTrue(is_unused(naive, NOW, 90))
        self.assertFalse(is_unused(naive, NOW, 91))


class TestWasCreatedBeforeCutoff(unittest.TestCase):

    def test_old_identity(self):
        self.assertTrue(was_created_before_cutoff(NOW - timedelta(days=200), NOW, 90))

    def test_young_identity(self):
        self.assertFalse(was_created_before_cutoff(NOW - timedelta(days=30), NOW, 90))

    def test_boundary_matches_is_unused(self):
        created = NOW - timedelta(days=90)
        self.assertFalse(was_created_before_cutoff(created, NOW, 90))
        self.assertEqual(was_created_before_cutoff(created, NOW, 90), is_unused(created, NOW, 90))

    def test_missing_creation_date(self):
        self.assertFalse(was_created_before_cutoff(None, NOW, 90))


if __name__ == '__main__':
    unittest.main()
