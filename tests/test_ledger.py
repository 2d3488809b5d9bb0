import unittest
from datetime import datetime, timezone

from questlab.catalog import DEFAULT_CATALOG
from questlab.errors import SignInRequiredError
from questlab.ledger import (
    LEVEL_STEP,
    ensure_progress,
    level_for,
    progress_fraction,
    record_attempt,
    record_solve,
    scoreboard,
    subject_stats,
)
from questlab.models import Account


def fresh_account():
    account = Account(name="ada", email="ada@example.com", password="pw")
    ensure_progress(account, DEFAULT_CATALOG)
    return account


class LevelingTestCase(unittest.TestCase):
    def test_level_boundaries(self):
        self.assertEqual(level_for(0), 1)
        self.assertEqual(level_for(119), 1)
        self.assertEqual(level_for(120), 2)
        self.assertEqual(level_for(239), 2)
        self.assertEqual(level_for(240), 3)

    def test_level_is_non_decreasing(self):
        levels = [level_for(p) for p in range(0, LEVEL_STEP * 5)]
        self.assertEqual(levels, sorted(levels))

    def test_progress_fraction(self):
        self.assertEqual(progress_fraction(0), 0)
        self.assertEqual(progress_fraction(180), 0.5)
        for points in range(0, LEVEL_STEP * 3):
            fraction = progress_fraction(points)
            self.assertGreaterEqual(fraction, 0)
            self.assertLess(fraction, 1)


class RecordingTestCase(unittest.TestCase):
    def test_single_solve_on_fresh_account(self):
        account = fresh_account()
        now = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
        record_solve(account, "Arrays", now=now)

        entry = account.progress["Arrays"]
        self.assertEqual((entry.solved, entry.attempts), (1, 1))
        self.assertEqual(entry.last_solved, now.isoformat())
        self.assertEqual(account.points, 40)
        self.assertEqual(account.streak, 1)
        self.assertEqual(account.level, 1)

    def test_three_solves_then_hint(self):
        account = fresh_account()
        for _ in range(3):
            record_solve(account, "Arrays")
        record_attempt(account, "Arrays")

        self.assertEqual(account.points, 130)
        self.assertEqual(account.level, 2)
        self.assertEqual(account.streak, 2)
        self.assertEqual(account.progress["Arrays"].attempts, 4)
        self.assertEqual(account.progress["Arrays"].solved, 3)

    def test_attempt_floors_streak_at_zero(self):
        account = fresh_account()
        record_attempt(account, "Logic")
        record_attempt(account, "Logic")
        self.assertEqual(account.streak, 0)
        self.assertEqual(account.points, 20)
        self.assertIsNone(account.progress["Logic"].last_solved)

    def test_solve_without_account_is_rejected(self):
        with self.assertRaises(SignInRequiredError):
            record_solve(None, "Arrays")

    def test_attempt_without_account_is_silent(self):
        self.assertIsNone(record_attempt(None, "Arrays"))

    def test_missing_subject_entry_is_created_on_demand(self):
        account = Account(name="bo", email="bo@example.com", password="pw")
        record_solve(account, "Strings")
        self.assertEqual(account.progress["Strings"].solved, 1)


class DisplayTestCase(unittest.TestCase):
    def test_stats_for_signed_out_visitor(self):
        rows = subject_stats(None, DEFAULT_CATALOG)
        self.assertEqual([r["subject"] for r in rows], DEFAULT_CATALOG.names())
        self.assertTrue(all(r["solved"] == 0 and r["mastery"] == 0 for r in rows))
        self.assertEqual(scoreboard(None), {"level": 1, "points": 0, "streak": 0, "progress": 0.0})

    def test_mastery_percentage(self):
        account = fresh_account()
        record_solve(account, "Logic")
        row = next(r for r in subject_stats(account, DEFAULT_CATALOG) if r["subject"] == "Logic")
        self.assertEqual(row["total"], 3)
        self.assertEqual(row["mastery"], 33)

    def test_scoreboard_meter(self):
        account = fresh_account()
        account.points = 180
        board = scoreboard(account)
        self.assertEqual(board["level"], 2)
        self.assertEqual(board["progress"], 50.0)


if __name__ == "__main__":
    unittest.main()
