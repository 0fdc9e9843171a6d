import unittest
from datetime import datetime, timezone

from shortterm.app.session_manager import SessionManager
from shortterm.drills.recall_drill import DrillContext, RecallDrill
from tests.helpers import FakeTerminal, scripted


def _cfg(trials=2, numbers=3, dry=False):
    return {
        "test": {"trials": trials, "numbers": numbers, "min": 10, "max": 99},
        "ui": {"mode": "plain", "dry": dry},
    }


class RecallDrillTests(unittest.TestCase):
    def test_trial_scores_prefix_and_times_recall(self) -> None:
        drill = RecallDrill(
            DrillContext(minimum=10, maximum=99, numbers=3),
            clock=scripted([100.0, 103.5]),
            randbelow=scripted([11, 22, 33]),
        )
        term = FakeTerminal(["11 22 99"])
        result = drill.run_trial(term)

        self.assertEqual(term.shown, ["11 22 33"])
        self.assertEqual(term.events, ["show", "confirm", "clear", "answer", "clear"])
        self.assertEqual(result.score, 2)
        self.assertEqual(result.count, 3)
        self.assertAlmostEqual(result.duration, 3.5)

    def test_empty_trial(self) -> None:
        drill = RecallDrill(DrillContext(minimum=10, maximum=99, numbers=0), clock=scripted([1.0, 2.0]))
        term = FakeTerminal([""])
        result = drill.run_trial(term)
        self.assertEqual(term.shown, [""])
        self.assertEqual((result.score, result.count), (0, 0))


class SessionManagerTests(unittest.TestCase):
    def test_run_builds_record_for_every_trial(self) -> None:
        sm = SessionManager(
            _cfg(trials=2),
            clock=scripted([0.0, 2.0, 10.0, 14.0]),
            randbelow=scripted([11, 12, 13, 21, 22, 23]),
            now=lambda: datetime(2026, 10, 18, 9, 30, tzinfo=timezone.utc),
        )
        term = FakeTerminal(["11 12 13", "21 0 23"])
        record = sm.run(term)

        self.assertEqual(len(record.results), 2)
        self.assertEqual([r.score for r in record.results], [3, 1])
        self.assertEqual(record.total_score, 4)
        self.assertAlmostEqual(record.avg_duration, 3.0)
        self.assertEqual(record.date, "2026-10-18 09:30:00+00:00")
        self.assertEqual(term.informed, [])

    def test_dry_mode_reports_each_trial_and_total(self) -> None:
        sm = SessionManager(
            _cfg(trials=2, dry=True),
            clock=scripted([0.0, 1.0, 2.0, 4.0]),
            randbelow=scripted([11, 12, 13, 21, 22, 23]),
        )
        term = FakeTerminal(["11 12 13", "99"])
        sm.run(term)

        self.assertEqual(len(term.informed), 3)
        self.assertIn("Score: 3/3", term.informed[0])
        self.assertIn("Duration: 1.00s", term.informed[0])
        self.assertIn("Score: 0/3", term.informed[1])
        self.assertIn("Total score: 3/6", term.informed[2])
        self.assertIn("Average duration: 1.50s", term.informed[2])

    def test_zero_trials(self) -> None:
        sm = SessionManager(_cfg(trials=0))
        record = sm.run(FakeTerminal([]))
        self.assertEqual(record.results, [])
        self.assertEqual(record.avg_duration, 0.0)


if __name__ == "__main__":
    unittest.main()
