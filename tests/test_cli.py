import contextlib
import curses
import io
import json
import os
import runpy
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from shortterm.app import explain
from shortterm.app.cli import EXIT_CONFIG_ERROR, EXIT_DISPLAY_ERROR, EXIT_IO_ERROR, EXIT_QUIT, main


def _run(argv, stdin_text=""):
    out, err = io.StringIO(), io.StringIO()
    with mock.patch("sys.stdin", io.StringIO(stdin_text)):
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = main(argv)
    return code, out.getvalue(), err.getvalue()


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.dir = Path(self._tmp.name)
        self.db = self.dir / "short-term"
        env = mock.patch.dict(os.environ)
        env.start()
        self.addCleanup(env.stop)

    def tearDown(self) -> None:
        explain.enable(False)
        self._tmp.cleanup()

    def _args(self, *extra):
        # -i 10 -a 11 leaves 10 as the only possible number.
        return ["-f", str(self.db), "-n", "2", "-c", "3", "-i", "10", "-a", "11", *extra]

    def test_full_run_is_saved(self) -> None:
        code, out, _err = _run(self._args(), "\n10 10 10\n\n10 5 10\n")
        self.assertEqual(code, 0)
        self.assertIn("10 10 10", out)
        self.assertIn("Total score: 4/6", out)

        data = json.loads(self.db.read_text(encoding="utf-8"))
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["total_score"], 4)
        self.assertEqual([r["score"] for r in data[0]["results"]], [3, 1])
        self.assertEqual([r["count"] for r in data[0]["results"]], [3, 3])

    def test_runs_accumulate(self) -> None:
        _run(self._args(), "\n10 10 10\n\n10 10 10\n")
        _run(self._args(), "\n1\n\n1\n")
        data = json.loads(self.db.read_text(encoding="utf-8"))
        self.assertEqual([d["total_score"] for d in data], [6, 0])

    def test_dry_mode_prints_per_trial(self) -> None:
        code, out, _err = _run(self._args("--dry"), "\n10 10 10\n\n\n10\n\n")
        self.assertEqual(code, 0)
        self.assertIn("Score: 3/3", out)
        self.assertIn("Score: 1/3", out)
        self.assertEqual(out.count("Total score: 4/6"), 1)

    def test_quit_saves_nothing(self) -> None:
        code, _out, err = _run(self._args(), "\n10 10 10\n")
        self.assertEqual(code, EXIT_QUIT)
        self.assertIn("nothing saved", err)
        self.assertEqual(self.db.read_text(encoding="utf-8"), "")

    def test_invalid_range(self) -> None:
        code, _out, err = _run(["-f", str(self.db), "-i", "50", "-a", "20"])
        self.assertEqual(code, EXIT_CONFIG_ERROR)
        self.assertIn("ERROR", err)
        self.assertFalse(self.db.exists())

    def test_unopenable_database(self) -> None:
        self.db.mkdir()
        code, _out, err = _run(self._args(), "\n10 10 10\n\n10 10 10\n")
        self.assertEqual(code, EXIT_IO_ERROR)
        self.assertIn("Cannot open results database", err)

    def test_version(self) -> None:
        code, out, _err = _run(["--version"])
        self.assertEqual(code, 0)
        self.assertTrue(out.startswith("shortterm "))

    def test_explain_traces(self) -> None:
        code, _out, err = _run(self._args("--explain"), "\n10 x 10\n\n10 10 10\n")
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] run_started", err)
        self.assertIn("[EXPLAIN] coerced_token", err)
        self.assertIn("[EXPLAIN] run_saved", err)

    def test_history_and_plot(self) -> None:
        _run(self._args(), "\n10 10 10\n\n10 10 10\n")
        _run(self._args(), "\n10\n\n10 10\n")
        code, out, _err = _run(["-f", str(self.db), "--history"])
        self.assertEqual(code, 0)
        self.assertIn("Runs: 2", out)
        self.assertIn("6/6", out)

        chart = self.dir / "trend.png"
        code, out, _err = _run(["-f", str(self.db), "--plot", str(chart)])
        self.assertEqual(code, 0)
        self.assertTrue(chart.exists())

    def test_history_when_empty(self) -> None:
        code, out, _err = _run(["-f", str(self.db), "--history"])
        self.assertEqual(code, 0)
        self.assertIn("No runs recorded yet.", out)

    def test_history_does_not_touch_the_log(self) -> None:
        db = self.dir / "nested" / "short-term"
        code, out, _err = _run(["-f", str(db), "--history"])
        self.assertEqual(code, 0)
        self.assertIn("No runs recorded yet.", out)
        self.assertFalse(db.parent.exists())

        self.db.write_text("garbage", encoding="utf-8")
        code, _out, err = _run(["-f", str(self.db), "--history"])
        self.assertEqual(code, 0)
        self.assertIn("WARNING", err)
        self.assertEqual(list(self.dir.glob("short-term.corrupt-*")), [])

    def test_screen_mode_without_terminal(self) -> None:
        with mock.patch("curses.initscr", side_effect=curses.error("setupterm: could not find terminal")):
            code, _out, err = _run(self._args("--screen"))
        self.assertEqual(code, EXIT_DISPLAY_ERROR)
        self.assertIn("ERROR: Cannot start full-screen mode", err)
        self.assertEqual(self.db.read_text(encoding="utf-8"), "")

    def test_screen_setup_failure_restores_terminal(self) -> None:
        names = ("initscr", "noecho", "cbreak", "nocbreak", "echo", "endwin")
        with mock.patch.multiple(curses, **{name: mock.DEFAULT for name in names}) as patched:
            patched["cbreak"].side_effect = curses.error("cbreak() returned ERR")
            code, _out, _err = _run(self._args("--screen"))
        self.assertEqual(code, EXIT_DISPLAY_ERROR)
        self.assertEqual(patched["endwin"].call_count, 1)

    def test_module_entry_point(self) -> None:
        out = io.StringIO()
        with mock.patch("sys.argv", ["shortterm", "--version"]), contextlib.redirect_stdout(out):
            with self.assertRaises(SystemExit) as ctx:
                runpy.run_module("shortterm", run_name="__main__")
        self.assertEqual(ctx.exception.code, 0)
        self.assertTrue(out.getvalue().startswith("shortterm "))


if __name__ == "__main__":
    unittest.main()
