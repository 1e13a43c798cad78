import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from pathlib import Path

from onlineexam.app import explain
from onlineexam.app.cli import main
from storage.store import load_all


class CliTests(unittest.TestCase):
    def tearDown(self) -> None:
        explain.enable(False)

    def _run(self, argv):
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            code = main(argv)
        return code, out.getvalue()

    def test_demo_runs_both_students(self) -> None:
        code, out = self._run(["demo", "--seed", "11"])
        self.assertEqual(code, 0)
        self.assertIn("Exam published: General Knowledge Test", out)
        self.assertIn("student1 submitted exam. Score:", out)
        self.assertIn("student2 submitted exam. Score:", out)
        self.assertIn("Total Students Taken Exam: 2", out)

    def test_demo_explain_traces(self) -> None:
        code, out = self._run(["demo", "--seed", "11", "--explain"])
        self.assertEqual(code, 0)
        self.assertIn("[EXPLAIN] session_submitted", out)

    def test_demo_persist_and_summary(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            data_dir = Path(tmp) / "data"
            cfg_path = Path(tmp) / "cfg.yml"
            cfg_path.write_text(f"storage:\n  data_dir: {data_dir.as_posix()}\n", encoding="utf-8")
            code, _ = self._run(["demo", "--config", str(cfg_path), "--seed", "4", "--persist"])
            self.assertEqual(code, 0)
            self.assertEqual(len(load_all(data_dir)), 2)

            code, out = self._run(["summary", "--data-dir", str(data_dir)])
            self.assertEqual(code, 0)
            self.assertIn("General Knowledge Test: 2 result(s)", out)

    def test_summary_without_data(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            code, out = self._run(["summary", "--data-dir", tmp])
        self.assertEqual(code, 0)
        self.assertIn("No stored results", out)

    def test_show_config(self) -> None:
        code, out = self._run(["show-config"])
        self.assertEqual(code, 0)
        self.assertIn("duration_minutes: 30", out)


if __name__ == "__main__":
    unittest.main()
