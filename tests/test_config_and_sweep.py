import json
import os
import tempfile
import unittest
from contextlib import redirect_stdout
from io import StringIO
from unittest import mock

from dls_lab.benchmarks.run_all import load_problem, main, run_limit, sweep, to_rows
from dls_lab.core.config import SearchConfig, parse_limits
from dls_lab.core.log import get_logger
from dls_lab.problems.chain import ChainProblem


class TestSearchConfig(unittest.TestCase):

    def test_defaults(self):
        cfg = SearchConfig.from_env({})
        self.assertEqual(cfg.limit, 12)
        self.assertEqual(cfg.limits, list(range(13)))
        self.assertEqual(cfg.problem, "romania")
        self.assertIsNone(cfg.timeout_s)

    def test_env_overrides(self):
        cfg = SearchConfig.from_env({
            "DLS_LIMIT": "4",
            "DLS_LIMITS": "1, 2 3",
            "DLS_PROBLEM": "chain",
            "DLS_LOG_LEVEL": "DEBUG",
            "DLS_TIMEOUT": "2.5",
        })
        self.assertEqual(cfg.limit, 4)
        self.assertEqual(cfg.limits, [1, 2, 3])
        self.assertEqual(cfg.problem, "chain")
        self.assertEqual(cfg.log_level, "DEBUG")
        self.assertEqual(cfg.timeout_s, 2.5)

    def test_bad_values(self):
        with self.assertRaises(ValueError):
            SearchConfig(problem="mars")
        with self.assertRaises(ValueError):
            SearchConfig(timeout_s=0)
        with self.assertRaises(ValueError):
            SearchConfig.from_env({"DLS_PROBLEM": "mars"})
        with self.assertRaises(ValueError):
            parse_limits("1 two")

    def test_single_limit_env_sets_the_sweep(self):
        cfg = SearchConfig.from_env({"DLS_LIMIT": "3"})
        self.assertEqual(cfg.limit, 3)
        self.assertEqual(cfg.limits, [3])


class TestSweep(unittest.TestCase):

    def test_run_limit_outcomes(self):
        problem = ChainProblem()
        self.assertEqual(run_limit(problem, 2).outcome, "cutoff")
        self.assertEqual(run_limit(problem, 3, timeout_s=30).outcome, "solution")

    def test_collaborator_errors_are_recorded(self):
        class Broken(ChainProblem):
            def step_cost(self, state, action, next_state):
                return None

        r = run_limit(Broken(), 2)
        self.assertEqual(r.outcome, "error")
        self.assertIn("ValueError", r.error)

    def test_rows_are_json_friendly(self):
        with redirect_stdout(StringIO()):
            results = sweep(ChainProblem(), [0, 3])
        rows = to_rows(results)
        self.assertEqual([r["outcome"] for r in rows], ["cutoff", "solution"])
        self.assertEqual(rows[1]["actions"], ["('A', 'B')", "('B', 'C')", "('C', 'D')"])
        self.assertIsNone(rows[0]["cost"])
        json.dumps(rows)

    def test_unknown_problem(self):
        with self.assertRaises(SystemExit):
            load_problem("mars")

    def test_main_writes_results(self):
        with tempfile.TemporaryDirectory() as tmp:
            out = os.path.join(tmp, "results.json")
            with redirect_stdout(StringIO()):
                results = main(["--problem", "chain", "--limits", "1", "2", "3", "--out", out])
            self.assertEqual([r.outcome for r in results], ["cutoff", "cutoff", "solution"])
            with open(out) as f:
                data = json.load(f)
        self.assertEqual(data["problem"], "chain")
        self.assertEqual(len(data["results"]), 3)

    def test_main_plots(self):
        with tempfile.TemporaryDirectory() as tmp:
            png = os.path.join(tmp, "sweep.png")
            with redirect_stdout(StringIO()):
                main(["--problem", "chain", "--limits", "2", "3",
                      "--out", os.path.join(tmp, "r.json"), "--plot", png])
            self.assertTrue(os.path.getsize(png) > 0)

    def test_main_sweeps_only_dls_limit_from_env(self):
        with tempfile.TemporaryDirectory() as tmp:
            env = {"DLS_LIMIT": "3", "DLS_PROBLEM": "chain"}
            with mock.patch.dict(os.environ, env), redirect_stdout(StringIO()):
                results = main(["--out", os.path.join(tmp, "r.json")])
        self.assertEqual([r.limit for r in results], [3])
        self.assertEqual(results[0].outcome, "solution")

    def test_bad_env_problem_exits_with_message(self):
        with mock.patch.dict(os.environ, {"DLS_PROBLEM": "mars"}):
            with self.assertRaises(SystemExit) as ctx:
                main(["--limits", "1"])
        self.assertIn("mars", str(ctx.exception.code))


class TestLogger(unittest.TestCase):

    def test_names_are_namespaced(self):
        self.assertEqual(get_logger("bench").name, "dls_lab.bench")
        self.assertEqual(get_logger("dls_lab.core").name, "dls_lab.core")
        self.assertEqual(get_logger().name, "dls_lab")


if __name__ == "__main__":
    unittest.main()
