# dls_lab/benchmarks/run_all.py
# Runs depth-limited search once per depth limit and reports solution / cutoff / failure for each.
from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence

from ..algorithms.depth_limited import DepthLimitedSearch
from ..core.cancel import CancellationToken, cancel_after
from ..core.config import PROBLEMS, SearchConfig
from ..core.log import configure_logging, get_logger
from ..core.metrics import SearchResult
from ..core.problem import Problem

logger = get_logger(__name__)


# ---- Helpers ----------------------------------------------------------------
def _fmt_time(x):
    try:
        return f"{float(x):.4f}"
    except (TypeError, ValueError):
        return "n/a"


def _problem_factories() -> Dict[str, Callable[[], Problem]]:
    from ..problems.chain import ChainProblem
    from ..problems.grid import make_grid_problem
    from ..problems.romania import romania_problem
    return {
        "romania": romania_problem,
        "grid": make_grid_problem,
        "chain": ChainProblem,
    }


def load_problem(name: str) -> Problem:
    factories = _problem_factories()
    if name not in factories:
        raise SystemExit(f"Unknown problem {name!r}; choose one of: {', '.join(sorted(factories))}")
    return factories[name]()


def run_limit(problem: Problem, limit: int, timeout_s: Optional[float] = None) -> SearchResult:
    """One DLS run at `limit`; with a timeout, an external timer cancels it (reported as cutoff)."""
    token = CancellationToken()
    timer = cancel_after(token, timeout_s) if timeout_s else None
    try:
        return DepthLimitedSearch(limit, cancel_token=token).run(problem)
    except Exception as e:
        logger.exception("DLS(l=%d) raised", limit)
        return SearchResult(f"DLS(l={limit})", False, outcome="error", limit=limit, error=repr(e))
    finally:
        if timer is not None:
            timer.cancel()


def sweep(problem: Problem, limits: Sequence[int], timeout_s: Optional[float] = None) -> List[SearchResult]:
    results = []
    for limit in limits:
        print(f"→ Running DLS(l={limit}) ...")
        r = run_limit(problem, limit, timeout_s)
        print(
            f"  {r.algo}: {r.outcome.upper()} "
            f"actions={r.actions} "
            f"cost={r.cost} "
            f"expanded={r.nodes_expanded}, "
            f"time={_fmt_time(r.time_s)}s"
        )
        results.append(r)
    return results


def to_rows(results: Sequence[SearchResult]) -> List[dict]:
    return [
        {
            "algo": r.algo,
            "limit": r.limit,
            "outcome": r.outcome,
            "success": r.success,
            "actions": [str(a) for a in r.actions],
            "cost": r.cost if r.success else None,
            "nodes_expanded": r.nodes_expanded,
            "time_s": r.time_s,
            "peak_kb": r.peak_kb,
            "error": r.error,
        }
        for r in results
    ]


def build_parser(cfg: SearchConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dls-sweep",
        description="Run depth-limited search over a range of depth limits.",
    )
    parser.add_argument("--problem", choices=PROBLEMS, default=cfg.problem)
    parser.add_argument("--limits", type=int, nargs="+", default=cfg.limits,
                        help="depth limits to try, in order")
    parser.add_argument("--timeout", type=float, default=cfg.timeout_s,
                        help="seconds before each run is cancelled")
    parser.add_argument("--out", type=Path, default=Path(__file__).with_name("results.json"),
                        help="where to write the JSON results")
    parser.add_argument("--plot", default=cfg.plot, help="save a PNG of the sweep here")
    parser.add_argument("--log-level", default=cfg.log_level)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> List[SearchResult]:
    try:
        cfg = SearchConfig.from_env()
    except ValueError as e:
        raise SystemExit(f"Invalid DLS_* environment setting: {e}")
    args = build_parser(cfg).parse_args(argv)
    cfg = SearchConfig(limit=max(args.limits), limits=list(args.limits), problem=args.problem,
                       log_level=args.log_level, timeout_s=args.timeout, plot=args.plot)
    configure_logging(cfg.log_level)

    problem = load_problem(cfg.problem)
    results = sweep(problem, cfg.limits, cfg.timeout_s)

    out = {"problem": cfg.problem, "results": to_rows(results), "ts": time.time()}
    print(json.dumps(out, indent=2))
    try:
        args.out.write_text(json.dumps(out, indent=2))
    except OSError as e:
        logger.warning("could not write %s: %s", args.out, e)

    if cfg.plot:
        from ..plots.plotting import limit_sweep, save_figure
        save_figure(limit_sweep(results, title=f"DLS on {cfg.problem}"), cfg.plot)
        print(f"Wrote {cfg.plot}")
    return results


if __name__ == "__main__":
    main()
