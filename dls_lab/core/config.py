# dls_lab/core/config.py
# Run settings for the CLI and benchmarks, read from environment variables and overridable by flags.
from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Mapping, Optional

PROBLEMS = ("romania", "grid", "chain")


def parse_limits(raw: str) -> List[int]:
    return [int(x) for x in raw.replace(",", " ").split()]


@dataclass
class SearchConfig:
    limit: int = 12
    limits: List[int] = field(default_factory=lambda: list(range(0, 13)))
    problem: str = "romania"
    log_level: str = "WARNING"
    timeout_s: Optional[float] = None
    plot: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if self.problem not in PROBLEMS:
            raise ValueError(f"Unknown problem {self.problem!r}; expected one of {', '.join(PROBLEMS)}")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValueError(f"timeout_s must be positive, got {self.timeout_s}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SearchConfig":
        """
        DLS_LIMIT     single depth limit; the sweep runs only this limit unless DLS_LIMITS is set
        DLS_LIMITS    limits for the sweep, e.g. "0 1 2 3" (default 0..12)
        DLS_PROBLEM   romania | grid | chain
        DLS_LOG_LEVEL logging level name
        DLS_TIMEOUT   seconds before the search is cancelled
        """
        env = os.environ if environ is None else environ
        cfg = cls()
        if "DLS_LIMIT" in env:
            cfg.limit = int(env["DLS_LIMIT"])
            cfg.limits = [cfg.limit]
        if "DLS_LIMITS" in env:
            cfg.limits = parse_limits(env["DLS_LIMITS"])
        cfg.problem = env.get("DLS_PROBLEM", cfg.problem)
        cfg.log_level = env.get("DLS_LOG_LEVEL", cfg.log_level)
        if env.get("DLS_TIMEOUT"):
            cfg.timeout_s = float(env["DLS_TIMEOUT"])
        cfg.validate()
        return cfg
