# dls_lab/core/metrics.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Union
import time, tracemalloc

Number = Union[int, float]

METRIC_NODES_EXPANDED = "nodesExpanded"
METRIC_PATH_COST = "pathCost"


class Metrics:
    """Named counters/values written by a single search instance (not thread-safe)."""

    def __init__(self) -> None:
        self._values: Dict[str, Number] = {}

    def set(self, name: str, value: Number) -> None:
        self._values[name] = value

    def get(self, name: str, default: Optional[Number] = None) -> Optional[Number]:
        return self._values.get(name, default)

    def get_int(self, name: str) -> int:
        return int(self._values.get(name, 0))

    def get_float(self, name: str) -> float:
        return float(self._values.get(name, 0.0))

    def increment_int(self, name: str) -> int:
        value = self.get_int(name) + 1
        self._values[name] = value
        return value

    def keys(self) -> List[str]:
        return sorted(self._values)

    def as_dict(self) -> Dict[str, Number]:
        return dict(self._values)

    def clear(self) -> None:
        self._values.clear()

    def __getitem__(self, name: str) -> Number:
        return self._values[name]

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._values)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}={self._values[k]}" for k in self.keys()) + "}"

    __repr__ = __str__


@dataclass
class SearchResult:
    algo: str
    success: bool
    actions: List = field(default_factory=list)
    cost: float = float("inf")
    nodes_expanded: int = 0
    time_s: float = 0.0
    peak_kb: int = 0
    outcome: str = "failure"
    limit: Optional[int] = None
    error: Optional[str] = None


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        # nested runs share tracemalloc; only the outermost one starts/stops it
        if self._trace_memory and not tracemalloc.is_tracing():
            self._tracing = True
            tracemalloc.start()
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
