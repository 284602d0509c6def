"""
Timing harness for sorting algorithms.

Each sample times exactly one call to `sort(a, config=...)` with a monotonic
high-resolution clock. Copying, GC collection and warmup happen outside the
timed block. The output of the first timed call is checked against the
oracle, so a backend that silently mis-sorts shows up as status "invalid".

Public API (stable):
    TimingResult
    time_sort_call(...) -> TimingResult
"""

from __future__ import annotations

import gc
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from polysort.validate import explain_mismatch

logger = logging.getLogger(__name__)

SortFn = Callable[..., List[int]]

__all__ = ["TimingResult", "time_sort_call"]


@dataclass
class TimingResult:
    """
    Outcome of timing one algorithm on one input.

    status is "ok", "timeout" (a sample exceeded the threshold; sampling
    stopped), "error" (the call raised) or "invalid" (wrong output).
    """

    algo: str
    repeats: int
    samples_ns: List[int] = field(default_factory=list)
    status: str = "ok"
    error: Optional[str] = None
    timed_out_on_repeat: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


def time_sort_call(
    *,
    algo_name: str,
    algo_fn: SortFn,
    a: List[int],
    config: Optional[Dict[str, Any]],
    repeats: int,
    warmup: bool,
    disable_gc: bool,
    timeout_seconds: float,
    validate: bool = True,
) -> TimingResult:
    """
    Time `repeats` calls of `algo_fn(list(a), config=config)`.

    The input is copied before every call, so `a` itself is never handed to
    the algorithm. GC state is restored on exit.

    Raises
    ------
    ValueError
        If `repeats` is negative or `timeout_seconds` is not positive.
    """
    if repeats < 0:
        raise ValueError("repeats must be nonnegative")
    if timeout_seconds <= 0:
        raise ValueError("timeout_seconds must be positive")

    result = TimingResult(algo=algo_name, repeats=repeats)

    if warmup and repeats > 0:
        try:
            algo_fn(list(a), config=config)
        except Exception as e:
            result.status = "error"
            result.error = f"warmup failed: {e!r}"
            logger.debug("%s warmup failed on n=%d: %r", algo_name, len(a), e)
            return result

    threshold_ns = int(timeout_seconds * 1e9)
    gc_was_enabled = gc.isenabled()
    if disable_gc:
        gc.collect()
        gc.disable()
    try:
        for r in range(repeats):
            arg = list(a)
            try:
                t0 = time.perf_counter_ns()
                out = algo_fn(arg, config=config)
                t1 = time.perf_counter_ns()
            except Exception as e:
                result.status = "error"
                result.error = f"run failed at repeat {r}: {e!r}"
                logger.debug("%s failed on n=%d: %r", algo_name, len(a), e)
                break

            elapsed = t1 - t0
            result.samples_ns.append(elapsed)

            if validate and r == 0:
                if not isinstance(out, list):
                    reason = f"expected a list result, got {type(out).__name__}"
                else:
                    reason = explain_mismatch(a, out)
                if reason is not None:
                    result.status = "invalid"
                    result.error = reason
                    break

            if elapsed > threshold_ns:
                result.status = "timeout"
                result.timed_out_on_repeat = r
                break
    finally:
        if disable_gc and gc_was_enabled:
            gc.enable()

    return result
