"""
Integer dataset generators used by the benchmark runner and tests.

Distributions (spec["dist"]):
- "random":        uniform integers from an inclusive params["range"] (required).
- "nearly_sorted": [0..n-1] degraded by ceil(swap_frac * n) random swaps.
- "few_uniques":   k distinct values from an optional inclusive range, repeated.
- "small_range":   uniform over a small inclusive domain (default [0, 255]).
- "reversed":      [n-1, ..., 0]; ignores params and RNG.
- "negative_tail": a non-negative prefix of params["prefix"] elements (default 100)
                   followed by values drawn from a signed params["range"]
                   (default [-1000, 1000]). Its sample looks radix-eligible
                   while the full list is not.

Public API (stable):
    make_dataset(n: int, spec: dict, rng: numpy.random.Generator) -> list[int]

Every generator returns a plain Python list of ints; the caller owns the RNG.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

import numpy as np

from polysort.config import SAMPLE_CAP

Params = Dict[str, Any]

__all__ = ["SUPPORTED_DISTS", "make_dataset"]


def make_dataset(n: int, spec: Dict[str, Any], rng: np.random.Generator) -> List[int]:
    """
    Generate `n` integers following `spec`.

    Parameters
    ----------
    n : int
        Number of elements, >= 0.
    spec : dict
        {"dist": <name>, "params": {...}}; see the module docstring.
    rng : numpy.random.Generator
        Seeded upstream for reproducibility.

    Raises
    ------
    ValueError
        On a bad `n`, an unknown distribution or invalid params.
    """
    if not isinstance(n, (int, np.integer)) or isinstance(n, bool):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")
    if not isinstance(spec, dict):
        raise ValueError("spec must be a dict")

    dist = spec.get("dist")
    gen = _GENERATORS.get(dist)  # type: ignore[arg-type]
    if gen is None:
        raise ValueError(f"Unsupported dataset dist: {dist!r}. Supported: {sorted(SUPPORTED_DISTS)}")

    params = spec.get("params") or {}
    if not isinstance(params, dict):
        raise ValueError(f"{dist}.params must be a dict")
    return gen(int(n), params, rng)


# ------------------------- generators ------------------------- #


def _uniform(n: int, lo: int, hi: int, rng: np.random.Generator) -> List[int]:
    if n == 0:
        return []
    # Generator.integers is half-open; +1 makes hi inclusive.
    return rng.integers(lo, hi + 1, size=n, dtype=np.int64).tolist()


def _gen_random(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" not in params:
        raise ValueError("random.params.range must be provided as [min, max] (inclusive)")
    lo, hi = _parse_range(params["range"], "random")
    return _uniform(n, lo, hi, rng)


def _gen_nearly_sorted(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    swap_frac = _parse_fraction(params.get("swap_frac", 0.05), "nearly_sorted.params.swap_frac")
    out = list(range(n))
    swaps = int(np.ceil(swap_frac * n))
    if n == 0 or swaps == 0:
        return out
    idxs = rng.integers(0, n, size=(swaps, 2))
    for i, j in idxs.tolist():
        out[i], out[j] = out[j], out[i]
    return out


def _gen_few_uniques(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    k = params.get("k")
    if not isinstance(k, int) or isinstance(k, bool) or k < 1:
        raise ValueError(f"few_uniques.params.k must be an integer >= 1; got {k!r}")
    lo, hi = _parse_range(params.get("range", [0, 4294967295]), "few_uniques")
    if n == 0:
        return []
    k = min(k, n, hi - lo + 1)
    # Draw without replacement through the caller's RNG so seeds stay meaningful.
    values: List[int] = []
    seen = set()
    while len(values) < k:
        for v in rng.integers(lo, hi + 1, size=2 * (k - len(values))).tolist():
            if v not in seen:
                seen.add(v)
                values.append(v)
                if len(values) == k:
                    break
    return [values[t] for t in rng.integers(0, k, size=n).tolist()]


def _gen_small_range(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    if "range" in params:
        lo, hi = _parse_range(params["range"], "small_range")
    else:
        lo, hi = _parse_range([params.get("min_val", 0), params.get("max_val", 255)], "small_range")
    return _uniform(n, lo, hi, rng)


def _gen_reversed(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    return list(range(n - 1, -1, -1))


def _gen_negative_tail(n: int, params: Params, rng: np.random.Generator) -> List[int]:
    prefix = params.get("prefix", SAMPLE_CAP)
    if not isinstance(prefix, int) or prefix < 0:
        raise ValueError(f"negative_tail.params.prefix must be an integer >= 0; got {prefix!r}")
    lo, hi = _parse_range(params.get("range", [-1000, 1000]), "negative_tail")
    if lo >= 0:
        raise ValueError("negative_tail.params.range must include negative values")
    head = min(prefix, n)
    out = _uniform(head, 0, max(hi, 0), rng)
    tail = _uniform(n - head, lo, hi, rng)
    if tail and min(tail) >= 0:
        # Force at least one negative so the tail really differs from the prefix.
        tail[int(rng.integers(0, len(tail)))] = lo
    return out + tail


_GENERATORS: Dict[str, Callable[[int, Params, np.random.Generator], List[int]]] = {
    "random": _gen_random,
    "nearly_sorted": _gen_nearly_sorted,
    "few_uniques": _gen_few_uniques,
    "small_range": _gen_small_range,
    "reversed": _gen_reversed,
    "negative_tail": _gen_negative_tail,
}

SUPPORTED_DISTS = frozenset(_GENERATORS)


# ------------------------- helpers ------------------------- #


def _parse_range(spec: Any, dist: str) -> Tuple[int, int]:
    """Validate an inclusive [min, max] pair."""
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError(f"{dist}.params.range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError(f"{dist}.params.range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"{dist}.params.range invalid: min > max ({lo} > {hi})")
    return lo, hi


def _parse_fraction(val: Any, name: str) -> float:
    try:
        x = float(val)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{name} must be a float in [0.0, 1.0]; got {val!r}") from e
    if not (0.0 <= x <= 1.0):
        raise ValueError(f"{name} must be in [0.0, 1.0]; got {x}")
    return x


def _is_int_like(x: Any) -> bool:
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
