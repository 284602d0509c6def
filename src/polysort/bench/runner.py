"""
Experiment runner: compares the adaptive sorter against its fixed backends.

Usage (from repo root):
    polysort-bench experiments/configs/01_adaptive_vs_backends.yaml
    python -m polysort.bench.runner experiments/configs/01_adaptive_vs_backends.yaml -v

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, pandas, cpu/ram, oracle)
    - results.jsonl           # one line per timing sample, per failure and per adaptive plan
    - summary.csv             # median + IQR per (algo, n), with the adaptive plan for that n

Design notes:
- For each size n one dataset is generated and every algorithm gets a copy of it.
- Each algorithm's first output is checked against the oracle.
- On timeout/error/invalid output an algorithm is skipped for larger sizes.
  Radix on signed data is expected to end up here.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import logging
import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from tqdm import tqdm

from polysort.algorithms import ALGORITHMS
from polysort.analysis import profile_sample, take_sample
from polysort.bench.measure import time_sort_call
from polysort.config import Thresholds
from polysort.datasets import make_dataset
from polysort.dispatch import plan
from polysort.validate import ORACLE_NAME

logger = logging.getLogger(__name__)
_console = Console()

REQUIRED_KEYS = (
    "experiment_name",
    "output_dir",
    "seed",
    "repeats",
    "warmup",
    "disable_gc",
    "timeout_seconds",
    "dataset",
    "sizes",
    "algorithms",
)
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns", "plan_backend"]


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class AlgoSpec:
    name: str
    sort_fn: Any
    config: Dict[str, Any]


# ------------------------- helpers: IO & meta ------------------------- #

def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        cfg = yaml.safe_load(f)
    if not isinstance(cfg, dict):
        raise ValueError(f"Experiment config must be a YAML mapping: {path}")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = _dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = base_dir / f"{stamp}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        suffix += 1
        run_dir = base_dir / f"{stamp}_{experiment_name}_{suffix}"
    run_dir.mkdir(parents=False)
    return run_dir


def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "oracle": ORACLE_NAME,
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name") if isinstance(entry, dict) else None
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name not in ALGORITHMS:
            raise ValueError(f"Unknown algorithm {name!r}. Supported: {list(ALGORITHMS)}")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        config = entry.get("config") or {}
        if not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        mod = importlib.import_module(f"polysort.algorithms.{name}")
        specs.append(AlgoSpec(name=name, sort_fn=mod.sort, config=config))
    return specs


def _adaptive_thresholds(algos: List[AlgoSpec]) -> Thresholds:
    for spec in algos:
        if spec.name == "adaptive":
            return Thresholds.from_mapping(spec.config.get("thresholds"))
    return Thresholds()


def _plan_record(a: List[int], thresholds: Thresholds) -> Dict[str, Any]:
    p = plan(a, thresholds)
    record: Dict[str, Any] = {
        "kind": "plan",
        "n": len(a),
        "backend": p.backend,
        "strategy": p.strategy.name if p.strategy is not None else None,
        "radix_guarded": p.radix_guarded,
    }
    if a:
        prof = profile_sample(take_sample(a, thresholds.sample_cap))
        record.update(
            sample_size=prof.size,
            ascending_ratio=prof.ascending_ratio,
            has_negative=prof.has_negative,
            unique_ratio=prof.unique_ratio,
        )
    return record


# ------------------------- aggregation & display ------------------------- #

def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    samples = df[df["kind"] == "sample"]
    if samples.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = samples.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    ).reset_index()
    iqr = (grouped.quantile(0.75) - grouped.quantile(0.25)).rename("iqr_ns").reset_index()
    out = out.merge(iqr, on=["algo", "n"], how="left")
    for col in ("median_ns", "min_ns", "max_ns", "iqr_ns"):
        out[col] = out[col].astype("int64")

    plans = (
        df[df["kind"] == "plan"][["n", "backend"]]
        .drop_duplicates("n")
        .rename(columns={"backend": "plan_backend"})
    )
    out = out.merge(plans, on="n", how="left")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _format_cell(median_ns: Optional[int], iqr_ns: Optional[int]) -> str:
    if median_ns is None:
        return "—"
    return f"{median_ns / 1e6:.2f} ± {(iqr_ns or 0) / 1e6:.2f}"


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for algo in summary["algo"].unique():
        row = [algo]
        for n in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == n)]
            if s.empty:
                row.append("—")
            else:
                row.append(_format_cell(int(s["median_ns"].iloc[0]), int(s["iqr_ns"].iloc[0])))
        table.add_row(*row)

    plan_row = ["[italic]adaptive plan[/]"]
    for n in picks:
        s = summary[summary["n"] == n]["plan_backend"].dropna()
        plan_row.append(str(s.iloc[0]) if not s.empty else "—")
    table.add_row(*plan_row)

    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, show_progress: bool = True) -> Path:
    """Run one experiment described by a YAML file; return the run directory."""
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    if not output_dir.is_absolute():
        output_dir = config_path.parent / output_dir
    sizes = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    dataset_spec = dict(cfg["dataset"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    algos = _resolve_algorithms(list(cfg["algorithms"]))
    thresholds = _adaptive_thresholds(algos)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    skipped = {a.name: False for a in algos}

    _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
    _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=not show_progress):
        base_a = make_dataset(n, dataset_spec, rng)

        plan_rec = _plan_record(base_a, thresholds)
        _append_jsonl(plan_rec, results_path)
        logger.info("n=%d adaptive plan: %s", n, plan_rec["backend"])

        for a_spec in algos:
            if skipped[a_spec.name]:
                continue

            res = time_sort_call(
                algo_name=a_spec.name,
                algo_fn=a_spec.sort_fn,
                a=base_a,
                config=a_spec.config,
                repeats=repeats,
                warmup=warmup,
                disable_gc=disable_gc,
                timeout_seconds=timeout_seconds,
            )

            if res.status in ("ok", "timeout"):
                for trial_idx, t_ns in enumerate(res.samples_ns):
                    _append_jsonl(
                        {"kind": "sample", "algo": a_spec.name, "n": n, "trial": trial_idx, "time_ns": int(t_ns)},
                        results_path,
                    )

            if not res.ok:
                skipped[a_spec.name] = True
                logger.warning("%s skipped from n=%d on: %s %s", a_spec.name, n, res.status, res.error or "")
                _append_jsonl(
                    {
                        "kind": "failure",
                        "algo": a_spec.name,
                        "n": n,
                        "status": res.status,
                        "error": res.error,
                        "timed_out_on_repeat": res.timed_out_on_repeat,
                    },
                    results_path,
                )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    _print_summary(summary_df, sizes)
    _console.print("[bold green]Done.[/bold green] Wrote:")
    for path in (results_path, summary_path, meta_path, cfg_resolved_path):
        _console.print(f" - {path}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Benchmark the adaptive sorter against its backends.")
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-v", "--verbose", action="store_true", help="Show dispatcher and runner log records")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=_console, show_path=False)],
    )
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, show_progress=not args.no_progress)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
