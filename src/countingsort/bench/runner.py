"""
Experiment runner: counting sort vs. comparison sort, driven by a YAML config.

Usage (from repo root):
    countingsort-bench experiments/configs/01_u8_scaling.yaml
    python -m countingsort.bench.runner experiments/configs/01_u8_scaling.yaml

Outputs in a new run directory:
    - config_resolved.yaml    # the config we actually used
    - meta.json               # environment info (python, numpy, cpu/ram, git commit)
    - results.jsonl           # one JSON line per timing sample or failure
    - summary.csv             # median + IQR per (algo, n)

Design notes:
- For each size n, ONE dataset is generated and every algorithm gets a copy.
- On timeout/error/mismatch for an algorithm at size n, larger sizes are
  skipped for that algorithm.
"""

from __future__ import annotations

import argparse
import datetime as _dt
import importlib
import json
import os
import platform
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import numpy as np
import pandas as pd
import psutil
import yaml
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from countingsort import __version__
from countingsort.bench.measure import time_sort_call
from countingsort.datasets import make_dataset

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
SUMMARY_COLUMNS = ["algo", "n", "samples_ok", "median_ns", "iqr_ns", "min_ns", "max_ns"]


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
        raise ValueError(f"Config {path} must be a YAML mapping")
    return cfg


def _write_yaml(obj: Dict[str, Any], path: Path) -> None:
    with path.open("w", encoding="utf-8") as f:
        yaml.safe_dump(obj, f, sort_keys=False)


def _append_jsonl(obj: Dict[str, Any], path: Path) -> None:
    with path.open("a", encoding="utf-8") as f:
        f.write(json.dumps(obj, separators=(",", ":"), ensure_ascii=False))
        f.write("\n")


def _timestamp() -> str:
    return _dt.datetime.now().strftime("%Y%m%d_%H%M%S")


def _ensure_run_dir(base_dir: Path, experiment_name: str) -> Path:
    base_dir.mkdir(parents=True, exist_ok=True)
    run_dir = base_dir / f"{_timestamp()}_{experiment_name}"
    suffix = 1
    while run_dir.exists():
        run_dir = base_dir / f"{_timestamp()}_{experiment_name}_{suffix}"
        suffix += 1
    run_dir.mkdir(parents=False, exist_ok=False)
    return run_dir


def _git_commit_short() -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", "rev-parse", "--short", "HEAD"], stderr=subprocess.DEVNULL
        )
    except (OSError, subprocess.CalledProcessError):
        return None
    return out.decode("utf-8").strip()


def _gather_meta() -> Dict[str, Any]:
    return {
        "countingsort": __version__,
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "psutil": psutil.__version__,
        "git_commit": _git_commit_short(),
        "machine": {
            "cpu": platform.processor() or platform.machine(),
            "cores_logical": psutil.cpu_count(logical=True),
            "cores_physical": psutil.cpu_count(logical=False),
            "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
            "platform": platform.platform(),
        },
        "start_time": _dt.datetime.now().isoformat(timespec="seconds"),
        "pid": os.getpid(),
        "cwd": str(Path.cwd()),
    }


def _resolve_algorithms(cfg_algos: List[Dict[str, Any]]) -> List[AlgoSpec]:
    specs: List[AlgoSpec] = []
    seen = set()
    for entry in cfg_algos:
        name = entry.get("name", None)
        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        try:
            mod = importlib.import_module(f"countingsort.algorithms.{name}")
        except ImportError as e:
            raise ImportError(
                f"Could not import algorithm module 'countingsort.algorithms.{name}': {e!r}"
            ) from e

        if not callable(getattr(mod, "sort", None)):
            raise AttributeError(
                f"Algorithm module '{name}' must define a callable `sort(a, *, config=None)`"
            )

        config = entry.get("config", {})
        if config is None:
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(f"Algorithm '{name}': 'config' must be a dict if provided")

        specs.append(AlgoSpec(name=name, sort_fn=mod.sort, config=config))
    return specs


def _aggregate_summary(jsonl_path: Path) -> pd.DataFrame:
    if not jsonl_path.exists():
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = pd.read_json(jsonl_path, lines=True)
    if "time_ns" not in df.columns:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)
    df = df[df["time_ns"].notna()]
    if df.empty:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    grouped = df.groupby(["algo", "n"])["time_ns"]
    out = grouped.agg(
        samples_ok="count",
        median_ns="median",
        min_ns="min",
        max_ns="max",
    ).reset_index()
    iqr = (grouped.quantile(0.75) - grouped.quantile(0.25)).rename("iqr_ns").reset_index()
    out = out.merge(iqr, on=["algo", "n"], how="left")
    out[["median_ns", "iqr_ns", "min_ns", "max_ns"]] = out[
        ["median_ns", "iqr_ns", "min_ns", "max_ns"]
    ].astype("int64")
    return out[SUMMARY_COLUMNS].sort_values(["algo", "n"], ignore_index=True)


def _print_summary(summary: pd.DataFrame, sizes: List[int]) -> None:
    table = Table(title="Benchmark Summary (median ± IQR in ms)")
    table.add_column("Algorithm", style="bold")
    picks: List[Tuple[str, int]] = []
    if sizes:
        for npick in dict.fromkeys((sizes[0], sizes[len(sizes) // 2], sizes[-1])):
            picks.append((f"n={npick}", npick))
            table.add_column(f"n={npick}", justify="right")

    for algo in summary["algo"].unique():
        row = [f"[bold]{algo}[/]"]
        for _, npick in picks:
            s = summary[(summary["algo"] == algo) & (summary["n"] == npick)]
            if s.empty:
                row.append("—")
            else:
                median_ms = int(s["median_ns"].values[0]) / 1e6
                iqr_ms = int(s["iqr_ns"].values[0]) / 1e6
                row.append(f"{median_ms:.2f} ± {iqr_ms:.2f}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_experiment(config_path: Path, *, quiet: bool = False) -> Path:
    cfg = _load_yaml(config_path)

    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing required config keys: {missing}")

    experiment_name = str(cfg["experiment_name"])
    output_dir = Path(cfg["output_dir"])
    if not output_dir.is_absolute():
        output_dir = config_path.parent / output_dir
    sizes: List[int] = [int(n) for n in cfg["sizes"]]
    repeats = int(cfg["repeats"])
    warmup = bool(cfg["warmup"])
    disable_gc = bool(cfg["disable_gc"])
    timeout_seconds = float(cfg["timeout_seconds"])
    validate = bool(cfg.get("validate", True))
    dataset_spec: Dict[str, Any] = dict(cfg["dataset"])
    algos_cfg: List[Dict[str, Any]] = list(cfg["algorithms"])

    if not sizes or any(n < 0 for n in sizes):
        raise ValueError("Config 'sizes' must be a non-empty list of nonnegative integers")

    # Fail on bad algorithm names before creating any output.
    algos = _resolve_algorithms(algos_cfg)

    run_dir = _ensure_run_dir(output_dir, experiment_name)
    results_path = run_dir / "results.jsonl"
    summary_path = run_dir / "summary.csv"
    meta_path = run_dir / "meta.json"
    cfg_resolved_path = run_dir / "config_resolved.yaml"

    _write_yaml(cfg, cfg_resolved_path)
    with meta_path.open("w", encoding="utf-8") as f:
        json.dump(_gather_meta(), f, indent=2)

    rng = np.random.default_rng(int(cfg["seed"]))
    per_algo_skip = {a.name: False for a in algos}

    if not quiet:
        _console.print(f"[bold green]Run directory:[/bold green] {run_dir}")
        _console.print(f"[bold]Experiment:[/bold] {experiment_name}")
        _console.print(f"[bold]Algorithms:[/bold] {', '.join(a.name for a in algos)}")
        _console.print()

    for n in tqdm(sizes, desc="Sizes", unit="n", disable=quiet):
        base_a = make_dataset(n, dataset_spec, rng)

        for a_spec in algos:
            if per_algo_skip[a_spec.name]:
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
                validate=validate,
            )

            for trial_idx, t_ns in enumerate(res["samples_ns"]):
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "dataset": dataset_spec,
                        "trial": trial_idx,
                        "time_ns": int(t_ns),
                        "config": a_spec.config,
                    },
                    results_path,
                )

            status = res["status"]
            if status != "ok":
                per_algo_skip[a_spec.name] = True
                _append_jsonl(
                    {
                        "algo": a_spec.name,
                        "n": n,
                        "status": status,
                        "error": res["error"],
                        "timed_out_on_repeat": res["timed_out_on_repeat"],
                        "config": a_spec.config,
                    },
                    results_path,
                )
                if not quiet:
                    _console.print(
                        f"[yellow]{a_spec.name} {status} at n={n}; skipping larger sizes[/yellow]"
                    )

    summary_df = _aggregate_summary(results_path)
    summary_df.to_csv(summary_path, index=False)

    if not quiet:
        _print_summary(summary_df, sizes)
        _console.print("[bold green]Done.[/bold green] Wrote:")
        for p in (results_path, summary_path, meta_path, cfg_resolved_path):
            _console.print(f" - {p}")

    return run_dir


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Benchmark counting sort against comparison sorting from a YAML config."
    )
    p.add_argument("config", type=str, help="Path to YAML experiment config")
    p.add_argument("-q", "--quiet", action="store_true", help="No console output")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    config_path = Path(args.config).resolve()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    try:
        run_experiment(config_path, quiet=args.quiet)
    except Exception as e:
        _console.print(f"[bold red]Runner failed:[/bold red] {e!r}")
        raise


if __name__ == "__main__":
    main()
