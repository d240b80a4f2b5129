"""
Benchmark runner: sweeps input sizes and distributions through the three
insertion-sort variants and writes a CSV report.

Usage (from repo root):
    python -m insertbench.bench.runner [--config FILE.yaml] [--output FILE.csv]
    insertbench --help

Outputs:
    - (stdout) one CSV line per run, echoed as soon as the run finishes
    - benchmark_results.csv (or `output_path`), header:
        Type,Size,Time(ns),Comparisons,Swaps,ArrayAccesses,Iterations
    - (console) rich summary table

Design notes:
- For each size n, every distribution is generated once from a fresh
  `default_rng(seed)`, and each run sorts its own copy, so no run ever sees
  data already sorted by a previous run.
- Arguments other than --help/--config/--output are ignored.
- A failed CSV write is reported on stderr; the rows were already echoed, so
  the process still exits normally.
"""

from __future__ import annotations

import argparse
import logging
import platform
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd
import psutil
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table
from tqdm import tqdm

from insertbench.bench.config import BenchConfig, load_config
from insertbench.bench.measure import time_variant_call
from insertbench.datasets import make_dataset
from insertbench.engine import InsertionSorter

logger = logging.getLogger(__name__)

_console = Console()
_err_console = Console(stderr=True)

CSV_COLUMNS = ["Type", "Size", "Time(ns)", "Comparisons", "Swaps", "ArrayAccesses", "Iterations"]

_HELP_EPILOG = """\
Runs every sort variant on several input sizes and distributions.
Results are printed to the console and saved to benchmark_results.csv.

Tested distributions:
  - Random: randomly generated arrays
  - Sorted: already sorted arrays (best case)
  - ReverseSorted: reverse sorted arrays (worst case)
  - NearlySorted: mostly sorted arrays with some disorder
"""


# ------------------------- helpers: meta & output ------------------------- #

def _gather_meta() -> Dict[str, Any]:
    return {
        "python": platform.python_version(),
        "numpy": np.__version__,
        "pandas": pd.__version__,
        "cpu": platform.processor() or platform.machine(),
        "cores_logical": psutil.cpu_count(logical=True),
        "ram_gb": round(psutil.virtual_memory().total / (1024**3), 2),
        "platform": platform.platform(),
    }


def _format_row(row: Dict[str, Any]) -> str:
    return ",".join(str(row[c]) for c in CSV_COLUMNS)


def write_report(df: pd.DataFrame, path: Path) -> bool:
    """Write the results CSV. Returns False (after reporting) if the file cannot be written."""
    try:
        df.to_csv(path, index=False)
    except OSError as e:
        logger.error("Could not write %s: %s", path, e)
        _err_console.print(f"[bold red]Error writing CSV file:[/bold red] {escape(str(e))}")
        return False
    return True


def _print_rich_summary(df: pd.DataFrame, sizes: Sequence[int]) -> None:
    table = Table(title="Benchmark Summary (time ms / comparisons)")
    table.add_column("Type", style="bold")
    picks: List[int] = []
    if sizes:
        picks = sorted({sizes[0], sizes[len(sizes) // 2], sizes[-1]})
    for n in picks:
        table.add_column(f"n={n}", justify="right")

    for run_type in df["Type"].unique():
        row = [str(run_type)]
        for n in picks:
            s = df[(df["Type"] == run_type) & (df["Size"] == n)]
            if s.empty:
                row.append("—")
            else:
                ms = int(s["Time(ns)"].values[0]) / 1e6
                row.append(f"{ms:.2f} / {int(s['Comparisons'].values[0])}")
        table.add_row(*row)
    _console.print()
    _console.print(table)
    _console.print()


# ------------------------- core runner ------------------------- #

def run_benchmarks(cfg: BenchConfig, sorter: Optional[InsertionSorter] = None) -> pd.DataFrame:
    """
    Run every configured (size, run) pair and return one row per run.

    Rows are echoed to stdout as they are produced.
    """
    if sorter is None:
        sorter = InsertionSorter(guard_threshold=cfg.guard_threshold)

    print(",".join(CSV_COLUMNS))
    rows: List[Dict[str, Any]] = []

    for n in tqdm(cfg.sizes, desc="Sizes", unit="n", disable=not cfg.progress, leave=False):
        _console.print(f"\nTesting size: {n}")

        datasets: Dict[str, List[int]] = {}
        for run in cfg.runs:
            if run.dist not in datasets:
                rng = np.random.default_rng(cfg.seed)
                datasets[run.dist] = make_dataset(
                    int(n), run.dist, rng, cfg.dataset_params.get(run.dist)
                )

            res = time_variant_call(
                sorter=sorter,
                variant=run.variant,
                a=datasets[run.dist],
                warmup=cfg.warmup,
                disable_gc=cfg.disable_gc,
            )
            if res["status"] != "ok":
                logger.error("%s (n=%d) failed: %s", run.type, n, res["error"])
                _err_console.print(f"[bold red]{escape(run.type)} n={n} failed:[/bold red] {escape(res['error'])}")
                continue
            if not res["sorted_ok"]:
                logger.error(
                    "%s (n=%d): %s variant produced a bad result (value diff: %s)",
                    run.type, n, run.variant, res["value_diff"],
                )

            counters = res["counters"]
            row = {
                "Type": run.type,
                "Size": res["n"],
                "Time(ns)": res["time_ns"],
                "Comparisons": counters["comparisons"],
                "Swaps": counters["swaps"],
                "ArrayAccesses": counters["array_accesses"],
                "Iterations": counters["iterations"],
            }
            print(_format_row(row))
            rows.append(row)
            logger.debug("Metrics store after %s:\n%s", run.type, sorter.store.format_table())

    return pd.DataFrame(rows, columns=CSV_COLUMNS)


# ------------------------- CLI ------------------------- #

def _parse_args(argv: Optional[Sequence[str]]) -> Tuple[argparse.Namespace, List[str]]:
    p = argparse.ArgumentParser(
        prog="insertbench",
        description="Insertion sort benchmark runner.",
        epilog=_HELP_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    p.add_argument("--config", type=str, default=None, help="Path to a YAML benchmark config")
    p.add_argument("--output", type=str, default=None, help="CSV destination (overrides the config)")
    return p.parse_known_args(argv)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, extra = _parse_args(argv)

    config_path: Optional[Path] = None
    if args.config is not None:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            raise SystemExit(f"Config file not found: {config_path}")
    cfg = load_config(config_path)
    if args.output is not None:
        cfg = replace(cfg, output_path=Path(args.output))

    _configure_logging(cfg.log_level)
    if extra:
        logger.debug("Ignoring arguments: %s", extra)
    logger.info("Environment: %s", _gather_meta())

    _console.print("[bold]Insertion Sort Benchmark[/bold]")
    _console.print("=" * 28)

    try:
        df = run_benchmarks(cfg)
    except Exception as e:
        _err_console.print(f"[bold red]Runner failed:[/bold red] {escape(repr(e))}")
        raise

    saved = write_report(df, cfg.output_path)
    _print_rich_summary(df, cfg.sizes)
    if saved:
        _console.print(f"[bold green]Benchmark completed![/bold green] Results saved to {escape(str(cfg.output_path))}")
    else:
        _console.print("[bold yellow]Benchmark completed;[/bold yellow] results were not saved.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
