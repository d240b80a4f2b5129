"""End-to-end tests for the benchmark CLI."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
import yaml

from insertbench.bench import runner
from insertbench.bench.config import BenchConfig
from insertbench.bench.runner import CSV_COLUMNS, main, run_benchmarks


def _config(tmp_path: Path, **overrides) -> Path:
    obj = {"sizes": [20, 40], "progress": False, "output_path": str(tmp_path / "results.csv")}
    obj.update(overrides)
    path = tmp_path / "bench.yaml"
    path.write_text(yaml.safe_dump(obj), encoding="utf-8")
    return path


def test_help_short_circuits(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--help"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Tested distributions" in out
    assert "ReverseSorted" in out
    assert not (tmp_path / "benchmark_results.csv").exists()


def test_full_run_writes_csv_and_echoes_rows(tmp_path: Path, capsys) -> None:
    assert main(["--config", str(_config(tmp_path))]) == 0

    df = pd.read_csv(tmp_path / "results.csv")
    assert list(df.columns) == CSV_COLUMNS
    assert len(df) == 2 * 6
    assert list(df["Type"][:6]) == ["Random", "Sorted", "ReverseSorted", "NearlySorted", "Optimized", "BinarySearch"]

    by = {(t, n): row for t, n, row in zip(df["Type"], df["Size"], df.itertuples(index=False))}
    for n in (20, 40):
        best = by[("Sorted", n)]
        assert best.Comparisons == n - 1
        assert best.Swaps == 0
        assert best.Iterations == n - 1

        worst = by[("ReverseSorted", n)]
        assert worst.Swaps == n * (n - 1) // 2

        assert by[("Optimized", n)].Iterations == n - 2
        assert by[("BinarySearch", n)].Iterations == n - 1
    assert (df["Time(ns)"] >= 0).all()

    out = capsys.readouterr().out
    lines = out.splitlines()
    assert ",".join(CSV_COLUMNS) in lines
    echoed = [line for line in lines if line.startswith(("Random,", "Sorted,", "BinarySearch,"))]
    assert len(echoed) == 2 * 3


def test_unwritable_output_is_reported_not_fatal(tmp_path: Path, capsys) -> None:
    cfg = _config(tmp_path, output_path=str(tmp_path / "missing" / "results.csv"))
    assert main(["--config", str(cfg)]) == 0

    captured = capsys.readouterr()
    assert "Error writing CSV file" in captured.err
    assert sum(1 for line in captured.out.splitlines() if line.startswith("Random,")) == 2
    assert not (tmp_path / "missing").exists()


def test_unknown_arguments_are_ignored(tmp_path: Path) -> None:
    cfg = _config(tmp_path, sizes=[5])
    out = tmp_path / "override.csv"
    assert main(["--frobnicate", "extra", "--config", str(cfg), "--output", str(out)]) == 0
    assert len(pd.read_csv(out)) == 6


@pytest.mark.parametrize("extra", [["--out"], ["--conf"], ["--o", "x.csv"], ["--outp", "x.csv"]])
def test_option_prefixes_are_not_abbreviations(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, extra
) -> None:
    monkeypatch.chdir(tmp_path)
    cfg = _config(tmp_path, sizes=[5])

    assert main(["--config", str(cfg), *extra]) == 0

    assert len(pd.read_csv(tmp_path / "results.csv")) == 6
    assert not (tmp_path / "x.csv").exists()


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main(["--config", str(tmp_path / "nope.yaml")])


def test_runs_do_not_share_sorted_data(capsys) -> None:
    # Optimized and NearlySorted use the same dataset; each must start unsorted
    df = run_benchmarks(BenchConfig(sizes=(100,), progress=False))
    basic = df[df["Type"] == "NearlySorted"].iloc[0]
    guarded = df[df["Type"] == "Optimized"].iloc[0]
    assert basic["Swaps"] > 0
    assert guarded["Swaps"] > 0

    random_row = df[df["Type"] == "Random"].iloc[0]
    binary_row = df[df["Type"] == "BinarySearch"].iloc[0]
    assert binary_row["Swaps"] > 0
    assert random_row["Swaps"] > 0


def test_write_report_failure_returns_false(tmp_path: Path, capsys) -> None:
    df = pd.DataFrame([], columns=CSV_COLUMNS)
    assert runner.write_report(df, tmp_path / "missing" / "x.csv") is False
    assert runner.write_report(df, tmp_path / "ok.csv") is True
    assert "Error writing CSV file" in capsys.readouterr().err


def test_bad_dataset_params_fail_before_any_run(tmp_path: Path, capsys) -> None:
    cfg = _config(tmp_path, dataset_params={"random": {"value_factor": 0}})
    with pytest.raises(ValueError, match="value_factor"):
        main(["--config", str(cfg)])
    assert ",".join(CSV_COLUMNS) not in capsys.readouterr().out
    assert not (tmp_path / "results.csv").exists()
