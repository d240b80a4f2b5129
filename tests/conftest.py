"""
Shared pytest setup.

Inserts the project `src/` onto sys.path so tests run without installing the package.
"""

from __future__ import annotations

import pathlib
import sys

import pytest

# Ensure `src/` is importable when running `pytest` from the repo root
_REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))

from insertbench import InsertionSorter, MetricsStore  # noqa: E402


@pytest.fixture
def store() -> MetricsStore:
    return MetricsStore()


@pytest.fixture
def sorter(store: MetricsStore) -> InsertionSorter:
    """A sorter with its own store, so tests never touch the global one."""
    return InsertionSorter(store=store)
