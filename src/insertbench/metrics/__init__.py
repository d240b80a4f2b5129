"""
Metrics package public API.

    from insertbench.metrics import MetricsStore, global_store
"""

from .store import MetricsStore, global_store

__all__ = ["MetricsStore", "global_store"]
