"""
Benchmark harness: configuration, timing and the CLI runner.

    python -m insertbench.bench.runner --help
"""
