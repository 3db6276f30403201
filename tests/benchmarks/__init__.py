"""Benchmarks package (uses pytest-benchmark).

Run with::

    pytest tests/benchmarks/bench_*.py -v
    pytest tests/benchmarks/bench_*.py -v --benchmark-sort=median
"""
