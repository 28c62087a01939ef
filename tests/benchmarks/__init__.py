"""Codec, builder and engine benchmarks (pytest-benchmark).

Run with::

    pytest tests/benchmarks/bench_codec.py --benchmark-sort=median

Add ``--benchmark-disable`` to run them as plain functional tests.
"""
