"""Benchmarks package — uses pytest-benchmark.

Not collected by a plain ``pytest`` run (``testpaths`` covers
``tests/unit`` only). Run explicitly with::

    pytest tests/benchmarks/ -v
    pytest tests/benchmarks/ -v --benchmark-sort=median

As plain functional checks without timing::

    pytest tests/benchmarks/ --benchmark-disable
"""
