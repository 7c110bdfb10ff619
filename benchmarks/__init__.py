"""
Benchmark suite for tinyjson parsing and serialization performance.

Compares tinyjson against established JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures parse and serialize speed plus peak memory across document shapes.
Run with ``pytest benchmarks/`` after installing the ``bench`` extra.
"""
