"""merkleproof performance benchmarks.

Run all benchmarks:
    pytest benchmarks/bench_merkle_anchor.py --benchmark-only

Generate JSON report:
    pytest benchmarks/bench_merkle_anchor.py --benchmark-only --benchmark-json=results.json

Quick manual run:
    python benchmarks/bench_merkle_anchor.py
"""
