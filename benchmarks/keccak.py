"""
Benchmark SHA3-256 / Keccak-256 / SHAKE128: picokeccak vs hashlib (OpenSSL).
Compares time per call and peak traced memory (tracemalloc) of a single call.

Run from repo root:

  PYTHONPATH=src python benchmarks/keccak.py

Or after pip install -e . (PICOKECCAK_CYTHON=1 for the compiled permutation):

  python benchmarks/keccak.py
"""

from __future__ import annotations

import hashlib
import os
import sys
import time
import tracemalloc

# Prefer repo src on path so we use local code
_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
_src = os.path.join(_root, "src")
if _src not in sys.path:
    sys.path.insert(0, _src)

from picokeccak import keccak_f1600, keccak256, sha3_256, shake128
from picokeccak.permutation import keccak_f

# Sample payloads (bytes); kept small so benchmark stays fast
SAMPLES = [
    (b"", "empty"),
    (b"hello", "short"),
    (b"x" * 64, "64 B"),
    (b"x" * 256, "256 B"),
    (b"x" * 1024, "1 KiB"),
]

WARMUP = 50


def _hashlib_sha3_256(data: bytes) -> bytes:
    return hashlib.sha3_256(data).digest()


def _hashlib_shake128(data: bytes) -> bytes:
    return hashlib.shake_128(data).digest(64)


def _shake128_64(data: bytes) -> bytes:
    return shake128(data, 64)


# Pure-Python permutation is slow: scale iterations down by absorbed blocks
def _iterations(data_len: int) -> int:
    blocks = 1 + data_len // 136
    return max(50, 1000 // blocks)


def _measure(fn, data: bytes, n: int) -> tuple[float, float]:
    """(ms per call, peak traced KiB) over n calls after a warmup."""
    for _ in range(WARMUP):
        fn(data)
    start = time.perf_counter()
    for _ in range(n):
        fn(data)
    elapsed_ms = (time.perf_counter() - start) * 1000 / n
    tracemalloc.start()
    fn(data)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()
    return elapsed_ms, peak / 1024.0


def _bench_pair(title: str, ours, ref) -> None:
    print(f"  --- {title}: ms per call / peak KiB per call ---")
    print(
        f"  {'size':<8} {'n':<6} {'picokeccak':<20} {'hashlib':<20} {'slowdown':<8}"
    )
    print("  " + "-" * 66)
    ratios: list[float] = []
    for data, label in SAMPLES:
        n = _iterations(len(data))
        t_ours, mem_ours = _measure(ours, data, n)
        t_ref, mem_ref = _measure(ref, data, n)
        ratio = t_ours / t_ref if t_ref > 0 else 0
        ratios.append(ratio)
        ours_col = f"{t_ours:.4f} / {mem_ours:.2f}"
        ref_col = f"{t_ref:.4f} / {mem_ref:.2f}"
        print(f"  {label:<8} {n:<6} {ours_col:<20} {ref_col:<20} {ratio:.1f}x")
    print(f"  average slowdown: {sum(ratios) / len(ratios):.1f}x")
    print()


def main() -> None:
    compiled = not keccak_f.__file__.endswith(".py")
    print("Benchmark: picokeccak vs hashlib")
    print(f"  permutation: {'Cython' if compiled else 'pure Python'}")
    print()

    # Sanity: same digest
    msg = b"test"
    a = sha3_256(msg)
    b = _hashlib_sha3_256(msg)
    assert a == b, f"digest mismatch: {a.hex()} vs {b.hex()}"
    print(f"  Sanity check: both give {a.hex()[:32]}...")
    print(f"  keccak256(b'test') = {keccak256(msg).hex()[:32]}...")
    print()

    lanes = [0] * 25
    n = 2000
    start = time.perf_counter()
    for _ in range(n):
        keccak_f1600(lanes)
    per_call = (time.perf_counter() - start) / n * 1e6
    print(f"  keccak_f1600: {per_call:.1f} us per permutation")
    print()

    _bench_pair("SHA3-256", sha3_256, _hashlib_sha3_256)
    _bench_pair("SHAKE128 (64 B out)", _shake128_64, _hashlib_shake128)


if __name__ == "__main__":
    main()
