"""
Simple SHA3 / SHAKE / Keccak usage: one-shot functions, streaming sponge,
branching with copy(), and the raw permutation.

Run from repo root: PYTHONPATH=src python examples/keccak.py
"""

import os
import sys

if getattr(sys, "frozen", False) is False:
    _root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    _src = os.path.join(_root, "src")
    if _src not in sys.path:
        sys.path.insert(0, _src)

from picokeccak import (
    keccak256,
    keccak_f1600,
    new_sha3_256,
    new_shake128,
    sha3_256,
    shake256,
)

# One-shot
print("keccak256(b'hello')  =", keccak256(b"hello").hex())
print("sha3_256(b'hello')   =", sha3_256(b"hello").hex())
print("shake256(b'hello',16)=", shake256(b"hello", 16).hex())

# Streaming: chunks give the same digest as one call
h = new_sha3_256()
h.update(b"hello")
branch = h.copy()
h.update(b" world")
out = bytearray(32)
h.finalize(out)
print("sha3_256 stream      =", out.hex())
print("sha3_256 branch      =", branch.digest().hex())

# Extendable output
xof = new_shake128()
xof.update(b"seed")
print("shake128(seed, 64)   =", xof.digest(64).hex())

# Raw permutation on 25 lanes
lanes = [0] * 25
keccak_f1600(lanes)
print(f"keccak-f[1600](0)[0] = {lanes[0]:016x}")
