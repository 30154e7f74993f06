"""
Keccak-f[1600] permutation (24 rounds over 25 little-endian 64-bit lanes).
Pure Python; built as a Cython extension when PICOKECCAK_CYTHON=1.
"""

from __future__ import annotations

import struct

ROUND_CONSTANTS = (
    0x0000000000000001,
    0x0000000000008082,
    0x800000000000808A,
    0x8000000080008000,
    0x000000000000808B,
    0x0000000080000001,
    0x8000000080008081,
    0x8000000000008009,
    0x000000000000008A,
    0x0000000000000088,
    0x0000000080008009,
    0x000000008000000A,
    0x000000008000808B,
    0x800000000000008B,
    0x8000000000008089,
    0x8000000000008003,
    0x8000000000008002,
    0x8000000000000080,
    0x000000000000800A,
    0x800000008000000A,
    0x8000000080008081,
    0x8000000000008080,
    0x0000000080000001,
    0x8000000080008008,
)

# Rotation offsets along the rho/pi walk starting at lane 1 (x=1, y=0).
RHO = (
    1, 3, 6, 10, 15, 21,
    28, 36, 45, 55, 2, 14,
    27, 41, 56, 8, 25, 43,
    62, 18, 39, 61, 20, 44,
)  # fmt: skip

# Destination lane (x + 5*y) of each step of the same walk.
PI = (
    10, 7, 11, 17, 18, 3,
    5, 16, 8, 21, 24, 4,
    15, 23, 19, 13, 12, 2,
    20, 14, 22, 9, 6, 1,
)  # fmt: skip

LANES = 25
STATE_BYTES = LANES * 8

_MASK64 = 0xFFFFFFFFFFFFFFFF
_LANES_LE = struct.Struct("<25Q")


def _rol64(v: int, n: int) -> int:
    """Rotate 64-bit value v left by n bits (mod 64)."""
    n = n % 64
    return ((v << n) | (v >> (64 - n))) & _MASK64


def keccak_f1600(lanes: list[int]) -> None:
    """
    Keccak-f[1600] permutation; updates the 25 lanes in place.

    Args:
        lanes: Mutable sequence of 25 unsigned 64-bit ints, lane (x, y) at x + 5*y.
    """
    if len(lanes) != LANES:
        raise ValueError("keccak-f[1600] state must be 25 lanes")
    a = lanes
    c = [0] * 5
    for rc in ROUND_CONSTANTS:
        # theta
        for x in range(5):
            c[x] = a[x] ^ a[x + 5] ^ a[x + 10] ^ a[x + 15] ^ a[x + 20]
        for x in range(5):
            d = c[(x + 4) % 5] ^ _rol64(c[(x + 1) % 5], 1)
            for y in range(0, 25, 5):
                a[y + x] ^= d
        # rho and pi
        t = a[1]
        for rot, dst in zip(RHO, PI):
            t, a[dst] = a[dst], _rol64(t, rot)
        # chi
        for y in range(0, 25, 5):
            c[:] = a[y : y + 5]
            for x in range(5):
                a[y + x] = c[x] ^ ((~c[(x + 1) % 5]) & c[(x + 2) % 5])
        # iota
        a[0] ^= rc


def keccak_f1600_bytes(state: bytearray) -> None:
    """
    Keccak-f[1600] over a 200-byte state buffer; lanes are little-endian
    regardless of host byte order. Updates state in place.
    """
    if len(state) != STATE_BYTES:
        raise ValueError("keccak-f[1600] state must be 200 bytes")
    lanes = list(_LANES_LE.unpack_from(state))
    keccak_f1600(lanes)
    _LANES_LE.pack_into(state, 0, *lanes)


__all__: tuple[str, ...] = (
    "LANES",
    "PI",
    "RHO",
    "ROUND_CONSTANTS",
    "STATE_BYTES",
    "keccak_f1600",
    "keccak_f1600_bytes",
)
