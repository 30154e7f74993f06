"""
One-shot SHA3 / SHAKE / Keccak hashing: absorb data once, return the digest.
"""

from __future__ import annotations

from .sponge import (
    Keccak,
    new_keccak224,
    new_keccak256,
    new_keccak384,
    new_keccak512,
    new_sha3_224,
    new_sha3_256,
    new_sha3_384,
    new_sha3_512,
    new_shake128,
    new_shake256,
)


def _oneshot(sponge: Keccak, data: bytes, length: int) -> bytes:
    sponge.update(data)
    out = bytearray(length)
    sponge.finalize(out)
    return bytes(out)


def keccak224(data: bytes) -> bytes:
    """Keccak-224 (original 0x01 padding); 28-byte digest."""
    return _oneshot(new_keccak224(), data, 28)


def keccak256(data: bytes) -> bytes:
    """
    Keccak-256 hash (256-bit output, multirate padding).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return _oneshot(new_keccak256(), data, 32)


def keccak384(data: bytes) -> bytes:
    """Keccak-384 (original 0x01 padding); 48-byte digest."""
    return _oneshot(new_keccak384(), data, 48)


def keccak512(data: bytes) -> bytes:
    """Keccak-512 (original 0x01 padding); 64-byte digest."""
    return _oneshot(new_keccak512(), data, 64)


def sha3_224(data: bytes) -> bytes:
    return _oneshot(new_sha3_224(), data, 28)


def sha3_256(data: bytes) -> bytes:
    """
    SHA3-256 (FIPS 202).

    Args:
        data: Input bytes (any length).

    Returns:
        32-byte digest.
    """
    return _oneshot(new_sha3_256(), data, 32)


def sha3_384(data: bytes) -> bytes:
    return _oneshot(new_sha3_384(), data, 48)


def sha3_512(data: bytes) -> bytes:
    return _oneshot(new_sha3_512(), data, 64)


def shake128(data: bytes, length: int) -> bytes:
    """
    SHAKE128 extendable-output function.

    Args:
        data: Input bytes (any length).
        length: Number of output bytes.

    Returns:
        length-byte output; a shorter request is a prefix of a longer one.
    """
    if length < 0:
        raise ValueError("length must be non-negative")
    return _oneshot(new_shake128(), data, length)


def shake256(data: bytes, length: int) -> bytes:
    """SHAKE256 extendable-output function; returns length bytes."""
    if length < 0:
        raise ValueError("length must be non-negative")
    return _oneshot(new_shake256(), data, length)


__all__: tuple[str, ...] = (
    "keccak224",
    "keccak256",
    "keccak384",
    "keccak512",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    "shake128",
    "shake256",
)
