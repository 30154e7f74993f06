"""Permutations: Keccak-f[1600]."""

from .keccak_f import keccak_f1600, keccak_f1600_bytes

__all__: tuple[str, ...] = ("keccak_f1600", "keccak_f1600_bytes")
