"""
Keccak-f[1600] and the Keccak sponge: SHA3-224/256/384/512, SHAKE128/256 and
legacy Keccak-224/256/384/512. No hashlib / pycryptodome dependency.
Pure Python by default; the permutation can be cythonized (PICOKECCAK_CYTHON=1).
"""

from .__about__ import __version__
from .hashes import (
    Keccak,
    keccak224,
    keccak256,
    keccak384,
    keccak512,
    new,
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
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    shake128,
    shake256,
)
from .permutation import keccak_f1600, keccak_f1600_bytes

__all__: tuple[str, ...] = (
    # About
    "__version__",
    # Permutation
    "keccak_f1600",
    "keccak_f1600_bytes",
    # Sponge
    "Keccak",
    "new",
    # Sponge constructors: SHAKE (extendable output)
    "new_shake128",
    "new_shake256",
    # Sponge constructors: legacy Keccak (0x01 padding)
    "new_keccak224",
    "new_keccak256",
    "new_keccak384",
    "new_keccak512",
    # Sponge constructors: SHA3 (FIPS 202)
    "new_sha3_224",
    "new_sha3_256",
    "new_sha3_384",
    "new_sha3_512",
    # One-shot hashes
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
