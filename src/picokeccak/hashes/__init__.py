"""Hash functions: SHA3, SHAKE and legacy Keccak on the Keccak sponge."""

from .keccak import (
    keccak224,
    keccak256,
    keccak384,
    keccak512,
    sha3_224,
    sha3_256,
    sha3_384,
    sha3_512,
    shake128,
    shake256,
)
from .sponge import (
    Keccak,
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
)

__all__: tuple[str, ...] = (
    "Keccak",
    "keccak224",
    "keccak256",
    "keccak384",
    "keccak512",
    "new",
    "new_keccak224",
    "new_keccak256",
    "new_keccak384",
    "new_keccak512",
    "new_sha3_224",
    "new_sha3_256",
    "new_sha3_384",
    "new_sha3_512",
    "new_shake128",
    "new_shake256",
    "sha3_224",
    "sha3_256",
    "sha3_384",
    "sha3_512",
    "shake128",
    "shake256",
)
