"""
Keccak sponge (multirate padding) driving Keccak-f[1600]: SHA3, SHAKE and
legacy Keccak variants. Absorb with update(), squeeze once with finalize().
"""

from __future__ import annotations

from ..permutation.keccak_f import STATE_BYTES, keccak_f1600_bytes

DELIM_KECCAK = 0x01
DELIM_SHA3 = 0x06
DELIM_SHAKE = 0x1F


def _rate_for(bits: int) -> int:
    """Rate in bytes for a security level in bits (capacity = 2 * bits)."""
    return STATE_BYTES - bits // 4


def _xor_into(state: bytearray, offset: int, chunk: memoryview) -> None:
    """XOR chunk into state starting at offset."""
    n = len(chunk)
    if not n:
        return
    end = offset + n
    v = int.from_bytes(state[offset:end], "little") ^ int.from_bytes(chunk, "little")
    state[offset:end] = v.to_bytes(n, "little")


class Keccak:
    """
    Keccak sponge state: 200-byte state plus rate, offset and delimiter.

    Build one with the new_* constructors. Call update() any number of times,
    then finalize() exactly once; the instance is unusable afterwards. Use
    copy() to branch a computation.

    Example:
        >>> h = new_sha3_256()
        >>> h.update(b"hello")
        >>> out = bytearray(32)
        >>> h.finalize(out)
        >>> out.hex()[:8]
        '3338be69'
    """

    __slots__ = ("_state", "_offset", "_rate", "_delim", "_digest_size", "_finalized")

    def __init__(self, rate: int, delim: int, digest_size: int | None = None) -> None:
        if not 0 < rate <= STATE_BYTES:
            raise ValueError("rate must be between 1 and 200 bytes")
        if not 0 < delim <= 0xFF:
            raise ValueError("delimiter must be a non-zero byte")
        if digest_size is not None and digest_size <= 0:
            raise ValueError("digest_size must be positive")
        self._state = bytearray(STATE_BYTES)
        self._offset = 0
        self._rate = rate
        self._delim = delim
        self._digest_size = digest_size
        self._finalized = False

    @property
    def rate(self) -> int:
        return self._rate

    @property
    def block_size(self) -> int:
        return self._rate

    @property
    def capacity(self) -> int:
        return STATE_BYTES - self._rate

    @property
    def delimiter(self) -> int:
        return self._delim

    @property
    def digest_size(self) -> int | None:
        """Fixed output length in bytes; None for extendable output (SHAKE)."""
        return self._digest_size

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _check_live(self) -> None:
        if self._finalized:
            raise ValueError("keccak sponge already finalized")

    def update(self, data: bytes | bytearray | memoryview) -> None:
        """
        Absorb data (any bytes-like object, any length).

        Args:
            data: Input bytes; chunking across calls does not change the result.
        """
        self._check_live()
        view = memoryview(data).cast("B")
        state = self._state
        rate = self._rate
        pos, remaining = 0, len(view)
        while remaining >= rate - self._offset:
            take = rate - self._offset
            _xor_into(state, self._offset, view[pos : pos + take])
            keccak_f1600_bytes(state)
            pos += take
            remaining -= take
            self._offset = 0
        _xor_into(state, self._offset, view[pos:])
        self._offset += remaining

    def _pad(self) -> None:
        # Both XORs hit the same byte when offset == rate - 1.
        self._state[self._offset] ^= self._delim
        self._state[self._rate - 1] ^= 0x80

    def _squeeze(self, out: memoryview) -> None:
        state = self._state
        rate = self._rate
        pos, remaining = 0, len(out)
        while remaining >= rate:
            out[pos : pos + rate] = state[:rate]
            keccak_f1600_bytes(state)
            pos += rate
            remaining -= rate
        out[pos:] = state[:remaining]

    def finalize(self, output: bytearray | memoryview) -> None:
        """
        Pad, permute and squeeze len(output) bytes into output. Consumes the sponge.

        Args:
            output: Writable buffer; must be exactly digest_size bytes for
                fixed-output variants, any length for SHAKE.
        """
        self._check_live()
        out = memoryview(output).cast("B")
        if out.readonly:
            raise TypeError("output buffer must be writable")
        if self._digest_size is not None and len(out) != self._digest_size:
            raise ValueError(
                f"output must be {self._digest_size} bytes, got {len(out)}"
            )
        self._finalized = True
        self._pad()
        keccak_f1600_bytes(self._state)
        self._squeeze(out)

    def copy(self) -> Keccak:
        """Independent sponge with the same state and parameters."""
        self._check_live()
        other = Keccak.__new__(Keccak)
        other._state = bytearray(self._state)
        other._offset = self._offset
        other._rate = self._rate
        other._delim = self._delim
        other._digest_size = self._digest_size
        other._finalized = False
        return other

    __copy__ = copy

    def digest(self, length: int | None = None) -> bytes:
        """
        Output of finalizing a copy; this sponge stays open for more update() calls.

        Args:
            length: Output length in bytes. Defaults to digest_size; required for SHAKE.

        Returns:
            length-byte digest.
        """
        if length is None:
            if self._digest_size is None:
                raise ValueError("length is required for extendable output")
            length = self._digest_size
        if length < 0:
            raise ValueError("length must be non-negative")
        out = bytearray(length)
        self.copy().finalize(out)
        return bytes(out)

    def __repr__(self) -> str:
        return (
            f"Keccak(rate={self._rate}, delim=0x{self._delim:02x}, "
            f"digest_size={self._digest_size})"
        )


def new_shake128() -> Keccak:
    """SHAKE128 (extendable output, rate 168)."""
    return Keccak(_rate_for(128), DELIM_SHAKE)


def new_shake256() -> Keccak:
    """SHAKE256 (extendable output, rate 136)."""
    return Keccak(_rate_for(256), DELIM_SHAKE)


def new_keccak224() -> Keccak:
    return Keccak(_rate_for(224), DELIM_KECCAK, 28)


def new_keccak256() -> Keccak:
    """Keccak-256 as used by Ethereum (0x01 padding, not SHA3-256)."""
    return Keccak(_rate_for(256), DELIM_KECCAK, 32)


def new_keccak384() -> Keccak:
    return Keccak(_rate_for(384), DELIM_KECCAK, 48)


def new_keccak512() -> Keccak:
    return Keccak(_rate_for(512), DELIM_KECCAK, 64)


def new_sha3_224() -> Keccak:
    return Keccak(_rate_for(224), DELIM_SHA3, 28)


def new_sha3_256() -> Keccak:
    return Keccak(_rate_for(256), DELIM_SHA3, 32)


def new_sha3_384() -> Keccak:
    return Keccak(_rate_for(384), DELIM_SHA3, 48)


def new_sha3_512() -> Keccak:
    return Keccak(_rate_for(512), DELIM_SHA3, 64)


_CONSTRUCTORS = {
    "shake128": new_shake128,
    "shake256": new_shake256,
    "keccak224": new_keccak224,
    "keccak256": new_keccak256,
    "keccak384": new_keccak384,
    "keccak512": new_keccak512,
    "sha3_224": new_sha3_224,
    "sha3_256": new_sha3_256,
    "sha3_384": new_sha3_384,
    "sha3_512": new_sha3_512,
}


def new(name: str) -> Keccak:
    """
    Sponge for a variant by name ("sha3_256", "keccak256", "shake128", ...).

    Args:
        name: Variant name; "-" is accepted in place of "_" (e.g. "sha3-256").

    Returns:
        Fresh Keccak sponge.
    """
    if not isinstance(name, str):
        raise TypeError("name must be str")
    try:
        ctor = _CONSTRUCTORS[name.lower().replace("-", "_")]
    except KeyError:
        raise ValueError(f"unknown keccak variant: {name!r}") from None
    return ctor()


__all__: tuple[str, ...] = (
    "DELIM_KECCAK",
    "DELIM_SHA3",
    "DELIM_SHAKE",
    "Keccak",
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
)
