"""Byte helpers shared by the primitives: hex decoding, padding and dumps."""

from __future__ import annotations

import binascii
from collections.abc import Iterable

_MD_BLOCK = 64
_MD_LENGTH_OFFSET = 56


def must_decode_hex(s: str) -> bytes:
    """Decode a hex string, raising ValueError if it is malformed."""
    try:
        return binascii.unhexlify(s)
    except (binascii.Error, TypeError) as exc:
        raise ValueError(f"invalid hex string: {s!r}") from exc


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm with truncated remainders."""
    while b != 0:
        remainder = abs(a) % abs(b)
        if a < 0:
            remainder = -remainder
        a, b = b, remainder
    return a


def dump_words(note: str, words: Iterable[int]) -> None:
    """Print 32-bit words, four to a numbered line group."""
    parts = [note]
    for i, word in enumerate(words):
        if i % 4 == 0:
            parts.append(f"\nword[{i // 4:02d}]: {word:08x}")
        else:
            parts.append(f"\n {word:08x}")
    print("".join(parts))


def dump_bytes(note: str, data: bytes | None) -> None:
    """Print bytes as hex in 16-byte blocks, grouped by four."""
    parts = [note]
    for i, value in enumerate(data or b""):
        if i % 16 == 0:
            parts.append(f"\nblock[{i // 16}]: {value:02x}")
        elif i % 4 == 0:
            parts.append(f" {value:02x}")
        else:
            parts.append(f"{value:02x}")
    print("".join(parts))


def pkcs7_padding(data: bytes, block_len: int) -> bytes:
    """Pad data to a multiple of block_len as described by PKCS #7."""
    if block_len <= 0:
        raise ValueError("block length must be positive")
    count = block_len - len(data) % block_len
    return bytes(data) + bytes([count & 0xFF]) * count


def pkcs7_unpadding(data: bytes) -> bytes:
    """Strip PKCS #7 padding, trusting the value of the last byte."""
    if not data:
        raise ValueError("cannot unpad empty data")
    count = data[-1]
    if count > len(data):
        raise ValueError("padding length exceeds data length")
    return bytes(data[: len(data) - count])


def md_padding(data: bytes) -> bytes:
    """Merkle-Damgard padding: 0x80, zeros, then the bit length big-endian."""
    bit_length = (len(data) * 8) & 0xFFFFFFFFFFFFFFFF
    padded = bytearray(data)
    padded.append(0x80)
    padded.extend(bytes((_MD_LENGTH_OFFSET - len(padded)) % _MD_BLOCK))
    padded.extend(bit_length.to_bytes(8, "big"))
    return bytes(padded)