"""SHA-256 built from its block compression function."""

from __future__ import annotations

import struct

from .utils import md_padding

_MASK = 0xFFFFFFFF
_BLOCK_SIZE = 64

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_INITIAL_STATE = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def rotr(u: int, i: int) -> int:
    """Rotate a 32-bit word right by i bits."""
    u &= _MASK
    return ((u >> i) | (u << (32 - i))) & _MASK


def shr(u: int, i: int) -> int:
    """Shift a 32-bit word right by i bits."""
    return (u & _MASK) >> i


def _big_sigma0(a: int) -> int:
    return rotr(a, 2) ^ rotr(a, 13) ^ rotr(a, 22)


def _big_sigma1(e: int) -> int:
    return rotr(e, 6) ^ rotr(e, 11) ^ rotr(e, 25)


def _small_sigma0(u: int) -> int:
    return rotr(u, 7) ^ rotr(u, 18) ^ shr(u, 3)


def _small_sigma1(u: int) -> int:
    return rotr(u, 17) ^ rotr(u, 19) ^ shr(u, 10)


def _choose(e: int, f: int, g: int) -> int:
    return (e & f) ^ (~e & _MASK & g)


def _majority(a: int, b: int, c: int) -> int:
    return (a & b) ^ (a & c) ^ (b & c)


def _compress(block: bytes, state: list[int]) -> list[int]:
    w = list(struct.unpack(">16I", block))
    for i in range(16, 64):
        w.append((w[i - 16] + _small_sigma0(w[i - 15]) + w[i - 7] + _small_sigma1(w[i - 2])) & _MASK)

    a, b, c, d, e, f, g, h = state
    for k_i, w_i in zip(_K, w):
        t1 = (h + w_i + k_i + _choose(e, f, g) + _big_sigma1(e)) & _MASK
        t2 = (_majority(a, b, c) + _big_sigma0(a)) & _MASK
        h, g, f, e = g, f, e, (t1 + d) & _MASK
        d, c, b, a = c, b, a, (t1 + t2) & _MASK

    return [(old + new) & _MASK for old, new in zip(state, (a, b, c, d, e, f, g, h))]


class SHA256State:
    """Running SHA-256 chaining state of eight 32-bit words."""

    def __init__(self) -> None:
        self.state: list[int] = list(_INITIAL_STATE)

    def sha256(self, msg: str | bytes) -> SHA256State:
        """Pad the message and feed every block through the compression function."""
        data = msg.encode("utf-8") if isinstance(msg, str) else bytes(msg)
        padded = md_padding(data)
        for offset in range(0, len(padded), _BLOCK_SIZE):
            self.process_block(padded[offset : offset + _BLOCK_SIZE])
        return self

    def process_block(self, block: bytes) -> None:
        """Compress one 64-byte block into the state."""
        if len(block) != _BLOCK_SIZE:
            raise ValueError(f"block must be {_BLOCK_SIZE} bytes, got {len(block)}")
        self.state[:] = _compress(bytes(block), self.state)

    def hexdigest(self) -> str:
        """The state as a big-endian hex string."""
        return struct.pack(f">{len(self.state)}I", *self.state).hex()

    def __repr__(self) -> str:
        return f"SHA256State({self.hexdigest()})"