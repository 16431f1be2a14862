"""AES-128 block cipher with CBC and GCM modes of operation."""

from __future__ import annotations

import hmac
import struct
from collections.abc import Callable

BLOCK_SIZE = 16
_NK = 4
_NB = 4
_NR = 10
_KEY_SIZE = 4 * _NK
_MASK32 = 0xFFFFFFFF
_GCM_R = 0xE1 << 120

_SBOX = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)


def _invert_box(box: bytes) -> bytes:
    inverse = bytearray(256)
    for index, value in enumerate(box):
        inverse[value] = index
    return bytes(inverse)


_INV_SBOX = _invert_box(_SBOX)

_RCON = (
    0x01000000, 0x02000000, 0x04000000, 0x08000000, 0x10000000,
    0x20000000, 0x40000000, 0x80000000, 0x1B000000, 0x36000000,
)

_MIX = (2, 3, 1, 1)
_INV_MIX = (14, 11, 13, 9)


def _xtime(value: int) -> int:
    value <<= 1
    if value & 0x100:
        value ^= 0x11B
    return value


def _gf_mul(x: int, y: int) -> int:
    result = 0
    while y:
        if y & 1:
            result ^= x
        x = _xtime(x)
        y >>= 1
    return result


_MUL_TABLES = {c: bytes(_gf_mul(v, c) for v in range(256)) for c in set(_MIX + _INV_MIX)}


class AuthenticationError(ValueError):
    """Raised when a GCM authentication tag does not match."""


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _zero_fill(length: int) -> bytes:
    """Zeros to reach a 16-byte boundary plus a further 64 bits."""
    return bytes(-length % BLOCK_SIZE + 8)


def _bit_length64(data: bytes) -> bytes:
    return (8 * len(data)).to_bytes(8, "big")


def _sub_word(word: int) -> int:
    return int.from_bytes(word.to_bytes(4, "big").translate(_SBOX), "big")


def _rot_word(word: int) -> int:
    return ((word << 8) | (word >> 24)) & _MASK32


def _shift_rows(state: bytes, direction: int) -> bytearray:
    return bytearray(
        state[4 * ((col + direction * row) % 4) + row]
        for col in range(4)
        for row in range(4)
    )


def _mix_columns(state: bytes, coefficients: tuple[int, int, int, int]) -> bytearray:
    tables = [_MUL_TABLES[c] for c in coefficients]
    out = bytearray(BLOCK_SIZE)
    for col in range(0, BLOCK_SIZE, 4):
        column = state[col : col + 4]
        for i in range(4):
            value = 0
            for j, byte in enumerate(column):
                value ^= tables[(j - i) % 4][byte]
            out[col + i] = value
    return out


def inc32(block: bytes) -> bytes:
    """Increment the low 32 bits of a block modulo 2**32, big-endian."""
    if len(block) < 4:
        raise ValueError("block must be at least 4 bytes long")
    counter = (int.from_bytes(block[-4:], "big") + 1) & _MASK32
    return bytes(block[:-4]) + counter.to_bytes(4, "big")


def mul_block(x: bytes, y: bytes) -> bytes:
    """Multiply two 128-bit blocks in GF(2**128) as GCM defines it."""
    if len(x) != BLOCK_SIZE or len(y) != BLOCK_SIZE:
        raise ValueError(f"blocks must be {BLOCK_SIZE} bytes long")
    xv = int.from_bytes(x, "big")
    v = int.from_bytes(y, "big")
    z = 0
    for i in range(128):
        if (xv >> (127 - i)) & 1:
            z ^= v
        v = (v >> 1) ^ _GCM_R if v & 1 else v >> 1
    return z.to_bytes(BLOCK_SIZE, "big")


def ghash(data: bytes, h: bytes) -> bytes:
    """GHASH of data, a whole number of blocks, under hash subkey h."""
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"data length must be a multiple of {BLOCK_SIZE}")
    y = bytes(BLOCK_SIZE)
    for offset in range(0, len(data), BLOCK_SIZE):
        y = mul_block(_xor(y, data[offset : offset + BLOCK_SIZE]), h)
    return y


class AES:
    """AES-128 keyed with a 16-byte key."""

    def __init__(self, key: bytes) -> None:
        if len(key) != _KEY_SIZE:
            raise ValueError(f"key must be {_KEY_SIZE} bytes long, got {len(key)}")
        self._key = bytes(key)
        self._words = self._expand_key()
        self._round_key_bytes = [
            struct.pack(">4I", *self._words[4 * r : 4 * r + 4]) for r in range(_NR + 1)
        ]

    def _expand_key(self) -> tuple[int, ...]:
        words = list(struct.unpack(">4I", self._key))
        for r in range(_NK, _NB * (_NR + 1)):
            temp = words[r - 1]
            if r % _NK == 0:
                temp = _sub_word(_rot_word(temp)) ^ _RCON[r // _NK - 1]
            words.append(words[r - _NK] ^ temp)
        return tuple(words)

    def round_keys(self) -> list[int]:
        """The expanded key schedule as 44 32-bit words."""
        return list(self._words)

    @staticmethod
    def _check_block(block: bytes) -> None:
        if len(block) != BLOCK_SIZE:
            raise ValueError(f"block must be {BLOCK_SIZE} bytes long, got {len(block)}")

    def encrypt_block(self, block: bytes) -> bytes:
        """Encrypt one 16-byte block."""
        self._check_block(block)
        keys = self._round_key_bytes
        state = bytearray(_xor(block, keys[0]))
        for rnd in range(1, _NR):
            state = _shift_rows(state.translate(_SBOX), 1)
            state = _mix_columns(state, _MIX)
            state = bytearray(_xor(state, keys[rnd]))
        state = _shift_rows(state.translate(_SBOX), 1)
        return _xor(state, keys[_NR])

    def decrypt_block(self, block: bytes) -> bytes:
        """Decrypt one 16-byte block."""
        self._check_block(block)
        keys = self._round_key_bytes
        state = bytearray(_xor(block, keys[_NR]))
        state = _shift_rows(state, -1).translate(_INV_SBOX)
        for rnd in range(_NR - 1, 0, -1):
            state = _mix_columns(_xor(state, keys[rnd]), _INV_MIX)
            state = _shift_rows(state, -1).translate(_INV_SBOX)
        return _xor(state, keys[0])

    def encrypt_cbc(
        self, data: bytes, iv: bytes, pad: Callable[[bytes, int], bytes]
    ) -> bytes:
        """Pad data and encrypt it in CBC mode."""
        self._check_block(iv)
        padded = pad(bytes(data), BLOCK_SIZE)
        if len(padded) % BLOCK_SIZE:
            raise ValueError("padding did not produce whole blocks")
        previous = bytes(iv)
        out = bytearray()
        for offset in range(0, len(padded), BLOCK_SIZE):
            previous = self.encrypt_block(_xor(padded[offset : offset + BLOCK_SIZE], previous))
            out += previous
        return bytes(out)

    def decrypt_cbc(
        self, data: bytes, iv: bytes, unpad: Callable[[bytes], bytes]
    ) -> bytes:
        """Decrypt CBC ciphertext and strip its padding."""
        self._check_block(iv)
        if len(data) % BLOCK_SIZE:
            raise ValueError(f"ciphertext length must be a multiple of {BLOCK_SIZE}")
        previous = bytes(iv)
        out = bytearray()
        for offset in range(0, len(data), BLOCK_SIZE):
            block = bytes(data[offset : offset + BLOCK_SIZE])
            out += _xor(self.decrypt_block(block), previous)
            previous = block
        return unpad(bytes(out))

    def encrypt_gctr(self, data: bytes, icb: bytes) -> bytes:
        """XOR data with the keystream of counter blocks starting at icb."""
        if not data:
            return bytes(data)
        self._check_block(icb)
        counter = bytes(icb)
        stream = bytearray()
        while len(stream) < len(data):
            stream += self.encrypt_block(counter)
            counter = inc32(counter)
        return _xor(data, stream)

    def _hash_subkey(self) -> bytes:
        return self.encrypt_block(bytes(BLOCK_SIZE))

    @staticmethod
    def _pre_counter(iv: bytes, h: bytes) -> bytes:
        if len(iv) == 12:
            return bytes(iv) + b"\x00\x00\x00\x01"
        return ghash(bytes(iv) + _zero_fill(len(iv)) + _bit_length64(iv), h)

    @staticmethod
    def _auth_input(aad: bytes, ciphertext: bytes) -> bytes:
        return (
            bytes(aad)
            + _zero_fill(len(aad))
            + bytes(ciphertext)
            + _zero_fill(len(ciphertext))
            + _bit_length64(aad)
            + _bit_length64(ciphertext)
        )

    def encrypt_gcm(
        self, data: bytes, iv: bytes, aad: bytes, tag_len: int
    ) -> tuple[bytes, bytes]:
        """Encrypt in GCM mode, returning the ciphertext and a tag of tag_len bytes."""
        if not 0 <= tag_len <= BLOCK_SIZE:
            raise ValueError(f"tag length must be between 0 and {BLOCK_SIZE}")
        h = self._hash_subkey()
        j0 = self._pre_counter(iv, h)
        ciphertext = self.encrypt_gctr(data, inc32(j0))
        s = ghash(self._auth_input(aad, ciphertext), h)
        tag = self.encrypt_gctr(s, j0)
        return ciphertext, tag[:tag_len]

    def decrypt_gcm(self, data: bytes, iv: bytes, aad: bytes, tag: bytes) -> bytes:
        """Decrypt GCM ciphertext, raising AuthenticationError if the tag is wrong."""
        if not 0 < len(tag) <= BLOCK_SIZE:
            raise ValueError(f"tag length must be between 1 and {BLOCK_SIZE}")
        h = self._hash_subkey()
        j0 = self._pre_counter(iv, h)
        plaintext = self.encrypt_gctr(data, inc32(j0))
        s = ghash(self._auth_input(aad, data), h)
        expected = self.encrypt_gctr(s, j0)[: len(tag)]
        if not hmac.compare_digest(expected, bytes(tag)):
            raise AuthenticationError("GCM authentication tag mismatch")
        return plaintext

    def __repr__(self) -> str:
        return f"AES(bits={8 * _KEY_SIZE})"