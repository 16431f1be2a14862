"""Classical ciphers: Caesar, affine, Vigenere, one-time pad, columnar."""

from __future__ import annotations

from itertools import cycle

from .utils import gcd

_ALPHABET_SIZE = 26
_LOWER_A = ord("a")


def _letter_base(ch: str) -> int | None:
    if "A" <= ch <= "Z":
        return ord("A")
    if "a" <= ch <= "z":
        return _LOWER_A
    return None


def _shift(ch: str, shift: int) -> str:
    base = _letter_base(ch)
    if base is None:
        return ch
    return chr((ord(ch) - base + shift) % _ALPHABET_SIZE + base)


def caesar(text: str, key: int) -> str:
    """Shift every ASCII letter by key places, keeping case."""
    if not text:
        raise ValueError("plain text should be non-empty")
    return "".join(_shift(ch, key) for ch in text)


def affine(text: str, a: int, b: int) -> str:
    """Map each ASCII letter x to a*x + b modulo 26; b must be coprime with 26."""
    if gcd(_ALPHABET_SIZE, b) != 1:
        raise ValueError("invalid multiplication key, key must be coprime with 26")

    def encode(ch: str) -> str:
        base = _letter_base(ch)
        if base is None:
            return ch
        return chr((a * (ord(ch) - base) + b) % _ALPHABET_SIZE + base)

    return "".join(encode(ch) for ch in text)


def vigenere(text: str, key: str) -> str:
    """Shift each letter by the key letter at the same position, repeating the key."""
    if not text:
        return ""
    if not key:
        raise ValueError("key must be non-empty")
    shifts = [(ord(ch) - _LOWER_A) & 0xFF for ch in key.lower()]
    return "".join(_shift(ch, shift) for ch, shift in zip(text, cycle(shifts)))


def one_time_pad(text: str, key: str) -> str:
    """XOR letter offsets of text and key, reduced to a lowercase letter."""
    if len(text) != len(key):
        raise ValueError("key length must be same as message length")
    return "".join(
        chr((((ord(k) - _LOWER_A) & 0xFF) ^ ((ord(t) - _LOWER_A) & 0xFF)) % _ALPHABET_SIZE + _LOWER_A)
        for t, k in zip(text, key)
    )


def columnar(text: str, key: str) -> str:
    """Write text row by row under the key and read columns in key-letter order."""
    if not text or not key:
        raise ValueError("plain text and key must be non-empty")
    cols = len(key)
    if len(text) % cols != 0:
        raise ValueError("plain text length must be divisible by key length")
    order = sorted(range(cols), key=lambda column: key[column])
    return "".join(text[column::cols] for column in order)