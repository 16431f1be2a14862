"""Diffie-Hellman key agreement over Curve25519 (X25519)."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric.x25519 import (
    X25519PrivateKey,
    X25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

KEY_SIZE = 32


class KeySizeError(ValueError):
    """Raised when key material is not exactly 32 bytes long."""

    def __init__(self, message: str = f"the data provided was not {KEY_SIZE} bytes long") -> None:
        super().__init__(message)


@dataclass(frozen=True)
class PublicKey:
    """A 32-byte X25519 public key."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != KEY_SIZE:
            raise KeySizeError()
        object.__setattr__(self, "raw", bytes(self.raw))

    def to_bytes(self) -> bytes:
        """The raw 32 bytes of the key."""
        return self.raw


class PrivateKey:
    """A 32-byte X25519 scalar with a lazily computed public key."""

    def __init__(self, raw: bytes) -> None:
        if len(raw) != KEY_SIZE:
            raise KeySizeError()
        self._raw = bytes(raw)
        self._public: PublicKey | None = None

    def public(self) -> PublicKey:
        """The matching public key, computed once and then cached."""
        if self._public is None:
            point = X25519PrivateKey.from_private_bytes(self._raw).public_key()
            self._public = PublicKey(point.public_bytes(Encoding.Raw, PublicFormat.Raw))
        return self._public

    def public_computed(self) -> bool:
        """Whether the public key has already been computed."""
        return self._public is not None

    def compute_secret(self, pub: PublicKey | None) -> bytes:
        """The shared secret with the holder of pub."""
        if pub is None:
            raise ValueError("public key cannot be None")
        own = X25519PrivateKey.from_private_bytes(self._raw)
        return own.exchange(X25519PublicKey.from_public_bytes(pub.to_bytes()))

    def to_bytes(self) -> bytes:
        """The raw 32 bytes of the scalar."""
        return self._raw

    def __repr__(self) -> str:
        return f"PrivateKey(public_computed={self.public_computed()})"


def generate_key() -> PrivateKey:
    """A fresh random private key with the low and high bits masked."""
    raw = bytearray(secrets.token_bytes(KEY_SIZE))
    raw[0] &= 248
    raw[31] &= 127
    raw[31] &= 64
    return PrivateKey(bytes(raw))


def private_from_bytes(raw: bytes, precompute: bool = False) -> PrivateKey:
    """Load a private key, optionally computing its public key at once."""
    key = PrivateKey(raw)
    if precompute:
        key.public()
    return key


def public_from_bytes(raw: bytes) -> PublicKey:
    """Load a public key from its raw 32 bytes."""
    return PublicKey(raw)