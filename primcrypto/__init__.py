"""Cryptographic primitives: SHA-256, AES-128 (CBC, GCM), X25519 and classical ciphers."""

__version__ = "0.1.0"
__all__ = ["aes", "classical", "ecdh25519", "sha256", "utils"]