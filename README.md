# primcrypto

Cryptographic primitives written out step by step, for study and experiment:

- `primcrypto.sha256`: SHA-256 with an inspectable chaining state
- `primcrypto.aes`: AES-128 block cipher with CBC and GCM modes
- `primcrypto.ecdh25519`: X25519 key agreement (curve arithmetic from the `cryptography` library)
- `primcrypto.classical`: Caesar, affine, Vigenère, one-time-pad and columnar ciphers
- `primcrypto.utils`: hex decoding, gcd, PKCS #7 and Merkle–Damgård padding, debug dumps

These implementations are meant for learning. Do not rely on them to protect real data.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Usage

### SHA-256

```python
from primcrypto.sha256 import SHA256State

state = SHA256State()
state.sha256("this is message.Please hash this value")
print(state.hexdigest())
print(state.state)  # the eight 32-bit chaining words
```

`sha256()` accepts `str` (encoded as UTF-8) or `bytes`, pads the message and
runs every 64-byte block through `process_block()`; it returns the state
itself. `rotr()` and `shr()` are the 32-bit rotate and shift helpers.

### AES-128

```python
from primcrypto.aes import AES, AuthenticationError
from primcrypto.utils import pkcs7_padding, pkcs7_unpadding

key = bytes(16)
iv = bytes(16)
cipher = AES(key)

ct = cipher.encrypt_cbc(b"attack at dawn", iv, pkcs7_padding)
pt = cipher.decrypt_cbc(ct, iv, pkcs7_unpadding)

nonce = bytes(12)
ct, tag = cipher.encrypt_gcm(b"attack at dawn", nonce, b"header", 16)
try:
    pt = cipher.decrypt_gcm(ct, nonce, b"header", tag)
except AuthenticationError:
    print("tag mismatch")
```

`AES` takes a 16-byte key only; other lengths raise `ValueError`.
`round_keys()` returns the 44-word key schedule, and `encrypt_block()`,
`decrypt_block()` and `encrypt_gctr()` expose the single-block and counter-mode
steps. The module-level `ghash()`, `mul_block()` and `inc32()` are the GCM
building blocks. GCM nonces of 12 bytes are used directly; other lengths are
hashed with GHASH.

### X25519 key agreement

```python
from primcrypto.ecdh25519 import generate_key

alice = generate_key()
bob = generate_key()
assert alice.compute_secret(bob.public()) == bob.compute_secret(alice.public())
```

Keys can be written out with `to_bytes()` and read back with
`private_from_bytes(raw, precompute)` and `public_from_bytes(raw)`.
A private key computes its public key once and caches it;
`public_computed()` tells whether that has happened.
Input that is not 32 bytes long raises `KeySizeError`.

### Classical ciphers

```python
from primcrypto.classical import affine, caesar, columnar, one_time_pad, vigenere

caesar("Hello, World", 3)
affine("hello", 5, 7)
vigenere("attackatdawn", "lemon")
one_time_pad("hello", "xmckl")
columnar("wearediscovered", "zebra")
```

Letters outside `A`–`Z` and `a`–`z` pass through unchanged. `affine()`
requires its additive key `b` to be coprime with 26, `columnar()` requires the
text length to be a multiple of the key length, and `one_time_pad()` requires
text and key of equal length; each raises `ValueError` otherwise.

## Scope

This is a library only: it has no command-line tool, no key storage and no
file encryption. AES supports 128-bit keys only.

## Tests

```
pytest
```