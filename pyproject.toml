[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "primcrypto"
version = "0.1.0"
description = "Cryptographic primitives from first principles: SHA-256, AES-128 (CBC and GCM), X25519 key agreement and classical ciphers"
requires-python = ">=3.10"
keywords = ["cryptography", "sha256", "aes", "gcm", "cbc", "x25519", "ecdh", "caesar", "vigenere", "pkcs7"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
]
dependencies = [
    "cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["primcrypto"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
