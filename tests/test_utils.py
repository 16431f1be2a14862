import math

import pytest

from primcrypto.utils import (
    dump_bytes,
    dump_words,
    gcd,
    md_padding,
    must_decode_hex,
    pkcs7_padding,
    pkcs7_unpadding,
)


@pytest.mark.parametrize("data", [b"", b"\x00", b"\x00\xff\x10", bytes(range(40))])
def test_must_decode_hex_round_trip(data):
    assert must_decode_hex(data.hex()) == data


@pytest.mark.parametrize("text", ["abc", "zz", "0g"])
def test_must_decode_hex_rejects_malformed(text):
    with pytest.raises(ValueError):
        must_decode_hex(text)


@pytest.mark.parametrize("a,b", [(12, 18), (26, 3), (26, 13), (100, 75), (7, 7)])
def test_gcd_matches_math_gcd(a, b):
    assert gcd(a, b) == math.gcd(a, b)


def test_gcd_with_zero_returns_first():
    assert gcd(42, 0) == 42


def test_gcd_is_symmetric():
    assert gcd(26, 8) == gcd(8, 26)


def test_dump_words_format(capsys):
    dump_words("W", [1, 2, 3, 4, 5])
    out = capsys.readouterr().out
    assert out == "W\nword[00]: 00000001\n 00000002\n 00000003\n 00000004\nword[01]: 00000005\n"


def test_dump_bytes_format(capsys):
    dump_bytes("note", bytes(range(5)))
    out = capsys.readouterr().out
    assert out == "note\nblock[0]: 00010203 04\n"


def test_dump_bytes_none_prints_only_note(capsys):
    dump_bytes("Failed!", None)
    assert capsys.readouterr().out == "Failed!\n"


def test_pkcs7_padding_short_block():
    assert pkcs7_padding(b"abc", 4) == b"abc\x01"


@pytest.mark.parametrize("length", [0, 1, 15, 16, 17, 31, 65])
def test_pkcs7_padding_invariants(length):
    data = bytes(range(length))
    block = 16
    padded = pkcs7_padding(data, block)
    assert len(padded) % block == 0
    assert padded.startswith(data)
    count = padded[-1]
    assert 1 <= count <= block
    assert padded[-count:] == bytes([count]) * count


def test_pkcs7_full_block_gets_whole_block():
    data = bytes(16)
    block = 16
    padded = pkcs7_padding(data, block)
    assert len(padded) == len(data) + block
    assert padded[-1] == block


@pytest.mark.parametrize("length", [0, 5, 16, 33])
def test_pkcs7_round_trip(length):
    data = bytes(range(length))
    assert pkcs7_unpadding(pkcs7_padding(data, 16)) == data


def test_pkcs7_padding_rejects_zero_block():
    with pytest.raises(ValueError):
        pkcs7_padding(b"abc", 0)


def test_pkcs7_unpadding_rejects_empty():
    with pytest.raises(ValueError):
        pkcs7_unpadding(b"")


def test_pkcs7_unpadding_rejects_oversized_count():
    with pytest.raises(ValueError):
        pkcs7_unpadding(b"\x01\x09")


@pytest.mark.parametrize("length", [0, 1, 55, 56, 63, 64, 65, 119, 120, 200])
def test_md_padding_invariants(length):
    data = bytes(range(256))[:length]
    padded = md_padding(data)
    assert len(padded) % 64 == 0
    assert padded.startswith(data)
    assert padded[len(data)] == 0x80
    assert set(padded[len(data) + 1 : -8]) <= {0}
    assert int.from_bytes(padded[-8:], "big") == len(data) * 8
    assert len(padded) - len(data) <= 64 + 8


def test_md_padding_does_not_modify_input():
    data = bytearray(b"keep")
    md_padding(data)
    assert data == bytearray(b"keep")