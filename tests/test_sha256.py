import hashlib

import pytest

from primcrypto.sha256 import SHA256State, rotr, shr


def test_source_vector():
    msg = "this is message.Please hash this value"
    expected = "da64e014912667baead7f1d5dc4262b28bbf547e00cb3b5a9171f43e8bf8f006"
    h = SHA256State()
    h.sha256(msg)
    assert h.hexdigest() == expected


def test_single_character_message():
    assert SHA256State().sha256("2").hexdigest() == hashlib.sha256(b"2").hexdigest()


@pytest.mark.parametrize(
    "msg",
    [b"", b"abc", b"a" * 55, b"a" * 56, b"a" * 64, b"a" * 119, bytes(range(256)) * 3],
)
def test_matches_hashlib(msg):
    assert SHA256State().sha256(msg).hexdigest() == hashlib.sha256(msg).hexdigest()


def test_str_input_is_utf8_encoded():
    text = "héllo wörld"
    assert SHA256State().sha256(text).hexdigest() == hashlib.sha256(text.encode("utf-8")).hexdigest()


def test_sha256_returns_self():
    s = SHA256State()
    assert s.sha256("x") is s


def test_initial_state_words():
    assert SHA256State().state[0] == 0x6A09E667
    assert SHA256State().state[7] == 0x5BE0CD19


def test_state_list_is_updated_in_place():
    s = SHA256State()
    words = s.state
    s.sha256("abc")
    assert words is s.state
    assert s.hexdigest() == hashlib.sha256(b"abc").hexdigest()


def test_process_block_rejects_wrong_size():
    with pytest.raises(ValueError):
        SHA256State().process_block(bytes(63))


def test_hexdigest_is_64_hex_chars():
    digest = SHA256State().sha256("anything").hexdigest()
    assert len(digest) == 64
    assert int(digest, 16) >= 0


def test_rotr_wraps_low_bit():
    assert rotr(1, 1) == 0x80000000


def test_rotr_full_rotation_is_identity():
    value = 0x12345678
    assert rotr(rotr(value, 13), 19) == value


def test_shr_drops_bits():
    assert shr(0xFFFFFFFF, 28) == 0xF