import base64

import pytest

from kdutils.byte_array import ByteArray

DATA = b"hello world"


def test_construct_from_bytes_and_str():
    assert ByteArray(DATA).to_bytes() == DATA
    assert ByteArray("hello world") == ByteArray(DATA)
    assert ByteArray(None).is_empty()
    assert ByteArray().is_empty()


def test_filled():
    b = ByteArray.filled(5, 7)
    assert len(b) == 5
    assert b.to_bytes() == bytes([7] * 5)
    assert ByteArray.filled(3).to_bytes() == bytes(3)


def test_mid():
    b = ByteArray(DATA)
    assert b.mid(6) == ByteArray(DATA[6:])
    assert b.mid(0, 5) == ByteArray(DATA[:5])
    assert b.mid(len(DATA)).is_empty()
    assert b.mid(8, 100) == ByteArray(DATA[8:])


def test_left():
    b = ByteArray(DATA)
    assert b.left(5) == ByteArray(DATA[:5])
    assert b.left(1000) == b


def test_remove():
    b = ByteArray(DATA)
    result = b.remove(5, 6)
    assert result is b
    assert b == ByteArray(DATA[:5])
    b.remove(100, 2)
    assert b == ByteArray(DATA[:5])
    b.remove(2, 1000)
    assert b == ByteArray(DATA[:2])


def test_clear_and_resize():
    b = ByteArray(DATA)
    b.resize(3)
    assert b == ByteArray(DATA[:3])
    b.resize(5)
    assert b.to_bytes() == DATA[:3] + bytes(2)
    b.clear()
    assert b.is_empty()
    assert len(b) == 0


def test_index_of():
    b = ByteArray(DATA)
    assert b.index_of(ord("o")) == DATA.index(b"o")
    assert b.index_of(ord("z")) == -1


def test_starts_and_ends_with():
    b = ByteArray(DATA)
    assert b.starts_with(ByteArray(DATA[:5]))
    assert not b.starts_with(ByteArray(DATA[1:6]))
    assert b.ends_with(ByteArray(DATA[-5:]))
    assert not b.ends_with(ByteArray(DATA[:5]))
    assert not ByteArray(DATA[:2]).starts_with(b)
    assert b.starts_with(ByteArray())


def test_concatenation():
    a = ByteArray(DATA[:5])
    b = ByteArray(DATA[5:])
    assert a + b == ByteArray(DATA)
    assert a == ByteArray(DATA[:5])
    a += b
    assert a == ByteArray(DATA)


def test_to_base64_pinned_value():
    assert ByteArray(b"Man").to_base64() == ByteArray(b"TWFu")


@pytest.mark.parametrize("length", range(0, 10))
def test_to_base64_matches_standard_encoding(length):
    raw = bytes(range(200, 200 + length))
    assert ByteArray(raw).to_base64().to_bytes() == base64.b64encode(raw)


@pytest.mark.parametrize("length", range(0, 10))
def test_base64_round_trip(length):
    raw = bytes((i * 37) % 256 for i in range(length))
    b = ByteArray(raw)
    assert ByteArray.from_base64(b.to_base64()) == b


def test_from_base64_accepts_url_safe_alphabet():
    raw = bytes([0xFB, 0xFF, 0xBF])
    encoded = base64.urlsafe_b64encode(raw)
    assert ByteArray.from_base64(ByteArray(encoded)).to_bytes() == raw


def test_from_base64_stops_at_invalid_character():
    raw = DATA[:6]
    encoded = base64.b64encode(raw) + b"!" + base64.b64encode(DATA)
    assert ByteArray.from_base64(encoded).to_bytes() == raw


def test_from_base64_without_padding():
    raw = DATA[:4]
    encoded = base64.b64encode(raw).rstrip(b"=")
    assert ByteArray.from_base64(encoded).to_bytes() == raw