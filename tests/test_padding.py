import pytest
from cryptography.hazmat.primitives import padding as lib_padding

from blockmodes.common.errors import PaddingError
from blockmodes.crypto.padding import pad, un_pad

from conftest import BLOCK_SIZE, EDGE_LENGTHS


@pytest.mark.parametrize("n", EDGE_LENGTHS)
def test_pad_round_trip(n):
    data = bytes(i % 256 for i in range(n))
    padded = pad(data)
    assert len(padded) % BLOCK_SIZE == 0
    assert len(padded) > len(data)
    assert un_pad(padded) == data


def test_unpad_small_example():
    init_data = bytes([1, 2, 4, 5])
    assert un_pad(pad(init_data)) == init_data


def test_pad_empty_is_one_full_block():
    assert pad(b"") == bytes([16]) * 16


def test_pad_aligned_adds_whole_block():
    data = b"A" * 16
    padded = pad(data)
    assert padded == data + bytes([16]) * 16


def test_pad_matches_pkcs7():
    for n in EDGE_LENGTHS:
        data = b"x" * n
        padder = lib_padding.PKCS7(128).padder()
        assert pad(data) == padder.update(data) + padder.finalize()


def test_pad_other_block_size():
    assert pad(b"abc", block_size=8) == b"abc" + bytes([5]) * 5
    assert un_pad(b"abc" + bytes([5]) * 5, block_size=8) == b"abc"


@pytest.mark.parametrize("bad", [0, 256, -1])
def test_bad_block_size(bad):
    with pytest.raises(ValueError):
        pad(b"abc", block_size=bad)


def test_unpad_empty():
    with pytest.raises(PaddingError):
        un_pad(b"")


def test_unpad_zero_length_byte():
    with pytest.raises(PaddingError):
        un_pad(b"A" * 15 + b"\x00")


def test_unpad_length_byte_too_big():
    with pytest.raises(PaddingError):
        un_pad(b"A" * 15 + bytes([17]))


def test_unpad_length_exceeds_buffer():
    with pytest.raises(PaddingError):
        un_pad(b"\x05\x05\x05")


def test_unpad_strict_checks_every_byte():
    data = b"A" * 13 + b"\x03\x09\x03"
    with pytest.raises(PaddingError):
        un_pad(data)
    # lenient mode trusts the last byte only
    assert un_pad(data, strict=False) == b"A" * 13


def test_padding_error_is_value_error():
    with pytest.raises(ValueError):
        un_pad(b"")
