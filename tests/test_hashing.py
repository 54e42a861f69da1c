import pytest

from drillkit.hashing import djb2, key_index


def test_empty_key_hashes_to_seed():
    assert djb2("") == 5381
    assert djb2(b"") == 5381


def test_str_and_bytes_agree():
    assert djb2("holberton") == djb2(b"holberton")


def test_stops_at_nul():
    assert djb2("ab\0cd") == djb2("ab")


def test_hash_fits_in_64_bits():
    assert 0 <= djb2("x" * 500) < 2**64


def test_different_keys_usually_differ():
    assert djb2("ab") != djb2("ba")


@pytest.mark.parametrize("size", [1, 2, 7, 1024])
def test_key_index_in_range_and_consistent(size):
    for key in ["cisfun", "betty", "python", ""]:
        index = key_index(key, size)
        assert 0 <= index < size
        assert index == djb2(key) % size


def test_key_index_size_one_is_zero():
    assert key_index("anything", 1) == 0


@pytest.mark.parametrize("size", [0, -3])
def test_key_index_rejects_bad_size(size):
    with pytest.raises(ValueError):
        key_index("key", size)