import pytest

from nopad32.errors import InvalidLengthError
from nopad32.lengths import get_base32_length, get_byte_count, is_valid_length


@pytest.mark.parametrize("byte_count, expected", [(0, 0), (1, 2), (2, 4), (3, 5), (4, 7), (5, 8), (6, 10)])
def test_get_base32_length(byte_count, expected):
    assert get_base32_length(byte_count) == expected


@pytest.mark.parametrize("length, expected", [(0, 0), (2, 1), (4, 2), (5, 3), (7, 4), (8, 5), (10, 6), (16, 10)])
def test_get_byte_count(length, expected):
    assert get_byte_count(length) == expected


@pytest.mark.parametrize("length", [1, 3, 6, 9, 11, 14, 17])
def test_get_byte_count_non_minimal(length):
    with pytest.raises(InvalidLengthError, match="Invalid base32 length: %d" % length):
        get_byte_count(length)


def test_negative_lengths():
    with pytest.raises(ValueError):
        get_byte_count(-1)
    with pytest.raises(ValueError):
        get_base32_length(-1)
    assert not is_valid_length(-1)


def test_encoded_lengths_are_exactly_the_valid_ones():
    encoded_lengths = {get_base32_length(n) for n in range(200)}
    for length in range(get_base32_length(199) + 1):
        assert is_valid_length(length) == (length in encoded_lengths)


def test_byte_count_inverts_base32_length():
    for n in range(200):
        assert get_byte_count(get_base32_length(n)) == n
