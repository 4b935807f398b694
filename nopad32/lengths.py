from nopad32.errors import InvalidLengthError


def get_base32_length(byte_count: int) -> int:
    """
    ceil(8 * byte_count / 5): number of symbols the encoder emits for byte_count bytes.
    """
    if byte_count < 0:
        raise ValueError("byte_count can't be negative")
    return (byte_count * 8 + 4) // 5


def get_byte_count(base32_length: int) -> int:
    """
    floor(5 * base32_length / 8), rejecting lengths that are not minimal:
    if one less symbol decodes to the same number of bytes, the encoder could
    never have produced base32_length.
    """
    if base32_length < 0:
        raise ValueError("base32_length can't be negative")

    bit_count = base32_length * 5
    byte_count = bit_count >> 3

    # floor division, so length 0 gives -1 here and passes
    byte_count_with_1_less_char = (bit_count - 5) >> 3
    if byte_count_with_1_less_char == byte_count:
        raise InvalidLengthError(base32_length, byte_count)

    return byte_count


def is_valid_length(base32_length: int) -> bool:
    if base32_length < 0:
        return False
    try:
        get_byte_count(base32_length)
    except InvalidLengthError:
        return False
    return True
