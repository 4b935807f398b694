from numba import njit

from nopad32.alphabet import BASE32_CHARS_BYTES, BASE32_LOOKUP, INVALID_VALUE
from nopad32.lengths import get_base32_length

RIGHT_5_BITS_MASK = 0x1F


@njit(cache=True)
def encode_into(data, length, alphabet, out):
    i = 0
    j = 0

    # 5 bytes <-> 8 symbols, stop as soon as the input runs out in any phase
    while i < length:
        b0 = data[i]
        i += 1
        out[j] = alphabet[b0 >> 3]
        j += 1

        b0 = (b0 << 2) & RIGHT_5_BITS_MASK
        if i == length:
            out[j] = alphabet[b0]
            break
        b1 = data[i]
        i += 1
        out[j] = alphabet[b0 | (b1 >> 6)]
        out[j + 1] = alphabet[(b1 >> 1) & RIGHT_5_BITS_MASK]
        j += 2

        b1 = (b1 << 4) & RIGHT_5_BITS_MASK
        if i == length:
            out[j] = alphabet[b1]
            break
        b0 = data[i]
        i += 1
        out[j] = alphabet[b1 | (b0 >> 4)]
        j += 1

        b0 = (b0 << 1) & RIGHT_5_BITS_MASK
        if i == length:
            out[j] = alphabet[b0]
            break
        b1 = data[i]
        i += 1
        out[j] = alphabet[b0 | (b1 >> 7)]
        out[j + 1] = alphabet[(b1 >> 2) & RIGHT_5_BITS_MASK]
        j += 2

        b1 = (b1 << 3) & RIGHT_5_BITS_MASK
        if i == length:
            out[j] = alphabet[b1]
            break
        b0 = data[i]
        i += 1
        out[j] = alphabet[b1 | (b0 >> 5)]
        out[j + 1] = alphabet[b0 & RIGHT_5_BITS_MASK]
        j += 2


@njit(cache=True)
def find_invalid_char(data, length, lookup):
    for k in range(length):
        if lookup[data[k]] == INVALID_VALUE:
            return k
    return -1


@njit(cache=True)
def decode_into(data, lookup, out, byte_count):
    k = 0
    n = 0

    # trailing bits of the last symbol are dropped once byte_count is reached
    while n < byte_count:
        d0 = lookup[data[k]]
        d1 = lookup[data[k + 1]]
        k += 2
        out[n] = ((d0 << 3) | (d1 >> 2)) & 0xFF
        n += 1
        if n == byte_count:
            break

        d2 = lookup[data[k]]
        d0 = lookup[data[k + 1]]
        k += 2
        out[n] = ((d1 << 6) | (d2 << 1) | (d0 >> 4)) & 0xFF
        n += 1
        if n == byte_count:
            break

        d1 = lookup[data[k]]
        k += 1
        out[n] = ((d0 << 4) | (d1 >> 1)) & 0xFF
        n += 1
        if n == byte_count:
            break

        d2 = lookup[data[k]]
        d0 = lookup[data[k + 1]]
        k += 2
        out[n] = ((d1 << 7) | (d2 << 2) | (d0 >> 3)) & 0xFF
        n += 1
        if n == byte_count:
            break

        d1 = lookup[data[k]]
        k += 1
        out[n] = ((d0 << 5) | d1) & 0xFF
        n += 1


def b32encode_nopad(data: bytes) -> bytes:
    out = bytearray(get_base32_length(len(data)))
    if data:
        encode_into(data, len(data), BASE32_CHARS_BYTES, out)
    return bytes(out)


def first_invalid_index(data: bytes) -> int:
    if not data:
        return -1
    return int(find_invalid_char(data, len(data), BASE32_LOOKUP))


def b32decode_nopad(data: bytes, byte_count: int) -> bytes:
    out = bytearray(byte_count)
    if byte_count:
        decode_into(data, BASE32_LOOKUP, out, byte_count)
    return bytes(out)
