from nopad32.errors import InvalidCharacterError, ensure_not_none
from nopad32.lengths import get_byte_count
from nopad32.numba_base32 import b32encode_nopad, b32decode_nopad, first_invalid_index

bytes_types = (bytes, bytearray, memoryview)  # Types acceptable as binary data


def encode(data: bytes) -> str:
    """
    Encode to base32 without padding, as defined in RFC 4648.
    """
    ensure_not_none(data, "data")
    if not isinstance(data, bytes_types):
        raise TypeError("expected bytes, not %s" % data.__class__.__name__)

    return b32encode_nopad(bytes(data)).decode("ascii")


def decode(text: str) -> bytes:
    """
    Decode from base32 without padding, as defined in RFC 4648.
    The padding character '=' is rejected like any other non-base32 character.

    text may be a str or ascii bytes. InvalidLengthError is raised if the length
    is not the shortest one for its byte count, InvalidCharacterError on the
    first character outside the alphabet.
    """
    ensure_not_none(text, "text")
    if isinstance(text, str):
        # "replace" keeps one byte per character so positions still index text
        raw = text.encode("ascii", "replace")
    elif isinstance(text, bytes_types):
        raw = bytes(text)
        text = raw.decode("latin-1")
    else:
        raise TypeError("expected str or bytes, not %s" % text.__class__.__name__)

    byte_count = get_byte_count(len(raw))

    position = first_invalid_index(raw)
    if position >= 0:
        raise InvalidCharacterError(text[position], position)

    return b32decode_nopad(raw, byte_count)
