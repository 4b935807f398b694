BASE32_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"

BASE32_CHARS_BYTES = BASE32_CHARS.encode("ascii")

INVALID_VALUE = 0xFF

# ascii code -> 5-bit value, INVALID_VALUE for anything outside the alphabet
_lookup = bytearray([INVALID_VALUE]) * 256
for _i, _ch in enumerate(BASE32_CHARS_BYTES):
    _lookup[_ch] = _i
BASE32_LOOKUP = bytes(_lookup)
del _lookup, _i, _ch
