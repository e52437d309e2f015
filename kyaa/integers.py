"""Strict integer literal parsing for integer-valued flags."""

import string

from kyaa.errors import InvalidIntegerError

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DIGITS = {
    8: frozenset(string.octdigits),
    10: frozenset(string.digits),
    16: frozenset(string.hexdigits),
}


def split_base(unsigned: str) -> tuple[int, str]:
    """Return the base implied by a literal's prefix and the digits after it.

    ``0x``/``0X`` selects hexadecimal, a leading ``0`` followed by more
    characters selects octal, anything else is decimal.
    """
    if unsigned[:2] in ('0x', '0X'):
        return 16, unsigned[2:]
    if len(unsigned) > 1 and unsigned.startswith('0'):
        return 8, unsigned[1:]
    return 10, unsigned


def parse_integer(token: str) -> int:
    """Parse a whole token as a signed 32-bit integer.

    Accepts an optional leading ``-`` and C-style base prefixes. The entire
    token must be consumed: surrounding whitespace, a leading ``+``, digit
    separators and trailing garbage are all rejected, as is any value outside
    ``[INT32_MIN, INT32_MAX]``.

    Raises:
        InvalidIntegerError: The token is not a valid literal.
    """
    negative = token.startswith('-')
    unsigned = token[1:] if negative else token
    if not unsigned:
        raise InvalidIntegerError(token)

    base, digits = split_base(unsigned)
    allowed = _DIGITS[base]
    if not digits or any(char not in allowed for char in digits):
        raise InvalidIntegerError(token)

    value = int(digits, base)
    if negative:
        value = -value
    if not INT32_MIN <= value <= INT32_MAX:
        raise InvalidIntegerError(token)
    return value
