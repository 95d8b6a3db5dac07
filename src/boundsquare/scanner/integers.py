# boundsquare:header:start
#
#   project      : BoundSquare
#   file         : integers.py
#   file_relpath : src/boundsquare/scanner/integers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# boundsquare:header:end

"""32-bit integer helpers.

Tokens are parsed under a dual-format rule:

* ``[+-]?<digits>``: signed decimal, must fit ``[-2**31, 2**31 - 1]``;
* ``0x`` / ``0X`` followed by ``[+]?<hex digits>``: unsigned hexadecimal, must
  fit ``[0, 2**32 - 1]`` and is reinterpreted as a signed 32-bit value
  (``0xFFFFFFFF`` is ``-1``).

A digit is any Unicode decimal digit (``"٣"`` counts as 3); hexadecimal
letters are ``a-f`` in ASCII or fullwidth form, in either case. Underscores,
inner whitespace and other separators that `int` tolerates are rejected.

Arithmetic helpers wrap results to signed 32 bits and divide truncating toward
zero, so computations match fixed-width integer semantics exactly.
"""

from __future__ import annotations

import unicodedata
from typing import Final

from boundsquare.scanner.errors import TokenFormatError

INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1
UINT32_MAX: Final[int] = 2**32 - 1

HEX_PREFIX: Final[str] = "0x"

_FULLWIDTH_UPPER_A: Final[int] = 0xFF21
_FULLWIDTH_LOWER_A: Final[int] = 0xFF41
_LETTER_COUNT: Final[int] = 26


def wrap_int32(value: int) -> int:
    """Reduce ``value`` to the signed 32-bit range (two's complement)."""
    return ((value - INT32_MIN) & UINT32_MAX) + INT32_MIN


def trunc_div(a: int, b: int) -> int:
    """Divide ``a`` by ``b`` rounding toward zero.

    Python's ``//`` floors; ``trunc_div(-3, 2)`` is ``-1`` where ``-3 // 2`` is ``-2``.

    Raises:
        ZeroDivisionError: If ``b`` is zero.
    """
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def ceil_div(a: int, b: int) -> int:
    """Return ``(a + b - 1) / b`` with 32-bit wrap and truncating division.

    This is ceiling division for non-negative ``a`` and positive ``b``; other
    inputs keep the raw formula's result.
    """
    return wrap_int32(trunc_div(wrap_int32(a + b - 1), b))


def digit_value(ch: str, radix: int) -> int | None:
    """Return the value of ``ch`` as a digit in ``radix``, or None.

    Letters count from 10 (``a`` / ``A``) up to 35, so any radix up to 36 works.
    """
    if ch.isdecimal():
        value = unicodedata.decimal(ch)
    elif ch.isascii() and ch.isalpha():
        value = ord(ch.lower()) - ord("a") + 10
    elif 0 <= ord(ch) - _FULLWIDTH_UPPER_A < _LETTER_COUNT:
        value = ord(ch) - _FULLWIDTH_UPPER_A + 10
    elif 0 <= ord(ch) - _FULLWIDTH_LOWER_A < _LETTER_COUNT:
        value = ord(ch) - _FULLWIDTH_LOWER_A + 10
    else:
        return None
    return value if value < radix else None


def _parse_digits(digits: str, radix: int) -> int | None:
    if not digits:
        return None
    value = 0
    for ch in digits:
        d = digit_value(ch, radix)
        if d is None:
            return None
        value = value * radix + d
    return value


def parse_int32(token: str) -> int:
    """Parse a signed decimal 32-bit integer.

    Raises:
        TokenFormatError: If the token is not a decimal integer in range.
    """
    negative = token.startswith("-")
    body = token[1:] if token[:1] in ("+", "-") else token
    value = _parse_digits(body, 10)
    if value is None:
        raise TokenFormatError(token)
    if negative:
        value = -value
    if not INT32_MIN <= value <= INT32_MAX:
        raise TokenFormatError(token)
    return value


def parse_unsigned_hex32(digits: str) -> int:
    """Parse unsigned hexadecimal digits and reinterpret them as signed 32-bit.

    Raises:
        TokenFormatError: If the digits are not hexadecimal or exceed 32 bits.
    """
    value = _parse_digits(digits.removeprefix("+"), 16)
    if value is None or value > UINT32_MAX:
        raise TokenFormatError(digits)
    return wrap_int32(value)


def parse_token_int(token: str) -> int:
    """Parse a token under the decimal / ``0x`` unsigned-hex rule.

    Raises:
        TokenFormatError: If the token parses under neither form.
    """
    if token.lower().startswith(HEX_PREFIX):
        try:
            return parse_unsigned_hex32(token[len(HEX_PREFIX) :])
        except TokenFormatError as exc:
            raise TokenFormatError(token) from exc
    return parse_int32(token)


def is_token_int(token: str) -> bool:
    """Return whether `parse_token_int` would accept ``token``."""
    try:
        parse_token_int(token)
    except TokenFormatError:
        return False
    return True
