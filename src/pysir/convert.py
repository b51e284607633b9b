# -*- encoding: utf-8 -*-
# @File   : convert.py
# @Time   : 2026/10/19 11:37:08

"""Text to value conversions with C-library semantics.

The numeric readers behave like `strtol`, `strtoul` and `strtod`:
leading whitespace and a sign are accepted, the longest valid prefix is
consumed and anything after it is ignored (`"12px"` reads as 12).
Every converter returns `(value, error)`; `error` is `None` on success.
"""

import math
import sys
from re import IGNORECASE
from re import compile as regex

from .consts import BOOL_FALSE, BOOL_TRUE, LONG_MAX, LONG_MIN, ULONG_MAX
from .lexer import fold_case, skip_whitespace, trim_str

# `isspace()` of the C locale, not Python's unicode-aware `\s`.
_C_SPACE = r'[ \t\n\v\f\r]*'

_INTEGER = regex(
    _C_SPACE + r'([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)')

_FLOAT = regex(
    _C_SPACE + r'([+-]?)(?:'
    r'(?P<hex>0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)'
    r'|(?P<inf>inf(?:inity)?)'
    r'|(?P<nan>nan(?:\([0-9a-z_]*\))?)'
    r'|(?P<dec>(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)'
    r')',
    IGNORECASE)

# more digits than this is out of every C integer range anyway,
# and spares `int()` its own digit limit.
_MAX_DECIMAL_DIGITS = 20


def _digits_value(digits: str) -> int:
    if digits[:2] in ('0x', '0X'):
        return int(digits[2:], 16)
    if digits.startswith('0'):
        return int(digits, 8)
    if len(digits) > _MAX_DECIMAL_DIGITS:
        return ULONG_MAX + 1
    return int(digits)


def to_long(s: str) -> tuple[int, str | None]:
    if (m := _INTEGER.match(s)) is None:
        return 0, f"'{s}' could not be converted to a long integer."
    sign, digits = m.groups()
    value = _digits_value(digits)
    if sign == '-':
        value = -value
    if value > LONG_MAX:
        return 0, f"'{s}' is more than the maximum value of a long integer."
    if value < LONG_MIN:
        return 0, f"'{s}' is less than the minimum value of a long integer."
    return value, None


def to_unsigned_long(s: str) -> tuple[int, str | None]:
    if (m := _INTEGER.match(s)) is None:
        return 0, (f"'{s}' could not be converted to "
                   'an unsigned long integer.')
    sign, digits = m.groups()
    value = _digits_value(digits)
    # negative input is rejected instead of wrapping around like strtoul.
    if value > ULONG_MAX or (sign == '-' and value):
        return 0, (f"'{s}' is outside the range of values of "
                   'an unsigned long integer.')
    return value, None


def _mantissa_is_zero(m_hex: str | None, m_dec: str | None) -> bool:
    if m_hex is not None:
        mantissa = m_hex[2:].lower().split('p')[0]
        return not any(c in '123456789abcdef' for c in mantissa)
    mantissa = m_dec.lower().split('e')[0]
    return not any(c in '123456789' for c in mantissa)


def to_double(s: str) -> tuple[float, str | None]:
    if (m := _FLOAT.match(s)) is None:
        return 0.0, f"'{s}' could not be converted to a double."

    negative = m.group(1) == '-'
    if m['inf'] is not None:
        return (-math.inf if negative else math.inf), None
    if m['nan'] is not None:
        return (-math.nan if negative else math.nan), None

    if m['hex'] is not None:
        try:
            value = float.fromhex(m['hex'])
        except OverflowError:
            value = math.inf
    else:
        value = float(m['dec'])
    if negative:
        value = -value

    if math.isinf(value):
        if negative:
            return 0.0, f"'{s}' is less than the minimum value of a double."
        return 0.0, f"'{s}' is more than the maximum value of a double."
    if ((value == 0.0 and not _mantissa_is_zero(m['hex'], m['dec']))
            or 0.0 < abs(value) < sys.float_info.min):
        return 0.0, f"'{s}' is outside the range of values of a double."
    return value, None


def to_bool(s: str) -> tuple[bool | None, str | None]:
    """Numbers first (non-zero is true), then `true`/`false` prefixes.

    Returns `None` as value when neither way works.
    """
    value, err = to_long(s)
    if err is None:
        return value != 0, None

    s = s[skip_whitespace(s, 0):]
    if fold_case(s[:len(BOOL_TRUE)]) == BOOL_TRUE:
        return True, None
    if fold_case(s[:len(BOOL_FALSE)]) == BOOL_FALSE:
        return False, None
    return None, f"could not parse '{s}' as a bool"


def split_csv(s: str) -> list[str]:
    """Split on every comma; empty fields are kept.

    The whole value is trimmed first, then each field loses
    its leading whitespace. There is always `1 + s.count(',')` fields.
    """
    return [i[skip_whitespace(i, 0):] for i in trim_str(s).split(',')]
