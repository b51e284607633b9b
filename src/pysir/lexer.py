# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2026/10/19 10:24:17

"""Character classes and cursor helpers shared by every pass.

Positions are plain `int` offsets into the buffer. Helpers that look for
a character return `len(buf)` when it is missing, so callers can treat
"not found" and "end of buffer" the same way, as the passes do.
"""

from .consts import (
    ASSIGNMENT_CHAR,
    ASSIGNMENT_CHAR_ALT,
    COMMENT_CHAR,
    COMMENT_CHAR_ALT,
    KEY_END_CHAR,
)
from .options import IniOptions


def is_space(c: str) -> bool:
    # control characters count as whitespace too.
    return c <= ' '


def is_comment_char(opts: IniOptions, c: str) -> bool:
    return c == COMMENT_CHAR or (
        not opts.disable_hash_comments and c == COMMENT_CHAR_ALT)


def is_assignment_char(opts: IniOptions, c: str) -> bool:
    return c == ASSIGNMENT_CHAR or (
        not opts.disable_colon_assignment and c == ASSIGNMENT_CHAR_ALT)


def fold_case(s: str) -> str:
    """ASCII-only folding; other characters compare as they are."""
    return s.translate(_ASCII_FOLD)


_ASCII_FOLD = str.maketrans(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def name_key(opts: IniOptions, s: str) -> str:
    """Comparison key for section and key names under the case policy."""
    return s if opts.case_sensitive else fold_case(s)


def names_equal(opts: IniOptions, a: str, b: str) -> bool:
    return name_key(opts, a) == name_key(opts, b)


def skip_whitespace(buf: str, pos: int, end: int | None = None) -> int:
    end = len(buf) if end is None else end
    while pos < end and buf[pos] <= ' ':
        pos += 1
    return pos


def skip_to_char(buf: str, pos: int, c: str, end: int | None = None) -> int:
    end = len(buf) if end is None else end
    found = buf.find(c, pos, end)
    return end if found < 0 else found


def skip_to_line_end(buf: str, pos: int) -> int:
    return skip_to_char(buf, pos, KEY_END_CHAR)


def skip_to_assignment(opts: IniOptions, buf: str, pos: int) -> int:
    """Position of the nearest assignment character at or after `pos`."""
    eq = skip_to_char(buf, pos, ASSIGNMENT_CHAR)
    if opts.disable_colon_assignment:
        return eq
    return min(eq, skip_to_char(buf, pos, ASSIGNMENT_CHAR_ALT, eq))


def trim(buf: str, start: int, end: int) -> tuple[int, int]:
    """Shrink `[start, end)` until neither edge is whitespace."""
    start = skip_whitespace(buf, start, end)
    while end > start and buf[end - 1] <= ' ':
        end -= 1
    return start, end


def trim_str(s: str) -> str:
    start, end = trim(s, 0, len(s))
    return s[start:end]
