# -*- encoding: utf-8 -*-
# @File   : prescan.py
# @Time   : 2026/10/19 10:40:52

import logging
from typing import NamedTuple

from .consts import (
    KEY_END_CHAR,
    QUOTE_CHAR,
    SECTION_CLOSE_CHAR,
    SECTION_OPEN_CHAR,
)
from .lexer import (
    is_assignment_char,
    is_comment_char,
    is_space,
    skip_to_line_end,
)
from .options import IniOptions


class PrescanResult(NamedTuple):
    text: str
    # both counts are upper bounds:
    # duplicates and dropped empty values are unknown at this point.
    section_count: int
    key_count: int


def strip_comments(buf: str, opts: IniOptions) -> PrescanResult:
    """Blank out comments and count section/key candidates.

    Comment text is replaced by spaces rather than removed,
    so the line/column coordinates of what follows stay valid.
    A `"` only quotes inside a value, i.e. after the first assignment
    character of a line outside any section header.
    """
    pieces: list[str] = []
    sections, keys = 1, 0  # the global section always exists.
    quoting = not opts.disable_quotes
    line_blank, in_quote = True, False
    # `at_token`: next non-space char starts a header or a key name
    at_token, in_header, in_value = True, False, False
    pos, last, size = 0, 0, len(buf)

    while pos < size:
        c = buf[pos]
        if c == KEY_END_CHAR:
            line_blank, in_quote = True, False
            at_token, in_header, in_value = True, False, False
        elif (is_comment_char(opts, c) and not in_quote
              and (opts.comment_anywhere or line_blank)):
            end = skip_to_line_end(buf, pos)
            pieces.append(buf[last:pos])
            pieces.append(' ' * (end - pos))
            pos = last = end
            continue
        else:
            closes_header = False
            if c == SECTION_OPEN_CHAR:
                sections += 1
                if at_token:
                    in_header = True
            elif c == SECTION_CLOSE_CHAR and in_header:
                in_header, closes_header = False, True
            elif is_assignment_char(opts, c):
                keys += 1
                if not in_header:
                    in_value = True
            elif quoting and in_value and c == QUOTE_CHAR:
                in_quote = not in_quote
            if not is_space(c):
                line_blank, at_token = False, closes_header
        pos += 1

    if last:
        pieces.append(buf[last:])
        buf = ''.join(pieces)
    logging.debug(
        'prescan: at most %d sections and %d keys', sections, keys)
    return PrescanResult(buf, sections, keys)
