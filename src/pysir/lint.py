# -*- encoding: utf-8 -*-
# @File   : lint.py
# @Time   : 2026/10/19 11:03:29

"""Look for probable mistakes in a comment-stripped INI buffer.

This pass is advisory only. It walks the text the same way a human reads
it (headers, then `name = value` lines) and never feeds back into parsing.
"""

import logging

from .consts import KEY_END_CHAR, SECTION_CLOSE_CHAR, SECTION_OPEN_CHAR
from .lexer import is_assignment_char, is_space
from .options import IniOptions

_MISSING_CLOSE = "Did you forget to close the section name with ']'?"


def format_warning(name: str, line: int, col: int, msg: str) -> str:
    return f'{name}:{line}:{col}: warning: {msg}'


class _Cursor:
    """Walks the buffer keeping 1-based line and column numbers."""

    def __init__(self, buf: str) -> None:
        self.buf = buf
        self.pos = 0
        self.line = 1
        self.col = 1

    @property
    def eof(self) -> bool:
        return self.pos >= len(self.buf)

    @property
    def char(self) -> str:
        return self.buf[self.pos] if self.pos < len(self.buf) else ''

    def advance(self) -> None:
        if self.char == KEY_END_CHAR:
            self.line += 1
            self.col = 1
        else:
            self.col += 1
        self.pos += 1


def find_warnings(buf: str, opts: IniOptions, name: str) -> list[str]:
    ret: list[str] = []
    cur = _Cursor(buf)

    def warn(msg: str) -> None:
        text = format_warning(name, cur.line, cur.col, msg)
        logging.debug(text)
        ret.append(text)

    while not cur.eof:
        while not cur.eof and is_space(cur.char):
            cur.advance()
        if cur.eof:
            break

        if cur.char == SECTION_OPEN_CHAR:
            while not cur.eof and cur.char != SECTION_CLOSE_CHAR:
                if cur.char == KEY_END_CHAR:
                    warn(f'Newline found in section name. {_MISSING_CLOSE}')
                elif is_assignment_char(opts, cur.char):
                    warn(f"'{cur.char}' found in section name. "
                         f'{_MISSING_CLOSE}')
                cur.advance()
            cur.advance()
            continue

        while not cur.eof and not is_assignment_char(opts, cur.char):
            if cur.char in (SECTION_OPEN_CHAR, SECTION_CLOSE_CHAR):
                warn(f"'{cur.char}' found in key name")
            cur.advance()
        cur.advance()
        while not cur.eof and cur.char != KEY_END_CHAR:
            if cur.char in (SECTION_OPEN_CHAR, SECTION_CLOSE_CHAR):
                warn(f"'{cur.char}' found in key value")
            cur.advance()
        cur.advance()
    return ret
