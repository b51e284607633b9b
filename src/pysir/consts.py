# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/19 10:02:41

from enum import IntFlag


COMMENT_CHAR = ';'
COMMENT_CHAR_ALT = '#'
ASSIGNMENT_CHAR = '='
ASSIGNMENT_CHAR_ALT = ':'

SECTION_OPEN_CHAR = '['
SECTION_CLOSE_CHAR = ']'
KEY_END_CHAR = '\n'
QUOTE_CHAR = '"'

GLOBAL_SECTION_NAME = 'global'
# used in diagnostics when a buffer comes without a name.
NO_NAME = 'ini'

BOOL_TRUE = 'true'
BOOL_FALSE = 'false'

# C `long`/`unsigned long` on LP64.
LONG_MIN = -(1 << 63)
LONG_MAX = (1 << 63) - 1
ULONG_MAX = (1 << 64) - 1


class IniFlag(IntFlag):
    NONE = 0x000
    IGNORE_EMPTY_VALUES = 0x001
    OVERRIDE_DUPLICATE_KEYS = 0x002
    DISABLE_QUOTES = 0x004
    DISABLE_HASH_COMMENTS = 0x008
    DISABLE_COLON_ASSIGNMENT = 0x010
    DISABLE_COMMENT_ANYWHERE = 0x020
    DISABLE_CASE_SENSITIVITY = 0x040
    DISABLE_ERRORS = 0x080
    DISABLE_WARNINGS = 0x100
