# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/19 13:20:36

"""Build an `IniDocument` out of text.

Loading runs three passes over the buffer:
1. `prescan.strip_comments()` blanks comments and estimates sizes,
2. `lint.find_warnings()` collects warnings (unless disabled),
3. `IniBuilder` walks the result once and fills the document.

What the builder accepts:

    top = 1            ; keys before any header live in [global]
    [ section ]
    name = value       # ':' assigns as well
    quoted = "  kept  "

A truncated header or key at the end of the buffer is kept as far as it
goes; it is never an error.
"""

import logging
from dataclasses import replace
from os import PathLike
from typing import Any

from .abstract import FileHandler
from .consts import (
    NO_NAME,
    QUOTE_CHAR,
    SECTION_CLOSE_CHAR,
    SECTION_OPEN_CHAR,
)
from .lexer import (
    name_key,
    skip_to_assignment,
    skip_to_char,
    skip_to_line_end,
    skip_whitespace,
    trim,
)
from .lint import find_warnings
from .model import IniDocument, IniSection, SectionRange, Span
from .options import IniOptions
from .prescan import strip_comments


class IniBuilder:
    """Single forward walk over a comment-stripped buffer."""

    def __init__(self, doc: IniDocument) -> None:
        self.doc = doc
        self.opts = doc.options
        self.buf = doc.data
        self.pos = 0
        # folded section name -> index into `doc.sections`
        self._sections: dict[str, int] = {
            name_key(self.opts, doc.sections[0].name): 0}
        # per section: folded key name -> slot in the key arrays
        self._keys: list[dict[str, int]] = [{}]
        self._current = 0

    @property
    def cursor(self) -> int:
        """Next free slot of the key arrays."""
        return len(self.doc.name_spans)

    def build(self) -> IniDocument:
        buf, size = self.buf, len(self.buf)
        while True:
            self.pos = skip_whitespace(buf, self.pos)
            if self.pos >= size:
                break
            if buf[self.pos] == SECTION_OPEN_CHAR:
                truncated = self._read_section()
            else:
                truncated = self._read_key()
            if truncated:
                break

        self.doc.sections[self._current].ranges[-1].end = self.cursor
        return self.doc

    def _read_section(self) -> bool:
        doc = self.doc
        doc.sections[self._current].ranges[-1].end = self.cursor

        start = self.pos + 1
        end = skip_to_char(self.buf, start, SECTION_CLOSE_CHAR)
        name = self.buf[slice(*trim(self.buf, start, end))]
        self.pos = end + 1

        folded = name_key(self.opts, name)
        if (index := self._sections.get(folded)) is None:
            index = len(doc.sections)
            doc.sections.append(
                IniSection(name, [SectionRange(self.cursor, self.cursor)]))
            self._sections[folded] = index
            self._keys.append({})
        elif index != self._current:
            # opened again after another section: a new disjoint range.
            doc.sections[index].ranges.append(
                SectionRange(self.cursor, self.cursor))
        self._current = index
        return end >= len(self.buf)

    def _read_value(self) -> Span:
        buf = self.buf
        line_end = skip_to_line_end(buf, self.pos)
        if not self.opts.disable_quotes:
            quote = buf.find(QUOTE_CHAR, self.pos, line_end)
            if quote >= 0:
                close = skip_to_char(buf, quote + 1, QUOTE_CHAR)
                self.pos = close + 1
                return Span(quote + 1, close)
        start, self.pos = self.pos, line_end + 1
        return Span(*trim(buf, start, line_end))

    def _read_key(self) -> bool:
        buf = self.buf
        assign = skip_to_assignment(self.opts, buf, self.pos)
        name = Span(*trim(buf, self.pos, assign))
        truncated = assign >= len(buf)
        if truncated:
            value = Span(len(buf), len(buf))
        else:
            self.pos = assign + 1
            value = self._read_value()
        self._store(name, value)
        return truncated

    def _store(self, name: Span, value: Span) -> None:
        doc = self.doc
        if self.opts.ignore_empty_values and value.start == value.end:
            return

        folded = name_key(self.opts, self.buf[name.start:name.end])
        keys = self._keys[self._current]
        if (slot := keys.get(folded)) is not None:
            if self.opts.override_duplicate_keys:
                doc.value_spans[slot] = value
            return

        keys[folded] = self.cursor
        doc.name_spans.append(name)
        doc.value_spans.append(value)


def load_from_str(
    text: str | bytes,
    options: IniOptions | int | None = None,
    name: str | None = None,
    mem_ctx: Any = None
) -> IniDocument:
    """Parse `text` as an INI document.

    Args:
        options: an `IniOptions`, or an `IniFlag` bitmask.
        name: only used in warnings, defaults to `'ini'`.
        mem_ctx: anything; kept on the document as is.
    """
    if isinstance(text, (bytes, bytearray)):
        text = FileHandler.decode(bytes(text))
    opts = IniOptions.coerce(options)
    name = NO_NAME if name is None else name

    stripped = strip_comments(text, opts)
    doc = IniDocument(stripped.text, opts, name, mem_ctx)
    if not opts.disable_warnings:
        doc.warnings.extend(find_warnings(stripped.text, opts, name))

    IniBuilder(doc).build()
    logging.debug(
        '%s: %d sections (estimated %d), %d keys (estimated %d)',
        name, len(doc.sections), stripped.section_count,
        doc.key_count, stripped.key_count)
    return doc


class IniParser(FileHandler[IniDocument]):
    """Loads an INI file; the file name becomes the document name.

    Failing to open or read the file is not raised: an empty document
    with its error set is returned instead, like any other query.
    """

    def __init__(
        self,
        filename: str | PathLike[str],
        encoding: str | None = None,
        options: IniOptions | int | None = None,
        mem_ctx: Any = None
    ) -> None:
        super().__init__(filename, encoding)
        self._opts = IniOptions.coerce(options)
        self._mem_ctx = mem_ctx

    def parse(self, text: str) -> IniDocument:
        return load_from_str(text, self._opts, self._fn, self._mem_ctx)

    def on_error(self, e: OSError) -> IniDocument:
        # reported even if the caller disabled error tracking,
        # there is no other way to tell a missing file from an empty one.
        doc = IniDocument(options=replace(self._opts, disable_errors=False),
                          name=self._fn,
                          mem_ctx=self._mem_ctx)
        doc._set_error(e.strerror or str(e))
        return doc

    def __str__(self) -> str:
        return f'INI file: {super().__str__()} ({self._codec})'


def load_from_file(
    filename: str | PathLike[str],
    options: IniOptions | int | None = None,
    mem_ctx: Any = None,
    encoding: str | None = None
) -> IniDocument:
    return IniParser(filename, encoding, options, mem_ctx).read()
