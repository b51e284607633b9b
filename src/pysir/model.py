# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/19 12:05:44

"""Parsed INI document and its typed accessors.

Key names and values are stored as spans over the comment-stripped
buffer and only turned into `str` when asked for. Keys are kept in two
parallel arrays in file order; a section is a list of index ranges over
those arrays, since a section may be opened again later in the file.

Every query reports failures through `IniDocument.error` and a sentinel
return value instead of raising. Check `has_error` right after a call
when the sentinel (`None`, `0`, `0.0`) could also be a real value.
"""

from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, Iterator, NamedTuple, TypeVar

from .consts import GLOBAL_SECTION_NAME
from .convert import (
    split_csv,
    to_bool,
    to_double,
    to_long,
    to_unsigned_long,
)
from .lexer import name_key
from .options import IniOptions

T = TypeVar('T')


class IniError(Exception):
    """Raised by `IniDocument.raise_for_error()` with the pending error."""
    pass


class Span(NamedTuple):
    start: int
    end: int


@dataclass(slots=True)
class SectionRange:
    """`[start, end)` over the key arrays."""
    start: int
    end: int


@dataclass(slots=True)
class IniSection:
    name: str
    ranges: list[SectionRange] = field(default_factory=list)

    def indices(self) -> Iterator[int]:
        for r in self.ranges:
            yield from range(r.start, r.end)

    def __len__(self) -> int:
        return sum(r.end - r.start for r in self.ranges)


class IniDocument:
    def __init__(
        self,
        data: str = '',
        options: IniOptions | None = None,
        name: str = '',
        mem_ctx: Any = None
    ) -> None:
        """Usually built by `load_from_str()` or `IniParser.read()`."""
        self.data = data
        self.options = options or IniOptions()
        self.name = name
        self.mem_ctx = mem_ctx
        self.sections: list[IniSection] = [
            IniSection(GLOBAL_SECTION_NAME, [SectionRange(0, 0)])]
        self.name_spans: list[Span] = []
        self.value_spans: list[Span] = []
        self.warnings: list[str] = []
        self._error = ''

    # error slot

    @property
    def error(self) -> str:
        return self._error

    @property
    def has_error(self) -> bool:
        return bool(self._error)

    def _set_error(self, msg: str) -> None:
        if not self.options.disable_errors:
            self._error = msg

    def _clear_error(self) -> None:
        self._error = ''

    def raise_for_error(self) -> None:
        if self._error:
            raise IniError(self._error)

    # raw views

    def _text(self, span: Span) -> str:
        return self.data[span.start:span.end]

    @cached_property
    def key_names(self) -> tuple[str, ...]:
        return tuple(self._text(i) for i in self.name_spans)

    @cached_property
    def key_values(self) -> tuple[str, ...]:
        return tuple(self._text(i) for i in self.value_spans)

    @property
    def key_count(self) -> int:
        return len(self.name_spans)

    @property
    def section_names(self) -> list[str]:
        return [i.name for i in self.sections]

    # sections

    def get_section(self, section_name: str | None) -> IniSection | None:
        if section_name is None:
            self._set_error("the parameter 'section_name' is not optional")
            return None
        wanted = name_key(self.options, section_name)
        for i in self.sections:
            if name_key(self.options, i.name) == wanted:
                self._clear_error()
                return i
        self._set_error(f"section '{section_name}' not found")
        return None

    def _section_column(
        self, section_name: str | None, column: tuple[str, ...]
    ) -> list[str] | None:
        if (section := self.get_section(section_name)) is None:
            return None
        return [column[i] for i in section.indices()]

    def section_key_names(self, section_name: str | None) -> list[str] | None:
        """Key names of one section, in file order. The list is yours."""
        return self._section_column(section_name, self.key_names)

    def section_key_values(
        self, section_name: str | None
    ) -> list[str] | None:
        """Key values of one section, in file order. The list is yours."""
        return self._section_column(section_name, self.key_values)

    # keys

    def _find(self, section_name: str | None, key_name: str) -> int | None:
        wanted = name_key(self.options, key_name)
        names = self.key_names

        if section_name is not None:
            if (section := self.get_section(section_name)) is None:
                return None
            for i in section.indices():
                if name_key(self.options, names[i]) == wanted:
                    return i
            self._set_error(
                f"key '{key_name}' not found in section '{section_name}'")
            return None

        found = None
        for i, name in enumerate(names):
            if name_key(self.options, name) != wanted:
                continue
            found = i
            # the last match wins a global search when overriding,
            # even across sections.
            if not self.options.override_duplicate_keys:
                break
        if found is None:
            self._set_error(f"key '{key_name}' not found")
        return found

    def get_str(
        self, section_name: str | None, key_name: str | None
    ) -> str | None:
        """Value of `key_name`; `section_name=None` searches every key."""
        if key_name is None:
            self._set_error("the parameter 'key_name' is not optional")
            return None
        if (index := self._find(section_name, key_name)) is None:
            return None
        self._clear_error()
        return self.key_values[index]

    def _convert(
        self,
        section_name: str | None,
        key_name: str | None,
        converter: Callable[[str], tuple[T, str | None]],
        sentinel: T
    ) -> T:
        if (value := self.get_str(section_name, key_name)) is None:
            return sentinel
        ret, err = converter(value)
        if err is not None:
            self._set_error(err)
            return sentinel
        return ret

    def get_int(self, section_name: str | None, key_name: str | None) -> int:
        return self._convert(section_name, key_name, to_long, 0)

    def get_unsigned(
        self, section_name: str | None, key_name: str | None
    ) -> int:
        return self._convert(section_name, key_name, to_unsigned_long, 0)

    def get_float(
        self, section_name: str | None, key_name: str | None
    ) -> float:
        return self._convert(section_name, key_name, to_double, 0.0)

    def get_bool(
        self, section_name: str | None, key_name: str | None
    ) -> bool | None:
        """`None` when the value reads as neither a number nor a boolean."""
        return self._convert(section_name, key_name, to_bool, None)

    def get_csv(
        self, section_name: str | None, key_name: str | None
    ) -> list[str] | None:
        if (value := self.get_str(section_name, key_name)) is None:
            return None
        return split_csv(value)

    # lifecycle

    def release(self) -> None:
        """Drop the buffer and every table. Lists already handed out
        by the query methods are left alone."""
        self.data = ''
        self.sections.clear()
        self.name_spans.clear()
        self.value_spans.clear()
        self.warnings.clear()
        self.__dict__.pop('key_names', None)
        self.__dict__.pop('key_values', None)
        self._clear_error()

    def __enter__(self) -> 'IniDocument':
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __len__(self) -> int:
        return self.key_count

    def __bool__(self) -> bool:
        # a document without keys (or one that failed to load) is still one.
        return True

    def __repr__(self) -> str:
        return (f'<IniDocument {self.name!r}: {len(self.sections)} sections, '
                f'{self.key_count} keys>')
