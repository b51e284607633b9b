# -*- encoding: utf-8 -*-
# @File   : options.py
# @Time   : 2026/10/19 10:11:05

"""Parsing switches.

Every field is an independent toggle and all of them default to `False`,
which means: every feature enabled, case-sensitive, first duplicate wins.
"""

from dataclasses import asdict, dataclass, fields
from os import PathLike

import yaml

from .consts import IniFlag


@dataclass(frozen=True, kw_only=True)
class IniOptions:
    ignore_empty_values: bool = False
    override_duplicate_keys: bool = False
    disable_quotes: bool = False
    disable_hash_comments: bool = False
    disable_colon_assignment: bool = False
    disable_comment_anywhere: bool = False
    disable_case_sensitivity: bool = False
    disable_errors: bool = False
    disable_warnings: bool = False

    @classmethod
    def from_flags(cls, flags: int) -> 'IniOptions':
        """Build from an `IniFlag` bitmask (plain `int` works too)."""
        flags = IniFlag(flags)
        return cls(**{
            i.name: bool(flags & IniFlag[i.name.upper()])
            for i in fields(cls)
        })

    def to_flags(self) -> IniFlag:
        ret = IniFlag.NONE
        for k, v in asdict(self).items():
            if v:
                ret |= IniFlag[k.upper()]
        return ret

    @classmethod
    def coerce(cls, value: 'IniOptions | int | None') -> 'IniOptions':
        if value is None:
            return cls()
        if isinstance(value, cls):
            return value
        # bool is an int as well, but never a meaningful bitmask.
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_flags(value)
        raise TypeError(
            f'expected IniOptions, IniFlag or int, got {type(value).__name__}')

    @property
    def comment_anywhere(self) -> bool:
        return not self.disable_comment_anywhere

    @property
    def case_sensitive(self) -> bool:
        return not self.disable_case_sensitivity


def load_options(path: str | PathLike[str],
                 encoding: str = 'utf-8') -> IniOptions:
    """Read an option set from a YAML mapping, like

    ```yaml
    override_duplicate_keys: true
    disable_hash_comments: yes
    ```

    An empty file gives the defaults.
    """
    with open(path, 'r', encoding=encoding) as fp:
        raw = yaml.load(fp, yaml.FullLoader)
    if raw is None:
        return IniOptions()
    if not isinstance(raw, dict):
        raise ValueError(f'{path}: option file must hold a mapping.')

    known = {i.name for i in fields(IniOptions)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f'{path}: unknown options {", ".join(unknown)}')
    return IniOptions(**{k: bool(v) for k, v in raw.items()})
