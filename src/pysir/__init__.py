# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/19 10:00:12

import logging

from .consts import GLOBAL_SECTION_NAME, IniFlag
from .model import IniDocument, IniError, IniSection, SectionRange
from .options import IniOptions, load_options
from .parser import IniParser, load_from_file, load_from_str

__all__ = [
    'GLOBAL_SECTION_NAME', 'IniFlag',
    'IniDocument', 'IniError', 'IniSection', 'SectionRange',
    'IniOptions', 'load_options',
    'IniParser', 'load_from_file', 'load_from_str'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')
