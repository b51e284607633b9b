# -*- encoding: utf-8 -*-
# @File   : abstract.py
# @Time   : 2026/10/19 12:48:10

import logging
from abc import ABCMeta, abstractmethod
from os import PathLike, fspath
from typing import Generic, TypeVar

import chardet


# below this `chardet` is only guessing.
_DETECT_CONFIDENCE = 0.8

T = TypeVar('T')


class FileHandler(Generic[T], metaclass=ABCMeta):
    """Reads a whole text file and hands the decoded text to `parse()`."""

    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        self._fn = fspath(filename)
        self._codec = encoding

    @staticmethod
    def decode(raw: bytes, encoding: str | None = None) -> str:
        if encoding is not None:
            try:
                return raw.decode(encoding)
            except UnicodeDecodeError:
                logging.debug('%r does not fit, guessing encoding', encoding)

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < _DETECT_CONFIDENCE:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            return raw.decode(codec['encoding'])
        except (UnicodeDecodeError, LookupError):
            return raw.decode('latin-1')

    @abstractmethod
    def parse(self, text: str) -> T:
        raise NotImplementedError

    @abstractmethod
    def on_error(self, e: OSError) -> T:
        """What `read()` gives back when the file can't be loaded."""
        raise NotImplementedError

    def read(self) -> T:
        try:
            with open(self._fn, 'rb') as fp:
                raw = fp.read()
        except OSError as e:
            logging.warning(f"Couldn't read {self._fn}:\n  {e}")
            return self.on_error(e)
        return self.parse(self.decode(raw, self._codec))

    def __str__(self) -> str:
        return self._fn
