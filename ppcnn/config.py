"""Key/value configuration files."""

from __future__ import annotations

import re
from typing import Any, Callable

from .utility import FileError, split

__all__ = ["Config", "config_get_value"]

_DELIMS = " ,=\t\r\n"

_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(
    r"\s*[+-]?(?:"
    r"\d+\.?\d*(?:[eE][+-]?\d+)?"
    r"|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?"
    r"|nan"
    r")",
    re.IGNORECASE,
)


class Config:
    """Holds 'key value' pairs read from a configuration file."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get_value(self, key: str) -> str:
        """Return the value for key; KeyError if it is absent."""
        return self._values[key]

    def is_exist_key(self, key: str) -> bool:
        return key in self._values

    def load_from_file(self, filename: str) -> None:
        """Read pairs from a file; '#' starts a comment, first key wins."""
        try:
            with open(filename, encoding="utf-8") as stream:
                content = stream.read()
        except OSError as exc:
            raise FileError(f"Err: Config file not found. ({filename})") from exc

        if not content:
            raise FileError(f"Err: Config file is empty. ({filename})")

        for line in content.split("\n"):
            line = line.split("#", 1)[0]
            tokens = split(line, _DELIMS)
            if len(tokens) >= 2:
                self._values.setdefault(tokens[0], tokens[1])


def _parse_int(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer: {text!r}")
    return int(match.group())


def _parse_float(text: str) -> float:
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid number: {text!r}")
    return float(match.group())


_CONVERTERS: dict[type, Callable[[str], Any]] = {
    str: str,
    int: _parse_int,
    float: _parse_float,
}


def config_get_value(config: Config, key: str, kind: type = str) -> Any:
    """Return the value for key converted to kind (str, int or float).

    Numbers are read from the leading part of the value, as far as it parses.
    """
    try:
        convert = _CONVERTERS[kind]
    except KeyError:
        raise TypeError(f"unsupported value type: {kind!r}") from None
    if not config.is_exist_key(key):
        raise FileError(f"Err: Invalid key string. ({key})")
    return convert(config.get_value(key))