"""File, path and string helpers shared by the client and server sides."""

from __future__ import annotations

import os
import random
import time
from itertools import groupby

__all__ = [
    "FileError",
    "file_exist",
    "dir_exist",
    "file_size",
    "remove_file",
    "basename",
    "isdigit",
    "getenv",
    "split",
    "gen_uuid",
    "trim_string",
    "get_filelist",
    "get_filename",
    "get_dirname",
    "get_extname",
]

_ASCII_DIGITS = frozenset("0123456789")
_RAND_MAX = 2**31 - 1


class FileError(OSError):
    """Raised when a file is missing or cannot be used."""


def file_exist(filename: str) -> bool:
    """Return True if the file can be opened for reading."""
    try:
        with open(filename, "rb"):
            return True
    except OSError:
        return False


def dir_exist(dirname: str) -> bool:
    """Return True if anything exists at the given path."""
    try:
        os.stat(dirname)
    except OSError:
        return False
    return True


def file_size(filename: str) -> int:
    """Return the size of a file in bytes."""
    if not file_exist(filename):
        raise FileError(f"failed to open {filename}")
    return os.path.getsize(filename)


def remove_file(filename: str) -> bool:
    """Delete a file; return True only if it existed and was removed."""
    if not file_exist(filename):
        return False
    try:
        os.remove(filename)
    except OSError:
        return False
    return True


def basename(filepath: str) -> str:
    """Return the part of the path after the last '/'."""
    return filepath[filepath.rfind("/") + 1:]


def isdigit(text: str) -> bool:
    """Return True if text is non-empty and made only of ASCII digits."""
    return bool(text) and all(ch in _ASCII_DIGITS for ch in text)


def getenv(name: str) -> str:
    """Return the environment variable's value, or '' when it is unset."""
    return os.environ.get(name, "")


def split(text: str, delims: str) -> list[str]:
    """Split text on any of the delimiter characters, dropping empty tokens."""
    return [
        "".join(chars)
        for is_delim, chars in groupby(text, key=lambda ch: ch in delims)
        if not is_delim
    ]


def gen_uuid() -> int:
    """Return a non-negative pseudo-random id seeded by the current second."""
    rng = random.Random(int(time.time()))
    return rng.randint(0, _RAND_MAX)


def trim_string(text: str, whitespace: str = " \t") -> str:
    """Strip the given characters from both ends of text."""
    return text.strip(whitespace)


def get_filelist(directory: str, ext: str = "") -> list[str]:
    """List the non-directory entries of a directory as 'directory/name'.

    When ext is given, only entries whose extension equals it are kept.
    A directory that cannot be read yields an empty list.
    """
    try:
        names = os.listdir(directory)
    except OSError:
        return []

    files = []
    for name in names:
        fullpath = f"{directory}/{name}"
        try:
            if os.path.isdir(fullpath):
                continue
            os.stat(fullpath)
        except OSError:
            continue
        if not ext or ext == get_extname(fullpath):
            files.append(fullpath)
    return files


def get_filename(path: str, without_ext: bool = False) -> str:
    """Return the part of the path after the last '/'.

    With without_ext the result is cut to as many characters as follow the
    last '.' of the whole path.
    """
    start = path.rfind("/") + 1
    if not without_ext:
        return path[start:]
    count = len(path) - (path.rfind(".") + 1)
    return path[start:start + count]


def get_dirname(path: str) -> str:
    """Return the path up to and including the last '/'."""
    return path[: path.rfind("/") + 1]


def get_extname(path: str) -> str:
    """Return the text after the last '.' of the file name."""
    filename = get_filename(path)
    return filename[filename.rfind(".") + 1:]