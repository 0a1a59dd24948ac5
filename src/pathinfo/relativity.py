"""Relative/absolute classification of filesystem path strings.

These predicates look only at the text of a path; they never touch the
filesystem. ``is_path_relative`` picks the rules of the host platform, and
the explicit variants are available for callers that need a specific one.
"""

from __future__ import annotations

import os
from typing import Callable

__all__ = [
    "RelativityPredicate",
    "is_path_relative",
    "is_path_relative_posix",
    "is_path_relative_windows",
]

RelativityPredicate = Callable[[str], bool]

_WINDOWS_SEPARATORS = ("\\", "/")
_VOLUME_SEPARATOR = ":"


def is_path_relative_windows(path: str) -> bool:
    """Classify ``path`` using Windows path syntax.

    ``\\foo`` is relative to the current drive and ``C:foo`` to the current
    directory of drive C, so both count as relative. UNC (``\\\\server``) and
    device (``\\\\?\\``, ``\\?\\``) prefixes and ``C:\\`` style paths do not.
    """
    if len(path) < 2:
        return True
    if path[0] in _WINDOWS_SEPARATORS:
        return not (path[1] == "?" or path[1] in _WINDOWS_SEPARATORS)
    return not (
        len(path) >= 3
        and path[0].isascii()
        and path[0].isalpha()
        and path[1] == _VOLUME_SEPARATOR
        and path[2] in _WINDOWS_SEPARATORS
    )


def is_path_relative_posix(path: str) -> bool:
    return not path.startswith(("/", "~"))


def is_path_relative(path: str) -> bool:
    if os.name == "nt":
        return is_path_relative_windows(path)
    return is_path_relative_posix(path)
