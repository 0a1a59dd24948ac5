"""Resolve location strings to HTTP(S) URLs or existing filesystem paths."""

from .errors import PathInfoError
from .models import Credential, PathInfo, PathType, ProxyConfig
from .relativity import is_path_relative, is_path_relative_posix, is_path_relative_windows
from .resolver import resolve

__all__ = [
    "resolve",
    "PathInfo",
    "PathType",
    "ProxyConfig",
    "Credential",
    "PathInfoError",
    "is_path_relative",
    "is_path_relative_posix",
    "is_path_relative_windows",
]
