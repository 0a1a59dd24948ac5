"""Filesystem access used by the resolver: lookup, canonical form and joins."""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional

from .errors import E_PROVIDER_PATH

log = logging.getLogger(__name__)

__all__ = ["is_provider_qualified", "locate", "join_platform"]

# ``Microsoft.PowerShell.Core\FileSystem::C:\x`` style provider paths.
_PROVIDER_QUALIFIED_RE = re.compile(r"^[A-Za-z][\w.\\-]*::")
# Non-file URIs (``ftp://``). A single letter is a volume, not a scheme.
_FOREIGN_URI_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]+://")
# Named drives (``Env:``, ``HKLM:\``, ``cert:``); only Windows paths use them.
_NAMED_DRIVE_RE = re.compile(r"^[A-Za-z][\w.+-]+:")


def _separators() -> str:
    return "/\\" if os.name == "nt" else "/"


def is_provider_qualified(path: str) -> bool:
    """Return True when ``path`` addresses something other than real storage."""
    if _PROVIDER_QUALIFIED_RE.match(path) or _FOREIGN_URI_RE.match(path):
        return True
    return os.name == "nt" and bool(_NAMED_DRIVE_RE.match(path))


def locate(path: str) -> Optional[str]:
    """Return the canonical absolute form of an existing filesystem entry.

    Relative paths are taken against the current working directory and ``~``
    is expanded. Returns None when nothing exists there, when the entry cannot
    be resolved, or when the path belongs to a non-filesystem namespace.
    """
    if not path:
        return None
    if is_provider_qualified(path):
        log.debug("[%s] not a filesystem path: %s", E_PROVIDER_PATH, path)
        return None
    try:
        resolved = Path(path).expanduser().resolve(strict=True)
    except (OSError, RuntimeError, ValueError) as exc:
        log.debug("Filesystem lookup failed for %s: %s", path, exc)
        return None
    return str(resolved)


def join_platform(base: str, child: str) -> str:
    """Join ``child`` under ``base``.

    Unlike ``os.path.join``, a leading separator on ``child`` does not
    discard ``base``; a drive-qualified ``child`` on Windows still does.
    """
    return os.path.join(base, child.lstrip(_separators()))
