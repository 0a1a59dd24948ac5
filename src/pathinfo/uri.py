"""URI well-formedness checks and base-joined candidate construction."""

from __future__ import annotations

import logging
import re
import string
from typing import Optional
from urllib.parse import quote, urlsplit

from .errors import E_MALFORMED_URI

log = logging.getLogger(__name__)

__all__ = [
    "HTTP_SCHEMES",
    "escape_non_ascii",
    "is_well_formed_absolute_uri",
    "uri_scheme",
    "is_http_uri",
    "join_uri_candidate",
    "uri_candidate",
]

HTTP_SCHEMES = frozenset({"http", "https"})

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_UNRESERVED = string.ascii_letters + string.digits + "-._~"
_RESERVED = ":/?#[]@!$&'()*+,;="
_URI_CHARS = frozenset(_UNRESERVED + _RESERVED + "%")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SEPARATORS = "/\\"


def uri_scheme(text: str) -> Optional[str]:
    scheme, sep, _ = text.partition(":")
    if not sep or not _SCHEME_RE.fullmatch(scheme):
        return None
    return scheme.lower()


def _is_escapable(ch: str) -> bool:
    code = ord(ch)
    return code > 0x7F and not ch.isspace() and not 0xD800 <= code <= 0xDFFF


def escape_non_ascii(text: str) -> str:
    """Percent-encode non-ASCII characters (IRI to URI), leaving the rest alone.

    Non-ASCII whitespace and lone surrogates are kept as is so that they
    still fail validation.
    """
    return "".join(
        quote(ch, safe="") if _is_escapable(ch) else ch
        for ch in text
    )


def is_well_formed_absolute_uri(text: str) -> bool:
    """Return True when ``text`` is a strictly well-formed absolute URI.

    Non-ASCII characters are accepted in their percent-encoded form; anything
    else that would need escaping (whitespace, backslashes, stray ``%``) is
    rejected rather than repaired.
    """
    text = escape_non_ascii(text)
    if not text or any(ch not in _URI_CHARS for ch in text):
        return False
    if _BAD_PERCENT_RE.search(text):
        return False
    scheme = uri_scheme(text)
    if scheme is None or len(text) == len(scheme) + 1:
        return False
    if scheme not in HTTP_SCHEMES:
        return True
    try:
        parts = urlsplit(text)
        parts.port  # raises ValueError for a non-numeric or out of range port
    except ValueError:
        return False
    return bool(parts.netloc) and bool(parts.hostname)


def is_http_uri(text: str) -> bool:
    return is_well_formed_absolute_uri(text) and uri_scheme(text) in HTTP_SCHEMES


def _escape_path(path: str) -> str:
    path = _BAD_PERCENT_RE.sub("%25", path)
    return quote(path, safe=_RESERVED + "%", errors="surrogatepass")


def join_uri_candidate(base_path: str, path: str) -> str:
    """Join ``path`` onto ``base_path`` the way a URL would be built.

    Backslashes in ``path`` are treated as separators so that relative paths
    written on Windows still join correctly onto a URL base.
    """
    relative = path.lstrip(_SEPARATORS).replace("\\", "/")
    return base_path.rstrip(_SEPARATORS) + "/" + _escape_path(relative)


def uri_candidate(path: str, base_path: Optional[str] = None) -> Optional[str]:
    """Return the absolute URI ``path`` denotes, alone or joined onto ``base_path``."""
    if is_well_formed_absolute_uri(path):
        return escape_non_ascii(path)
    if not base_path:
        return None
    joined = escape_non_ascii(join_uri_candidate(base_path, path))
    if is_well_formed_absolute_uri(joined):
        return joined
    log.debug("[%s] no URI candidate for %r (base %r)", E_MALFORMED_URI, path, base_path)
    return None
