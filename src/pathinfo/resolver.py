"""Resolve a location string to a URL or filesystem path.

Resolution is a fixed sequence:

1. Build a URI candidate from ``path`` alone, or joined onto ``base_path``.
2. An ``http``/``https`` candidate is the answer; optionally HEAD-probe it.
3. Otherwise classify ``path`` as relative or absolute.
4. Look ``path`` up as given, unless it is relative and the base is forced.
5. Look up ``base_path`` joined with ``path``.

Every outcome is reported through the returned :class:`PathInfo`; nothing is
raised to the caller.
"""

from __future__ import annotations

import logging
from typing import Optional

from .errors import E_NOT_FOUND, not_found_message
from .filesystem import join_platform, locate
from .models import PathInfo, PathType, ProxyConfig
from .probe import probe_url
from .relativity import RelativityPredicate, is_path_relative
from .uri import HTTP_SCHEMES, uri_candidate, uri_scheme

log = logging.getLogger(__name__)

__all__ = ["resolve"]


def _resolve_url(
    url: str, test_reachable: bool, proxy: Optional[ProxyConfig]
) -> PathInfo:
    if not test_reachable:
        return PathInfo(valid=True, type=PathType.HTTP, absolute_location=url)
    result = probe_url(url, proxy)
    return PathInfo(
        valid=True,
        reachable=result.reachable,
        type=PathType.HTTP,
        absolute_location=url,
        error_message=result.error_message,
    )


def _file_info(location: str) -> PathInfo:
    return PathInfo(
        valid=True,
        reachable=True,
        type=PathType.FILE,
        absolute_location=location,
    )


def resolve(
    path: str,
    base_path: Optional[str] = None,
    force_base_if_relative: bool = False,
    test_reachable: bool = False,
    proxy: Optional[ProxyConfig] = None,
    *,
    is_relative: RelativityPredicate = is_path_relative,
) -> PathInfo:
    """Classify ``path`` as an HTTP URL, an existing file, or unresolved.

    ``base_path`` anchors relative input, either as a URL or a directory.
    With ``force_base_if_relative`` a relative ``path`` is only looked up
    under ``base_path``, never against the current directory.
    ``test_reachable`` adds a HEAD probe for URLs, through ``proxy`` when
    given. ``is_relative`` overrides the platform relativity rules.
    """
    candidate = uri_candidate(path, base_path)
    if candidate is not None and uri_scheme(candidate) in HTTP_SCHEMES:
        log.debug("Resolved %r as URL %s", path, candidate)
        return _resolve_url(candidate, test_reachable, proxy)

    relative = is_relative(path)
    if relative and force_base_if_relative:
        log.debug("Skipping as-is lookup of relative path %r", path)
    else:
        location = locate(path)
        if location is not None:
            log.debug("Resolved %r as file %s", path, location)
            return _file_info(location)

    if base_path:
        joined = join_platform(base_path, path)
        location = locate(joined)
        if location is not None:
            log.debug("Resolved %r under %r as file %s", path, base_path, location)
            return _file_info(location)

    message = not_found_message(path)
    log.debug("[%s] %s", E_NOT_FOUND, message)
    return PathInfo(error_message=message)
