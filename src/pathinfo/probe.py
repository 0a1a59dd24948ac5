"""Lightweight HTTP reachability probe."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from .errors import E_UNREACHABLE, unreachable_message
from .models import ProxyConfig

log = logging.getLogger(__name__)

__all__ = ["PROBE_TIMEOUT", "ProbeResult", "probe_url"]

PROBE_TIMEOUT = 8.0


@dataclass(frozen=True, slots=True)
class ProbeResult:
    reachable: bool
    status_code: Optional[int] = None
    error_message: str = ""


def _open_session(proxy: Optional[ProxyConfig]) -> requests.Session:
    session = requests.Session()
    session.headers["Connection"] = "close"
    if proxy is not None:
        # Only default credentials may come from the environment.
        session.trust_env = proxy.use_default_credentials
    return session


def probe_url(
    url: str,
    proxy: Optional[ProxyConfig] = None,
    *,
    timeout: float = PROBE_TIMEOUT,
) -> ProbeResult:
    """Issue a HEAD request against ``url`` and report whether it answered 2xx.

    A non-2xx answer is not an error: it yields ``reachable=False`` with an
    empty message. Transport failures are caught and described instead of
    propagated.
    """
    log.debug("HEAD %s (timeout=%.1fs, proxy=%s)", url, timeout, proxy.url if proxy else None)
    try:
        with _open_session(proxy) as session:
            response = session.head(
                url,
                timeout=timeout,
                allow_redirects=True,
                proxies=proxy.proxies() if proxy else None,
            )
            response.close()
    except (requests.RequestException, ValueError) as exc:
        message = unreachable_message(url, exc)
        log.warning("[%s] %s", E_UNREACHABLE, message)
        return ProbeResult(reachable=False, error_message=message)

    status = response.status_code
    log.debug("HEAD %s -> %d", url, status)
    return ProbeResult(reachable=200 <= status <= 299, status_code=status)
