"""Value types produced and consumed by the location resolver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional
from urllib.parse import quote, urlsplit, urlunsplit

__all__ = ["PathType", "PathInfo", "Credential", "ProxyConfig"]


class PathType(Enum):
    UNKNOWN = "unknown"
    HTTP = "http"
    FILE = "file"


@dataclass(frozen=True, slots=True)
class PathInfo:
    """Outcome of resolving a single location string.

    ``reachable`` is only ever true for a URL when a probe was requested and
    succeeded; filesystem entries are reachable by virtue of existing.
    """

    valid: bool = False
    reachable: bool = False
    type: PathType = PathType.UNKNOWN
    absolute_location: str = ""
    error_message: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "reachable": self.reachable,
            "type": self.type.value,
            "absolute_location": self.absolute_location,
            "error_message": self.error_message,
        }


@dataclass(frozen=True, slots=True)
class Credential:
    username: str
    password: str

    def __repr__(self) -> str:  # keep secrets out of logs
        return f"Credential(username={self.username!r}, password='***')"


@dataclass(frozen=True, slots=True)
class ProxyConfig:
    url: str
    credential: Optional[Credential] = None
    use_default_credentials: bool = False

    def proxy_url(self) -> str:
        """Return the proxy URL, with the explicit credential embedded if it applies.

        ``use_default_credentials`` takes precedence over ``credential``: the
        explicit credential is then ignored and authentication is left to the
        environment (``.netrc`` or credentials already present in the URL).
        """
        if self.use_default_credentials or self.credential is None:
            return self.url
        url = self.url if "://" in self.url else f"http://{self.url}"
        parts = urlsplit(url)
        host = parts.netloc.rpartition("@")[2]
        userinfo = (
            quote(self.credential.username, safe="")
            + ":"
            + quote(self.credential.password, safe="")
        )
        return urlunsplit(
            (parts.scheme, f"{userinfo}@{host}", parts.path, parts.query, parts.fragment)
        )

    def proxies(self) -> Dict[str, str]:
        url = self.proxy_url()
        return {"http": url, "https": url}
