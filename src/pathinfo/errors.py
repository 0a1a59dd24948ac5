"""Error codes and diagnostic messages for location resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

E_MALFORMED_URI = "E_MALFORMED_URI"
E_UNREACHABLE = "E_UNREACHABLE"
E_NOT_FOUND = "E_NOT_FOUND"
E_PROVIDER_PATH = "E_PROVIDER_PATH"
E_CONFIG = "E_CONFIG"


@dataclass
class PathInfoError(Exception):
    """Raised by configuration loading; ``resolve`` itself never raises."""

    code: str
    message: str
    context: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.code}: {self.message}" + (
            f" | ctx={self.context}" if self.context else ""
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context or {},
        }


def config_error(
    message: str, context: Optional[Dict[str, Any]] = None
) -> PathInfoError:
    return PathInfoError(code=E_CONFIG, message=message, context=context)


def not_found_message(path: str) -> str:
    return f'"{path}" is not a supported URL and does not exist as a filesystem path'


def unreachable_message(url: str, exc: BaseException) -> str:
    detail = str(exc).strip()
    name = type(exc).__name__
    if detail:
        return f'Failed to reach "{url}": {name}: {detail}'
    return f'Failed to reach "{url}": {name}'


__all__ = [
    "PathInfoError",
    "config_error",
    "not_found_message",
    "unreachable_message",
    "E_MALFORMED_URI",
    "E_UNREACHABLE",
    "E_NOT_FOUND",
    "E_PROVIDER_PATH",
    "E_CONFIG",
]
