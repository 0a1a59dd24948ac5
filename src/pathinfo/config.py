"""Proxy settings from configuration files (JSON/YAML) and the environment."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from .errors import config_error
from .models import Credential, ProxyConfig

__all__ = ["load_proxy_config", "proxy_config_from_env", "parse_proxy_dict"]

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def load_proxy_config(path: str | Path) -> ProxyConfig:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(p)
    text = p.read_text(encoding="utf-8")
    try:
        if p.suffix.lower() in {".yaml", ".yml"}:
            data: Any = yaml.safe_load(text)
        else:
            data = json.loads(text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise config_error(f"Cannot parse proxy configuration: {exc}", {"file": str(p)}) from exc
    if not isinstance(data, dict):
        raise config_error("Root of proxy configuration must be an object", {"file": str(p)})
    section = data.get("proxy", data)
    if not isinstance(section, dict):
        raise config_error("'proxy' must be an object", {"file": str(p)})
    return parse_proxy_dict(section)


def parse_proxy_dict(data: Mapping[str, Any]) -> ProxyConfig:
    url = data.get("url")
    if not isinstance(url, str) or not url.strip():
        raise config_error("'url' must be a non-empty string", {"key": "url"})

    username = data.get("username")
    password = data.get("password")
    if (username is None) != (password is None):
        raise config_error("'username' and 'password' must be given together")
    credential = None
    if username is not None:
        if not isinstance(username, str) or not isinstance(password, str):
            raise config_error("'username' and 'password' must be strings")
        credential = Credential(username=username, password=password)

    use_default = data.get("use_default_credentials", False)
    if not isinstance(use_default, bool):
        raise config_error(
            "'use_default_credentials' must be a boolean",
            {"key": "use_default_credentials"},
        )
    return ProxyConfig(url=url.strip(), credential=credential, use_default_credentials=use_default)


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    value = environ.get(name, "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise config_error(f"{name} must be a boolean flag, got {value!r}", {"variable": name})


def proxy_config_from_env(environ: Optional[Mapping[str, str]] = None) -> Optional[ProxyConfig]:
    """Build a proxy configuration from environment variables.

    ``PATHINFO_PROXY`` names the proxy, falling back to the conventional
    ``HTTPS_PROXY``/``HTTP_PROXY`` (either case). Returns None when no proxy
    is configured.
    """
    env = os.environ if environ is None else environ
    url = ""
    for name in ("PATHINFO_PROXY", "HTTPS_PROXY", "https_proxy", "HTTP_PROXY", "http_proxy"):
        url = env.get(name, "").strip()
        if url:
            break
    if not url:
        return None

    username = env.get("PATHINFO_PROXY_USER")
    password = env.get("PATHINFO_PROXY_PASSWORD")
    credential = None
    if username:
        credential = Credential(username=username, password=password or "")
    return ProxyConfig(
        url=url,
        credential=credential,
        use_default_credentials=_env_flag(env, "PATHINFO_PROXY_USE_DEFAULT_CREDENTIALS"),
    )
