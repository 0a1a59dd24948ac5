"""Command line front-end for the location resolver."""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import load_proxy_config, proxy_config_from_env
from .errors import PathInfoError
from .logging import configure_console, configure_logging
from .models import Credential, PathInfo, ProxyConfig
from .resolver import resolve

EXIT_RESOLVED = 0
EXIT_UNRESOLVED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    description = (
        "Resolve a location to an HTTP(S) URL or an existing filesystem path.\n\n"
        "Examples:\n"
        "  pathinfo https://example.com/repo/manifest.yaml --test-reachable\n"
        "  pathinfo sub\\setup.msi --base https://example.com/repo\n"
        "  pathinfo manifest.yaml --base ./repo --force-base --json"
    )
    parser = argparse.ArgumentParser(
        prog="pathinfo",
        description=description,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", help="Location to resolve (URL, absolute or relative path)")
    parser.add_argument("--base", dest="base_path", default=None, help="Base URL or directory for relative locations")
    parser.add_argument("--force-base", action="store_true", help="Resolve relative paths only under --base, never the current directory")
    parser.add_argument("--test-reachable", action="store_true", help="Probe URLs with a HEAD request")
    parser.add_argument("--proxy", default=None, help="Proxy URL for the reachability probe")
    parser.add_argument("--proxy-user", default=None, help="Proxy user name")
    parser.add_argument("--proxy-password", default=None, help="Proxy password")
    parser.add_argument("--proxy-use-default-credentials", action="store_true", help="Authenticate to the proxy with credentials from the environment")
    parser.add_argument("--proxy-config", default=None, help="JSON/YAML file holding proxy settings")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--color", dest="color", action="store_true", default=None, help="Force rich-colored output")
    parser.add_argument("--no-color", dest="color", action="store_false", help="Disable colored output")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return parser


def select_proxy(args: argparse.Namespace) -> Optional[ProxyConfig]:
    """Pick the proxy: explicit flags, then --proxy-config, then the environment."""
    if args.proxy:
        credential = None
        if args.proxy_user is not None:
            credential = Credential(args.proxy_user, args.proxy_password or "")
        return ProxyConfig(
            url=args.proxy,
            credential=credential,
            use_default_credentials=args.proxy_use_default_credentials,
        )
    if args.proxy_config:
        return load_proxy_config(args.proxy_config)
    return proxy_config_from_env()


def print_info(console: Console, info: PathInfo) -> None:
    pairs = [
        ("Type", info.type.value),
        ("Valid", str(info.valid)),
        ("Reachable", str(info.reachable)),
        ("Location", info.absolute_location),
        ("Error", info.error_message),
    ]
    width = max(len(label) for label, _ in pairs)
    table = Table(show_header=False, box=None, show_edge=False)
    table.add_column("label", justify="right", style="bold green", width=width)
    table.add_column("value")
    for label, value in pairs:
        if not value:
            continue
        style = "red" if label == "Error" else None
        table.add_row(label, escape(value), style=style)
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.proxy_user is not None and not args.proxy:
        parser.error("--proxy-user requires --proxy")
    if args.proxy_password is not None and args.proxy_user is None:
        parser.error("--proxy-password requires --proxy-user")

    console = configure_console(args.color)
    logger = configure_logging(console, args.debug)

    try:
        proxy = select_proxy(args)
    except (FileNotFoundError, PathInfoError) as exc:
        if args.debug:
            raise
        console.print(f"[red]Error:[/] {escape(str(exc))}")
        return EXIT_USAGE

    logger.debug("Resolving %r (base=%r, proxy=%s)", args.path, args.base_path, proxy.url if proxy else None)
    info = resolve(
        args.path,
        base_path=args.base_path,
        force_base_if_relative=args.force_base,
        test_reachable=args.test_reachable,
        proxy=proxy,
    )

    if args.json:
        print(json.dumps(info.to_dict(), indent=2, ensure_ascii=False))
    else:
        print_info(console, info)
    return EXIT_RESOLVED if info.valid else EXIT_UNRESOLVED


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
