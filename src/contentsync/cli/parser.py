"""CLI parser construction."""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version


def _package_version() -> str:
    try:
        return version("contentsync")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="contentsync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    apply_parser = subparsers.add_parser("apply", help="Apply a delta batch to the local store")
    apply_parser.add_argument("--config", default="./contentsync.json", help="Path to contentsync.json")
    apply_parser.add_argument("--delta", required=True, help="Path to a delta batch JSON file")
    apply_parser.add_argument(
        "--resolve-each-page",
        action="store_true",
        default=None,
        help="Resolve relationships after every page (overrides config)",
    )
    apply_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    token_parser = subparsers.add_parser("token", help="Print the stored sync token")
    token_parser.add_argument("--config", default="./contentsync.json", help="Path to contentsync.json")
    token_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


__all__ = ["build_parser"]
