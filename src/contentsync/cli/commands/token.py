"""Token command: print the stored sync token."""

from __future__ import annotations

import argparse


def run_token(args: argparse.Namespace) -> str | None:
    import contentsync.cli as cli

    config = cli.load_config(args.config)
    token = cli.build_manager(config).sync_token
    print(token if token is not None else "(none)")
    return token


__all__ = ["run_token"]
