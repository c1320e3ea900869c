"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from contentsync import ConfigError, DeltaLoadError, StoreError, SyncError


def main(argv: list[str] | None = None) -> int:
    import contentsync.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "apply":
            cli._run_apply(args)
        elif args.command == "token":
            cli._run_token(args)
        return 0
    except (ConfigError, DeltaLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except StoreError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except SyncError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
