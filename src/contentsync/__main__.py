"""Module entrypoint for ``python -m contentsync``."""

from contentsync.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
