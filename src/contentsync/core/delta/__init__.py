"""Delta batch loading."""

from contentsync.core.delta.loader import load_delta

__all__ = ["load_delta"]
