"""Core config-domain exports."""

from contentsync.core.config.loader import load_config, load_model

__all__ = ["load_config", "load_model"]
