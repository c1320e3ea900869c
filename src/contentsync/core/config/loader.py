"""Config loading and persistence model resolution."""

from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from contentsync.core.contracts.config import ContentSyncConfig
from contentsync.core.contracts.exceptions import ConfigError
from contentsync.core.contracts.model import PersistenceModel


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> ContentSyncConfig:
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = ContentSyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={"snapshot_path": _resolve_path(parsed.snapshot_path, base_dir=config_path.parent)}
    )


def load_model(import_path: str) -> PersistenceModel:
    """Import a ``PersistenceModel`` from ``package.module:ATTR``."""
    module_name, sep, attr = import_path.partition(":")
    if not sep or not module_name or not attr:
        raise ConfigError(f"model must look like 'package.module:ATTR', got {import_path!r}")
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise ConfigError(f"cannot import model module {module_name!r}") from exc

    model = getattr(module, attr, None)
    if not isinstance(model, PersistenceModel):
        raise ConfigError(f"{import_path!r} is not a PersistenceModel")
    return model
