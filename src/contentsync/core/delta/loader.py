"""Load a delta batch from a JSON file on disk."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from contentsync.core.contracts.exceptions import DeltaLoadError
from contentsync.core.contracts.remote import DeltaDocument


def load_delta(path: str | Path) -> DeltaDocument:
    """Load and parse a delta batch file.

    The file holds ``{"pages": [...], "syncToken": "..."}``; a bare list is
    read as the pages of a batch without a token.

    Raises:
        DeltaLoadError: If the file is missing, unreadable, contains invalid
                        JSON, or the data doesn't match the schema.
    """
    delta_path = Path(path)
    if not delta_path.exists():
        raise DeltaLoadError(f"missing delta file: {delta_path}")
    try:
        payload = json.loads(delta_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise DeltaLoadError(f"invalid JSON input: {exc}") from exc
    except OSError as exc:
        raise DeltaLoadError(f"failed to read delta file: {exc}") from exc

    if isinstance(payload, list):
        payload = {"pages": payload}
    try:
        return DeltaDocument.model_validate(payload)
    except ValidationError as exc:
        raise DeltaLoadError(f"delta validation failed: {exc}") from exc
