"""Saved editing sessions.

A ``StateRepository`` stores full geometric snapshots as JSON, one file per
session key. The key is injected by the caller for each editing session,
so concurrent sessions never share storage.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from cropframe.core.state import GeometricState
from cropframe.exceptions import StateFileError
from cropframe.utils.logging import get_logger

logger = get_logger(__name__)

_SAFE_KEY_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


@dataclass(frozen=True)
class StateRepository:
    """Reads and writes geometric snapshots under ``directory``."""

    directory: Path

    @staticmethod
    def validate_key(key: str) -> None:
        """Reject keys that are not simple filenames.

        Raises:
            ValueError: If the key is empty, contains path separators, or
                would traverse out of the directory.
        """
        if not _SAFE_KEY_RE.match(key) or ".." in key:
            raise ValueError(
                f"Invalid session key {key!r}: use letters, digits, '.', '_' or '-'."
            )

    def path_for(self, key: str) -> Path:
        """Return the file a session key is stored in."""
        self.validate_key(key)
        return self.directory / f"{key}.json"

    def save(self, key: str, state: GeometricState) -> Path:
        """Save a snapshot and return the written path."""
        path = self.path_for(key)
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_text(state.model_dump_json(indent=2))
        logger.info("State saved", key=key, path=str(path))
        return path

    def load(self, key: str) -> GeometricState | None:
        """Load a snapshot, or None when nothing is stored under ``key``.

        Raises:
            StateFileError: If the stored file is unreadable or invalid.
        """
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            state = GeometricState.model_validate_json(path.read_text())
        except ValidationError as e:
            raise StateFileError(
                f"Saved state is invalid: {e.error_count()} error(s)", path, key=key
            ) from e
        except OSError as e:
            raise StateFileError(f"Cannot read saved state: {e}", path, key=key) from e
        logger.info("State restored", key=key, path=str(path))
        return state

    def delete(self, key: str) -> bool:
        """Remove a stored snapshot. Returns False if none existed."""
        path = self.path_for(key)
        if not path.exists():
            return False
        path.unlink()
        return True
