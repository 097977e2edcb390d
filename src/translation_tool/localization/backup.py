"""Timestamped snapshots of the translation document."""

from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .config import ToolConfig

TIMESTAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"


class BackupManager:
    """Copies the on-disk document into the backup directory.

    Snapshots are never modified or pruned. Two snapshots taken within the
    same second get a ``_N`` counter so the earlier one is kept.

    Attributes:
        config: Paths of the document and the backup directory.
        clock: Callable returning the current time; replaceable in tests.
    """

    def __init__(
        self,
        config: ToolConfig,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.config = config
        self.clock = clock or datetime.now

    def _ensure_backup_dir(self) -> None:
        self.config.backup_dir.mkdir(parents=True, exist_ok=True)

    def _next_backup_path(self) -> Path:
        """Return an unused snapshot path for the current second."""

        stem = f"{self.config.backup_prefix}{self.clock().strftime(TIMESTAMP_FORMAT)}"
        ext = self.config.extension
        candidate = self.config.backup_dir / f"{stem}.{ext}"
        counter = 1
        while candidate.exists():
            candidate = self.config.backup_dir / f"{stem}_{counter}.{ext}"
            counter += 1
        return candidate

    def backup(self) -> Path:
        """Copy the current document to a new timestamped snapshot.

        Returns:
            Path of the created snapshot.

        Raises:
            OSError: If the document cannot be read, or the directory or
                snapshot cannot be written.
        """

        self._ensure_backup_dir()
        backup_path = self._next_backup_path()
        shutil.copy2(self.config.document_path, backup_path)
        return backup_path


__all__ = ["BackupManager", "TIMESTAMP_FORMAT"]
