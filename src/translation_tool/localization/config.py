"""Configuration and file access for the translation document.

ToolConfig replaces fixed module-level paths: every component receives the
configuration it works against, so tests can point it at a temporary file.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..utils.settings import apply_environment, load_settings


@dataclass
class ToolConfig:
    """Resolved filesystem locations used by the translation workflow.

    Attributes:
        document_path: The .ts document to read and update.
        backup_dir: Folder that receives timestamped snapshots.
        backup_prefix: Filename prefix of each snapshot.
        backup_extension: Snapshot extension without the dot; the document
            suffix is used when empty.
    """

    document_path: Path
    backup_dir: Path
    backup_prefix: str = "translation_"
    backup_extension: str = ""

    def __post_init__(self) -> None:
        self.document_path = Path(self.document_path)
        self.backup_dir = Path(self.backup_dir)

    @property
    def extension(self) -> str:
        ext = self.backup_extension or self.document_path.suffix or ".ts"
        return ext.lstrip(".")

    @classmethod
    def load(
        cls,
        settings_path: Optional[Path | str] = None,
        environ: Optional[Mapping[str, str]] = None,
        document_path: Optional[Path | str] = None,
        backup_dir: Optional[Path | str] = None,
    ) -> "ToolConfig":
        """Build a configuration from settings file, environment and overrides.

        Precedence, lowest first: built-in defaults, the JSON settings file,
        TRANSLATION_TOOL_* environment variables, explicit arguments.

        Args:
            settings_path: Optional JSON settings file.
            environ: Environment mapping; defaults to ``os.environ``.
            document_path: Explicit document path override.
            backup_dir: Explicit backup directory override.

        Returns:
            A ToolConfig with paths resolved against the working directory.

        Raises:
            ValueError: If an explicitly requested settings file is missing.
        """

        if settings_path is not None:
            settings_path = Path(settings_path)
            if not settings_path.is_file():
                raise ValueError(f"Settings file not found: {settings_path}")

        settings = apply_environment(load_settings(settings_path), environ)
        if document_path:
            settings["document_path"] = str(document_path)
        if backup_dir:
            settings["backup_dir"] = str(backup_dir)

        return cls(
            document_path=Path(settings["document_path"]).expanduser(),
            backup_dir=Path(settings["backup_dir"]).expanduser(),
            backup_prefix=settings["backup_prefix"],
            backup_extension=settings["backup_extension"],
        )


def read_document(path: Path) -> str:
    """Read a document as UTF-8 without newline translation."""

    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: Path, content: str) -> None:
    """Write a document as UTF-8 without newline translation."""

    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
        f.flush()


__all__ = ["ToolConfig", "read_document", "write_document"]
