#!/usr/bin/env python3
"""Backend for .ts progress reports, extraction, backups and batch updates.

Provides TranslationTool, the engine that wires the scanner, progress
reporter, extractor, backup manager and batch translator to one configured
document. Used by the CLI.

Usage::

    from translation_tool.localization.operations import TranslationTool

    tool = TranslationTool()
    result = tool.progress()
    if result.success:
        print(result.details["stats"])
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from .backup import BackupManager
from .batch import BatchTranslator
from .config import ToolConfig, read_document
from .extractor import DEFAULT_EXTRACT_LIMIT, UnfinishedExtractor
from .progress import ProgressReporter


@dataclass
class OperationResult:
    """Standard response for translation workflow actions.

    Attributes:
        name: Short identifier for the operation (e.g., 'progress', 'apply').
        success: True if the operation completed without errors.
        logs: Informational log messages produced during the operation.
        errors: Error messages encountered during the operation.
        details: Arbitrary metadata (statistics, entries, backup path, etc.).
    """

    name: str
    success: bool
    logs: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    details: Dict[str, object] = field(default_factory=dict)

    def add_log(self, message: str) -> None:
        """Append an informational message to the logs.

        Args:
            message: Log message to record.
        """
        self.logs.append(message)

    def add_error(self, message: str) -> None:
        """Record an error and mark the operation as failed.

        Args:
            message: Error message to record.
        """
        self.errors.append(message)
        self.success = False


def load_batch_file(path: Path | str) -> Dict[str, str]:
    """Read a translation batch from a JSON object file.

    Args:
        path: JSON file mapping source text to translated text.

    Returns:
        The mapping, in file order.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a JSON object of strings.
    """

    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"Invalid JSON in {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ValueError(f"Batch file must contain a JSON object: {path}")
    for source, translation in data.items():
        if not isinstance(translation, str):
            raise ValueError(
                f"Translation for {source!r} must be a string, got {type(translation).__name__}"
            )
    return data


class TranslationTool:
    """High-level operations on a single .ts document.

    Attributes:
        config: Resolved document and backup paths.
        reporter: Whole-document progress counter.
        extractor: Context-aware unfinished entry extractor.
        backups: Snapshot writer.
        translator: Batch translator sharing the same backup manager.
    """

    def __init__(
        self,
        config: Optional[ToolConfig] = None,
        backups: Optional[BackupManager] = None,
    ):
        """Initialize the tool.

        Args:
            config: Pre-resolved configuration; loaded from settings file and
                environment if omitted.
            backups: Backup manager; built from config if omitted.
        """
        self.config = config or ToolConfig.load()
        self.reporter = ProgressReporter()
        self.extractor = UnfinishedExtractor()
        self.backups = backups or BackupManager(self.config)
        self.translator = BatchTranslator(self.config, self.backups)

    def is_document_detected(self) -> bool:
        """Check if the configured document exists.

        Returns:
            True if document_path points at a regular file.
        """
        return self.config.document_path.is_file()

    def _read(self, result: OperationResult) -> Optional[str]:
        try:
            return read_document(self.config.document_path)
        except OSError as exc:
            result.add_error(f"Cannot read {self.config.document_path}: {exc}")
            return None

    def progress(self) -> OperationResult:
        """Compute completion statistics for the document.

        Returns:
            An OperationResult with a ProgressStats in details["stats"].
        """
        result = OperationResult("progress", True)
        content = self._read(result)
        if content is None:
            return result

        stats = self.reporter.report(content)
        result.details["stats"] = stats
        result.add_log(
            f"{stats.completed}/{stats.total} translated, "
            f"{stats.unfinished} unfinished ({stats.progress}%)"
        )
        return result

    def extract(self, limit: int = DEFAULT_EXTRACT_LIMIT) -> OperationResult:
        """List unfinished entries in document order.

        Args:
            limit: Maximum number of entries to return.

        Returns:
            An OperationResult with UnfinishedEntry items in details["entries"].
        """
        result = OperationResult("extract", True)
        content = self._read(result)
        if content is None:
            return result

        entries = self.extractor.extract(content, limit)
        result.details["entries"] = entries
        result.details["limit"] = limit
        result.add_log(f"Found {len(entries)} unfinished entries (limit {limit})")
        return result

    def backup(self) -> OperationResult:
        """Create a timestamped snapshot of the document.

        Returns:
            An OperationResult with the snapshot path in details["backup"].
        """
        result = OperationResult("backup", True)
        try:
            backup_path = self.backups.backup()
        except OSError as exc:
            result.add_error(f"Backup failed: {exc}")
            return result

        result.details["backup"] = str(backup_path)
        result.add_log(f"Backup created: {backup_path}")
        return result

    def translate_batch(self, translations: Mapping[str, str]) -> OperationResult:
        """Apply a batch of translations after taking a backup.

        Args:
            translations: Mapping of source text to translated text.

        Returns:
            An OperationResult with the applied count in details["applied"]
            and the snapshot path in details["backup"].
        """
        result = OperationResult("apply", True)
        try:
            applied = self.translator.apply(translations)
        except OSError as exc:
            result.add_error(f"Batch translation failed: {exc}")
            if self.translator.last_backup is not None:
                result.details["backup"] = str(self.translator.last_backup)
            return result

        result.details["backup"] = str(self.translator.last_backup)
        result.details["applied"] = applied
        result.details["requested"] = len(translations)
        result.add_log(f"Backup created: {self.translator.last_backup}")
        for source, translation in self.translator.last_applied:
            result.add_log(f"[OK] Translated: {source} -> {translation}")
        result.add_log(f"Batch complete: {applied} of {len(translations)} entries translated")
        return result

    def translate_file(self, batch_path: Path | str) -> OperationResult:
        """Apply a batch read from a JSON object file.

        Args:
            batch_path: JSON file mapping source text to translated text.

        Returns:
            The translate_batch result, or a failed result if the batch file
            cannot be loaded. The document is not backed up in that case.
        """
        try:
            translations = load_batch_file(batch_path)
        except (OSError, ValueError) as exc:
            result = OperationResult("apply", False)
            result.add_error(f"Cannot load batch file: {exc}")
            return result
        return self.translate_batch(translations)


__all__ = [
    "OperationResult",
    "TranslationTool",
    "load_batch_file",
]
