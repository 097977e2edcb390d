"""Batch conversion of unfinished messages into translated ones.

Usage::

    translator = BatchTranslator(config)
    applied = translator.apply({"Hello": "你好"})
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Mapping, Optional, Tuple
from xml.sax.saxutils import escape

from ..core.document import UNFINISHED_MARKER
from .backup import BackupManager
from .config import ToolConfig, read_document, write_document

_ENCODE_ENTITIES = {'"': "&quot;", "'": "&apos;"}


def escape_markup(text: str) -> str:
    """Encode reserved XML characters for embedding in a <translation>."""

    return escape(text, _ENCODE_ENTITIES)


def build_unfinished_pattern(source: str) -> re.Pattern:
    """Compile the pattern locating unfinished messages for one source text.

    Group 1 captures everything from <message> up to the unfinished marker,
    group 2 the whitespace and closing </message> after it.
    """

    return re.compile(
        r"(<message>\s*<source>"
        + re.escape(source)
        + r"</source>\s*)"
        + re.escape(UNFINISHED_MARKER)
        + r"(\s*</message>)"
    )


def apply_to_text(
    content: str, translations: Mapping[str, str]
) -> Tuple[str, List[Tuple[str, str]]]:
    """Rewrite unfinished messages in memory.

    Each source is replaced across the whole document: when the same source
    is unfinished in several contexts, all of them receive the translation
    and the pair is counted once.

    Args:
        content: Raw document text.
        translations: Mapping of source text (as it appears in the document)
            to the desired translation.

    Returns:
        The rewritten text and the (source, translation) pairs that matched,
        in the order they were supplied.
    """

    applied: List[Tuple[str, str]] = []
    for source, translation in translations.items():
        pattern = build_unfinished_pattern(source)
        element = f"<translation>{escape_markup(translation)}</translation>"
        content, count = pattern.subn(
            lambda match: match.group(1) + element + match.group(2), content
        )
        if count:
            applied.append((source, translation))
    return content, applied


class BatchTranslator:
    """Applies a translation batch to the configured document.

    A backup is taken before anything else, even for an empty batch. The
    document is written once after every pair has been processed.

    Attributes:
        config: Paths of the document and backup directory.
        backups: Backup manager invoked before each batch.
        last_applied: Pairs applied by the most recent batch.
        last_backup: Snapshot taken by the most recent batch.
    """

    def __init__(
        self,
        config: ToolConfig,
        backups: Optional[BackupManager] = None,
    ) -> None:
        self.config = config
        self.backups = backups or BackupManager(config)
        self.last_applied: List[Tuple[str, str]] = []
        self.last_backup: Optional[Path] = None

    def apply(self, translations: Mapping[str, str]) -> int:
        """Translate every unfinished message whose source is in the batch.

        Args:
            translations: Mapping of source text to translated text. Sources
                that are missing or already translated are skipped.

        Returns:
            Number of pairs that matched at least one unfinished message.

        Raises:
            OSError: If the backup, read or write fails.
        """

        self.last_applied = []
        self.last_backup = self.backups.backup()
        content = read_document(self.config.document_path)
        updated, self.last_applied = apply_to_text(content, translations)
        write_document(self.config.document_path, updated)
        return len(self.last_applied)


__all__ = [
    "BatchTranslator",
    "apply_to_text",
    "build_unfinished_pattern",
    "escape_markup",
]
