"""Listing of untranslated messages grouped by context."""

from __future__ import annotations

from typing import List, Optional

from ..core.document import UnfinishedEntry
from .scanner import DocumentScanner

DEFAULT_EXTRACT_LIMIT = 50


class UnfinishedExtractor:
    """Returns unfinished messages in document order.

    Attributes:
        scanner: Scanner used to locate context boundaries.
    """

    def __init__(self, scanner: Optional[DocumentScanner] = None) -> None:
        self.scanner = scanner or DocumentScanner()

    def extract(
        self, content: str, limit: int = DEFAULT_EXTRACT_LIMIT
    ) -> List[UnfinishedEntry]:
        """Collect up to ``limit`` unfinished entries.

        Args:
            content: Raw document text.
            limit: Maximum number of entries; zero or negative yields an
                empty list.

        Returns:
            Entries ordered by context, then by message within the context.
        """

        if limit <= 0:
            return []

        entries: List[UnfinishedEntry] = []
        for context in self.scanner.scan(content):
            for message in context.unfinished():
                entries.append(UnfinishedEntry(context.name, message.source))
                if len(entries) >= limit:
                    return entries
        return entries


__all__ = ["DEFAULT_EXTRACT_LIMIT", "UnfinishedExtractor"]
