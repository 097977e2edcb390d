"""Document operations for the translation tool.

Provides the scanner, progress reporter, unfinished-entry extractor, backup
manager and batch translator, plus the TranslationTool facade that ties them
to a configured .ts document.
"""

from __future__ import annotations

from .backup import BackupManager
from .batch import BatchTranslator, apply_to_text, escape_markup
from .config import ToolConfig, read_document, write_document
from .extractor import DEFAULT_EXTRACT_LIMIT, UnfinishedExtractor
from .operations import OperationResult, TranslationTool, load_batch_file
from .progress import ProgressReporter, ProgressStats
from .scanner import DocumentScanner, decode_markup

__all__ = [
    "BackupManager",
    "BatchTranslator",
    "DEFAULT_EXTRACT_LIMIT",
    "DocumentScanner",
    "OperationResult",
    "ProgressReporter",
    "ProgressStats",
    "ToolConfig",
    "TranslationTool",
    "UnfinishedExtractor",
    "apply_to_text",
    "decode_markup",
    "escape_markup",
    "load_batch_file",
    "read_document",
    "write_document",
]
