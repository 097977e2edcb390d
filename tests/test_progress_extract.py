#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Tests for ProgressReporter counts and UnfinishedExtractor ordering."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from translation_tool.core import UnfinishedEntry
from translation_tool.localization.extractor import UnfinishedExtractor
from translation_tool.localization.progress import ProgressReporter, ProgressStats


def make_document(contexts):
    """Build a .ts document from {context: [(source, translation or None)]}."""
    parts = ['<?xml version="1.0" encoding="utf-8"?>', '<TS version="2.1">']
    for name, messages in contexts.items():
        parts.append("<context>")
        parts.append(f"    <name>{name}</name>")
        for source, translation in messages:
            parts.append("    <message>")
            parts.append(f"        <source>{source}</source>")
            if translation is None:
                parts.append('        <translation type="unfinished"/>')
            else:
                parts.append(f"        <translation>{translation}</translation>")
            parts.append("    </message>")
        parts.append("</context>")
    parts.append("</TS>")
    return "\n".join(parts) + "\n"


DOCUMENT = make_document(
    {
        "MainWindow": [("File", None), ("Edit", "编辑"), ("View", None)],
        "Dialog": [("OK", "确定"), ("Cancel", None)],
        "About": [("Version", None)],
    }
)


class TestProgressReporter:
    """Whole-document counting."""

    def test_counts(self):
        stats = ProgressReporter().report(DOCUMENT)
        assert stats == ProgressStats(total=6, completed=2, unfinished=4, progress=33.33)

    def test_completed_plus_unfinished_is_total(self):
        for document in (DOCUMENT, "", make_document({"A": [("x", "y")]})):
            stats = ProgressReporter().report(document)
            assert stats.completed + stats.unfinished == stats.total

    def test_empty_document_reports_zero(self):
        stats = ProgressReporter().report("")
        assert stats.total == 0
        assert stats.progress == 0

    def test_fully_translated(self):
        stats = ProgressReporter().report(make_document({"A": [("x", "y"), ("z", "w")]}))
        assert stats.progress == 100.0
        assert stats.unfinished == 0

    def test_counts_markers_without_structure(self):
        """Stray markers are counted even outside well-formed messages."""
        content = '<message><translation type="unfinished"/><message>'
        stats = ProgressReporter().report(content)
        assert (stats.total, stats.unfinished, stats.completed) == (2, 1, 1)
        assert stats.progress == 50.0

    def test_to_dict(self):
        stats = ProgressReporter().report(DOCUMENT)
        assert stats.to_dict() == {
            "total": 6,
            "completed": 2,
            "unfinished": 4,
            "progress": 33.33,
        }


class TestUnfinishedExtractor:
    """Context-tagged extraction in document order."""

    def test_all_entries_in_document_order(self):
        entries = UnfinishedExtractor().extract(DOCUMENT, 50)
        assert entries == [
            UnfinishedEntry("MainWindow", "File"),
            UnfinishedEntry("MainWindow", "View"),
            UnfinishedEntry("Dialog", "Cancel"),
            UnfinishedEntry("About", "Version"),
        ]

    @pytest.mark.parametrize("limit, expected", [(0, 0), (-3, 0), (1, 1), (3, 3), (4, 4), (100, 4)])
    def test_limit_truncates(self, limit, expected):
        entries = UnfinishedExtractor().extract(DOCUMENT, limit)
        assert len(entries) == expected
        assert entries == UnfinishedExtractor().extract(DOCUMENT, 100)[:expected]

    def test_default_limit(self):
        many = make_document({"Big": [(f"s{i}", None) for i in range(60)]})
        assert len(UnfinishedExtractor().extract(many)) == 50

    def test_duplicate_sources_listed_per_context(self):
        document = make_document({"A": [("Hello", None)], "B": [("Hello", None)]})
        entries = UnfinishedExtractor().extract(document)
        assert [e.context for e in entries] == ["A", "B"]

    def test_entry_to_dict(self):
        entry = UnfinishedEntry("Dialog", "Cancel")
        assert entry.to_dict() == {"context": "Dialog", "source": "Cancel"}
