"""Progress reports, extraction and batch updates for Qt .ts documents."""

__version__ = "1.0.0"
