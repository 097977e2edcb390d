"""Completion statistics for a .ts document."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Union

from ..core.document import MESSAGE_OPEN, UNFINISHED_MARKER


@dataclass(frozen=True)
class ProgressStats:
    """Aggregate translation counts.

    Attributes:
        total: Number of <message> markers in the document.
        completed: total minus unfinished.
        unfinished: Number of unfinished translation markers.
        progress: Completion percentage rounded to two decimals.
    """

    total: int
    completed: int
    unfinished: int
    progress: float

    def to_dict(self) -> Dict[str, Union[int, float]]:
        return asdict(self)


class ProgressReporter:
    """Counts messages and unfinished markers over the whole document.

    The counts are independent substring tallies and do not check that each
    unfinished marker sits inside a well-formed message.
    """

    def report(self, content: str) -> ProgressStats:
        total = content.count(MESSAGE_OPEN)
        unfinished = content.count(UNFINISHED_MARKER)
        completed = total - unfinished
        progress = round(completed / total * 100, 2) if total > 0 else 0
        return ProgressStats(total, completed, unfinished, progress)


__all__ = ["ProgressReporter", "ProgressStats"]
