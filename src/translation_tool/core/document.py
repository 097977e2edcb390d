"""Data classes describing the contents of a Qt Linguist .ts document.

Instances are derived fresh from the document text on every scan and are
never written back; the document itself stays the source of truth.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

# Markers shared by the scanner, the progress counter and the batch writer.
MESSAGE_OPEN = "<message>"
UNFINISHED_MARKER = '<translation type="unfinished"/>'


class TranslationState(Enum):
    """Translation state of a message."""

    UNFINISHED = "unfinished"
    TRANSLATED = "translated"


@dataclass(frozen=True)
class Message:
    """One translatable unit.

    Attributes:
        source: Source text exactly as it appears in the document (still
            markup-escaped). Used as the lookup key for batch updates.
        state: Whether the message still waits for a translation.
        translation: Decoded translation text, None while unfinished.
    """

    source: str
    state: TranslationState = TranslationState.UNFINISHED
    translation: Optional[str] = None

    @property
    def is_unfinished(self) -> bool:
        return self.state is TranslationState.UNFINISHED


@dataclass(frozen=True)
class Context:
    """A named grouping of messages.

    Attributes:
        name: Context name, or an empty string when the <name> element is
            missing.
        messages: Messages in document order.
    """

    name: str
    messages: Tuple[Message, ...] = field(default_factory=tuple)

    def unfinished(self) -> Tuple[Message, ...]:
        return tuple(message for message in self.messages if message.is_unfinished)


@dataclass(frozen=True)
class UnfinishedEntry:
    """An untranslated message tagged with its owning context."""

    context: str
    source: str

    def to_dict(self) -> dict:
        return {"context": self.context, "source": self.source}
