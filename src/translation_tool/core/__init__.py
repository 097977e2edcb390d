"""Core data models shared by the translation tool.

Exports:
    Context: A named group of messages from a .ts document.
    Message: A single source string and its translation state.
    TranslationState: Enum for unfinished and translated messages.
    UnfinishedEntry: A (context, source) pair awaiting translation.
"""

from .document import Context, Message, TranslationState, UnfinishedEntry

__all__ = [
    "Context",
    "Message",
    "TranslationState",
    "UnfinishedEntry",
]
