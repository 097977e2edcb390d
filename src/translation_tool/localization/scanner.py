"""Pattern-based scanner for Qt Linguist .ts documents.

Splits the document into <context> blocks and collects the messages inside
each block. The scanner never raises on malformed markup: regions it cannot
recognise simply produce no contexts or no messages.

Usage::

    from translation_tool.localization.scanner import DocumentScanner

    contexts = DocumentScanner().scan(content)
    for context in contexts:
        print(context.name, len(context.messages))
"""

from __future__ import annotations

import re
from typing import List
from xml.sax.saxutils import unescape

from ..core.document import UNFINISHED_MARKER, Context, Message, TranslationState

CONTEXT_SPLIT_RE = re.compile(r"(<context>.*?</context>)", re.DOTALL)
CONTEXT_NAME_RE = re.compile(r"^<context>\s*<name>(.*?)</name>", re.DOTALL)

# Source text is markup-escaped, so a raw "<" always ends the field. This keeps
# a match from running past </source> into the next message.
UNFINISHED_MESSAGE_RE = re.compile(
    r"<message>\s*<source>([^<]*)</source>\s*"
    + re.escape(UNFINISHED_MARKER)
    + r"\s*</message>"
)
MESSAGE_RE = re.compile(
    r"<message>\s*<source>([^<]*)</source>\s*"
    + r"(?:(?P<unfinished>"
    + re.escape(UNFINISHED_MARKER)
    + r")|<translation>(?P<text>[^<]*)</translation>)"
    + r"\s*</message>"
)

_DECODE_ENTITIES = {"&quot;": '"', "&apos;": "'", "&#x27;": "'", "&#39;": "'"}


def decode_markup(text: str) -> str:
    """Decode the XML entities written by the batch translator."""

    return unescape(text, _DECODE_ENTITIES)


class DocumentScanner:
    """Parses .ts text into an ordered list of contexts.

    Attributes:
        include_translated: When True, messages that already carry a plain
            <translation> element are returned too. By default only
            unfinished messages are enumerated.
    """

    def __init__(self, include_translated: bool = False) -> None:
        self.include_translated = include_translated

    def scan(self, content: str) -> List[Context]:
        """Return the contexts of a document in document order.

        Args:
            content: Raw document text.

        Returns:
            One Context per <context>...</context> block. Blocks without a
            <name> element get an empty name.
        """

        contexts: List[Context] = []
        # Odd indices hold the captured <context>...</context> blocks; the rest is
        # unmatched text, including any unclosed <context>.
        for segment in CONTEXT_SPLIT_RE.split(content)[1::2]:
            name_match = CONTEXT_NAME_RE.match(segment)
            name = name_match.group(1).strip() if name_match else ""
            contexts.append(Context(name, tuple(self._scan_messages(segment))))
        return contexts

    def _scan_messages(self, segment: str) -> List[Message]:
        """Collect the messages of a single context block.

        Args:
            segment: Text of one <context> block.

        Returns:
            Messages whose source is non-empty after trimming.
        """

        messages: List[Message] = []
        if not self.include_translated:
            for match in UNFINISHED_MESSAGE_RE.finditer(segment):
                source = match.group(1).strip()
                if source:
                    messages.append(Message(source))
            return messages

        for match in MESSAGE_RE.finditer(segment):
            source = match.group(1).strip()
            if not source:
                continue
            if match.group("unfinished"):
                messages.append(Message(source))
            else:
                messages.append(
                    Message(
                        source,
                        TranslationState.TRANSLATED,
                        decode_markup(match.group("text")),
                    )
                )
        return messages


__all__ = ["DocumentScanner", "decode_markup"]
