"""
Per-document cache of semantic tokens and decoded inactive ranges.

Holds, for every open document, the last full token response (the basis for
delta reconstruction) and the inactive ranges decoded from it.  Entries are
replaced wholesale on every processed payload and dropped when the document
closes.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from dataclasses import dataclass

from lsprotocol import types as lsp

from .tokens import InactiveRange

logger = logging.getLogger(__name__)

DocumentKey = Hashable


@dataclass(frozen=True, slots=True)
class CachedTokens:
    """Last full token data received for a document, in server encoding."""

    result_id: str | None
    data: tuple[int, ...]

    def as_semantic_tokens(self) -> lsp.SemanticTokens:
        return lsp.SemanticTokens(data=self.data, result_id=self.result_id)


class InactiveRegionIndex:
    """Document-keyed store for token responses and their inactive ranges."""

    def __init__(self) -> None:
        self._tokens: dict[DocumentKey, CachedTokens] = {}
        self._ranges: dict[DocumentKey, tuple[InactiveRange, ...]] = {}

    def __len__(self) -> int:
        return len(self._tokens)

    def __contains__(self, document: object) -> bool:
        return document in self._tokens

    def store(
        self,
        document: DocumentKey,
        tokens: lsp.SemanticTokens,
        ranges: Sequence[InactiveRange],
    ) -> None:
        """Replace both cache entries for *document*."""
        self._tokens[document] = CachedTokens(result_id=tokens.result_id, data=tuple(tokens.data))
        self._ranges[document] = tuple(ranges)

    def tokens(self, document: DocumentKey) -> CachedTokens | None:
        """Return the cached full token data for *document*, if any."""
        return self._tokens.get(document)

    def ranges(self, document: DocumentKey) -> tuple[InactiveRange, ...]:
        """Return cached inactive ranges; an unknown document has none."""
        return self._ranges.get(document, ())

    def discard(self, document: DocumentKey) -> None:
        """Forget everything cached for *document*."""
        if self._tokens.pop(document, None) is not None:
            logger.debug("Dropped inactive region cache for %s", document)
        self._ranges.pop(document, None)

    def clear(self) -> None:
        self._tokens.clear()
        self._ranges.clear()
