"""Rebuild full semantic token data from ``semanticTokens/full/delta`` edits."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from lsprotocol import types as lsp

from ..errors import MalformedTokenBuffer

logger = logging.getLogger(__name__)


def _edit_length(edit: lsp.SemanticTokensEdit) -> int:
    return len(edit.data) if edit.data else 0


def apply_semantic_token_edits(
    previous: Sequence[int],
    edits: Sequence[lsp.SemanticTokensEdit],
) -> list[int]:
    """Apply *edits* to *previous* in one forward pass and return a new array.

    Edits must be sorted by ``start`` and must not overlap; offsets count raw
    integers, not tokens.  *previous* is left untouched.
    """
    size = len(previous)
    delta_length = 0
    for edit in edits:
        delta_length += _edit_length(edit) - edit.delete_count

    result = [0] * (size + delta_length)
    read_index = 0
    write_index = 0
    for edit in edits:
        end = edit.start + edit.delete_count
        if edit.start < read_index or end > size:
            raise MalformedTokenBuffer(
                f"Semantic token edit (start={edit.start}, deleteCount={edit.delete_count}) "
                f"does not fit a buffer of {size} integers after offset {read_index}"
            )

        copy_count = edit.start - read_index
        if copy_count > 0:
            result[write_index : write_index + copy_count] = previous[read_index : edit.start]
            write_index += copy_count

        if edit.data:
            insert_count = len(edit.data)
            result[write_index : write_index + insert_count] = edit.data
            write_index += insert_count

        read_index = end

    if read_index < size:
        result[write_index:] = previous[read_index:]

    return result


def reconstruct_semantic_tokens(
    previous: lsp.SemanticTokens | None,
    previous_result_id: str,
    delta: lsp.SemanticTokensDelta,
) -> lsp.SemanticTokens | lsp.SemanticTokensDelta:
    """Turn *delta* into full tokens using the cached *previous* response.

    Returns *delta* itself, unchanged, when there is no cached response or the
    cached ``result_id`` is not *previous_result_id*; the caller must then
    request full tokens again.
    """
    if previous is None or previous.result_id != previous_result_id:
        logger.debug(
            "Cannot apply semantic token delta: cached result %r, expected %r",
            None if previous is None else previous.result_id,
            previous_result_id,
        )
        return delta

    data = apply_semantic_token_edits(previous.data, delta.edits)
    return lsp.SemanticTokens(data=data, result_id=delta.result_id)
