"""Semantic token decoding and remapping for inactive regions.

The LSP protocol encodes tokens as a flat integer array, five integers per
token: ``(deltaLine, deltaStartChar, length, tokenTypeIndex, modifierBitmask)``.
Line deltas are relative to the previous token; start characters are relative
to the previous token only when both sit on the same line.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lsprotocol import types as lsp

from ..errors import MalformedTokenBuffer
from ._legend import TokenTypeCodes

TOKEN_STRIDE = 5
_TYPE_OFFSET = 3


@dataclass(frozen=True)
class InactiveRange:
    """Single-line source range covered by one inactive token (0-based)."""

    start_line: int
    start_char: int
    end_line: int
    end_char: int

    def as_lsp_range(self) -> lsp.Range:
        return lsp.Range(
            start=lsp.Position(line=self.start_line, character=self.start_char),
            end=lsp.Position(line=self.end_line, character=self.end_char),
        )


def check_token_buffer(data: Sequence[int]) -> None:
    """Raise :class:`MalformedTokenBuffer` unless *data* holds whole tokens."""
    if len(data) % TOKEN_STRIDE != 0:
        raise MalformedTokenBuffer(
            f"Semantic token data length {len(data)} is not a multiple of {TOKEN_STRIDE}"
        )


def decode_inactive_ranges(data: Sequence[int], codes: TokenTypeCodes) -> list[InactiveRange]:
    """Decode *data* into the absolute ranges of its inactive tokens.

    Running line/char state advances over every token, whatever its type, so
    positions stay correct across interleaved active tokens.
    """
    check_token_buffer(data)
    if codes.inactive is None:
        return []

    ranges: list[InactiveRange] = []
    current_line = 0
    current_char = 0

    for i in range(0, len(data), TOKEN_STRIDE):
        delta_line = data[i]
        delta_start = data[i + 1]
        length = data[i + 2]
        type_index = data[i + 3]

        current_line += delta_line
        if delta_line != 0:
            current_char = delta_start
        else:
            current_char += delta_start

        if type_index == codes.inactive:
            ranges.append(
                InactiveRange(
                    start_line=current_line,
                    start_char=current_char,
                    end_line=current_line,
                    end_char=current_char + length,
                )
            )

    return ranges


def remap_inactive_tokens(data: Sequence[int], codes: TokenTypeCodes) -> list[int]:
    """Return a copy of *data* with inactive token types replaced.

    Only the type field of inactive tokens changes; length, order and every
    other field are copied as-is.  *data* itself is never modified.
    """
    check_token_buffer(data)
    remapped = list(data)
    inactive, replacement = codes.inactive, codes.replacement
    if inactive is None or replacement is None:
        return remapped

    for i in range(_TYPE_OFFSET, len(remapped), TOKEN_STRIDE):
        if remapped[i] == inactive:
            remapped[i] = replacement
    return remapped
