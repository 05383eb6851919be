"""Semantic token legend resolution, decoding, delta reconstruction and wire conversion."""

from ._codec import (
    TOKEN_STRIDE,
    InactiveRange,
    check_token_buffer,
    decode_inactive_ranges,
    remap_inactive_tokens,
)
from ._delta import apply_semantic_token_edits, reconstruct_semantic_tokens
from ._legend import (
    INACTIVE_TOKEN_TYPE,
    INERT_CODES,
    LegendSource,
    TokenTypeCodes,
    resolve_token_type_codes,
)
from .wire import parse_delta_response, parse_full_tokens, parse_legend, to_wire

__all__ = [
    "INACTIVE_TOKEN_TYPE",
    "INERT_CODES",
    "LegendSource",
    "TOKEN_STRIDE",
    "InactiveRange",
    "TokenTypeCodes",
    "apply_semantic_token_edits",
    "check_token_buffer",
    "decode_inactive_ranges",
    "parse_delta_response",
    "parse_full_tokens",
    "parse_legend",
    "reconstruct_semantic_tokens",
    "remap_inactive_tokens",
    "resolve_token_type_codes",
    "to_wire",
]
