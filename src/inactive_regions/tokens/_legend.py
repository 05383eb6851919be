"""Token-type legend resolution.

Finds the legend position of the token type the server uses for inactive
code, and picks an unused index to substitute for it in the copy handed back
to the renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from lsprotocol import types as lsp

logger = logging.getLogger(__name__)

INACTIVE_TOKEN_TYPE = "comment"


@dataclass(frozen=True)
class TokenTypeCodes:
    """Resolved integer codes for the inactive token type.

    ``inactive`` is the legend index of the inactive token type and
    ``replacement`` is one past the last declared token type.  Either may be
    ``None`` when the server advertised no usable legend, which makes every
    decode empty and every remap a plain copy.
    """

    inactive: int | None = None
    replacement: int | None = None

    @property
    def enabled(self) -> bool:
        return self.inactive is not None and self.replacement is not None


INERT_CODES = TokenTypeCodes()

LegendSource = lsp.ServerCapabilities | lsp.SemanticTokensLegend | Sequence[str] | None


def _legend_token_types(source: LegendSource) -> Sequence[str] | None:
    if source is None:
        return None
    if isinstance(source, lsp.ServerCapabilities):
        provider = source.semantic_tokens_provider
        if provider is None:
            return None
        return provider.legend.token_types
    if isinstance(source, lsp.SemanticTokensLegend):
        return source.token_types
    return source


def resolve_token_type_codes(
    source: LegendSource,
    *,
    token_type: str = INACTIVE_TOKEN_TYPE,
) -> TokenTypeCodes:
    """Resolve inactive/replacement codes from a server legend.

    *source* may be the server capabilities from the ``initialize`` response,
    a bare legend, or the sequence of token type names.  When the legend
    lists *token_type* more than once, the last occurrence wins.
    """
    token_types = _legend_token_types(source)
    if token_types is None:
        logger.debug("No semantic token legend advertised; inactive regions disabled")
        return INERT_CODES

    inactive: int | None = None
    for index, name in enumerate(token_types):
        if name == token_type:
            inactive = index

    if inactive is None:
        logger.debug("Semantic token legend has no %r type; inactive regions disabled", token_type)

    return TokenTypeCodes(inactive=inactive, replacement=len(token_types))
