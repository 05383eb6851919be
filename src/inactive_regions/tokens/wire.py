"""Conversion between JSON-RPC results and typed semantic token values."""

from __future__ import annotations

from typing import Any, TypeVar

from cattrs.errors import BaseValidationError
from lsprotocol import converters
from lsprotocol import types as lsp

from ..errors import MalformedTokenBuffer

_converter = converters.get_converter()

_T = TypeVar("_T")


def _structure(raw: dict[str, Any], cls: type[_T]) -> _T:
    try:
        return _converter.structure(raw, cls)
    except (BaseValidationError, KeyError, TypeError, ValueError) as exc:
        raise MalformedTokenBuffer(f"Invalid {cls.__name__} payload {raw!r}: {exc}") from exc


def parse_full_tokens(raw: Any) -> lsp.SemanticTokens:
    """Structure a ``textDocument/semanticTokens/full`` result."""
    if not isinstance(raw, dict) or not isinstance(raw.get("data"), list):
        raise MalformedTokenBuffer(f"Expected semantic tokens with a data array, got {raw!r}")
    return _structure(raw, lsp.SemanticTokens)


def parse_delta_response(raw: Any) -> lsp.SemanticTokens | lsp.SemanticTokensDelta:
    """Structure a ``textDocument/semanticTokens/full/delta`` result.

    Servers may answer a delta request with either full tokens or edits.
    """
    if isinstance(raw, dict):
        if isinstance(raw.get("edits"), list):
            return _structure(raw, lsp.SemanticTokensDelta)
        if isinstance(raw.get("data"), list):
            return _structure(raw, lsp.SemanticTokens)
    raise MalformedTokenBuffer(f"Expected semantic tokens or token edits, got {raw!r}")


def parse_legend(raw: Any) -> lsp.SemanticTokensLegend | None:
    """Extract the semantic token legend from an ``initialize`` result.

    Accepts the whole result or just its ``capabilities`` object.  Returns
    ``None`` when the server does not provide a usable legend.
    """
    if not isinstance(raw, dict):
        return None
    capabilities = raw.get("capabilities", raw)
    if not isinstance(capabilities, dict):
        return None
    provider = capabilities.get("semanticTokensProvider")
    if not isinstance(provider, dict):
        return None
    legend = provider.get("legend")
    if not isinstance(legend, dict) or not isinstance(legend.get("tokenTypes"), list):
        return None
    modifiers = legend.get("tokenModifiers") or []
    if not isinstance(modifiers, list):
        modifiers = []
    return lsp.SemanticTokensLegend(
        token_types=[str(name) for name in legend["tokenTypes"]],
        token_modifiers=[str(name) for name in modifiers],
    )


def to_wire(value: lsp.SemanticTokens | lsp.SemanticTokensDelta) -> dict[str, Any]:
    """Unstructure a token payload into its JSON-RPC form."""
    return _converter.unstructure(value)
