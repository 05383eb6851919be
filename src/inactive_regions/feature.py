"""
Inactive regions feature for a semantic-token capable language client.

Sits between the language server and the editor's semantic highlighting:
every token response passes through here, gets its inactive ranges cached and
rendered, and is handed on with the inactive token type remapped to an index
the highlighter does not know, so inactive code is not painted as a comment.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable, Iterable, Sequence
from typing import Any, Protocol

from lsprotocol import types as lsp

from .config import Settings, load_settings
from .decorations import DecorationApplier, DecorationHost, DecorationStyle, EditorView
from .errors import FeatureAlreadyInitialized
from .index import InactiveRegionIndex
from .tokens import (
    INERT_CODES,
    LegendSource,
    TokenTypeCodes,
    decode_inactive_ranges,
    reconstruct_semantic_tokens,
    remap_inactive_tokens,
    resolve_token_type_codes,
)

logger = logging.getLogger(__name__)


class Disposable(Protocol):
    def dispose(self) -> None: ...


class ActivationHost(DecorationHost, Protocol):
    """Host that can report visible-view changes."""

    def on_did_change_visible_views(
        self, callback: Callable[[Sequence[EditorView]], None]
    ) -> Disposable:
        """Call *callback* with the new visible views whenever they change."""
        ...


class InactiveRegionsFeature:
    """Static client feature that tracks and renders inactive regions."""

    def __init__(
        self,
        host: DecorationHost,
        *,
        settings: Settings | None = None,
        style: DecorationStyle | None = None,
        index: InactiveRegionIndex | None = None,
    ) -> None:
        self._settings = settings if settings is not None else Settings()
        self._index = index if index is not None else InactiveRegionIndex()
        self._applier = DecorationApplier(
            host,
            self._index,
            style if style is not None else DecorationStyle.from_settings(self._settings),
        )
        self._codes: TokenTypeCodes = INERT_CODES
        self._initialized = False
        self._subscriptions: list[Disposable] = []

    @property
    def codes(self) -> TokenTypeCodes:
        return self._codes

    @property
    def index(self) -> InactiveRegionIndex:
        return self._index

    @property
    def state(self) -> str:
        return "static"

    def fill_client_capabilities(self, capabilities: Any) -> None:
        del capabilities

    def initialize(self, capabilities: LegendSource) -> TokenTypeCodes:
        """Resolve the inactive token type from the server's legend.

        Must run once, before the first token payload of the session.
        """
        if self._initialized:
            raise FeatureAlreadyInitialized(
                "Semantic token legend already resolved for this session"
            )
        self._codes = resolve_token_type_codes(
            capabilities, token_type=self._settings.inactive_token_type
        )
        self._initialized = True
        if self._codes.enabled:
            logger.info(
                "Inactive regions enabled: token type %d remapped to %d",
                self._codes.inactive,
                self._codes.replacement,
            )
        else:
            logger.info(
                "Inactive regions disabled: server legend has no %r type",
                self._settings.inactive_token_type,
            )
        return self._codes

    def add_subscription(self, subscription: Disposable) -> None:
        self._subscriptions.append(subscription)

    def on_full_tokens(self, document: Hashable, tokens: lsp.SemanticTokens) -> lsp.SemanticTokens:
        """Cache *tokens*, render their inactive ranges, return a remapped copy."""
        ranges = decode_inactive_ranges(tokens.data, self._codes)
        remapped = remap_inactive_tokens(tokens.data, self._codes)
        self._index.store(document, tokens, ranges)
        self._applier.apply_to_document(document)
        return lsp.SemanticTokens(data=remapped, result_id=tokens.result_id)

    def on_token_delta(
        self,
        document: Hashable,
        previous_result_id: str,
        tokens: lsp.SemanticTokens | lsp.SemanticTokensDelta,
    ) -> lsp.SemanticTokens | lsp.SemanticTokensDelta:
        """Handle a ``full/delta`` response.

        Edits are applied to the cached response for *document*.  If that
        cache is missing or stale, the delta is returned untouched so the
        caller falls back to requesting full tokens.
        """
        if isinstance(tokens, lsp.SemanticTokensDelta):
            cached = self._index.tokens(document)
            reconstructed = reconstruct_semantic_tokens(
                cached.as_semantic_tokens() if cached is not None else None,
                previous_result_id,
                tokens,
            )
            if isinstance(reconstructed, lsp.SemanticTokensDelta):
                return reconstructed
            tokens = reconstructed
        return self.on_full_tokens(document, tokens)

    def on_visible_views_changed(self, views: Iterable[EditorView]) -> None:
        self._applier.apply_to_views(views)

    def on_document_closed(self, document: Hashable) -> None:
        self._index.discard(document)

    def dispose(self) -> None:
        """Release host subscriptions and forget every cached document."""
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.dispose()
        self._index.clear()


def activate(host: ActivationHost, settings: Settings | None = None) -> InactiveRegionsFeature:
    """Create the feature for *host* and re-render views as they become visible."""
    feature = InactiveRegionsFeature(
        host,
        settings=settings if settings is not None else load_settings(),
    )
    feature.add_subscription(host.on_did_change_visible_views(feature.on_visible_views_changed))
    return feature
