"""Shared test utilities."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from inactive_regions.decorations import DecorationRequest

# Token types as advertised by clangd; "comment" marks inactive code.
CLANGD_TOKEN_TYPES = (
    "variable",
    "variable",
    "parameter",
    "function",
    "method",
    "function",
    "property",
    "variable",
    "class",
    "interface",
    "enum",
    "enumMember",
    "type",
    "type",
    "unknown",
    "namespace",
    "typeParameter",
    "concept",
    "type",
    "macro",
    "modifier",
    "operator",
    "bracket",
    "label",
    "comment",
)
CLANGD_COMMENT_INDEX = 24


@dataclass(frozen=True)
class FakeView:
    document: str
    name: str = "editor"


@dataclass
class FakeSubscription:
    callbacks: list[Callable[[Sequence[FakeView]], None]]
    callback: Callable[[Sequence[FakeView]], None]
    disposed: bool = False

    def dispose(self) -> None:
        self.disposed = True
        self.callbacks.remove(self.callback)


@dataclass
class RecordingHost:
    """Editor host double that records every render request."""

    views: list[FakeView] = field(default_factory=list)
    rendered: list[tuple[FakeView, DecorationRequest]] = field(default_factory=list)
    callbacks: list[Callable[[Sequence[FakeView]], None]] = field(default_factory=list)
    subscriptions: list[FakeSubscription] = field(default_factory=list)

    def visible_views(self) -> Sequence[FakeView]:
        return list(self.views)

    def render(self, view: FakeView, request: DecorationRequest) -> None:
        self.rendered.append((view, request))

    def on_did_change_visible_views(
        self, callback: Callable[[Sequence[FakeView]], None]
    ) -> FakeSubscription:
        self.callbacks.append(callback)
        subscription = FakeSubscription(self.callbacks, callback)
        self.subscriptions.append(subscription)
        return subscription

    def show(self, *views: FakeView) -> None:
        """Make *views* the visible set and notify subscribers."""
        self.views = list(views)
        for callback in list(self.callbacks):
            callback(self.views)
