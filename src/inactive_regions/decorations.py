"""Rendering of inactive ranges through the host editor."""

from __future__ import annotations

import enum
import logging
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass
from typing import Protocol

from .config import Settings
from .index import InactiveRegionIndex
from .tokens import InactiveRange

logger = logging.getLogger(__name__)


class EdgeBehavior(enum.Enum):
    """Whether a decoration grows when text is typed at its edges."""

    OPEN_OPEN = "openOpen"
    CLOSED_CLOSED = "closedClosed"
    OPEN_CLOSED = "openClosed"
    CLOSED_OPEN = "closedOpen"


@dataclass(frozen=True)
class DecorationStyle:
    """Visual treatment applied to inactive ranges."""

    opacity: str
    edge_behavior: EdgeBehavior = EdgeBehavior.OPEN_OPEN

    @classmethod
    def from_settings(cls, settings: Settings) -> DecorationStyle:
        return cls(opacity=str(settings.inactive_region_opacity))


@dataclass(frozen=True)
class DecorationRequest:
    """One rendering call: the full set of ranges to show for a view."""

    ranges: tuple[InactiveRange, ...]
    style: DecorationStyle


class EditorView(Protocol):
    """A visible editor bound to a document."""

    @property
    def document(self) -> Hashable: ...


class DecorationHost(Protocol):
    """Editor-side operations the applier relies on."""

    def visible_views(self) -> Sequence[EditorView]:
        """Return the editor views currently on screen."""
        ...

    def render(self, view: EditorView, request: DecorationRequest) -> None:
        """Replace the inactive-region decorations shown in *view*."""
        ...


class DecorationApplier:
    """Pushes cached inactive ranges to editor views.

    Reads only from the index; it never decodes tokens itself.
    """

    def __init__(
        self,
        host: DecorationHost,
        index: InactiveRegionIndex,
        style: DecorationStyle,
    ) -> None:
        self._host = host
        self._index = index
        self._style = style

    @property
    def style(self) -> DecorationStyle:
        return self._style

    def apply(self, view: EditorView) -> bool:
        """Render cached ranges in *view*; return False if none are cached."""
        document = view.document
        if document not in self._index:
            return False
        ranges = self._index.ranges(document)
        self._host.render(view, DecorationRequest(ranges=ranges, style=self._style))
        logger.debug("Applied %d inactive ranges to view of %s", len(ranges), document)
        return True

    def apply_to_views(self, views: Iterable[EditorView]) -> None:
        for view in views:
            self.apply(view)

    def apply_to_document(self, document: Hashable) -> None:
        """Render cached ranges in every visible view of *document*."""
        for view in self._host.visible_views():
            if view.document == document:
                self.apply(view)
