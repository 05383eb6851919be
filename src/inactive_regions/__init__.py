"""Inactive region tracking for semantic-token capable language clients."""

from .config import Settings, load_settings
from .decorations import (
    DecorationApplier,
    DecorationHost,
    DecorationRequest,
    DecorationStyle,
    EdgeBehavior,
    EditorView,
)
from .errors import FeatureAlreadyInitialized, InactiveRegionsError, MalformedTokenBuffer
from .feature import InactiveRegionsFeature, activate
from .index import CachedTokens, InactiveRegionIndex
from .tokens import InactiveRange, TokenTypeCodes, resolve_token_type_codes

__version__ = "0.1.0"

__all__ = [
    "CachedTokens",
    "DecorationApplier",
    "DecorationHost",
    "DecorationRequest",
    "DecorationStyle",
    "EdgeBehavior",
    "EditorView",
    "FeatureAlreadyInitialized",
    "InactiveRange",
    "InactiveRegionIndex",
    "InactiveRegionsError",
    "InactiveRegionsFeature",
    "MalformedTokenBuffer",
    "Settings",
    "TokenTypeCodes",
    "activate",
    "load_settings",
    "resolve_token_type_codes",
]
