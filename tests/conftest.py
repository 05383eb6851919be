"""Global pytest fixtures for deterministic test behavior."""

from __future__ import annotations

import pytest
from helpers import CLANGD_TOKEN_TYPES, RecordingHost
from lsprotocol import types as lsp


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch, tmp_path):
    """Keep settings lookups away from the real environment and cwd."""
    monkeypatch.delenv("INACTIVE_REGIONS_OPACITY", raising=False)
    monkeypatch.delenv("INACTIVE_REGIONS_TOKEN_TYPE", raising=False)
    monkeypatch.setenv("INACTIVE_REGIONS_WORKSPACE", str(tmp_path))


@pytest.fixture()
def clangd_legend() -> lsp.SemanticTokensLegend:
    return lsp.SemanticTokensLegend(
        token_types=list(CLANGD_TOKEN_TYPES),
        token_modifiers=["declaration", "definition", "deprecated", "readonly", "static"],
    )


@pytest.fixture()
def clangd_capabilities(clangd_legend) -> lsp.ServerCapabilities:
    return lsp.ServerCapabilities(
        semantic_tokens_provider=lsp.SemanticTokensOptions(legend=clangd_legend, full=True),
    )


@pytest.fixture()
def host() -> RecordingHost:
    return RecordingHost()
