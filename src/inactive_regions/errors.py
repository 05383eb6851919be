"""Exceptions raised while processing semantic token payloads."""

from __future__ import annotations


class InactiveRegionsError(Exception):
    """Base class for inactive-region processing failures."""


class MalformedTokenBuffer(InactiveRegionsError, ValueError):
    """A token payload violates the semantic token encoding contract.

    Raised for buffers whose length is not a multiple of five and for delta
    edits that fall outside the buffer they apply to.  Processing of the
    offending payload stops before any cached state is replaced.
    """


class FeatureAlreadyInitialized(InactiveRegionsError, RuntimeError):
    """The token legend was already resolved for this session."""
