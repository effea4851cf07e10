"""Tabular exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each error also derives from the closest builtin so callers can
catch either the domain type or the standard one.
"""

from __future__ import annotations


class TabularError(Exception):
    """Base exception for all tabular container failures."""


class TabularConfigError(TabularError):
    """Raised for invalid runtime configuration."""


class RecordIdentityError(TabularError, ValueError):
    """Raised when a record lacks the identity an operation requires."""


class ReadOnlyViewError(TabularError, TypeError):
    """Raised when mutation is attempted through a read-only record view."""


class RecordLookupError(TabularError, LookupError):
    """Raised when requested record identities are not stored in a dataset."""


class ConcurrentMutationError(TabularError, RuntimeError):
    """Raised when a dataset changes while an iterator over it is live."""
