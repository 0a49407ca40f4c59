# -*- coding: utf-8 -*-
"""Exceptions raised by panokit.

All of them derive from ValueError, so code that already guards calls with ``except ValueError`` keeps working.
"""


class IntervalError(ValueError):
    """Raised when an interval cannot be built or two intervals cannot be united."""


class DomainError(ValueError):
    """Raised when a numeric routine is called outside of its domain."""


class RootNotFoundError(DomainError):
    """Raised when a bracket scan reaches its upper bound without a sign change."""
