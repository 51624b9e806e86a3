"""Product domain exceptions.

Raised by the policy and repository layers when business rules are
violated.  The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class UnknownProductType(Exception):
    """A product carries a type with no availability policy."""


class InsufficientStock(Exception):
    """A stock decrement would make the available quantity negative (RN-PRO-001)."""
