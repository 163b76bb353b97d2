"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

- ErrorKey: validation failure kinds for write requests
- Present / Absent: explicit result of a lookup that may find nothing
"""

from .error_key import ErrorKey
from .lookup import Absent, Lookup, Present, lookup_of

__all__ = ["ErrorKey", "Absent", "Lookup", "Present", "lookup_of"]
