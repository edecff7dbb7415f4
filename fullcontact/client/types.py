"""Shared value types for contact operations.

Determinism:
    Pure value definitions and conversion; no I/O.
"""

from enum import Enum


class ActionType(str, Enum):
    """History filter values accepted by `contactLists/{id}/{id}/history`.

    Plain strings are accepted wherever an `ActionType` is; the remote service
    validates the value.
    """

    ADDED = "Added"
    UPDATED = "Updated"
    DELETED = "Deleted"
    ENRICHED = "Enriched"


def query_value(value):
    """Convert one option value to the spelling the API expects in a query.

    - `True`/`False` -> `"true"`/`"false"`
    - Enum members -> their value
    - Anything else is returned unchanged for `requests` to encode.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return value.value
    return value


def build_params(**options):
    """Build a query mapping from keyword options, dropping `None` values."""
    return {
        name: query_value(value)
        for name, value in options.items()
        if value is not None
    }
