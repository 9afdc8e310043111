"""Identifier syntax checks.

Aggregates use Protean's ``uuid`` identity strategy, so every brand and
product id is the string form of a UUID.
"""

import uuid

from wholesale.shared.errors import InvalidId


def ensure_valid_id(value) -> str:
    """Return ``value`` as a string, raising ``InvalidId`` if it is not a UUID."""
    try:
        uuid.UUID(str(value))
    except (TypeError, ValueError):
        raise InvalidId(value) from None
    return str(value)
