"""Player identifier parsing and formatting.

Upstream services return identifiers as 32 contiguous hex digits, while
callers usually hold the dashed 8-4-4-4-12 form. Both normalize to the
same ``uuid.UUID``.
"""

import re
from uuid import UUID

from player_index.errors import InvalidIdentifierError

_UNDASHED = re.compile(r"[0-9a-fA-F]{32}")
_DASHED = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def parse_identifier(raw: str) -> UUID:
    """Parse a dashed or undashed identifier string.

    ``uuid.UUID`` alone is too lenient here (it also takes braces and
    ``urn:uuid:`` prefixes), so the two accepted shapes are checked first.
    Both patterns must match the whole string, trailing newline included.

    Raises:
        InvalidIdentifierError: if ``raw`` is not 32 hex digits, optionally dashed
    """
    if not isinstance(raw, str):
        raise InvalidIdentifierError(raw)
    if not (_UNDASHED.fullmatch(raw) or _DASHED.fullmatch(raw)):
        raise InvalidIdentifierError(raw)
    return UUID(raw)


def undashed(identifier: UUID) -> str:
    """32 hex digit form used in upstream URLs."""
    return identifier.hex


def dashed(identifier: UUID) -> str:
    """Canonical dashed form returned to callers."""
    return str(identifier)
