"""Explicit lookup results.

These let callers tell "no such player" apart from "upstream failed",
which the plain resolver methods collapse into an empty result.
"""

from dataclasses import dataclass, field
from enum import Enum

from player_index.models.profile import PlayerProfile


class LookupStatus(str, Enum):
    """Outcome of a call to the upstream profile service."""

    FOUND = "FOUND"
    NOT_FOUND = "NOT_FOUND"  # Upstream answered, nothing matched
    FAILED = "FAILED"  # Transport error or malformed response


@dataclass
class ProfileLookup:
    """Result of looking up a single identifier."""

    status: LookupStatus
    profile: PlayerProfile | None = None
    reason: str | None = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND


@dataclass
class BatchLookup:
    """Result of looking up a batch of names."""

    status: LookupStatus
    profiles: list[PlayerProfile] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)  # One diagnosis per dropped entry
    reason: str | None = None

    @property
    def failed(self) -> bool:
        return self.status == LookupStatus.FAILED
