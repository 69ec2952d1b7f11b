"""Data models for the player index."""

from player_index.models.identifier import dashed, parse_identifier, undashed
from player_index.models.profile import PlayerProfile
from player_index.models.lookup import BatchLookup, LookupStatus, ProfileLookup

__all__ = [
    "dashed",
    "parse_identifier",
    "undashed",
    "PlayerProfile",
    "BatchLookup",
    "LookupStatus",
    "ProfileLookup",
]
