"""Business logic services."""

from player_index.services.identifier_extractor import extract_identifiers
from player_index.services.profile_resolver import ProfileResolver, parse_profile

__all__ = [
    "ProfileResolver",
    "extract_identifiers",
    "parse_profile",
]
