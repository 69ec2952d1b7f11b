"""Projection of resolved profiles down to their identifiers."""

from collections.abc import Iterable
from uuid import UUID

from player_index.models.profile import PlayerProfile


def extract_identifiers(profiles: Iterable[PlayerProfile]) -> set[UUID]:
    """Collect the unique identifiers of the given profiles.

    Profiles sharing an identifier (the upstream answering twice for the
    same player) coalesce into one entry.
    """
    return {profile.id for profile in profiles}
