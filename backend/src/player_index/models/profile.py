"""Player profile model."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from player_index.models.identifier import dashed


@dataclass(frozen=True)
class PlayerProfile:
    """A resolved player.

    ``properties`` is None when the upstream response didn't include it.
    That means "not fetched", which is not the same as an empty list.
    Name lookups never carry properties; identifier lookups usually do.
    """

    id: UUID
    name: str
    properties: list[Any] | None = None

    @property
    def has_properties(self) -> bool:
        return self.properties is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize with the identifier in canonical dashed form."""
        return {
            "id": dashed(self.id),
            "name": self.name,
            "properties": self.properties,
        }
