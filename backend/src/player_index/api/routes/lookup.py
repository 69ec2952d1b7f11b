"""REST endpoints for name and identifier lookups."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, Request
from pydantic import BaseModel

from player_index.errors import InvalidIdentifierError
from player_index.models.identifier import dashed, parse_identifier
from player_index.models.lookup import LookupStatus
from player_index.services.identifier_extractor import extract_identifiers
from player_index.services.profile_resolver import ProfileResolver

router = APIRouter(tags=["lookup"])


class ProfileResponse(BaseModel):
    """A resolved player profile."""

    id: str
    name: str
    properties: list[Any] | None = None


def _get_resolver(request: Request) -> ProfileResolver:
    return request.app.state.resolver


@router.post("/uuid/", response_model=list[str])
def lookup_uuids(request: Request, names: Annotated[list[str], Body()]):
    """Translate a batch of player names into their identifiers.

    Names with no matching player are left out of the response.
    """
    result = _get_resolver(request).lookup_names(names)
    if result.failed:
        raise HTTPException(status_code=502, detail=result.reason)
    return sorted(dashed(identifier) for identifier in extract_identifiers(result.profiles))


@router.post("/profiles", response_model=list[ProfileResponse])
def lookup_profiles(request: Request, names: Annotated[list[str], Body()]):
    """Resolve a batch of player names into full profiles."""
    result = _get_resolver(request).lookup_names(names)
    if result.failed:
        raise HTTPException(status_code=502, detail=result.reason)
    return [ProfileResponse(**profile.to_dict()) for profile in result.profiles]


@router.get("/profile/{identifier}", response_model=ProfileResponse)
def get_profile(request: Request, identifier: str):
    """Get one player's profile, including properties, by identifier.

    Accepts the identifier with or without dashes.
    """
    try:
        player_id = parse_identifier(identifier)
    except InvalidIdentifierError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = _get_resolver(request).lookup_id(player_id)
    if result.status == LookupStatus.FAILED:
        raise HTTPException(status_code=502, detail=result.reason)
    if not result.found:
        raise HTTPException(status_code=404, detail=f"Profile not found: {dashed(player_id)}")
    return ProfileResponse(**result.profile.to_dict())
