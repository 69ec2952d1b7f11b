"""Client for the upstream profile service.

Turns player names into profiles (and identifiers into profiles) through
the upstream HTTP API. Every response is treated as untrusted JSON: records
that don't have the expected shape are dropped, never surfaced half-built.

There is no cache. Each call is one live round trip per batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any, Optional
from uuid import UUID

import httpx

from player_index.errors import InvalidIdentifierError, ProfileParseError
from player_index.models.identifier import parse_identifier, undashed
from player_index.models.lookup import BatchLookup, LookupStatus, ProfileLookup
from player_index.models.profile import PlayerProfile

if TYPE_CHECKING:
    from player_index.config import Settings

logger = logging.getLogger(__name__)

_MISSING = object()


def parse_profile(entry: Any) -> PlayerProfile:
    """Build a profile from one upstream JSON record.

    ``name`` and ``id`` are required strings. ``properties`` is attached
    as-is when it is a list and ignored otherwise.

    Raises:
        ProfileParseError: with a short diagnosis of what was wrong
    """
    if not isinstance(entry, dict):
        raise ProfileParseError(f"entry is not an object: {type(entry).__name__}")

    for key in ("name", "id"):
        value = entry.get(key, _MISSING)
        if value is _MISSING:
            raise ProfileParseError(f"missing field '{key}'")
        if not isinstance(value, str):
            raise ProfileParseError(f"field '{key}' is not a string")

    try:
        identifier = parse_identifier(entry["id"])
    except InvalidIdentifierError as e:
        raise ProfileParseError(str(e)) from e

    properties = entry.get("properties")
    if not isinstance(properties, list):
        properties = None

    return PlayerProfile(id=identifier, name=entry["name"], properties=properties)


def _chunks(names: Sequence[str], size: int) -> list[list[str]]:
    # An empty request is still sent once
    if not names:
        return [[]]
    return [list(names[i:i + size]) for i in range(0, len(names), size)]


class ProfileResolver:
    """Resolves player names and identifiers against the upstream service.

    Holds no state besides its HTTP client, so one instance can be shared
    between request handlers.
    """

    def __init__(
        self,
        batch_url: str,
        profile_url: str,
        timeout: float,
        batch_size: int,
        client: Optional[httpx.Client] = None,
    ):
        """Initialize the resolver.

        Args:
            batch_url: Endpoint accepting a POSTed JSON array of names
            profile_url: Single profile endpoint, with an ``{id}`` placeholder
            timeout: Per-request timeout in seconds
            batch_size: Maximum names sent in one POST
            client: Pre-built HTTP client (tests pass one with a mock transport)
        """
        if batch_size < 1:
            raise ValueError(f"batch_size must be positive, got {batch_size}")
        self.batch_url = batch_url
        self.profile_url = profile_url
        self.timeout = timeout
        self.batch_size = batch_size
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> ProfileResolver:
        return cls(
            batch_url=settings.batch_profiles_url,
            profile_url=settings.session_profile_url,
            timeout=settings.upstream_timeout,
            batch_size=settings.batch_size,
        )

    def _get_client(self) -> httpx.Client:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(timeout=self.timeout)
        return self._client

    def close(self):
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()

    def __enter__(self) -> ProfileResolver:
        return self

    def __exit__(self, *exc_info):
        self.close()

    # Plain lookups: every failure collapses to an empty result

    def resolve_by_name(self, names: Iterable[str]) -> list[PlayerProfile]:
        """Look up the profiles for the given names.

        Profiles returned here never include properties; use
        ``resolve_by_id`` for that. Returns an empty list when the upstream
        fails, so "no such player" and "upstream down" look the same. Use
        ``lookup_names`` to tell them apart.
        """
        result = self.lookup_names(names)
        if result.failed:
            return []
        return result.profiles

    def resolve_by_id(self, identifier: UUID) -> PlayerProfile | None:
        """Look up the profile, including properties, for one identifier.

        Returns None when the player is unknown or the upstream fails.
        """
        return self.lookup_id(identifier).profile

    # Explicit lookups

    def lookup_names(self, names: Iterable[str]) -> BatchLookup:
        """Look up names, reporting upstream failures and dropped entries."""
        names = list(names)
        profiles: list[PlayerProfile] = []
        skipped: list[str] = []

        for chunk in _chunks(names, self.batch_size):
            payload, reason = self._request("POST", self.batch_url, json=chunk)
            if reason is not None:
                return BatchLookup(status=LookupStatus.FAILED, reason=reason)
            if payload is None:
                continue
            if not isinstance(payload, list):
                reason = f"expected a JSON array, got {type(payload).__name__}"
                logger.warning(f"Batch profile lookup failed: {reason}")
                return BatchLookup(status=LookupStatus.FAILED, reason=reason)

            for entry in payload:
                # A bad entry only drops itself, the rest of the batch is kept
                try:
                    profiles.append(parse_profile(entry))
                except ProfileParseError as e:
                    logger.debug(f"Skipping upstream entry: {e.reason}")
                    skipped.append(e.reason)

        if skipped:
            logger.info(f"Dropped {len(skipped)} malformed entries from batch lookup")
        status = LookupStatus.FOUND if profiles else LookupStatus.NOT_FOUND
        return BatchLookup(status=status, profiles=profiles, skipped=skipped)

    def lookup_id(self, identifier: UUID) -> ProfileLookup:
        """Look up a single identifier, reporting upstream failures."""
        url = self.profile_url.format(id=undashed(identifier))
        payload, reason = self._request("GET", url)
        if reason is not None:
            return ProfileLookup(status=LookupStatus.FAILED, reason=reason)
        if payload is None:
            return ProfileLookup(status=LookupStatus.NOT_FOUND)
        if not isinstance(payload, dict):
            reason = f"expected a JSON object, got {type(payload).__name__}"
            logger.warning(f"Profile lookup for {identifier} failed: {reason}")
            return ProfileLookup(status=LookupStatus.FAILED, reason=reason)

        try:
            profile = parse_profile(payload)
        except ProfileParseError as e:
            logger.debug(f"Discarding profile for {identifier}: {e.reason}")
            return ProfileLookup(status=LookupStatus.NOT_FOUND, reason=e.reason)
        return ProfileLookup(status=LookupStatus.FOUND, profile=profile)

    def _request(self, method: str, url: str, **kwargs) -> tuple[Any, str | None]:
        """Send one request and decode its JSON body.

        Returns ``(payload, None)`` on success, where payload is None for a
        404 or an empty body, and ``(None, reason)`` on failure.
        """
        try:
            client = self._get_client()
            response = client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            logger.warning(f"Upstream {method} {url} failed: {e}")
            return None, f"transport error: {e}"

        if response.status_code == 404:
            return None, None
        if response.status_code == 429:
            logger.warning(f"Upstream rate limited {method} {url}")
            return None, "rate limited by upstream"
        if not response.is_success:
            logger.warning(f"Unexpected upstream response {response.status_code} for {method} {url}")
            return None, f"upstream returned status {response.status_code}"
        if response.status_code == 204 or not response.content.strip():
            return None, None

        try:
            return response.json(), None
        except ValueError as e:
            logger.warning(f"Upstream {method} {url} returned malformed JSON: {e}")
            return None, "malformed JSON response"
