"""Exceptions raised by the player index."""


class PlayerIndexError(Exception):
    """Base class for player index errors."""


class InvalidIdentifierError(PlayerIndexError, ValueError):
    """Raised when a string is not a well-formed player identifier."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"invalid identifier: {raw!r}")


class ProfileParseError(PlayerIndexError):
    """Raised when an upstream record can't be turned into a profile."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(reason)
