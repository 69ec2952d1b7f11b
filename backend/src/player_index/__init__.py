"""Player name to identifier lookup service."""

__version__ = "0.1.0"
