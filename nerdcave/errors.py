"""Exceptions for broken content or configuration.

Gameplay mistakes never raise; they come back as error lines.
"""


class NerdCaveError(Exception):
    pass


class WorldError(NerdCaveError):
    """Static room data is inconsistent."""


class ConfigError(NerdCaveError):
    """Configuration file is missing or malformed."""
