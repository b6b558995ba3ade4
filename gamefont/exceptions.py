"""Exceptions raised while looking up font banks or transcoding text."""

from __future__ import annotations


class GameFontError(ValueError):
    """Base class for all game font errors."""


class UnknownVersion(GameFontError):
    """Raised when a text version is not present in the registry."""

    def __init__(self, version: object) -> None:
        super().__init__(f"unknown text version {version}")
        self.version = version


class InvalidFontTable(GameFontError):
    """Raised when a font table definition fails schema validation."""


class EscapeError(GameFontError):
    """Base class for malformed escape sequences in display text."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(f"{message} at position {position}")
        self.position = position


class IncompleteEscape(EscapeError):
    """A backslash or \\c escape is cut off by the end of the string."""


class InvalidEscape(EscapeError):
    """An escape letter other than c, quote or backslash was used."""


class InvalidHexEscape(EscapeError):
    """The two characters after \\c are not hexadecimal digits."""
