"""Registry of known game text versions and their font banks."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
import logging
from typing import Any

from .const import VERSION_JAK1_V1, VERSION_JAK1_V2, VERSION_JAK2
from .exceptions import UnknownVersion
from .profile import (
    CONF_ALLOW_LOWERCASE,
    CONF_ENCODE_RULES,
    CONF_KOREAN,
    CONF_NAME,
    CONF_PASSTHROUGH,
    CONF_REPLACE_RULES,
    VersionProfile,
    build_profile,
)
from .tables import (
    JAK1_ENCODE_RULES,
    JAK1_PASSTHROUGH,
    JAK1_REPLACE_RULES,
    JAK1_V2_ENCODE_RULES,
    JAK2_ENCODE_RULES,
    JAK2_PASSTHROUGH,
    JAK2_REPLACE_RULES,
)

_LOGGER = logging.getLogger(__name__)


class GameTextVersion(str, Enum):
    """Game text versions with a known font bank."""

    JAK1_V1 = VERSION_JAK1_V1
    JAK1_V2 = VERSION_JAK1_V2
    JAK2 = VERSION_JAK2


_PROFILE_DEFINITIONS: dict[GameTextVersion, dict[str, Any]] = {
    GameTextVersion.JAK1_V1: {
        CONF_NAME: VERSION_JAK1_V1,
        CONF_ENCODE_RULES: JAK1_ENCODE_RULES,
        CONF_REPLACE_RULES: JAK1_REPLACE_RULES,
        CONF_PASSTHROUGH: JAK1_PASSTHROUGH,
    },
    GameTextVersion.JAK1_V2: {
        CONF_NAME: VERSION_JAK1_V2,
        CONF_ENCODE_RULES: JAK1_V2_ENCODE_RULES,
        CONF_REPLACE_RULES: JAK1_REPLACE_RULES,
        CONF_PASSTHROUGH: JAK1_PASSTHROUGH,
    },
    GameTextVersion.JAK2: {
        CONF_NAME: VERSION_JAK2,
        CONF_ENCODE_RULES: JAK2_ENCODE_RULES,
        CONF_REPLACE_RULES: JAK2_REPLACE_RULES,
        CONF_PASSTHROUGH: JAK2_PASSTHROUGH,
        CONF_ALLOW_LOWERCASE: True,
        CONF_KOREAN: True,
    },
}


def text_version_from_name(name: str) -> GameTextVersion:
    """Get the version enum for a version name.

    Raises:
        UnknownVersion: If no version has that name.
    """
    try:
        return GameTextVersion(name)
    except ValueError:
        raise UnknownVersion(name) from None


def get_text_version_name(version: GameTextVersion) -> str:
    """Get the name of a version."""
    return GameTextVersion(version).value


def font_bank_exists(version: GameTextVersion | str) -> bool:
    """Check if a font bank is registered for a version."""
    try:
        return _resolve_version(version) in _PROFILE_DEFINITIONS
    except UnknownVersion:
        return False


def available_versions() -> list[str]:
    """Get the names of all registered versions."""
    return [version.value for version in _PROFILE_DEFINITIONS]


def _resolve_version(identifier: GameTextVersion | str) -> GameTextVersion:
    if isinstance(identifier, GameTextVersion):
        return identifier
    if isinstance(identifier, str):
        return text_version_from_name(identifier)
    raise UnknownVersion(identifier)


@lru_cache(maxsize=None)
def _get_profile(version: GameTextVersion) -> VersionProfile:
    """Build the font bank for a version (cached)."""
    definition = _PROFILE_DEFINITIONS.get(version)
    if definition is None:
        raise UnknownVersion(version.value)
    _LOGGER.debug("Loading font bank for %s", version.value)
    return build_profile(
        definition[CONF_NAME],
        definition[CONF_ENCODE_RULES],
        definition[CONF_REPLACE_RULES],
        definition[CONF_PASSTHROUGH],
        allow_lowercase=definition.get(CONF_ALLOW_LOWERCASE, False),
        korean=definition.get(CONF_KOREAN, False),
    )


def profile_for(identifier: GameTextVersion | str | VersionProfile) -> VersionProfile:
    """Get the font bank for a version.

    Args:
        identifier: Version enum, version name, or an already built profile.

    Returns:
        The shared, immutable profile for that version.

    Raises:
        UnknownVersion: If the version is not registered.
    """
    if isinstance(identifier, VersionProfile):
        return identifier
    return _get_profile(_resolve_version(identifier))


def clear_profile_cache() -> None:
    """Clear cached font banks.

    Useful for testing.
    """
    _get_profile.cache_clear()
