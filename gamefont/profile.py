"""Version profiles: one game's font tables plus its literal policy."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
import logging
from typing import Any

import voluptuous as vol

from .exceptions import InvalidFontTable
from .matching import EncodeRule, ReplaceRule, RuleIndex, sort_longest_first

_LOGGER = logging.getLogger(__name__)

CONF_NAME = "name"
CONF_ENCODE_RULES = "encode_rules"
CONF_REPLACE_RULES = "replace_rules"
CONF_PASSTHROUGH = "passthrough"
CONF_ALLOW_LOWERCASE = "allow_lowercase"
CONF_KOREAN = "korean"


def _single_byte_char(value: str) -> int:
    """Convert a one-character string to its byte value."""
    code = ord(value)
    if code > 0xFF:
        raise vol.Invalid(f"passthrough character {value!r} is not a single byte")
    return code


_ENCODE_RULE_SCHEMA = vol.ExactSequence(
    [vol.All(str, vol.Length(min=1)), vol.All(bytes, vol.Length(min=1))]
)
_REPLACE_RULE_SCHEMA = vol.ExactSequence([vol.All(str, vol.Length(min=1)), str])
_PASSTHROUGH_SCHEMA = vol.Any(
    vol.All(int, vol.Range(min=0, max=0xFF)),
    vol.All(str, vol.Length(min=1, max=1), _single_byte_char),
)

PROFILE_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_NAME): vol.All(str, vol.Length(min=1)),
        vol.Required(CONF_ENCODE_RULES): [_ENCODE_RULE_SCHEMA],
        vol.Required(CONF_REPLACE_RULES): [_REPLACE_RULE_SCHEMA],
        vol.Required(CONF_PASSTHROUGH): [_PASSTHROUGH_SCHEMA],
        vol.Optional(CONF_ALLOW_LOWERCASE, default=False): bool,
        vol.Optional(CONF_KOREAN, default=False): bool,
    }
)


@dataclass(frozen=True)
class VersionProfile:
    """Font tables and capabilities of one game text version.

    Rule tables are sorted longest-pattern-first when the profile is created
    and never change afterwards, so a profile can be shared freely between
    threads.

    korean marks fonts that carry the Hangul glyph pairs. It does not switch
    the Korean pre-pass on; callers ask for that per text.
    """

    name: str
    encode_rules: tuple[EncodeRule, ...]
    replace_rules: tuple[ReplaceRule, ...]
    passthrough: frozenset[int]
    allow_lowercase: bool = False
    korean: bool = False

    _encode_by_data: RuleIndex = field(init=False, repr=False, compare=False)
    _encode_by_display: RuleIndex = field(init=False, repr=False, compare=False)
    _replace_by_encoded: RuleIndex = field(init=False, repr=False, compare=False)
    _replace_by_display: RuleIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        encode = sort_longest_first(self.encode_rules, lambda r: r.data)
        replace = sort_longest_first(self.replace_rules, lambda r: r.encoded)
        object.__setattr__(self, "encode_rules", encode)
        object.__setattr__(self, "replace_rules", replace)
        object.__setattr__(self, "passthrough", frozenset(self.passthrough))
        object.__setattr__(self, "_encode_by_data", RuleIndex(encode, lambda r: r.data))
        object.__setattr__(
            self, "_encode_by_display", RuleIndex(encode, lambda r: r.display)
        )
        object.__setattr__(
            self, "_replace_by_encoded", RuleIndex(replace, lambda r: r.encoded)
        )
        object.__setattr__(
            self, "_replace_by_display", RuleIndex(replace, lambda r: r.display)
        )

    def is_valid_literal(self, byte: int) -> bool:
        """Check if a raw byte may appear unescaped in display text.

        Digits and uppercase letters always qualify, lowercase letters only
        when the version's alphabet has them, and otherwise the byte must be
        in the passthrough set. A backslash never qualifies.
        """
        if byte == 0x5C:
            return False
        if 0x30 <= byte <= 0x39 or 0x41 <= byte <= 0x5A:
            return True
        if self.allow_lowercase and 0x61 <= byte <= 0x7A:
            return True
        return byte in self.passthrough

    def find_encode_by_data(self, data: bytes, offset: int) -> EncodeRule | None:
        """Longest encode rule whose glyph bytes match data at offset."""
        return self._encode_by_data.find(data, offset)

    def find_encode_by_display(self, text: str, offset: int) -> EncodeRule | None:
        """Longest encode rule whose display text matches text at offset."""
        return self._encode_by_display.find(text, offset)

    def replace_to_display(self, text: str) -> str:
        """Fold encoded substrings into their display form."""
        return self._replace_by_encoded.apply(text, lambda r: r.display)

    def replace_to_game(self, text: str) -> str:
        """Expand display substrings back into their encoded form."""
        return self._replace_by_display.apply(text, lambda r: r.encoded)


def validate_profile_config(config: dict[str, Any]) -> dict[str, Any]:
    """Validate a raw profile definition.

    Args:
        config: Dict with name, rule tables and passthrough characters.

    Returns:
        The validated definition with defaults filled in.

    Raises:
        InvalidFontTable: If the definition does not match PROFILE_SCHEMA.
    """
    data = dict(config)
    # Schemas for sequences are written as lists
    for key in (CONF_ENCODE_RULES, CONF_REPLACE_RULES, CONF_PASSTHROUGH):
        if key in data and isinstance(data[key], (tuple, set, frozenset)):
            data[key] = list(data[key])
    try:
        return PROFILE_SCHEMA(data)  # type: ignore[no-any-return]
    except vol.Invalid as err:
        raise InvalidFontTable(
            f"invalid font table {config.get(CONF_NAME)!r}: {err}"
        ) from err


def build_profile(
    name: str,
    encode_rules: Iterable[tuple[str, bytes]],
    replace_rules: Iterable[tuple[str, str]],
    passthrough: Iterable[str | int],
    *,
    allow_lowercase: bool = False,
    korean: bool = False,
) -> VersionProfile:
    """Validate raw table data and build a VersionProfile from it.

    Args:
        name: Version name.
        encode_rules: (display, glyph bytes) pairs.
        replace_rules: (encoded substring, display substring) pairs.
        passthrough: Characters (or byte values) allowed unescaped.
        allow_lowercase: Whether the alphabet includes a-z.
        korean: Whether the font has the Hangul glyphs of the Korean script.

    Returns:
        A sorted, immutable profile.
    """
    config = validate_profile_config(
        {
            CONF_NAME: name,
            CONF_ENCODE_RULES: list(encode_rules),
            CONF_REPLACE_RULES: list(replace_rules),
            CONF_PASSTHROUGH: list(passthrough),
            CONF_ALLOW_LOWERCASE: allow_lowercase,
            CONF_KOREAN: korean,
        }
    )
    profile = VersionProfile(
        name=config[CONF_NAME],
        encode_rules=tuple(
            EncodeRule(display, data) for display, data in config[CONF_ENCODE_RULES]
        ),
        replace_rules=tuple(
            ReplaceRule(encoded, display) for encoded, display in config[CONF_REPLACE_RULES]
        ),
        passthrough=frozenset(config[CONF_PASSTHROUGH]),
        allow_lowercase=config[CONF_ALLOW_LOWERCASE],
        korean=config[CONF_KOREAN],
    )
    _LOGGER.debug(
        "Built font bank %s: %d encode rules, %d replace rules",
        profile.name,
        len(profile.encode_rules),
        len(profile.replace_rules),
    )
    return profile
