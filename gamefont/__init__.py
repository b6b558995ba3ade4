"""Game font text transcoding.

This package converts strings between readable display text and the byte
encoding of the large font used by the Jak and Daxter games. Each game
version has its own font bank: a table of glyph codes, a table of display
substitutions for composite glyphs, and a set of bytes allowed unescaped.

Mapping Strategy:
-----------------
Both directions scan their input left to right and apply, at each position,
the rule with the longest matching pattern:

1. Encode rules map glyph byte sequences to display characters.

2. Replace rules map decoded multi-glyph constructs (accented letters drawn
   with positioning commands, controller icons) to single display symbols.

Display -> game runs escapes, then replace rules, then encode rules. Game ->
display runs the mirror image, with an optional pre-pass for Korean text.
"""

from __future__ import annotations

from .const import DEFAULT_VERSION
from .diagnostics import get_jamo_diagnostics, get_profile_diagnostics
from .exceptions import (
    EscapeError,
    GameFontError,
    IncompleteEscape,
    InvalidEscape,
    InvalidFontTable,
    InvalidHexEscape,
    UnknownVersion,
)
from .matching import EncodeRule, ReplaceRule, RuleIndex, find_best_match
from .profile import VersionProfile, build_profile
from .registry import (
    GameTextVersion,
    available_versions,
    clear_profile_cache,
    font_bank_exists,
    get_text_version_name,
    profile_for,
    text_version_from_name,
)
from .script import JamoSequenceCollector, convert_korean_text_from_game
from .transcoding import (
    escape_display_text,
    get_unmappable_chars,
    is_valid_literal,
    to_display_text,
    to_game_bytes,
    unescape_display_text,
)

__all__ = [
    "DEFAULT_VERSION",
    "EncodeRule",
    "EscapeError",
    "GameFontError",
    "GameTextVersion",
    "IncompleteEscape",
    "InvalidEscape",
    "InvalidFontTable",
    "InvalidHexEscape",
    "JamoSequenceCollector",
    "ReplaceRule",
    "RuleIndex",
    "UnknownVersion",
    "VersionProfile",
    "available_versions",
    "build_profile",
    "clear_profile_cache",
    "convert_korean_text_from_game",
    "escape_display_text",
    "find_best_match",
    "font_bank_exists",
    "get_jamo_diagnostics",
    "get_profile_diagnostics",
    "get_text_version_name",
    "get_unmappable_chars",
    "is_valid_literal",
    "profile_for",
    "text_version_from_name",
    "to_display_text",
    "to_game_bytes",
    "unescape_display_text",
]
