"""Transcoding between display text and game font bytes.

Forward (display text -> game bytes):
-------------------------------------
1. Escape interpretation (optional): \\cXX becomes the raw byte XX, \\" and
   \\\\ become the quote and backslash characters. Raw bytes from 0x80 up
   are carried as markers (U+DC00 plus the byte) that no rule can match.
2. Replacement fold: display substrings such as "Á" or "<PAD_X>" are
   expanded into the glyph commands that draw them.
3. Byte encode: each position takes the longest encode rule matching the
   text there. ASCII characters without a rule are written as their own
   byte, anything else without a rule as UTF-8.

Reverse (game bytes -> display text):
-------------------------------------
1. Korean pre-pass (optional): flattens the Korean script stream into
   (tier, code) glyph pairs.
2. Byte decode: each position takes the longest encode rule matching the
   bytes there. Unmatched bytes are kept if the version allows them as
   literals, otherwise carried as raw byte markers.
3. Replacement expand: glyph command sequences fold into display symbols.
4. Escape emission: raw byte markers become \\cXX, newline, tab, quote and
   backslash are escaped, then the replacement expand runs once more over
   the escaped text.

Every rule lookup picks the longest matching pattern, with ties going to
the rule listed first in the font table.
"""

from __future__ import annotations

import logging
import string

from .const import (
    ALWAYS_LITERAL_BYTES,
    DEFAULT_VERSION,
    ESCAPE_BYTE,
    ESCAPE_CHAR,
    HEX_ESCAPE_LENGTH,
    QUOTE_CHAR,
    RAW_BYTE_MARKER_BASE,
)
from .exceptions import IncompleteEscape, InvalidEscape, InvalidHexEscape
from .profile import VersionProfile
from .registry import GameTextVersion, profile_for
from .script import JamoSequenceCollector, convert_korean_text_from_game

_LOGGER = logging.getLogger(__name__)

VersionLike = GameTextVersion | str | VersionProfile

_HEX_DIGITS = frozenset(string.hexdigits)


def _raw_byte_marker(byte: int) -> str:
    return chr(RAW_BYTE_MARKER_BASE + byte)


def _raw_byte_value(char: str) -> int | None:
    """Return the byte a raw byte marker stands for, or None."""
    value = ord(char) - RAW_BYTE_MARKER_BASE
    if 0 <= value <= 0xFF:
        return value
    return None


def unescape_display_text(text: str) -> str:
    """Interpret escape sequences in display text.

    Args:
        text: Display text that may contain \\cXX, \\" and \\\\ escapes.

    Returns:
        Text with every escape replaced by the character it stands for.
        \\cXX below 0x80 yields the ASCII character XX. Higher values yield
        a raw byte marker that no font rule matches and that the encoder
        writes back as the byte itself.

    Raises:
        IncompleteEscape: If an escape is cut off by the end of the text.
        InvalidEscape: If the escape letter is not c, quote or backslash.
        InvalidHexEscape: If \\c is not followed by two hex digits.
    """
    out: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        char = text[i]
        if char != ESCAPE_CHAR:
            out.append(char)
            i += 1
            continue

        if i + 1 >= end:
            raise IncompleteEscape("incomplete string escape code", i)
        code = text[i + 1]
        if code == ESCAPE_BYTE:
            digits = text[i + 2 : i + 2 + HEX_ESCAPE_LENGTH]
            if len(digits) < HEX_ESCAPE_LENGTH:
                raise IncompleteEscape("incomplete string escape code", i)
            if not all(d in _HEX_DIGITS for d in digits):
                raise InvalidHexEscape(f"invalid character escape hex number {digits!r}", i)
            value = int(digits, 16)
            out.append(chr(value) if value < 0x80 else _raw_byte_marker(value))
            i += 2 + HEX_ESCAPE_LENGTH
        elif code in (QUOTE_CHAR, ESCAPE_CHAR):
            out.append(code)
            i += 2
        else:
            raise InvalidEscape(f"unknown string escape code {code!r} (0x{ord(code):x})", i)
    return "".join(out)


def encode_to_game(profile: VersionProfile, text: str) -> bytes:
    """Encode unescaped, replacement-folded text into game bytes.

    Raw byte markers become their byte. Other characters with no encode
    rule are written as ASCII when they are ASCII, and as UTF-8 otherwise.
    """
    out = bytearray()
    unmapped: list[str] = []
    i = 0
    end = len(text)
    while i < end:
        rule = profile.find_encode_by_display(text, i)
        if rule is not None:
            out += rule.data
            i += len(rule.display)
            continue
        char = text[i]
        raw = _raw_byte_value(char)
        if raw is not None:
            out.append(raw)
        elif ord(char) < 0x80:
            out.append(ord(char))
        else:
            out += char.encode("utf-8")
            if char not in unmapped:
                unmapped.append(char)
        i += 1

    if unmapped:
        _LOGGER.warning(
            "Characters not in %s font written as UTF-8: %s",
            profile.name,
            ", ".join(f"{c}(U+{ord(c):04X})" for c in unmapped),
        )
    return bytes(out)


def to_game_bytes(
    text: str, version: VersionLike = DEFAULT_VERSION, apply_escapes: bool = True
) -> bytes:
    """Convert display text to the game's font encoding.

    Args:
        text: Display text.
        version: Version enum, version name, or profile.
        apply_escapes: Whether to interpret escape sequences first.

    Returns:
        Encoded game bytes.

    Raises:
        UnknownVersion: If the version is not registered.
        EscapeError: If apply_escapes is set and an escape is malformed.
    """
    profile = profile_for(version)
    if not text:
        return b""
    if apply_escapes:
        text = unescape_display_text(text)
    return encode_to_game(profile, profile.replace_to_game(text))


def decode_from_game(profile: VersionProfile, data: bytes) -> str:
    """Decode game bytes to text.

    Bytes that are not valid literals come out as raw byte markers, which
    escape_display_text turns into \\cXX.
    """
    out: list[str] = []
    i = 0
    end = len(data)
    while i < end:
        rule = profile.find_encode_by_data(data, i)
        if rule is not None:
            out.append(rule.display)
            i += len(rule.data)
            continue
        byte = data[i]
        if profile.is_valid_literal(byte) or byte in ALWAYS_LITERAL_BYTES:
            out.append(chr(byte))
        else:
            out.append(_raw_byte_marker(byte))
        i += 1
    return "".join(out)


def escape_display_text(text: str) -> str:
    """Escape newline, tab, quote and backslash characters.

    Raw byte markers left by the decoder become \\cXX.
    """
    out: list[str] = []
    for char in text:
        raw = _raw_byte_value(char)
        if raw is not None:
            out.append(f"{ESCAPE_CHAR}{ESCAPE_BYTE}{raw:02x}")
        elif char == "\n":
            out.append("\\n")
        elif char == "\t":
            out.append("\\t")
        elif char == ESCAPE_CHAR:
            out.append("\\\\")
        elif char == QUOTE_CHAR:
            out.append('\\"')
        else:
            out.append(char)
    return "".join(out)


def to_display_text(
    data: bytes,
    version: VersionLike = DEFAULT_VERSION,
    korean: bool = False,
    collector: JamoSequenceCollector | None = None,
) -> str:
    """Convert game bytes to printable display text.

    Args:
        data: Raw game bytes.
        version: Version enum, version name, or profile.
        korean: Whether data uses the Korean script stream. Only the
            caller knows this; a version's korean flag just says whether
            its font has the Hangul glyph pairs the pre-pass produces.
        collector: Optional collector for jamo sequences (Korean only).

    Returns:
        Display text with escape sequences, safe inside a quoted literal.

    Raises:
        UnknownVersion: If the version is not registered.
    """
    profile = profile_for(version)
    data = bytes(data)
    if not data:
        return ""
    if korean:
        if not profile.korean:
            _LOGGER.warning(
                "Korean text decoded with %s font, which has no Hangul glyphs",
                profile.name,
            )
        data = convert_korean_text_from_game(data, collector)

    text = profile.replace_to_display(decode_from_game(profile, data))
    return profile.replace_to_display(escape_display_text(text))


def is_valid_literal(byte: int, version: VersionLike) -> bool:
    """Check if a raw byte may appear unescaped in a version's display text."""
    return profile_for(version).is_valid_literal(byte)


def get_unmappable_chars(text: str, version: VersionLike) -> list[str]:
    """Get list of characters the version's font cannot represent.

    Useful for warning translators about characters that would be written
    as UTF-8 instead of glyph codes. Escapes are not interpreted.

    Args:
        text: Display text to check.
        version: Version enum, version name, or profile.

    Returns:
        List of unique characters with no glyph.
    """
    if not text:
        return []

    profile = profile_for(version)
    folded = profile.replace_to_game(text)
    unmappable: list[str] = []
    i = 0
    while i < len(folded):
        rule = profile.find_encode_by_display(folded, i)
        if rule is not None:
            i += len(rule.display)
            continue
        char = folded[i]
        if ord(char) >= 0x80 and _raw_byte_value(char) is None and char not in unmappable:
            unmappable.append(char)
        i += 1
    return unmappable
