"""Constants for game font transcoding."""

from __future__ import annotations

# Version names
VERSION_JAK1_V1 = "jak1-v1"
VERSION_JAK1_V2 = "jak1-v2"
VERSION_JAK2 = "jak2"

DEFAULT_VERSION = VERSION_JAK1_V2

# Escape sequences accepted in display text
ESCAPE_CHAR = "\\"
ESCAPE_BYTE = "c"  # \cXX -> one raw byte
QUOTE_CHAR = '"'
HEX_ESCAPE_LENGTH = 2

# Raw bytes travel through the pipeline as U+DC00 + byte so no rule can match them
RAW_BYTE_MARKER_BASE = 0xDC00

# Bytes that may always appear unescaped in display text
ALWAYS_LITERAL_BYTES: frozenset[int] = frozenset(b'\n\t\\"')

# Korean script stream markers
KOREAN_ASCII_MARKER = 0x03
KOREAN_GLYPH_MARKER = 0x04
KOREAN_ALT_TIER_MARKER = 0x05

# Glyph tier prefixes emitted by the Korean pre-pass
GLYPH_TIER_ALT = 0x01
GLYPH_TIER_HANGUL = 0x03
