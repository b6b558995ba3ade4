"""Font tables for the second Jak 1 font.

Used by the PAL, Japanese and NTSC-U v2 releases. It is the v1 font with
a dedicated large-space glyph for "_", which frees 0x5f for the 掘 kanji.
Replace rules and passthrough characters are the same as v1.
"""

from __future__ import annotations

from .jak1 import JAK1_ENCODE_RULES

# 掘 sits with the other 0x5c-0x5f glyphs, right after 空
_SORA_END = [display for display, _ in JAK1_ENCODE_RULES].index("空") + 1

JAK1_V2_ENCODE_RULES: tuple[tuple[str, bytes], ...] = (
    ("_", b"\x03"),
    *JAK1_ENCODE_RULES[:_SORA_END],
    ("掘", b"\x5f"),
    *JAK1_ENCODE_RULES[_SORA_END:],
)
