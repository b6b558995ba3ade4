"""Korean script stream pre-pass.

Korean text in Jak 2 is not a flat run of glyph codes. The stream alternates
between two kinds of segments:

- 0x03 starts a run of plain ASCII bytes.
- Any other byte (0x04 in practice) starts a syllable: a length byte follows,
  then one sub-code per jamo glyph. A sub-code prefixed by 0x05 comes from the
  alternate glyph tier.

Both kinds end right before the next 0x03 or 0x04. The pre-pass rewrites each
jamo glyph as a two byte (tier, code) pair so the regular byte decoder can map
it through the font's encode rules.
"""

from __future__ import annotations

from collections.abc import Iterator
import threading

from .const import (
    GLYPH_TIER_ALT,
    GLYPH_TIER_HANGUL,
    KOREAN_ALT_TIER_MARKER,
    KOREAN_ASCII_MARKER,
    KOREAN_GLYPH_MARKER,
)

_SEGMENT_END = (KOREAN_ASCII_MARKER, KOREAN_GLYPH_MARKER)


class JamoSequenceCollector:
    """Records the distinct jamo glyph sequences seen by the pre-pass.

    Each sequence is a tuple of 16-bit values, (tier << 8) | code, one per
    glyph of a syllable. Intended for offline analysis of which glyphs the
    game combines; transcoding output does not depend on it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._sequences: set[tuple[int, ...]] = set()

    def add(self, sequence: tuple[int, ...]) -> None:
        """Record one syllable's glyph sequence."""
        with self._lock:
            self._sequences.add(sequence)

    def sequences(self) -> list[tuple[int, ...]]:
        """Get all recorded sequences, sorted."""
        with self._lock:
            return sorted(self._sequences)

    def clear(self) -> None:
        """Forget all recorded sequences."""
        with self._lock:
            self._sequences.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._sequences)

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        return iter(self.sequences())


def convert_korean_text_from_game(
    data: bytes, collector: JamoSequenceCollector | None = None
) -> bytes:
    """Flatten a Korean script stream into (tier, code) glyph pairs.

    Args:
        data: Raw game bytes.
        collector: Optional collector for the glyph sequences seen.

    Returns:
        Bytes where ASCII runs are copied as is and every jamo glyph is a
        two byte pair, 0x01 or 0x03 followed by its code.
    """
    out = bytearray()
    i = 0
    end = len(data)
    while i < end:
        if data[i] == KOREAN_ASCII_MARKER:
            i += 1
            while i < end and data[i] not in _SEGMENT_END:
                out.append(data[i])
                i += 1
            continue

        # skip the marker and the length byte
        i += 2
        sequence: list[int] = []
        while i < end and data[i] not in _SEGMENT_END:
            tier = GLYPH_TIER_HANGUL
            if data[i] == KOREAN_ALT_TIER_MARKER:
                i += 1
                if i >= end:
                    break
                tier = GLYPH_TIER_ALT
            code = data[i]
            out.append(tier)
            out.append(code)
            sequence.append((tier << 8) | code)
            i += 1
        if collector is not None and sequence:
            collector.add(tuple(sequence))
    return bytes(out)
