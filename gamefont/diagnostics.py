"""Diagnostics payloads for font banks and Korean glyph analysis."""

from __future__ import annotations

from typing import Any

from .profile import VersionProfile
from .registry import GameTextVersion, profile_for
from .script import JamoSequenceCollector


def get_profile_diagnostics(version: GameTextVersion | str | VersionProfile) -> dict[str, Any]:
    """Return a summary of a version's font bank."""
    profile = profile_for(version)
    return {
        "name": profile.name,
        "alphabet": "mixed_case" if profile.allow_lowercase else "uppercase",
        "korean": profile.korean,
        "encode_rules": len(profile.encode_rules),
        "replace_rules": len(profile.replace_rules),
        "longest_glyph_bytes": max((len(r.data) for r in profile.encode_rules), default=0),
        "longest_replace_pattern": max(
            (len(r.encoded) for r in profile.replace_rules), default=0
        ),
        "passthrough": "".join(chr(b) for b in sorted(profile.passthrough)),
    }


def get_jamo_diagnostics(collector: JamoSequenceCollector) -> dict[str, Any]:
    """Return the glyph values seen by the Korean pre-pass.

    Values are reported as hex strings: per syllable position, overall, and
    for each value the first position (1-based) it was seen at.
    """
    sequences = collector.sequences()
    by_position: list[set[int]] = []
    all_values: set[int] = set()
    for sequence in sequences:
        for pos, value in enumerate(sequence):
            if pos >= len(by_position):
                by_position.append(set())
            by_position[pos].add(value)
            all_values.add(value)

    first_position: dict[str, int] = {}
    for value in sorted(all_values):
        for pos, values in enumerate(by_position):
            if value in values:
                first_position[f"0x{value:x}"] = pos + 1
                break

    return {
        "sequences": len(sequences),
        "by_position": [[f"0x{v:x}" for v in sorted(values)] for values in by_position],
        "all": [f"0x{v:x}" for v in sorted(all_values)],
        "first_position": first_position,
    }
