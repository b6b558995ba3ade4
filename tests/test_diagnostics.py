"""Tests for diagnostics payloads."""

from gamefont import (
    JamoSequenceCollector,
    VersionProfile,
    build_profile,
    get_jamo_diagnostics,
    get_profile_diagnostics,
)


def test_profile_diagnostics(tiny_profile: VersionProfile) -> None:
    assert get_profile_diagnostics(tiny_profile) == {
        "name": "tiny",
        "alphabet": "uppercase",
        "korean": False,
        "encode_rules": 7,
        "replace_rules": 3,
        "longest_glyph_bytes": 3,
        "longest_replace_pattern": 19,
        "passthrough": " !+,-.<>?~",
    }


def test_profile_diagnostics_by_name() -> None:
    result = get_profile_diagnostics("jak2")
    assert result["alphabet"] == "mixed_case"
    assert result["korean"] is True
    assert result["encode_rules"] == 669
    assert result["longest_glyph_bytes"] == 2


def test_empty_profile_diagnostics() -> None:
    result = get_profile_diagnostics(build_profile("empty", [], [], []))
    assert result["longest_glyph_bytes"] == 0
    assert result["longest_replace_pattern"] == 0
    assert result["passthrough"] == ""


def test_jamo_diagnostics() -> None:
    collector = JamoSequenceCollector()
    collector.add((0x306, 0x110))
    collector.add((0x110,))
    assert get_jamo_diagnostics(collector) == {
        "sequences": 2,
        "by_position": [["0x110", "0x306"], ["0x110"]],
        "all": ["0x110", "0x306"],
        "first_position": {"0x110": 1, "0x306": 1},
    }


def test_jamo_diagnostics_empty() -> None:
    assert get_jamo_diagnostics(JamoSequenceCollector()) == {
        "sequences": 0,
        "by_position": [],
        "all": [],
        "first_position": {},
    }
