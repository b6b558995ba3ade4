"""Tests for VersionProfile construction and the literal policy."""

import pytest

from gamefont import InvalidFontTable, VersionProfile, build_profile
from gamefont.matching import EncodeRule, ReplaceRule


class TestBuildProfile:
    """Tests for build_profile."""

    def test_rules_sorted_longest_first(self, tiny_profile: VersionProfile) -> None:
        lengths = [len(r.data) for r in tiny_profile.encode_rules]
        assert lengths == sorted(lengths, reverse=True)
        assert tiny_profile.encode_rules[0] == EncodeRule("陸", b"\x01\x10\x20")

        lengths = [len(r.encoded) for r in tiny_profile.replace_rules]
        assert lengths == sorted(lengths, reverse=True)
        assert tiny_profile.replace_rules[-1] == ReplaceRule("~~", "世")

    def test_passthrough_stored_as_bytes(self, tiny_profile: VersionProfile) -> None:
        assert ord("~") in tiny_profile.passthrough
        assert ord("]") not in tiny_profile.passthrough

    def test_passthrough_accepts_ints(self) -> None:
        profile = build_profile("ints", [], [], [0x7E, ord(" ")])
        assert profile.passthrough == frozenset({0x7E, 0x20})

    def test_defaults(self, tiny_profile: VersionProfile) -> None:
        assert tiny_profile.name == "tiny"
        assert tiny_profile.allow_lowercase is False
        assert tiny_profile.korean is False

    def test_profiles_are_immutable(self, tiny_profile: VersionProfile) -> None:
        with pytest.raises(AttributeError):
            tiny_profile.name = "other"  # type: ignore[misc]

    def test_empty_byte_sequence_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [("x", b"")], [], [])

    def test_empty_display_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [("", b"\x01")], [], [])

    def test_str_glyph_bytes_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [("x", "\x01")], [], [])  # type: ignore[list-item]

    def test_malformed_replace_rule_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [], [("only one side",)], [])  # type: ignore[list-item]

    def test_multibyte_passthrough_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [], [], ["海"])

    def test_out_of_range_passthrough_rejected(self) -> None:
        with pytest.raises(InvalidFontTable):
            build_profile("bad", [], [], [0x100])

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidFontTable, match="invalid font table"):
            build_profile("", [], [], [])


class TestIsValidLiteral:
    """Tests for VersionProfile.is_valid_literal."""

    @pytest.mark.parametrize("char", "09AMZ")
    def test_digits_and_uppercase(self, tiny_profile: VersionProfile, char: str) -> None:
        assert tiny_profile.is_valid_literal(ord(char))

    @pytest.mark.parametrize("char", "amz")
    def test_lowercase_rejected_without_lowercase_alphabet(
        self, tiny_profile: VersionProfile, char: str
    ) -> None:
        assert not tiny_profile.is_valid_literal(ord(char))

    @pytest.mark.parametrize("char", "amz")
    def test_lowercase_accepted_with_lowercase_alphabet(
        self, tiny_mixed_case_profile: VersionProfile, char: str
    ) -> None:
        assert tiny_mixed_case_profile.is_valid_literal(ord(char))

    def test_passthrough_characters(self, tiny_profile: VersionProfile) -> None:
        for char in "~ ,.-+!?<>":
            assert tiny_profile.is_valid_literal(ord(char))

    def test_other_punctuation_rejected(self, tiny_profile: VersionProfile) -> None:
        for char in "]{}$&":
            assert not tiny_profile.is_valid_literal(ord(char))

    def test_boundaries(self, tiny_mixed_case_profile: VersionProfile) -> None:
        for byte in (0x2F, 0x3A, 0x40, 0x5B, 0x60, 0x7B):
            assert not tiny_mixed_case_profile.is_valid_literal(byte)

    def test_control_and_high_bytes_rejected(self, tiny_profile: VersionProfile) -> None:
        for byte in (0x00, 0x03, 0x0A, 0x80, 0xFF):
            assert not tiny_profile.is_valid_literal(byte)

    def test_backslash_never_valid(self) -> None:
        profile = build_profile("slash", [], [], ["\\"], allow_lowercase=True)
        assert not profile.is_valid_literal(ord("\\"))
