"""Tests for the forward and reverse transcoding pipelines."""

import logging

import pytest

from gamefont import (
    EscapeError,
    GameFontError,
    IncompleteEscape,
    InvalidEscape,
    InvalidHexEscape,
    JamoSequenceCollector,
    UnknownVersion,
    VersionProfile,
    escape_display_text,
    get_unmappable_chars,
    is_valid_literal,
    profile_for,
    to_display_text,
    to_game_bytes,
    unescape_display_text,
)

COMPOSITE_BYTES = b"XE~Y~-22H~-5V\x12~ZN~Y~-22H~-4V\x14~ZY"


class TestUnescape:
    """Tests for unescape_display_text."""

    def test_plain_text_unchanged(self) -> None:
        assert unescape_display_text("HELLO, WORLD!") == "HELLO, WORLD!"

    def test_hex_escape(self) -> None:
        assert unescape_display_text("a\\c41b") == "aAb"
        assert unescape_display_text("\\c7e") == "~"

    def test_high_hex_escape_is_raw_byte_marker(self) -> None:
        assert unescape_display_text("\\cff") == "\udcff"
        assert unescape_display_text("\\cFF") == "\udcff"
        assert unescape_display_text("\\cbf") != "¿"

    def test_quote_and_backslash(self) -> None:
        assert unescape_display_text('\\"HI\\"') == '"HI"'
        assert unescape_display_text("\\\\") == "\\"

    def test_lone_quote_is_literal(self) -> None:
        assert unescape_display_text('A"B') == 'A"B'

    def test_trailing_backslash(self) -> None:
        with pytest.raises(IncompleteEscape) as err:
            unescape_display_text("abc\\")
        assert err.value.position == 3

    def test_truncated_hex_escape(self) -> None:
        with pytest.raises(IncompleteEscape) as err:
            unescape_display_text("\\c4")
        assert err.value.position == 0

    def test_unknown_escape_letter(self) -> None:
        with pytest.raises(InvalidEscape, match="unknown string escape code"):
            unescape_display_text("OK\\q")

    @pytest.mark.parametrize("text", ["\\cZZ", "\\c4g", "\\c+1", "\\c 1"])
    def test_bad_hex_digits(self, text: str) -> None:
        with pytest.raises(InvalidHexEscape):
            unescape_display_text(text)

    def test_escape_errors_share_base(self) -> None:
        assert issubclass(InvalidHexEscape, EscapeError)
        assert issubclass(EscapeError, GameFontError)
        assert issubclass(GameFontError, ValueError)


class TestEscapeDisplayText:
    """Tests for escape_display_text."""

    def test_control_characters(self) -> None:
        assert escape_display_text('X\n"\t') == 'X\\n\\"\\t'

    def test_lone_backslash(self) -> None:
        assert escape_display_text("\\") == "\\\\"
        assert escape_display_text("A\\B") == "A\\\\B"

    def test_raw_byte_markers(self) -> None:
        assert escape_display_text("\udc19") == "\\c19"
        assert escape_display_text("A\udcbfB") == "A\\cbfB"

    def test_backslash_before_c_is_escaped(self) -> None:
        assert escape_display_text("\\cat") == "\\\\cat"


class TestToGameBytes:
    """Tests for to_game_bytes."""

    def test_longest_match(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("AB", tiny_profile) == b"\x91"
        assert to_game_bytes("ABA", tiny_profile) == b"\x91\x90"

    def test_unmapped_characters_pass_as_bytes(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("HI!", tiny_profile) == b"HI!"

    def test_escape_equivalence(self, tiny_profile: VersionProfile) -> None:
        escaped = to_game_bytes("a\\c41b", tiny_profile)
        raw = to_game_bytes("aAb", tiny_profile, apply_escapes=False)
        assert escaped == raw == b"a\x90b"

    def test_escapes_off(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("\\c41", tiny_profile, apply_escapes=False) == b"\\c41"

    def test_escaped_quotes(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes('\\"HI\\"', tiny_profile) == b'"HI"'

    def test_replacement_then_encode(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("XÉÑY", tiny_profile) == COMPOSITE_BYTES
        assert to_game_bytes("世", tiny_profile) == b"~~"

    def test_empty_text(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("", tiny_profile) == b""

    def test_unknown_version(self) -> None:
        with pytest.raises(UnknownVersion):
            to_game_bytes("", "jak3")

    def test_bad_escape_propagates(self, tiny_profile: VersionProfile) -> None:
        with pytest.raises(EscapeError):
            to_game_bytes("BAD\\", tiny_profile)

    def test_default_version_is_jak1_v2(self) -> None:
        assert to_game_bytes("_") == b"\x03"

    def test_wide_characters_fall_back_to_utf8(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gamefont.transcoding"):
            result = to_game_bytes("A한", "jak1-v1")
        assert result == b"A" + "한".encode("utf-8")
        assert "U+D55C" in caplog.text
        assert "jak1-v1" in caplog.text

    def test_single_warning_per_call(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gamefont.transcoding"):
            to_game_bytes("한한한", "jak1-v1")
        assert len(caplog.records) == 1

    def test_no_warning_for_mapped_text(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="gamefont.transcoding"):
            to_game_bytes("ガ", "jak1-v1")
        assert not caplog.records

    def test_escaped_high_byte_is_raw(self) -> None:
        assert to_game_bytes("\\cbf", "jak1-v1") == b"\xbf"
        assert to_game_bytes("\\cc1", "jak2") == b"\xc1"

    def test_escaped_high_byte_skips_replacements(self, tiny_profile: VersionProfile) -> None:
        assert to_game_bytes("\\cc9", tiny_profile) == b"\xc9"
        assert to_game_bytes("É", tiny_profile) != b"\xc9"

    def test_latin1_text_without_glyph_is_utf8(
        self, tiny_profile: VersionProfile, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="gamefont.transcoding"):
            assert to_game_bytes("é", tiny_profile) == b"\xc3\xa9"
        assert "U+00E9" in caplog.text


class TestToDisplayText:
    """Tests for to_display_text."""

    def test_longest_byte_match(self, tiny_profile: VersionProfile) -> None:
        assert to_display_text(b"\x01\x10\x20", tiny_profile) == "陸"
        assert to_display_text(b"\x01\x10\x21", tiny_profile) == "空!"

    def test_lowercase_depends_on_alphabet(
        self, tiny_profile: VersionProfile, tiny_mixed_case_profile: VersionProfile
    ) -> None:
        assert to_display_text(b"a", tiny_profile) == "\\c61"
        assert to_display_text(b"a", tiny_mixed_case_profile) == "a"

    def test_escape_emission(self, tiny_profile: VersionProfile) -> None:
        assert to_display_text(b'X\n"\t', tiny_profile) == 'X\\n\\"\\t'
        assert to_display_text(b"\\", tiny_profile) == "\\\\"
        assert to_display_text(b"\x80", tiny_profile) == "\\c80"

    def test_adjacent_composites(self, tiny_profile: VersionProfile) -> None:
        assert to_display_text(COMPOSITE_BYTES, tiny_profile) == "XÉÑY"
        assert to_display_text(b"~~", tiny_profile) == "世"

    def test_empty_data(self, tiny_profile: VersionProfile) -> None:
        assert to_display_text(b"", tiny_profile) == ""

    def test_accepts_bytearray(self, tiny_profile: VersionProfile) -> None:
        assert to_display_text(bytearray(b"\x91"), tiny_profile) == "AB"

    def test_unknown_version(self) -> None:
        with pytest.raises(UnknownVersion):
            to_display_text(b"", "jak3")

    def test_hex_escape_round_trip(self, tiny_profile: VersionProfile) -> None:
        text = to_display_text(b"\x80Z", tiny_profile)
        assert text == "\\c80Z"
        assert to_game_bytes(text, tiny_profile) == b"\x80Z"

    def test_literal_backslash_before_c(self, tiny_mixed_case_profile: VersionProfile) -> None:
        text = to_display_text(b"Z\\cat", tiny_mixed_case_profile)
        assert text == "Z\\\\cat"
        assert to_game_bytes(text, tiny_mixed_case_profile) == b"Z\\cat"

    def test_korean_on_font_without_hangul_warns(
        self, tiny_profile: VersionProfile, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="gamefont.transcoding"):
            assert to_display_text(b"\x03HI", tiny_profile, korean=True) == "HI"
        assert "Hangul" in caplog.text

    def test_korean_flag_does_not_enable_pre_pass(self) -> None:
        assert profile_for("jak2").korean is True
        assert to_display_text(b"\x03\x06", "jak2") == "<H306>"


class TestJak1:
    """Tests against the Jak 1 font banks."""

    def test_unmapped_byte_escaped(self) -> None:
        assert to_display_text(b"\x19", "jak1-v1") == "\\c19"
        assert to_game_bytes("\\c19", "jak1-v1") == b"\x19"

    def test_uppercase_text(self) -> None:
        assert to_game_bytes("HELLO", "jak1-v1") == b"HELLO"
        assert to_display_text(b"HELLO", "jak1-v1") == "HELLO"

    def test_kana_composite(self) -> None:
        assert to_game_bytes("ガ", "jak1-v1") == b"~Y\xd8~Z\x91"
        assert to_display_text(b"~Y\xd8~Z\x91", "jak1-v1") == "ガ"

    def test_accented_letter(self) -> None:
        data = b"A~Y~-21H~-5V\x16~Z"
        assert to_game_bytes("Å", "jak1-v1") == data
        assert to_display_text(data, "jak1-v1") == "Å"

    def test_button_icon(self) -> None:
        data = to_game_bytes("<PAD_X>", "jak1-v1")
        assert data == b"~Y~22L<~Z~Y~27L*~Z~Y~1L>~Z~Y~23L[~Z~+26H"
        assert to_display_text(data, "jak1-v1") == "<PAD_X>"

    def test_v2_glyph_additions(self) -> None:
        assert to_game_bytes("_", "jak1-v1") == b"_"
        assert to_game_bytes("_", "jak1-v2") == b"\x03"
        assert to_display_text(b"\x5f", "jak1-v1") == "_"
        assert to_display_text(b"\x5f", "jak1-v2") == "掘"

    def test_lowercase_escaped(self) -> None:
        # 0x61 is a kanji glyph in Jak 1
        assert to_display_text(b"a", "jak1-v1") != "a"


class TestJak2:
    """Tests against the Jak 2 font bank."""

    def test_mixed_case_text(self) -> None:
        assert to_game_bytes("Hello", "jak2") == b"Hello"
        assert to_display_text(b"Hello", "jak2") == "Hello"

    def test_descenders(self) -> None:
        data = to_game_bytes("jog", "jak2")
        assert data == b"~+1Vj~-1Vo~+7Vg~-7V"
        assert to_display_text(data, "jak2") == "jog"

    def test_backslash_pair(self) -> None:
        assert to_display_text(b"\\\\", "jak2") == "~%"
        assert to_game_bytes("~%", "jak2") == b"\\\\"

    def test_single_backslash_folds_after_escape(self) -> None:
        assert to_display_text(b"\\", "jak2") == "~%"

    def test_backslash_before_c_does_not_break_escapes(self) -> None:
        text = to_display_text(b"A\\cat", "jak2")
        assert text == "A~%cat"
        assert to_game_bytes(text, "jak2") == b"A\\\\cat"

    def test_glyph_pair(self) -> None:
        assert to_game_bytes("<H306>", "jak2") == b"\x03\x06"
        assert to_display_text(b"\x03\x06", "jak2") == "<H306>"

    def test_korean_stream(self) -> None:
        data = b"\x03HI\x04\x02\x06\x05\x10\x03!"
        assert to_display_text(data, "jak2", korean=True) == "HI<H306>・!"

    def test_korean_collector(self) -> None:
        collector = JamoSequenceCollector()
        to_display_text(b"\x04\x02\x06\x05\x10", "jak2", korean=True, collector=collector)
        assert collector.sequences() == [(0x306, 0x110)]

    def test_collector_ignored_without_korean(self) -> None:
        collector = JamoSequenceCollector()
        to_display_text(b"HI", "jak2", collector=collector)
        assert len(collector) == 0


@pytest.mark.parametrize("version", ["jak1-v1", "jak1-v2", "jak2"])
def test_every_glyph_round_trips(version: str) -> None:
    text = " ".join(rule.display for rule in profile_for(version).encode_rules)
    assert to_display_text(to_game_bytes(text, version), version) == text


@pytest.mark.parametrize("version", ["jak1-v1", "jak1-v2", "jak2"])
def test_every_high_byte_round_trips(version: str) -> None:
    for byte in range(0x80, 0x100):
        data = bytes([byte])
        assert to_game_bytes(to_display_text(data, version), version) == data, hex(byte)


class TestHelpers:
    """Tests for is_valid_literal and get_unmappable_chars."""

    def test_is_valid_literal(self) -> None:
        assert is_valid_literal(ord("a"), "jak2")
        assert not is_valid_literal(ord("a"), "jak1-v1")
        assert is_valid_literal(ord("]"), "jak2")
        assert not is_valid_literal(ord("\\"), "jak2")

    def test_unmappable_chars(self) -> None:
        assert get_unmappable_chars("A한世Á", "jak1-v1") == ["한"]

    def test_unmappable_chars_unique(self) -> None:
        assert get_unmappable_chars("한국한", "jak1-v1") == ["한", "국"]

    def test_unmappable_latin1(self, tiny_profile: VersionProfile) -> None:
        assert get_unmappable_chars("éÉ\\cbf", tiny_profile) == ["é"]

    def test_unmappable_chars_empty(self) -> None:
        assert get_unmappable_chars("", "jak1-v1") == []
        assert get_unmappable_chars("HELLO", "jak1-v1") == []
