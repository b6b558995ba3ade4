"""Tests for the Korean script stream pre-pass."""

import threading

from gamefont import JamoSequenceCollector, convert_korean_text_from_game


class TestConvertKoreanText:
    """Tests for convert_korean_text_from_game."""

    def test_ascii_run(self) -> None:
        assert convert_korean_text_from_game(b"\x03ABC") == b"ABC"

    def test_consecutive_ascii_runs(self) -> None:
        assert convert_korean_text_from_game(b"\x03AB\x03CD") == b"ABCD"

    def test_glyph_groups(self) -> None:
        data = b"\x04\x02\x06\x07\x04\x01\x05\x10"
        assert convert_korean_text_from_game(data) == b"\x03\x06\x03\x07\x01\x10"

    def test_group_ends_at_ascii_marker(self) -> None:
        assert convert_korean_text_from_game(b"\x04\x01\x06\x03OK") == b"\x03\x06OK"

    def test_length_byte_is_skipped_even_if_marker(self) -> None:
        assert convert_korean_text_from_game(b"\x04\x03\x06") == b"\x03\x06"

    def test_group_with_no_glyphs(self) -> None:
        assert convert_korean_text_from_game(b"\x04\x03") == b""

    def test_truncated_alternate_tier(self) -> None:
        assert convert_korean_text_from_game(b"\x04\x01\x05") == b""

    def test_empty(self) -> None:
        assert convert_korean_text_from_game(b"") == b""


class TestJamoSequenceCollector:
    """Tests for JamoSequenceCollector."""

    def test_records_each_group(self) -> None:
        collector = JamoSequenceCollector()
        convert_korean_text_from_game(b"\x04\x02\x06\x07\x04\x01\x05\x10", collector)
        assert collector.sequences() == [(0x110,), (0x306, 0x307)]

    def test_duplicates_recorded_once(self) -> None:
        collector = JamoSequenceCollector()
        convert_korean_text_from_game(b"\x04\x01\x06\x04\x01\x06", collector)
        assert len(collector) == 1

    def test_empty_groups_not_recorded(self) -> None:
        collector = JamoSequenceCollector()
        convert_korean_text_from_game(b"\x04\x01\x05\x03AB", collector)
        assert len(collector) == 0

    def test_clear(self) -> None:
        collector = JamoSequenceCollector()
        collector.add((0x306,))
        collector.clear()
        assert list(collector) == []

    def test_concurrent_adds(self) -> None:
        collector = JamoSequenceCollector()

        def worker(start: int) -> None:
            for code in range(start, start + 50):
                collector.add((0x300 | code,))

        threads = [threading.Thread(target=worker, args=(n * 50,)) for n in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        assert len(collector) == 200
