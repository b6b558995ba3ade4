from collections.abc import Generator

import pytest

from gamefont import VersionProfile, build_profile, clear_profile_cache

# Small font bank with overlapping patterns and a composite glyph
TINY_ENCODE_RULES = [
    ("'", b"\x12"),
    ("<TIL>", b"\x14"),
    ("海", b"\x1a"),
    ("A", b"\x90"),
    ("AB", b"\x91"),
    ("空", b"\x01\x10"),
    ("陸", b"\x01\x10\x20"),
]
TINY_REPLACE_RULES = [
    ("E~Y~-22H~-5V'~Z", "É"),
    ("N~Y~-22H~-4V<TIL>~Z", "Ñ"),
    ("~~", "世"),
]
TINY_PASSTHROUGH = "~ ,.-+!?<>"


@pytest.fixture(autouse=True)
def fresh_profile_cache() -> Generator[None, None, None]:
    """Start every test with no cached font banks."""
    clear_profile_cache()
    yield
    clear_profile_cache()


@pytest.fixture
def tiny_profile() -> VersionProfile:
    """Uppercase-only profile built from TINY_* tables."""
    return build_profile(
        "tiny",
        TINY_ENCODE_RULES,
        TINY_REPLACE_RULES,
        TINY_PASSTHROUGH,
    )


@pytest.fixture
def tiny_mixed_case_profile() -> VersionProfile:
    """Same tables as tiny_profile, with lowercase letters allowed."""
    return build_profile(
        "tiny-mixed",
        TINY_ENCODE_RULES,
        TINY_REPLACE_RULES,
        TINY_PASSTHROUGH,
        allow_lowercase=True,
    )
