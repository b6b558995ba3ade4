"""Longest-match rule lookup.

Both transcoding directions walk their input left to right and, at every
position, pick the single rule whose pattern is the longest one matching
there. Ties between equally long patterns go to the rule that comes first
in the table, so results are reproducible for any rule set.

Two kinds of rules exist:

1. EncodeRule: one glyph code (a short byte sequence) and the display text
   it stands for. Used for direct byte <-> character substitution.

2. ReplaceRule: a substring of decoded text and a friendlier display
   substring. Used for composite constructs such as accented letters drawn
   with several positioning commands, or button icons built from parts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

_R = TypeVar("_R")
_T = TypeVar("_T", str, bytes)


@dataclass(frozen=True, slots=True)
class EncodeRule:
    """Mapping between a glyph byte sequence and its display text."""

    display: str
    data: bytes


@dataclass(frozen=True, slots=True)
class ReplaceRule:
    """Mapping between decoded text and its display substitute."""

    encoded: str
    display: str


def find_best_match(
    table: Iterable[_R],
    data: _T,
    offset: int,
    pattern: Callable[[_R], _T],
) -> _R | None:
    """Find the rule whose pattern is the longest match at offset.

    Args:
        table: Rules to scan, in tie-break order.
        data: Text or bytes being transcoded.
        offset: Position in data to match at.
        pattern: Selects the side of a rule to compare against data.

    Returns:
        The matching rule with the strictly longest pattern (first one in
        table order on ties), or None if nothing matches.
    """
    best: _R | None = None
    best_len = 0
    for rule in table:
        pat = pattern(rule)
        if not pat or len(pat) <= best_len:
            continue
        # startswith never lets a pattern run past the end of data
        if data.startswith(pat, offset):
            best = rule
            best_len = len(pat)
    return best


def sort_longest_first(
    rules: Iterable[_R], pattern: Callable[[_R], Sequence[object]]
) -> tuple[_R, ...]:
    """Stable sort of rules by descending pattern length."""
    return tuple(sorted(rules, key=lambda rule: len(pattern(rule)), reverse=True))


class RuleIndex(Generic[_R, _T]):
    """Rules bucketed by the first element of their pattern.

    Only rules whose pattern starts with data[offset] can match at offset,
    so each lookup scans one bucket instead of the whole table. Buckets keep
    table order, which keeps the first-in-table tie-break intact.
    """

    def __init__(self, rules: Iterable[_R], pattern: Callable[[_R], _T]) -> None:
        self._pattern = pattern
        buckets: dict[str | int, list[_R]] = {}
        for rule in rules:
            pat = pattern(rule)
            if not pat:
                continue
            buckets.setdefault(pat[0], []).append(rule)
        self._buckets: dict[str | int, tuple[_R, ...]] = {
            key: tuple(bucket) for key, bucket in buckets.items()
        }

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def find(self, data: _T, offset: int) -> _R | None:
        """Return the longest rule matching data at offset, if any."""
        if offset >= len(data):
            return None
        bucket = self._buckets.get(data[offset])
        if not bucket:
            return None
        return find_best_match(bucket, data, offset, self._pattern)

    def apply(self, data: _T, output: Callable[[_R], _T]) -> _T:
        """Rewrite data by replacing every longest match with output(rule).

        Positions with no match are copied through one element at a time.
        """
        pieces: list[_T] = []
        i = 0
        while i < len(data):
            rule = self.find(data, i)
            if rule is None:
                pieces.append(data[i : i + 1])
                i += 1
            else:
                pieces.append(output(rule))
                i += len(self._pattern(rule))
        return data[:0].join(pieces)
