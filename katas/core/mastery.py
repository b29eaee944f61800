"""
Core Mastery Module.

Maps a kata's completion history onto a 0-5 mastery level.

Design:
- Base level: step function of how many times the kata was done
- Decay: step function of whole days since the last completion
- Level: max(0, base - decay), rendered as a run of "+" characters

Everything here is pure. Callers inject ``now`` so results are deterministic.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import UTC, date, datetime

MIN_MASTERY = 0
MAX_MASTERY = 5

MASTERY_SYMBOLS = (
    "",
    "+",
    "++",
    "+++",
    "++++",
    "+++++",
)


def _as_datetime(value: date | datetime) -> datetime:
    """Promote a bare date to midnight and make the result timezone-aware."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return value


def days_between(earlier: date | datetime, later: date | datetime) -> int:
    """
    Whole days elapsed from ``earlier`` to ``later``.

    The count is signed and truncated toward zero, so 71 hours is 2 days and
    a future ``earlier`` yields zero or a negative number.

    Args:
        earlier: Timestamp of the last completion (date or datetime)
        later: Evaluation time (date or datetime)

    Returns:
        Signed whole days
    """
    delta = _as_datetime(later) - _as_datetime(earlier)
    return int(delta.total_seconds() / 86400)


class MasteryCalculator:
    """
    Staged lookup from (times done, last done) to a mastery level.

    Thresholds are inclusive upper bounds, checked in order:
    - Base: 1-2 → 1, 3-5 → 2, 6-9 → 3, 10-14 → 4, 15+ → 5
    - Decay: ≤3 days → 0, ≤7 → 1, ≤14 → 2, older → 3
    """

    # (max times done, base level)
    BASE_THRESHOLDS = ((2, 1), (5, 2), (9, 3), (14, 4))
    BASE_CEILING = 5

    # (max days ago, decay)
    DECAY_THRESHOLDS = ((3, 0), (7, 1), (14, 2))
    DECAY_CEILING = 3

    def base_level(self, times_done: int) -> int:
        """Level implied by repetition count alone."""
        if times_done <= 0:
            return 0
        for limit, base in self.BASE_THRESHOLDS:
            if times_done <= limit:
                return base
        return self.BASE_CEILING

    def decay(self, days_ago: int | None) -> int:
        """
        Reduction for time since the last completion.

        Negative day counts (last done in the future) land in the first
        bracket. ``None`` means no usable timestamp and decays fully.
        """
        if days_ago is None:
            return self.DECAY_CEILING
        for limit, decay in self.DECAY_THRESHOLDS:
            if days_ago <= limit:
                return decay
        return self.DECAY_CEILING

    def level(
        self,
        times_done: int,
        last_done: date | datetime | None,
        now: date | datetime,
    ) -> int:
        """
        Calculate the mastery level.

        Args:
            times_done: Number of recorded completions
            last_done: Most recent completion, or None if never done
            now: Evaluation time

        Returns:
            Mastery level between 0 and 5
        """
        if times_done <= 0:
            return MIN_MASTERY

        days_ago = days_between(last_done, now) if last_done is not None else None
        return max(MIN_MASTERY, self.base_level(times_done) - self.decay(days_ago))

    @staticmethod
    def symbol(level: int) -> str:
        """Render a level as "+" characters; out-of-range levels render empty."""
        if level < MIN_MASTERY or level > MAX_MASTERY:
            return ""
        return MASTERY_SYMBOLS[level]


_default_calculator = MasteryCalculator()


def mastery(
    times_done: int,
    last_done: date | datetime | None,
    now: date | datetime,
) -> int:
    """Mastery level using the default thresholds."""
    return _default_calculator.level(times_done, last_done, now)


def level_to_symbol(level: int) -> str:
    """Render a mastery level, e.g. 3 -> "+++"."""
    return MasteryCalculator.symbol(level)


def average_mastery(levels: Iterable[int]) -> int:
    """Arithmetic mean of levels truncated to an int (0 when empty)."""
    levels = list(levels)
    if not levels:
        return 0
    return int(sum(levels) / len(levels))
