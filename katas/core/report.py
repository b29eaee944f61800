"""
Status report for the kata list.

Turns katas into display rows and a summary line. Rendering is left to the
CLI; everything here is plain data.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from katas.core.mastery import average_mastery, days_between, level_to_symbol, mastery
from katas.core.models import Kata


@dataclass
class KataRow:
    """One line of the status table."""

    name: str
    url: str
    times_done: int
    days_ago: int | None
    mastery: int

    @property
    def last_done_label(self) -> str:
        if self.days_ago is None:
            return "never"
        return f"{self.days_ago} days ago"

    @property
    def mastery_symbol(self) -> str:
        return level_to_symbol(self.mastery)


@dataclass
class Summary:
    """Totals across all katas."""

    kata_count: int
    total_done: int
    average_mastery: int

    @property
    def average_symbol(self) -> str:
        return level_to_symbol(self.average_mastery)


def build_row(kata: Kata, now: date | datetime) -> KataRow:
    """Derive the display row for a single kata."""
    last_done = kata.last_done
    return KataRow(
        name=kata.name,
        url=kata.url,
        times_done=kata.times_done,
        days_ago=days_between(last_done, now) if last_done is not None else None,
        mastery=mastery(kata.times_done, last_done, now),
    )


def build_report(katas: Iterable[Kata], now: date | datetime) -> tuple[list[KataRow], Summary]:
    """
    Build table rows and the summary for a kata list.

    Args:
        katas: Katas in file order
        now: Evaluation time injected by the caller

    Returns:
        Tuple of (rows, summary)
    """
    rows = [build_row(kata, now) for kata in katas]
    summary = Summary(
        kata_count=len(rows),
        total_done=sum(row.times_done for row in rows),
        average_mastery=average_mastery(row.mastery for row in rows),
    )
    return rows, summary
