"""
Core Module - kata model, mastery scoring and reporting.

Components:
- mastery: MasteryCalculator, mastery(), level_to_symbol()
- models: Kata
- report: KataRow, Summary, build_report()
"""

from katas.core.mastery import (
    MAX_MASTERY,
    MIN_MASTERY,
    MasteryCalculator,
    average_mastery,
    days_between,
    level_to_symbol,
    mastery,
)
from katas.core.models import Kata
from katas.core.report import KataRow, Summary, build_report

__all__ = [
    # Mastery
    "MAX_MASTERY",
    "MIN_MASTERY",
    "MasteryCalculator",
    "average_mastery",
    "days_between",
    "level_to_symbol",
    "mastery",
    # Model
    "Kata",
    # Report
    "KataRow",
    "Summary",
    "build_report",
]
