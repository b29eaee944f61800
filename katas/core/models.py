"""
Kata domain model.

A kata is a named practice exercise with a reference URL and the list of
dates it was completed on. Dates are appended in chronological order.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator


class Kata(BaseModel):
    """A programming exercise and its completion history."""

    name: str
    url: str = ""
    done: list[date] = Field(default_factory=list)

    @field_validator("name", mode="before")
    @classmethod
    def _name_as_text(cls, value: Any) -> Any:
        # YAML reads names like 2048 or 1.5 as numbers
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("url", mode="before")
    @classmethod
    def _blank_url(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("done", mode="before")
    @classmethod
    def _blank_done(cls, value: Any) -> Any:
        return [] if value is None else value

    @property
    def times_done(self) -> int:
        """Number of recorded completions."""
        return len(self.done)

    @property
    def last_done(self) -> date | None:
        """Most recent completion date, or None if never done."""
        return max(self.done) if self.done else None

    def was_done_on(self, day: date) -> bool:
        """Check whether the latest recorded completion is ``day``."""
        return bool(self.done) and self.done[-1] == day

    def to_record(self) -> dict[str, Any]:
        """Convert to the mapping written to the YAML file."""
        record: dict[str, Any] = {"name": self.name, "url": self.url}
        if self.done:
            record["done"] = [d.isoformat() for d in self.done]
        return record
