"""
YAML Record Store for katas.

Persists the kata list and completion dates in a single YAML file:

    - name: fizzbuzz
      url: https://codingdojo.org/kata/FizzBuzz/
      done:
        - "2024-05-01"
        - "2024-05-03"

Default location: ~/.config/katas.yaml
"""

from __future__ import annotations

from datetime import date
from importlib import resources
from pathlib import Path

import yaml
from loguru import logger
from pydantic import TypeAdapter, ValidationError

from katas.core.models import Kata

_KATA_LIST = TypeAdapter(list[Kata])


# =============================================================================
# Errors
# =============================================================================


class KataStoreError(Exception):
    """Raised when the kata file cannot be read, parsed or updated."""
    pass


class ConfigExistsError(KataStoreError):
    """Raised by init when the kata file is already present."""
    pass


class KataNotFoundError(KataStoreError):
    """Raised when no kata has the requested name."""
    pass


class AlreadyDoneError(KataStoreError):
    """Raised when a kata is marked done twice on the same day."""
    pass


# =============================================================================
# Store
# =============================================================================


def default_katas_yaml() -> str:
    """Packaged seed list written by ``katas init``."""
    return resources.files("katas.store").joinpath("default_katas.yaml").read_text(encoding="utf-8")


class KataStore:
    """
    File-backed kata list.

    Every operation reads the file fresh; writes replace the whole file.
    """

    def __init__(self, config_path: Path):
        self.config_path = Path(config_path).expanduser()

    def init_config(self) -> None:
        """Write the default kata list, refusing to overwrite an existing file."""
        if self.config_path.exists():
            raise ConfigExistsError(f"config file {self.config_path} already exists")

        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        self.config_path.write_text(default_katas_yaml(), encoding="utf-8")
        logger.info(f"Wrote default katas to {self.config_path}")

    def load(self) -> list[Kata]:
        """Read katas from the config file."""
        try:
            text = self.config_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise KataStoreError(f"reading config file: {e}") from e

        try:
            data = yaml.safe_load(text)
            katas = _KATA_LIST.validate_python(data or [])
        except (yaml.YAMLError, ValidationError) as e:
            raise KataStoreError(f"parsing config file: {e}") from e

        logger.debug(f"Loaded {len(katas)} katas from {self.config_path}")
        return katas

    def save(self, katas: list[Kata]) -> None:
        """Write katas to the config file."""
        data = yaml.safe_dump(
            [kata.to_record() for kata in katas],
            sort_keys=False,
            allow_unicode=True,
        )
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise KataStoreError(f"writing config file: {e}") from e

        logger.debug(f"Saved {len(katas)} katas to {self.config_path}")

    def mark_done(self, name: str, today: date) -> Kata:
        """
        Record a completion of ``name`` on ``today``.

        Args:
            name: Exact kata name
            today: Completion date

        Returns:
            The updated kata
        """
        katas = self.load()

        for kata in katas:
            if kata.name != name:
                continue
            if kata.was_done_on(today):
                raise AlreadyDoneError(f"kata {name} already marked as done today")

            kata.done.append(today)
            self.save(katas)
            logger.info(f"Marked {name} done on {today.isoformat()} ({kata.times_done}x)")
            return kata

        raise KataNotFoundError(f"kata {name} not found in {self.config_path}")
