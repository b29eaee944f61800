"""YAML persistence for the kata list."""

from katas.store.kata_store import (
    AlreadyDoneError,
    ConfigExistsError,
    KataNotFoundError,
    KataStore,
    KataStoreError,
)

__all__ = [
    "AlreadyDoneError",
    "ConfigExistsError",
    "KataNotFoundError",
    "KataStore",
    "KataStoreError",
]
