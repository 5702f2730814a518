# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Dependency Inversion Principle.

``NaiveDataManager`` is wired to one concrete database class.  ``DataManager``
depends on the :class:`Storage` capability; callers pick the backend.
"""

from __future__ import annotations

from typing import TextIO

from ..capability import define_capability
from ..registry import implements
from .catalog import catalog


# -- naive -------------------------------------------------------------------


class NaiveDatabase:
    def save(self, text: str) -> str:
        return f"Added `{text}` text to NaiveDatabase"


class NaiveDataManager:
    def __init__(self, database: NaiveDatabase) -> None:
        self.database = database

    def save(self, text: str) -> str:
        return self.database.save(text)


# -- correct -----------------------------------------------------------------


def save(self, text: str) -> str:
    """Persist *text* and return a human-readable receipt."""
    ...


Storage = define_capability(save, name="Storage")


with catalog.binding():

    @implements(Storage)
    class Database:
        def save(self, text: str) -> str:
            return f"Added `{text}` text to Database"

    @implements(Storage)
    class GoogleDrive:
        def save(self, text: str) -> str:
            return f"Added `{text}` text to GoogleDrive"

    @implements(Storage)
    class MemoryStorage:
        """Keeps saved texts in a list; handy in tests."""

        def __init__(self) -> None:
            self.texts: list[str] = []

        def save(self, text: str) -> str:
            self.texts.append(text)
            return f"Added `{text}` text to MemoryStorage"


del save


class DataManager:
    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def save(self, text: str) -> str:
        return self.storage.save(text)


def demo(file: TextIO | None = None) -> None:
    print(NaiveDataManager(NaiveDatabase()).save("It's Dependency Inversion Principle"), file=file)

    for storage in (Database(), GoogleDrive()):
        print(DataManager(storage).save("It's Dependency Inversion Principle"), file=file)


__all__ = [
    "DataManager",
    "Database",
    "GoogleDrive",
    "MemoryStorage",
    "NaiveDataManager",
    "NaiveDatabase",
    "Storage",
    "demo",
]
