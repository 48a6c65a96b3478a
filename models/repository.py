# models/repository.py

"""
The generic record collection capability shared by roster-style managers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, TypeVar

RecordType = TypeVar("RecordType")


class Repository(ABC, Generic[RecordType]):

    @abstractmethod
    def add(self, item: RecordType) -> None:
        """Adds a record to the collection."""

    @abstractmethod
    def remove(self, item: RecordType) -> bool:
        """Removes a record from the collection."""

    @abstractmethod
    def get_all(self) -> list[RecordType]:
        """Returns a copy of every record in the collection."""

    @abstractmethod
    def find(self, predicate: Callable[[RecordType], bool]) -> list[RecordType]:
        """Returns every record matching the predicate."""
