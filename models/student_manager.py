# models/student_manager.py

"""
The StudentManager holds the roster: an ordered collection of unique `Student` records.

The roster is kept sorted by student ID after every insertion, so every accessor returns
students in ID order. Uniqueness is by student ID; adding a second student with an existing ID
fails without changing the roster.

Every accessor returns a new list, so callers can never mutate the roster through a returned value.
"""

from __future__ import annotations

import logging
from typing import Callable

from core.errors import ArgumentError, ErrorCode, StateError
from models.repository import Repository
from models.student import Student

logger = logging.getLogger(__name__)


class StudentManager(Repository[Student]):

    def __init__(self):
        self._students: list[Student] = []

    # === data accessors ===

    def get_all(self) -> list[Student]:
        return list(self._students)

    def find(self, predicate: Callable[[Student], bool]) -> list[Student]:
        """
        Returns all students for which `predicate` is truthy, in roster order.

        Args:
            predicate (Callable[[Student], bool]): The filter function.

        Returns:
            A new list of matching students (may be empty).

        Raises:
            ArgumentError: If `predicate` is None.
        """
        if predicate is None:
            raise ArgumentError("Search predicate cannot be None.")

        return [student for student in self._students if predicate(student)]

    def find_by_id(self, student_id: str) -> Student | None:
        for student in self._students:
            if student.student_id == student_id:
                return student
        return None

    def get_students_by_age(self, min_age: int, max_age: int) -> list[Student]:
        """
        Returns all students whose age falls within [min_age, max_age], in roster order.

        Args:
            min_age (int): The inclusive lower bound.
            max_age (int): The inclusive upper bound.

        Returns:
            A new list of matching students (may be empty).

        Raises:
            ArgumentError:
                - If either bound is negative.
                - If `min_age` is greater than `max_age`.
        """
        if min_age < 0 or max_age < 0:
            raise ArgumentError(
                "Age bounds cannot be negative.", ErrorCode.INVALID_RANGE
            )

        if min_age > max_age:
            raise ArgumentError(
                f"Minimum age ({min_age}) cannot be greater than maximum age ({max_age}).",
                ErrorCode.INVALID_RANGE,
            )

        return self.find(lambda student: min_age <= student.age <= max_age)

    # === data manipulators ===

    def add(self, student: Student) -> None:
        """
        Adds a `Student` to the roster and re-sorts the roster by student ID.

        Args:
            student (Student): The student to add.

        Raises:
            ArgumentError: If `student` is None or not a `Student`.
            StateError: If a student with the same ID is already on the roster.

        Notes:
            - The roster is unchanged when this method raises.
        """
        if student is None:
            raise ArgumentError("Student cannot be None.")

        if not isinstance(student, Student):
            raise ArgumentError(
                f"Expected a Student, got {type(student).__name__}.",
                ErrorCode.INVALID_FIELD_VALUE,
            )

        if student in self._students:
            raise StateError(
                f"A student with the ID '{student.student_id}' already exists.",
                ErrorCode.DUPLICATE_RECORD,
            )

        self._students.append(student)
        self._students.sort()

        logger.debug("Added student %s", student.student_id)

    def remove(self, student: Student) -> bool:
        """
        Removes the roster entry matching `student` by student ID.

        Args:
            student (Student): The student to remove.

        Returns:
            True once the student has been removed.

        Raises:
            ArgumentError: If `student` is None.
            StateError: If no student with that ID is on the roster.
        """
        if student is None:
            raise ArgumentError("Student cannot be None.")

        try:
            self._students.remove(student)

        except ValueError:
            raise StateError(
                f"No student with the ID '{student.student_id}' could be found for removal."
            ) from None

        logger.debug("Removed student %s", student.student_id)

        return True

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._students)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Student):
            return item in self._students
        return any(student.student_id == item for student in self._students)

    def __repr__(self) -> str:
        return f"StudentManager({len(self._students)} students)"
