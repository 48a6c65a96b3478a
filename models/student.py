# models/student.py

"""
Represents a student on the roster.

A `Student` is an immutable value record: the student ID, name, and age are validated once
at construction and exposed through read-only properties. Replacing a student means removing
it from the roster and adding a new instance.

Equality, hashing, and ordering all derive from the student ID, compared by code point.
Two `Student` objects with the same ID are considered the same student even if their
names or ages differ.

Includes functionality for:
- Validating student ID, name, and age input
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

from typing import Any

from core.errors import ErrorCode, ValidationError


class Student:

    def __init__(self, student_id: str, name: str, age: int):
        self._student_id: str = Student.validate_text_input(student_id, "Student ID")
        self._name: str = Student.validate_text_input(name, "Name")
        self._age: int = Student.validate_age_input(age)

    # === properties ===

    @property
    def student_id(self) -> str:
        return self._student_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def age(self) -> int:
        return self._age

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "student_id": self._student_id,
            "name": self._name,
            "age": self._age,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            student_id=data["student_id"],
            name=data["name"],
            age=data["age"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id == other._student_id

    def __hash__(self) -> int:
        return hash(self._student_id)

    def __lt__(self, other: Student) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self._student_id < other._student_id

    def __repr__(self) -> str:
        return f"Student({self._student_id}, {self._name}, {self._age})"

    def __str__(self) -> str:
        return f"学号: {self._student_id}, 姓名: {self._name}, 年龄: {self._age}"

    # === data validators ===

    @staticmethod
    def validate_text_input(value: Any, field_name: str) -> str:
        """
        Validates a required text field such as the student ID or name.

        Args:
            value (Any): The input value to validate.
            field_name (str): A human-readable field label used in error messages.

        Returns:
            The value, unchanged.

        Raises:
            ValidationError: If the value is not a string, or is empty or whitespace-only.

        Notes:
            - Surrounding whitespace is preserved; only blank values are rejected.
        """
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(
                f"Invalid input. {field_name} cannot be empty.",
                ErrorCode.MISSING_REQUIRED_FIELD,
            )
        return value

    @staticmethod
    def validate_age_input(age: Any) -> int:
        """
        Validates a `Student` age value.

        Args:
            age (Any): The input value to validate.

        Returns:
            The age as an int.

        Raises:
            ValidationError: If the input is not an integer (booleans included) or is negative.
        """
        if isinstance(age, bool) or not isinstance(age, int):
            raise ValidationError("Invalid input. Age must be a whole number.")

        if age < 0:
            raise ValidationError("Invalid input. Age cannot be negative.")

        return age
