# models/score.py

"""
Represents a single score record: the points a student earned in one subject.

A `Score` carries no reference to its student; the `ScoreManager` attributes scores to
students by ID. Scores are immutable once constructed.

Notes:
- Points must be a finite number within [0, 100] and are stored as a float.
- Multiple scores for the same subject are allowed.
"""

from __future__ import annotations

import math
from typing import Any

from core.errors import ErrorCode, ValidationError

MIN_POINTS = 0.0
MAX_POINTS = 100.0


class Score:

    def __init__(self, subject: str, points: float):
        self._subject: str = Score.validate_subject_input(subject)
        self._points: float = Score.validate_points_input(points)

    # === properties ===

    @property
    def subject(self) -> str:
        return self._subject

    @property
    def points(self) -> float:
        return self._points

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Score):
            return NotImplemented
        return self._subject == other._subject and self._points == other._points

    def __hash__(self) -> int:
        return hash((self._subject, self._points))

    def __repr__(self) -> str:
        return f"Score({self._subject}, {self._points})"

    def __str__(self) -> str:
        return f"科目: {self._subject}, 成绩: {self._points:.2f}"

    # === data validators ===

    @staticmethod
    def validate_subject_input(subject: Any) -> str:
        if not isinstance(subject, str) or not subject.strip():
            raise ValidationError(
                "Invalid input. Subject cannot be empty.",
                ErrorCode.MISSING_REQUIRED_FIELD,
            )
        return subject

    @staticmethod
    def validate_points_input(points: Any) -> float:
        """
        Validates and normalizes input for a `Score` points value.

        Accepts any numeric input, and then:
            - Casts to float.
            - Ensures the number is finite.
            - Ensures it is within [0, 100].

        Args:
            points (Any): The input value to validate.

        Returns:
            The normalized points value (float).

        Raises:
            ValidationError: If the input is not a number, is non-finite, or is out of range.
        """
        if isinstance(points, bool):
            raise ValidationError("Invalid input. Points must be a number.")

        try:
            points = float(points)

        except (TypeError, ValueError):
            raise ValidationError("Invalid input. Points must be a number.") from None

        if not math.isfinite(points):
            raise ValidationError("Invalid input. Points must be a finite number.")

        if points < MIN_POINTS or points > MAX_POINTS:
            raise ValidationError("Invalid input. Points must be between 0 and 100.")

        return points
