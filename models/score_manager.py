# models/score_manager.py

"""
The ScoreManager attributes `Score` records to students by student ID.

Scores are stored per student in insertion order. A student ID with no entry simply has no
scores; the manager never checks that an ID exists on the roster.

Provides averages, letter grades, and a top-N ranking by average. Rankings use a stable sort,
so students with equal averages keep the order in which they first received a score.
"""

from __future__ import annotations

from core.errors import ArgumentError, ErrorCode
from models.grade import Grade
from models.score import MAX_POINTS, MIN_POINTS, Score


class ScoreManager:

    def __init__(self):
        self._scores: dict[str, list[Score]] = {}

    # === data accessors ===

    def get_student_scores(self, student_id: str) -> list[Score]:
        self._require_student_id(student_id)
        return list(self._scores.get(student_id, []))

    def get_all_scores(self) -> dict[str, list[Score]]:
        return {student_id: list(scores) for student_id, scores in self._scores.items()}

    # --- statistics ---

    def calculate_average(self, student_id: str) -> float:
        """
        Returns the arithmetic mean of a student's points.

        Args:
            student_id (str): The student to average.

        Returns:
            The mean points value, or 0.0 if the student has no scores.

        Raises:
            ArgumentError: If `student_id` is empty or whitespace-only.
        """
        self._require_student_id(student_id)

        scores = self._scores.get(student_id)
        if not scores:
            return 0.0

        total = 0.0
        for score in scores:
            total += score.points

        return total / len(scores)

    def get_grade(self, score: float) -> Grade:
        """
        Maps a numeric score to its letter `Grade`.

        Raises:
            ArgumentError: If `score` is outside [0, 100].
        """
        if score < MIN_POINTS or score > MAX_POINTS:
            raise ArgumentError(
                f"Score must be between 0 and 100, got {score}.",
                ErrorCode.INVALID_RANGE,
            )

        return Grade.from_score(score)

    def get_top_students(self, count: int) -> list[tuple[str, float]]:
        """
        Ranks students by average score, highest first.

        Args:
            count (int): The maximum number of entries to return. Zero or negative returns nothing.

        Returns:
            Up to `count` `(student_id, average)` tuples, sorted by average descending.

        Notes:
            - Only students with at least one recorded score are ranked.
            - Ties keep the order in which each student first received a score.
        """
        averages = [
            (student_id, self.calculate_average(student_id))
            for student_id in self._scores
        ]
        averages.sort(key=lambda entry: entry[1], reverse=True)

        return averages[: max(0, min(count, len(averages)))]

    # === data manipulators ===

    def add_score(self, student_id: str, score: Score) -> None:
        """
        Appends a `Score` to a student's score list, creating the list if needed.

        Raises:
            ArgumentError: If `student_id` is empty or `score` is None.
        """
        self._require_student_id(student_id)

        if score is None:
            raise ArgumentError("Score cannot be None.")

        self._scores.setdefault(student_id, []).append(score)

    # === helper methods ===

    def _require_student_id(self, student_id: str) -> None:
        if not isinstance(student_id, str) or not student_id.strip():
            raise ArgumentError("Student ID cannot be empty.")

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"ScoreManager({len(self._scores)} students)"
