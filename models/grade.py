# models/grade.py

"""
Letter grade tiers. Each member's value is the lowest score that earns it.
"""

from __future__ import annotations

from enum import Enum


class Grade(Enum):
    F = 0
    D = 60
    C = 70
    B = 80
    A = 90

    @property
    def threshold(self) -> int:
        return self.value

    @classmethod
    def from_score(cls, score: float) -> Grade:
        # checked from the highest tier down
        for grade in (cls.A, cls.B, cls.C, cls.D):
            if score >= grade.threshold:
                return grade
        return cls.F

    def __str__(self) -> str:
        return self.name
