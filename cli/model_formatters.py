# cli/model_formatters.py

# anything that renders domain objects or performs read-only manager lookups
from textwrap import indent

import core.formatters as formatters
from models.grade import Grade
from models.score import Score
from models.score_manager import ScoreManager
from models.student import Student

# === student formatters ===


def format_student_list(students: list[Student]) -> str:
    return "\n".join(str(student) for student in students)


# === score formatters ===


def format_score_list(scores: list[Score]) -> str:
    return indent("\n".join(str(score) for score in scores), "  ")


def format_average_and_grade(average: float, grade: Grade) -> str:
    return f"平均分: {formatters.format_points(average)}, 等级: {grade}"


def format_student_report(student: Student, score_manager: ScoreManager) -> str:
    scores = score_manager.get_student_scores(student.student_id)
    average = score_manager.calculate_average(student.student_id)
    grade = score_manager.get_grade(average)

    lines = [f"\n学生: {student}", "成绩:"]
    if scores:
        lines.append(format_score_list(scores))
    lines.append(format_average_and_grade(average, grade))

    return "\n".join(lines)


# === ranking formatters ===


def format_top_student(student: Student, average: float) -> str:
    return f"第一名: {student}, 平均分: {formatters.format_points(average)}"
