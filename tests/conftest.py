# tests/conftest.py

import pytest

from core.data_manager import DataManager
from models.score import Score
from models.score_manager import ScoreManager
from models.student import Student
from models.student_manager import StudentManager


@pytest.fixture
def sample_student():
    return Student("2021001", "张三", 20)


@pytest.fixture
def sample_score():
    return Score("数学", 95.5)


@pytest.fixture
def sample_students():
    return [
        Student("2021001", "张三", 20),
        Student("2021002", "李四", 19),
        Student("2021003", "王五", 21),
    ]


@pytest.fixture
def student_manager():
    return StudentManager()


@pytest.fixture
def populated_student_manager(sample_students):
    manager = StudentManager()
    # added out of order to exercise sorting
    for student in reversed(sample_students):
        manager.add(student)
    return manager


@pytest.fixture
def score_manager():
    return ScoreManager()


@pytest.fixture
def populated_score_manager():
    manager = ScoreManager()
    manager.add_score("2021001", Score("数学", 95.5))
    manager.add_score("2021001", Score("英语", 87.0))
    manager.add_score("2021002", Score("数学", 78.5))
    manager.add_score("2021002", Score("英语", 85.5))
    manager.add_score("2021003", Score("数学", 88.0))
    manager.add_score("2021003", Score("英语", 92.0))
    return manager


@pytest.fixture
def data_manager():
    return DataManager()


@pytest.fixture
def data_file(tmp_path):
    return str(tmp_path / "students.csv")
