# tests/test_student_manager.py

import pytest

from core.errors import ArgumentError, ErrorCode, StateError
from models.repository import Repository
from models.student import Student


def test_student_manager_is_repository(student_manager):
    assert isinstance(student_manager, Repository)


# --- add ---


def test_add_student(student_manager, sample_student):
    student_manager.add(sample_student)

    assert len(student_manager) == 1
    assert sample_student in student_manager
    assert "2021001" in student_manager


def test_add_keeps_roster_sorted(populated_student_manager):
    ids = [s.student_id for s in populated_student_manager.get_all()]

    assert ids == ["2021001", "2021002", "2021003"]


def test_add_sorts_by_code_point(student_manager):
    for student_id in ["10", "9", "100", "Z", "a"]:
        student_manager.add(Student(student_id, "name", 1))

    assert [s.student_id for s in student_manager.get_all()] == ["10", "100", "9", "Z", "a"]


def test_add_duplicate_student_fails(student_manager, sample_student):
    student_manager.add(sample_student)

    with pytest.raises(StateError) as exc_info:
        student_manager.add(Student("2021001", "Someone Else", 30))

    assert exc_info.value.error_code is ErrorCode.DUPLICATE_RECORD
    assert len(student_manager) == 1
    assert student_manager.get_all()[0].name == "张三"


def test_add_none_fails(student_manager):
    with pytest.raises(ArgumentError):
        student_manager.add(None)

    assert len(student_manager) == 0


@pytest.mark.parametrize("item", ["2021002", {"student_id": "2021002"}, 42])
def test_add_non_student_leaves_roster_unchanged(student_manager, sample_student, item):
    student_manager.add(sample_student)

    with pytest.raises(ArgumentError) as exc_info:
        student_manager.add(item)

    assert exc_info.value.error_code is ErrorCode.INVALID_FIELD_VALUE
    assert len(student_manager) == 1
    assert student_manager.get_all() == [sample_student]

    student_manager.add(Student("2021000", "赵六", 22))
    assert [s.student_id for s in student_manager.get_all()] == ["2021000", "2021001"]


# --- remove ---


def test_remove_student(populated_student_manager):
    assert populated_student_manager.remove(Student("2021002", "李四", 19))

    ids = [s.student_id for s in populated_student_manager.get_all()]
    assert ids == ["2021001", "2021003"]


def test_remove_matches_by_student_id(populated_student_manager):
    assert populated_student_manager.remove(Student("2021001", "different name", 99))
    assert "2021001" not in populated_student_manager


def test_remove_absent_student_fails(populated_student_manager):
    with pytest.raises(StateError) as exc_info:
        populated_student_manager.remove(Student("9999999", "Nobody", 1))

    assert exc_info.value.error_code is ErrorCode.NOT_FOUND
    assert len(populated_student_manager) == 3


def test_remove_none_fails(populated_student_manager):
    with pytest.raises(ArgumentError):
        populated_student_manager.remove(None)


def test_remove_then_re_add(populated_student_manager):
    populated_student_manager.remove(Student("2021002", "李四", 19))
    populated_student_manager.add(Student("2021002", "李四", 20))

    assert populated_student_manager.find_by_id("2021002").age == 20


# --- accessors ---


def test_get_all_returns_copy(populated_student_manager):
    students = populated_student_manager.get_all()
    students.clear()

    assert len(populated_student_manager) == 3


def test_find_with_predicate(populated_student_manager):
    result = populated_student_manager.find(lambda s: s.name.startswith("王"))

    assert [s.student_id for s in result] == ["2021003"]


def test_find_preserves_roster_order(populated_student_manager):
    result = populated_student_manager.find(lambda s: s.age != 20)

    assert [s.student_id for s in result] == ["2021002", "2021003"]


def test_find_no_matches(populated_student_manager):
    assert populated_student_manager.find(lambda s: False) == []


def test_find_none_predicate_fails(populated_student_manager):
    with pytest.raises(ArgumentError):
        populated_student_manager.find(None)


def test_find_by_id(populated_student_manager):
    assert populated_student_manager.find_by_id("2021003").name == "王五"
    assert populated_student_manager.find_by_id("0000000") is None


# --- age range ---


def test_get_students_by_age(populated_student_manager):
    result = populated_student_manager.get_students_by_age(19, 20)

    assert [(s.student_id, s.age) for s in result] == [
        ("2021001", 20),
        ("2021002", 19),
    ]


def test_get_students_by_age_single_value(populated_student_manager):
    result = populated_student_manager.get_students_by_age(21, 21)

    assert [s.student_id for s in result] == ["2021003"]


def test_get_students_by_age_no_matches(populated_student_manager):
    assert populated_student_manager.get_students_by_age(30, 40) == []


@pytest.mark.parametrize("min_age, max_age", [(-1, 20), (19, -1), (21, 19)])
def test_get_students_by_age_invalid_range(populated_student_manager, min_age, max_age):
    with pytest.raises(ArgumentError) as exc_info:
        populated_student_manager.get_students_by_age(min_age, max_age)

    assert exc_info.value.error_code is ErrorCode.INVALID_RANGE
