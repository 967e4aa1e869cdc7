# tests/test_student.py

import pytest

from models.person import PersonKind
from models.student import Education, Student


def test_student_fields(sample_student):
    assert sample_student.kind is PersonKind.STUDENT
    assert sample_student.name == "John Doe"
    assert sample_student.education is Education.SECONDARY
    assert sample_student.grade == "B"
    assert sample_student.tags == frozenset({"math", "weekly"})
    assert sample_student.parent_name is None
    assert sample_student.linked_name is None
    assert sample_student.status == "'ACTIVE'"


def test_student_is_read_only(sample_student):
    with pytest.raises(AttributeError):
        sample_student.parent_name = "Jane Doe"


def test_student_to_dict(sample_student):
    data = sample_student.to_dict()

    assert data["id"] == "s001"
    assert data["kind"] == "Student"
    assert data["name"] == "John Doe"
    assert data["education"] == "Secondary"
    assert data["tags"] == ["math", "weekly"]
    assert data["parent_name"] is None
    assert not data["pinned"]
    assert not data["archived"]


def test_student_from_dict():
    student = Student.from_dict(
        {
            "id": "s001",
            "kind": "Student",
            "name": "John Doe",
            "phone": "98765432",
            "email": "johnd@example.com",
            "address": "Clementi",
            "lesson_time": "Mon 14:00-16:00",
            "education": "Junior College",
            "grade": "A",
            "parent_name": "Jane Doe",
            "archived": True,
        }
    )

    assert student.id == "s001"
    assert student.education is Education.JUNIOR_COLLEGE
    assert student.parent_name == "Jane Doe"
    assert student.tags == frozenset()
    assert student.is_archived
    assert not student.is_pinned


def test_with_parent_name_preserves_other_fields(sample_student):
    linked = sample_student.with_parent_name("Jane Doe")

    assert linked is not sample_student
    assert linked.parent_name == "Jane Doe"
    assert sample_student.parent_name is None

    expected = sample_student.to_dict()
    expected["parent_name"] = "Jane Doe"
    assert linked.to_dict() == expected


def test_student_rejects_unknown_education():
    with pytest.raises(ValueError):
        Student(
            id="s009",
            name="Roy Balakrishnan",
            phone="92624417",
            email="royb@example.com",
            address="Blk 45 Aljunied Street 85",
            lesson_time="Fri 09:00-10:00",
            education="Kindergarten",
            grade="A",
        )
