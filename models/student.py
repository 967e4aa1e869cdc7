# models/student.py

"""
Represents a student receiving lessons.

Adds the tutoring details (lesson time, education level, grade) and an optional
link to a parent, stored as the parent's name.

`with_parent_name()` produces the replacement record used when linking; every
other field, including the id, is carried over unchanged.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from models.person import Person, PersonKind


class Education(str, Enum):
    PRIMARY = "Primary"
    SECONDARY = "Secondary"
    JUNIOR_COLLEGE = "Junior College"
    UNIVERSITY = "University"


class Student(Person):
    kind = PersonKind.STUDENT

    def __init__(
        self,
        id: str,
        name: str,
        phone: str,
        email: str,
        address: str,
        lesson_time: str,
        education: Education,
        grade: str,
        parent_name: str | None = None,
        tags: Iterable[str] = (),
        pinned: bool = False,
        archived: bool = False,
    ):
        super().__init__(id, name, phone, email, address, tags, pinned, archived)
        self._lesson_time: str = Student.validate_lesson_time_input(lesson_time)
        self._education: Education = Education(education)
        self._grade: str = Student.validate_grade_input(grade)
        self._parent_name: str | None = (
            Person.validate_name_input(parent_name) if parent_name else None
        )

    # === properties ===

    @property
    def lesson_time(self) -> str:
        return self._lesson_time

    @property
    def education(self) -> Education:
        return self._education

    @property
    def grade(self) -> str:
        return self._grade

    @property
    def parent_name(self) -> str | None:
        return self._parent_name

    @property
    def linked_name(self) -> str | None:
        return self._parent_name

    def with_parent_name(self, parent_name: str | None) -> Student:
        return Student(
            id=self._id,
            name=self._name,
            phone=self._phone,
            email=self._email,
            address=self._address,
            lesson_time=self._lesson_time,
            education=self._education,
            grade=self._grade,
            parent_name=parent_name,
            tags=self._tags,
            pinned=self._is_pinned,
            archived=self._is_archived,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        data = self._common_fields()
        data.update(
            {
                "lesson_time": self._lesson_time,
                "education": self._education.value,
                "grade": self._grade,
                "parent_name": self._parent_name,
            }
        )
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        return cls(
            lesson_time=data["lesson_time"],
            education=Education(data["education"]),
            grade=data["grade"],
            parent_name=data.get("parent_name"),
            **Person._common_kwargs(data),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Student({self._id}, {self._name}, {self._education.value}, {self._grade}, {self._parent_name})"

    # === data validators ===

    @staticmethod
    def validate_lesson_time_input(lesson_time: str) -> str:
        lesson_time = lesson_time.strip()
        if not lesson_time:
            raise ValueError("Invalid input. Lesson time must not be blank.")
        return lesson_time

    @staticmethod
    def validate_grade_input(grade: str) -> str:
        grade = grade.strip().upper()
        if not grade:
            raise ValueError("Invalid input. Grade must not be blank.")
        return grade
