# models/parent.py

"""
Represents the parent or guardian of a student.

Adds an optional link to one child, stored as the student's name.
"""

from __future__ import annotations

from typing import Iterable

from models.person import Person, PersonKind


class Parent(Person):
    kind = PersonKind.PARENT

    def __init__(
        self,
        id: str,
        name: str,
        phone: str,
        email: str,
        address: str,
        child_name: str | None = None,
        tags: Iterable[str] = (),
        pinned: bool = False,
        archived: bool = False,
    ):
        super().__init__(id, name, phone, email, address, tags, pinned, archived)
        self._child_name: str | None = (
            Person.validate_name_input(child_name) if child_name else None
        )

    # === properties ===

    @property
    def child_name(self) -> str | None:
        return self._child_name

    @property
    def linked_name(self) -> str | None:
        return self._child_name

    def with_child_name(self, child_name: str | None) -> Parent:
        return Parent(
            id=self._id,
            name=self._name,
            phone=self._phone,
            email=self._email,
            address=self._address,
            child_name=child_name,
            tags=self._tags,
            pinned=self._is_pinned,
            archived=self._is_archived,
        )

    # === persistence and import ===

    def to_dict(self) -> dict:
        data = self._common_fields()
        data["child_name"] = self._child_name
        return data

    @classmethod
    def from_dict(cls, data: dict) -> Parent:
        return cls(
            child_name=data.get("child_name"),
            **Person._common_kwargs(data),
        )

    # === dunder methods ===

    def __repr__(self) -> str:
        return f"Parent({self._id}, {self._name}, {self._child_name})"
