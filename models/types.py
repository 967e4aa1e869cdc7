# models/types.py

"""
Holds the contact type alias and the kind-based deserialization dispatch.
"""

from __future__ import annotations

from typing import Union

from models.parent import Parent
from models.person import PersonKind
from models.student import Student

PersonType = Union[Student, Parent]


def person_from_dict(data: dict) -> PersonType:
    """
    Rebuilds a `Student` or `Parent` from its dictionary form, dispatching on the "kind" key.

    Raises:
        ValueError: If "kind" is missing or not a known `PersonKind`.
    """
    match PersonKind(data.get("kind")):
        case PersonKind.STUDENT:
            return Student.from_dict(data)
        case PersonKind.PARENT:
            return Parent.from_dict(data)
