# models/person.py

"""
Represents a contact in the address book.

`Person` holds the fields shared by every contact: a stable id, name, phone,
email, address, tags, and the pinned and archived flags. The two concrete kinds,
`Student` and `Parent`, live in their own modules and add their link field.

Records are immutable. There are no setters; an edit is expressed by building a
replacement record with the same id and handing it to `AddressBook.set_person()`.

Each record carries an explicit `kind` tag so callers can branch on
`PersonKind` instead of inspecting classes.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Iterable


class PersonKind(str, Enum):
    STUDENT = "Student"
    PARENT = "Parent"


class Person:
    kind: PersonKind

    def __init__(
        self,
        id: str,
        name: str,
        phone: str,
        email: str,
        address: str,
        tags: Iterable[str] = (),
        pinned: bool = False,
        archived: bool = False,
    ):
        self._id: str = id
        self._name: str = Person.validate_name_input(name)
        self._phone: str = Person.validate_phone_input(phone)
        self._email: str = Person.validate_email_input(email)
        self._address: str = Person.validate_address_input(address)
        self._tags: frozenset[str] = frozenset(
            Person.validate_tag_input(tag) for tag in tags
        )
        self._is_pinned: bool = pinned
        self._is_archived: bool = archived

    # === properties ===

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def phone(self) -> str:
        return self._phone

    @property
    def email(self) -> str:
        return self._email

    @property
    def address(self) -> str:
        return self._address

    @property
    def tags(self) -> frozenset[str]:
        return self._tags

    @property
    def is_pinned(self) -> bool:
        return self._is_pinned

    @property
    def is_archived(self) -> bool:
        return self._is_archived

    @property
    def status(self) -> str:
        return "'ARCHIVED'" if self._is_archived else "'ACTIVE'"

    @property
    def linked_name(self) -> str | None:
        """
        The name held in this record's link field, or None if unlinked.
        """
        raise NotImplementedError

    # === persistence and import ===

    def _common_fields(self) -> dict:
        return {
            "id": self._id,
            "kind": self.kind.value,
            "name": self._name,
            "phone": self._phone,
            "email": self._email,
            "address": self._address,
            "tags": sorted(self._tags),
            "pinned": self._is_pinned,
            "archived": self._is_archived,
        }

    def to_dict(self) -> dict:
        return self._common_fields()

    @staticmethod
    def _common_kwargs(data: dict) -> dict:
        return {
            "id": data["id"],
            "name": data["name"],
            "phone": data["phone"],
            "email": data["email"],
            "address": data["address"],
            "tags": data.get("tags", []),
            "pinned": data.get("pinned", False),
            "archived": data.get("archived", False),
        }

    # === dunder methods ===

    def __str__(self) -> str:
        return f"{self.kind.value.upper()}: name: {self._name}, phone: {self._phone}, id: {self._id}"

    # === data validators ===

    @staticmethod
    def validate_name_input(name: str) -> str:
        """
        Validates and normalizes a contact name.

        Strips surrounding whitespace. The name must be one or more words of
        letters and digits, separated by single spaces.

        Raises:
            ValueError: If the name is blank or contains other characters.
        """
        name = name.strip()
        if not re.fullmatch(r"[^\W_]+(?: [^\W_]+)*", name):
            raise ValueError(
                "Invalid input. Names may only contain letters, digits, and single spaces, and must not be blank."
            )
        return name

    @staticmethod
    def validate_phone_input(phone: str) -> str:
        phone = phone.strip()
        if not re.fullmatch(r"\d{3,}", phone):
            raise ValueError(
                "Invalid input. Phone numbers must contain only digits and be at least 3 digits long."
            )
        return phone

    @staticmethod
    def validate_email_input(email: str) -> str:
        """
        Validates and normalizes a contact email address.

        Normalizes the input by stripping whitespace and converting to lowercase.
        Ensures the email:
            - Contains exactly one '@' symbol
            - Has non-whitespace characters on both sides of the '@'
            - Contains at least one '.' after the '@' to separate the domain and TLD

        Args:
            email: The input email string to validate.

        Returns:
            A normalized, lowercase version of the email if valid.

        Raises:
            ValueError: If the email does not conform to the expected format.
        """
        email = email.strip().lower()
        if not re.fullmatch(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", email):
            raise ValueError(
                "Invalid input. Email must be a valid address with one @ and a domain."
            )
        return email

    @staticmethod
    def validate_address_input(address: str) -> str:
        address = address.strip()
        if not address:
            raise ValueError("Invalid input. Address must not be blank.")
        return address

    @staticmethod
    def validate_tag_input(tag: str) -> str:
        tag = tag.strip()
        if not re.fullmatch(r"[^\W_]+", tag):
            raise ValueError(
                f"Invalid input. Tag '{tag}' must be a single alphanumeric word."
            )
        return tag
