# models/address_book.py

"""
The AddressBook model is the central data object of the program and represents the "source of truth" for all contacts.

Contacts are stored in a single dictionary keyed by their stable id. Records are immutable, so every edit replaces
the value stored under an id with a new record carrying the same id; no lookup ever depends on object identity.

Provides functions for adding, removing, finding, and replacing contacts, and for linking a `Student` to a `Parent`.
Every public method returns a `Response` and does not raise.
"""

from __future__ import annotations

from typing import Callable, cast

from core.logging_setup import get_logger
from core.response import ErrorCode, Response
from core.utils import normalize
from models.parent import Parent
from models.person import PersonKind
from models.student import Student
from models.types import PersonType

logger = get_logger("address_book")


class AddressBook:
    MESSAGE_LINK_SUCCESS = "Successfully linked Student: {child} to Parent: {parent}"
    MESSAGE_PARENT_LINKED = "Parent: {parent} has an existing link to Student: {child}"
    MESSAGE_CHILD_LINKED = "Student: {child} has an existing link to Parent: {parent}"
    MESSAGE_PARENT_NOT_FOUND = "Parent: {parent} does not exist in Address Book"
    MESSAGE_CHILD_NOT_FOUND = "Student: {child} does not exist in Address Book"

    def __init__(self, persons: list[PersonType] | None = None):
        self._persons: dict[str, PersonType] = {}

        for person in persons or []:
            response = self.add_person(person)

            if not response.success:
                raise ValueError(f"Failed to import contact: {response.detail}")

    # === properties ===

    @property
    def persons(self) -> dict[str, PersonType]:
        return dict(self._persons)

    @property
    def students(self) -> list[Student]:
        return [
            cast(Student, p)
            for p in self._persons.values()
            if p.kind is PersonKind.STUDENT
        ]

    @property
    def parents(self) -> list[Parent]:
        return [
            cast(Parent, p)
            for p in self._persons.values()
            if p.kind is PersonKind.PARENT
        ]

    # === data accessors ===

    def get_records(
        self,
        predicate: Callable[[PersonType], bool] | None = None,
    ) -> Response:
        """
        Fetches contacts, optionally filtered by a predicate.

        Args:
            predicate (Callable[[PersonType], bool]): Optional filter function. If omitted, all contacts are returned.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the operation succeeded, even if no contacts were found.
                    - False for unexpected errors.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "records" (list[PersonType]): The list of matching contacts (may be empty).

        Notes:
            - This method is read-only and never raises exceptions.
        """
        try:
            if predicate:
                records = list(filter(predicate, self._persons.values()))
            else:
                records = list(self._persons.values())

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            return Response.succeed(
                data={
                    "records": records,
                }
            )

    def find_person_by_uuid(self, uuid: str) -> Response:
        """
        Finds a contact by its stable id.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the contact was found.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The matched contact.

        Notes:
            - This method is read-only and does not raise.
        """
        record = self._persons.get(uuid)

        if record is None:
            return Response.fail(
                detail=f"No matching contact found for {uuid}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        return Response.succeed(
            data={
                "record": record,
            },
        )

    def find_person_by_name(self, name: str) -> Response:
        """
        Finds the contact whose name matches exactly (surrounding whitespace ignored).

        Args:
            name (str): The full name to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if a contact with that name was found.
                - detail (str | None):
                    - On failure, a human-readable explanation of the problem.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if no match is found.
                - status_code (int | None):
                    - 200 on success
                    - 404 if no match is found
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The matched contact, of either kind.

        Notes:
            - This method is read-only and does not raise.
            - The match is case-sensitive; uniqueness on insert is case-insensitive, so at most one contact can match.
        """
        name = name.strip()

        for person in self._persons.values():
            if person.name == name:
                return Response.succeed(
                    data={
                        "record": person,
                    },
                )

        return Response.fail(
            detail=f"No contact found with the name '{name}'.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    # === data manipulators ===

    def add_person(self, person: PersonType) -> Response:
        """
        Adds a `Student` or `Parent` to the address book.

        Args:
            person (PersonType): The contact to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the contact was successfully added.
                    - False if the name or id is already taken, or if unexpected errors occur.
                - detail (str | None):
                    - On failure, a human-readable description of the error.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_FAILED` if the name or id is not unique.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The added contact.
        """
        try:
            self.require_unique_name(person.name)

            if person.id in self._persons:
                raise ValueError(f"A contact with the id '{person.id}' already exists.")

            self._persons[person.id] = person

        except ValueError as e:
            return Response.fail(
                detail=f"Unique record validation failed: {e}",
                error=ErrorCode.VALIDATION_FAILED,
            )

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Added %s %s (%s)", person.kind.value, person.name, person.id)

            return Response.succeed(
                detail=f"{person.kind.value} successfully added to the address book.",
                data={
                    "record": person,
                },
            )

    def remove_person(self, person: PersonType) -> Response:
        """
        Removes a contact and clears the link held by its counterpart, if any.

        Args:
            person (PersonType): The contact to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the contact was removed.
                    - False if the contact is not tracked or if unexpected errors occur.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the contact is not in the address book.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the contact cannot be found
                    - 400 for other failures

        Notes:
            - The counterpart is only unlinked if its link field still names the removed contact.
        """
        if person.id not in self._persons:
            return Response.fail(
                detail=f"No matching contact could be found for deletion: {person}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        try:
            stored = self._persons[person.id]
            counterpart = self._find_counterpart(stored)

            del self._persons[stored.id]

            if counterpart is not None:
                match counterpart.kind:
                    case PersonKind.STUDENT:
                        unlinked = cast(Student, counterpart).with_parent_name(None)
                    case PersonKind.PARENT:
                        unlinked = cast(Parent, counterpart).with_child_name(None)

                self._persons[counterpart.id] = unlinked

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Removed %s %s (%s)", stored.kind.value, stored.name, stored.id)

            return Response.succeed(
                detail=f"{stored.kind.value} successfully removed from the address book."
            )

    def set_person(self, target: PersonType, edited: PersonType) -> Response:
        """
        Replaces the record stored under `target.id` with `edited`.

        Args:
            target (PersonType): The record being replaced. Only its id is used for the lookup.
            edited (PersonType): The replacement record. Must carry the same id as `target`.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): True if the record was replaced.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if `target.id` is not tracked.
                    - `ErrorCode.VALIDATION_FAILED` if the ids differ.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the target cannot be found
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (PersonType): The replacement record.

        Notes:
            - Replacement is by id, so duplicated names can never cause the wrong record to be replaced.
        """
        if target.id not in self._persons:
            return Response.fail(
                detail=f"No matching contact could be found for replacement: {target}.",
                error=ErrorCode.NOT_FOUND,
                status_code=404,
            )

        if edited.id != target.id:
            return Response.fail(
                detail=f"Replacement record id '{edited.id}' does not match '{target.id}'.",
                error=ErrorCode.VALIDATION_FAILED,
            )

        self._persons[target.id] = edited

        return Response.succeed(
            data={
                "record": edited,
            },
        )

    # --- linking ---

    def link_persons(self, child_name: str, parent_name: str) -> Response:
        """
        Links a `Student` and a `Parent`, found by their full names, in a parent-child relationship.

        Args:
            child_name (str): The full name of the student.
            parent_name (str): The full name of the parent.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if both records now reference each other.
                    - False if either contact is missing or already linked.
                - detail (str | None):
                    - A user-facing message in both cases.
                - error (ErrorCode | str | None):
                    - `ErrorCode.PARENT_NOT_FOUND` if `parent_name` matches no contact or matches a student.
                    - `ErrorCode.CHILD_NOT_FOUND` if `child_name` matches no contact or matches a parent.
                    - `ErrorCode.PARENT_ALREADY_LINKED` if the parent already has a child.
                    - `ErrorCode.CHILD_ALREADY_LINKED` if the student already has a parent.
                - status_code (int | None):
                    - 200 on success
                    - 404 if a contact cannot be found
                    - 409 if a contact is already linked
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "child" (Student): The replacement student record.
                        - "parent" (Parent): The replacement parent record.
                    - On an already-linked failure:
                        - "linked_name" (str): The name the contact is already linked to.

        Notes:
            - Checks run in order: parent lookup, child lookup, parent link, child link.
            - Every check runs before any write; a failed call leaves the address book untouched.
        """
        child_name = child_name.strip()
        parent_name = parent_name.strip()

        parent = self._resolve(parent_name, PersonKind.PARENT)

        if parent is None:
            return self._reject_link(
                self.MESSAGE_PARENT_NOT_FOUND.format(parent=parent_name),
                ErrorCode.PARENT_NOT_FOUND,
                status_code=404,
            )
        parent = cast(Parent, parent)

        child = self._resolve(child_name, PersonKind.STUDENT)

        if child is None:
            return self._reject_link(
                self.MESSAGE_CHILD_NOT_FOUND.format(child=child_name),
                ErrorCode.CHILD_NOT_FOUND,
                status_code=404,
            )
        child = cast(Student, child)

        if parent.child_name:
            return self._reject_link(
                self.MESSAGE_PARENT_LINKED.format(
                    parent=parent_name, child=parent.child_name
                ),
                ErrorCode.PARENT_ALREADY_LINKED,
                status_code=409,
                data={"linked_name": parent.child_name},
            )

        if child.parent_name:
            return self._reject_link(
                self.MESSAGE_CHILD_LINKED.format(
                    child=child_name, parent=child.parent_name
                ),
                ErrorCode.CHILD_ALREADY_LINKED,
                status_code=409,
                data={"linked_name": child.parent_name},
            )

        try:
            linked_child = child.with_parent_name(parent.name)
            linked_parent = parent.with_child_name(child.name)

            self._replace_all([(child, linked_child), (parent, linked_parent)])

        except Exception as e:
            return Response.fail(
                detail=f"Unexpected error: {e}",
                error=ErrorCode.INTERNAL_ERROR,
            )

        else:
            logger.info("Linked student %s to parent %s", child.name, parent.name)

            return Response.succeed(
                detail=self.MESSAGE_LINK_SUCCESS.format(
                    child=child_name, parent=parent_name
                ),
                data={
                    "child": linked_child,
                    "parent": linked_parent,
                },
            )

    # === data validators ===

    def require_unique_name(self, name: str) -> None:
        """
        Validates that no existing contact shares the given name.

        Args:
            name (str): The contact name to validate for uniqueness.

        Raises:
            ValueError: If a contact with the same normalized name already exists.
        """
        normalized = normalize(name)
        if any(normalize(p.name) == normalized for p in self._persons.values()):
            raise ValueError(f"A contact with the name '{name}' already exists.")

    # === helper methods ===

    def _resolve(self, name: str, kind: PersonKind) -> PersonType | None:
        response = self.find_person_by_name(name)

        if not response.success:
            return None

        person = response.data["record"]

        return person if person.kind is kind else None

    def _reject_link(
        self,
        detail: str,
        error: ErrorCode,
        status_code: int,
        data: dict | None = None,
    ) -> Response:
        logger.debug("Link rejected (%s): %s", error.value, detail)

        return Response.fail(
            detail=detail,
            error=error,
            status_code=status_code,
            data=data,
        )

    def _replace_all(self, pairs: list[tuple[PersonType, PersonType]]) -> None:
        """
        Replaces several records by id, checking every id before the first write.

        Raises:
            KeyError: If any target is not tracked. No record is replaced in that case.
            ValueError: If a replacement does not carry its target's id.
        """
        for target, edited in pairs:
            if target.id not in self._persons:
                raise KeyError(f"No matching contact could be found: {target}")
            if edited.id != target.id:
                raise ValueError(
                    f"Replacement record id '{edited.id}' does not match '{target.id}'."
                )

        for target, edited in pairs:
            self._persons[target.id] = edited

    def _find_counterpart(self, person: PersonType) -> PersonType | None:
        if not person.linked_name:
            return None

        match person.kind:
            case PersonKind.STUDENT:
                counterpart = self._resolve(person.linked_name, PersonKind.PARENT)
            case PersonKind.PARENT:
                counterpart = self._resolve(person.linked_name, PersonKind.STUDENT)

        if counterpart is None or counterpart.linked_name != person.name:
            return None

        return counterpart

    # === dunder methods ===

    def __len__(self) -> int:
        return len(self._persons)

    def __contains__(self, person: object) -> bool:
        return getattr(person, "id", None) in self._persons
