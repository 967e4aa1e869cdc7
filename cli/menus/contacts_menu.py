# cli/menus/contacts_menu.py

"""
Manage Contacts menu for the Tutorbook CLI.

This module defines the interface for managing contacts, including:
- Adding new students and parents
- Linking a student to a parent
- Removing contacts
- Viewing contacts (individual or all)

All operations are routed through the `AddressBook` API for consistency and validation.
"""

from typing import cast

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from core.logging_setup import get_logger
from core.utils import generate_uuid
from models.address_book import AddressBook
from models.parent import Parent
from models.person import Person
from models.student import Education, Student
from models.types import PersonType

logger = get_logger("cli.contacts_menu")


def run(address_book: AddressBook) -> None:
    """
    Top-level loop with dispatch for the Manage Contacts menu.

    Args:
        address_book (AddressBook): The active `AddressBook`.

    Raises:
        RuntimeError: If the menu response is unrecognized.
    """
    title = formatters.format_banner_text("Manage Contacts")
    options = [
        ("Add Student", add_student),
        ("Add Parent", add_parent),
        ("Link Student to Parent", link_student_to_parent),
        ("Remove Contact", find_and_remove_person),
        ("View Contact", find_and_view_person),
        ("View All Contacts", view_all_contacts),
    ]
    zero_option = "Exit Program"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            break

        elif callable(menu_response):
            menu_response(address_book)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


# === add contacts ===


def add_student(address_book: AddressBook) -> None:
    new_student = prompt_new_student()

    if new_student is None:
        helpers.returning_without_changes()
        return

    confirm_and_add(new_student, address_book)


def add_parent(address_book: AddressBook) -> None:
    new_parent = prompt_new_parent()

    if new_parent is None:
        helpers.returning_without_changes()
        return

    confirm_and_add(new_parent, address_book)


def confirm_and_add(person: PersonType, address_book: AddressBook) -> None:
    """
    Previews a new contact, asks for confirmation, and adds it to the address book.

    Args:
        person (PersonType): The contact under review.
        address_book (AddressBook): The active `AddressBook`.
    """
    print(f"\nYou are about to create the following {person.kind.value.lower()}:")
    print(model_formatters.format_person_multiline(person))

    if not helpers.confirm_action(
        f"Would you like to create this {person.kind.value.lower()}?"
    ):
        print(f"\nDiscarding {person.kind.value.lower()}: {person.name}")
        return

    address_book_response = address_book.add_person(person)

    if not address_book_response.success:
        helpers.display_response_failure(address_book_response)
        print(f"\n{person.name} was not added.")

    else:
        print(f"\n{address_book_response.detail}")


def prompt_common_fields() -> dict | None:
    """
    Prompts for the fields shared by every contact.

    Returns:
        A dictionary of validated keyword arguments, or None if the user cancels at any prompt.
    """
    fields = [
        ("name", "Enter full name", Person.validate_name_input),
        ("phone", "Enter phone number", Person.validate_phone_input),
        ("email", "Enter email address", Person.validate_email_input),
        ("address", "Enter address", Person.validate_address_input),
    ]
    values = {}

    for key, prompt, validator in fields:
        value = helpers.prompt_validated_input_or_cancel(prompt, validator)

        if value is MenuSignal.CANCEL:
            return None
        values[key] = value

    tags_input = helpers.prompt_user_input_or_none(
        "Enter tags separated by commas (leave blank for none):"
    )
    values["tags"] = [t for t in (tags_input or "").split(",") if t.strip()]

    return values


def prompt_education_or_cancel() -> Education | MenuSignal:
    title = "Select education level:"
    options = [(level.value, lambda level=level: level) for level in Education]

    menu_response = helpers.display_menu(title, options, "Cancel")

    if menu_response is MenuSignal.EXIT:
        return MenuSignal.CANCEL

    return cast(Education, menu_response())


def prompt_new_student() -> Student | None:
    common = prompt_common_fields()

    if common is None:
        return None

    lesson_time = helpers.prompt_validated_input_or_cancel(
        "Enter lesson time (e.g. Mon 14:00-16:00)", Student.validate_lesson_time_input
    )

    if lesson_time is MenuSignal.CANCEL:
        return None

    education = prompt_education_or_cancel()

    if education is MenuSignal.CANCEL:
        return None

    grade = helpers.prompt_validated_input_or_cancel(
        "Enter current grade", Student.validate_grade_input
    )

    if grade is MenuSignal.CANCEL:
        return None

    try:
        return Student(
            id=generate_uuid(),
            lesson_time=lesson_time,
            education=cast(Education, education),
            grade=grade,
            **common,
        )

    except (TypeError, ValueError) as e:
        print(f"\n[ERROR] Could not create student: {e}")
        return None


def prompt_new_parent() -> Parent | None:
    common = prompt_common_fields()

    if common is None:
        return None

    try:
        return Parent(id=generate_uuid(), **common)

    except (TypeError, ValueError) as e:
        print(f"\n[ERROR] Could not create parent: {e}")
        return None


# === link contacts ===


def link_student_to_parent(address_book: AddressBook) -> None:
    """
    Prompts for a student name and a parent name, then links the two contacts.

    Args:
        address_book (AddressBook): The active `AddressBook`.

    Notes:
        - Both names are required; a blank entry cancels.
        - The outcome is reported with the detail string of the `AddressBook.link_persons()` response.
    """
    child_name = helpers.prompt_validated_input_or_cancel(
        "Enter the student's full name", Person.validate_name_input
    )

    if child_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    parent_name = helpers.prompt_validated_input_or_cancel(
        "Enter the parent's full name", Person.validate_name_input
    )

    if parent_name is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return

    address_book_response = address_book.link_persons(child_name, parent_name)

    if not address_book_response.success:
        helpers.display_response_failure(address_book_response)
        print("\nNo links were changed.")

    else:
        print(f"\n{address_book_response.detail}")


# === remove contacts ===


def find_and_remove_person(address_book: AddressBook) -> None:
    person = helpers.find_person_by_name(address_book)

    if person is MenuSignal.CANCEL:
        helpers.returning_without_changes()
        return
    person = cast(PersonType, person)

    helpers.caution_banner()
    print("You are about to permanently remove the following contact:")
    print(model_formatters.format_person_multiline(person))

    if person.linked_name:
        print(f"\nThe link to {person.linked_name} will also be removed.")

    if not helpers.confirm_action("Are you sure you want to remove this contact?"):
        helpers.returning_without_changes()
        return

    address_book_response = address_book.remove_person(person)

    if not address_book_response.success:
        helpers.display_response_failure(address_book_response)
        print(f"\n{person.name} was not removed.")

    else:
        print(f"\n{address_book_response.detail}")


# === view contacts ===


def find_and_view_person(address_book: AddressBook) -> None:
    person = helpers.find_person_by_name(address_book)

    if person is MenuSignal.CANCEL:
        return

    print(f"\n{model_formatters.format_person_multiline(cast(PersonType, person))}")


def view_all_contacts(address_book: AddressBook) -> None:
    address_book_response = address_book.get_records()

    if not address_book_response.success:
        helpers.display_response_failure(address_book_response)
        return

    records = address_book_response.data["records"]

    banner = formatters.format_banner_text("All Contacts")
    print(f"\n{banner}")

    if not records:
        print("There are no contacts in the address book yet.")
        return

    helpers.sort_and_display_records(
        records=records,
        show_index=True,
        formatter=model_formatters.format_person_oneline,
    )
