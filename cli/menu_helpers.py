# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Tutorbook application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Handling user selections and confirmation flows
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

import core.formatters as formatters
from core.response import Response
from models.address_book import AddressBook
from models.types import PersonType


class MenuSignal(Enum):
    CANCEL = "CANCEL"
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("\nSelect an option: ")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            # casts choice to int and adjusts for zero-index, retrieves action from tuple
            index = int(choice) - 1
            if index < 0:
                raise IndexError(index)
            return options[index][1]

        except (ValueError, IndexError):
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def sort_and_display_records(
    records: Iterable[PersonType],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
    sort_key: Callable[[PersonType], Any] = lambda x: x.name,
) -> None:
    """
    Sorts and prints a list of contacts using a display formatter.

    Notes:
        - Pinned contacts are listed first, then by `sort_key`.
        - Output is delegated to `display_results()`.
    """
    sorted_records = sorted(records, key=lambda x: (not x.is_pinned, sort_key(x)))
    display_results(sorted_records, show_index, formatter)


# === prompt user input methods ===


# Prompt Helpers
#
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - Empty string responses are overloaded for control signals:
#     - `prompt_user_input_or_cancel()` returns `MenuSignal.CANCEL` on blank input.
#     - `prompt_user_input_or_none()` returns `None`.
# - `confirm_action()` loops until the user enters a valid yes/no response.


def confirm_action(prompt: str) -> bool:
    while True:
        choice = prompt_user_input(f"{prompt} (y/n): ").lower()

        if choice == "y" or choice == "yes":
            return True

        elif choice == "n" or choice == "no":
            return False

        else:
            print("Invalid selection. Please try again.")


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_user_input_or_cancel(prompt: str) -> str | MenuSignal:
    response = prompt_user_input(prompt)
    return MenuSignal.CANCEL if response == "" else response


def prompt_user_input_or_none(prompt: str) -> str | None:
    response = prompt_user_input(prompt)
    return None if response == "" else response


def prompt_validated_input_or_cancel(
    prompt: str, validator: Callable[[str], Any]
) -> Any | MenuSignal:
    """
    Loops a cancellable prompt until the validator accepts the input.

    Args:
        prompt (str): The prompt shown to the user.
        validator (Callable[[str], Any]): Normalizes the raw input, raising `ValueError` if it is invalid.

    Returns:
        The validator's return value, or `MenuSignal.CANCEL` if the user enters nothing.
    """
    while True:
        raw_input = prompt_user_input_or_cancel(f"{prompt} (leave blank to cancel):")

        if isinstance(raw_input, MenuSignal):
            return raw_input

        try:
            return validator(raw_input)

        except ValueError as e:
            print(f"\n[ERROR] {e}")
            print("Please try again.")


# === finder methods ===


def find_person_by_name(address_book: AddressBook) -> PersonType | MenuSignal:
    """
    Prompts for a full name and returns the matching contact.

    Returns:
        - The matching `Student` or `Parent`.
        - `MenuSignal.CANCEL` if the user cancels or no contact has that name.
    """
    name = prompt_user_input_or_cancel(
        "Enter the contact's full name (leave blank to cancel):"
    )

    if isinstance(name, MenuSignal):
        return name

    address_book_response = address_book.find_person_by_name(name)

    if not address_book_response.success:
        display_response_failure(address_book_response)
        return MenuSignal.CANCEL

    return address_book_response.data["record"]


# === often used messages ===


def returning_without_changes() -> None:
    print("\nReturning without changes.")


def returning_to(destination: str) -> None:
    print(f"\nReturning to {destination}.")


def caution_banner() -> None:
    caution_banner = formatters.format_banner_text("CAUTION!")
    print(f"\n{caution_banner}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")
