# cli/main.py

"""
Entry point for the Tutorbook CLI.

Sets up logging, starts an empty in-memory `AddressBook`, and hands control to the Manage Contacts menu.
"""

import core.formatters as formatters
from cli.menus import contacts_menu
from core.logging_setup import (
    SESSION_ID,
    get_logger,
    install_global_exception_hooks,
    setup_logging,
)
from models.address_book import AddressBook


def run_cli() -> None:
    setup_logging()
    install_global_exception_hooks()

    logger = get_logger("cli")
    logger.info("Tutorbook started, sid=%s", SESSION_ID)

    title = formatters.format_banner_text("TUTORBOOK")
    print(f"\n{title}")

    address_book = AddressBook()

    try:
        contacts_menu.run(address_book)

    except (KeyboardInterrupt, EOFError):
        print()

    exit_program()


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.
    """
    get_logger("cli").info("Tutorbook exiting")

    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}\n")

    raise SystemExit


if __name__ == "__main__":
    run_cli()
