# tests/test_contacts_menu.py

import cli.model_formatters as model_formatters
from cli.menus import contacts_menu


def feed_input(monkeypatch, *answers):
    responses = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _: next(responses))


def test_link_student_to_parent_reports_success(
    monkeypatch, capsys, sample_address_book
):
    feed_input(monkeypatch, "John Doe", "Jane Doe")

    contacts_menu.link_student_to_parent(sample_address_book)

    out = capsys.readouterr().out
    assert "Successfully linked Student: John Doe to Parent: Jane Doe" in out
    parent = sample_address_book.find_person_by_name("Jane Doe").data["record"]
    assert parent.child_name == "John Doe"


def test_link_student_to_parent_reports_failure(
    monkeypatch, capsys, sample_address_book
):
    feed_input(monkeypatch, "Jane Doe", "John Doe")

    contacts_menu.link_student_to_parent(sample_address_book)

    out = capsys.readouterr().out
    assert "[ERROR: PARENT_NOT_FOUND]" in out
    assert "No links were changed." in out


def test_link_student_to_parent_cancel(monkeypatch, capsys, sample_address_book):
    feed_input(monkeypatch, "")

    contacts_menu.link_student_to_parent(sample_address_book)

    assert "Returning without changes." in capsys.readouterr().out


def test_add_parent(monkeypatch, empty_address_book):
    feed_input(
        monkeypatch,
        "Irfan Ibrahim",
        "92492021",
        "irfan@example.com",
        "Blk 47 Tampines Street 20",
        "payer, weekend",
        "y",
    )

    contacts_menu.add_parent(empty_address_book)

    parent = empty_address_book.find_person_by_name("Irfan Ibrahim").data["record"]
    assert parent.tags == frozenset({"payer", "weekend"})
    assert parent.child_name is None


def test_person_oneline_formatters(sample_student, sample_parent):
    assert "Parent: [NO PARENT]" in model_formatters.format_person_oneline(
        sample_student
    )
    assert model_formatters.format_person_oneline(sample_parent).endswith(
        "Child: [NO CHILD] [PINNED]"
    )
