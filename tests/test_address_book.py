# tests/test_address_book.py

import pytest

from core.response import ErrorCode
from models.address_book import AddressBook
from models.parent import Parent

# === data accessors ===


def test_students_and_parents_views(sample_address_book):
    ab = sample_address_book

    assert len(ab) == 4
    assert {s.name for s in ab.students} == {"John Doe", "Alex Yeoh"}
    assert {p.name for p in ab.parents} == {"Jane Doe", "Bernice Yu"}


def test_get_records_with_predicate(sample_address_book):
    response = sample_address_book.get_records(lambda p: p.is_pinned)

    assert response.success
    assert [p.name for p in response.data["records"]] == ["Jane Doe"]


def test_find_person_by_name(sample_address_book, sample_student):
    response = sample_address_book.find_person_by_name("  John Doe ")

    assert response.success
    assert response.data["record"] is sample_student


def test_find_person_by_name_not_found(sample_address_book):
    response = sample_address_book.find_person_by_name("Irfan Ibrahim")

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert response.status_code == 404


def test_find_person_by_uuid(sample_address_book, sample_parent):
    response = sample_address_book.find_person_by_uuid("p001")
    assert response.data["record"] is sample_parent

    response = sample_address_book.find_person_by_uuid("missing")
    assert response.error is ErrorCode.NOT_FOUND


# === data manipulators ===


def test_add_person(empty_address_book, sample_student):
    response = empty_address_book.add_person(sample_student)

    assert response.success
    assert response.data["record"] is sample_student
    assert sample_student in empty_address_book


def test_add_person_rejects_duplicate_name(sample_address_book):
    duplicate = Parent(
        id="p003",
        name="john doe",
        phone="555",
        email="other@example.com",
        address="Elsewhere",
    )

    response = sample_address_book.add_person(duplicate)

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert duplicate not in sample_address_book


def test_add_person_rejects_duplicate_id(sample_address_book):
    clash = Parent(
        id="s001",
        name="Charlotte Oliveiro",
        phone="93210283",
        email="charlotte@example.com",
        address="Blk 11 Ang Mo Kio Street 74",
    )

    response = sample_address_book.add_person(clash)

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED


def test_constructor_raises_on_bad_import(sample_student):
    with pytest.raises(ValueError):
        AddressBook([sample_student, sample_student])


def test_set_person_replaces_by_id(sample_address_book, sample_parent):
    edited = sample_parent.with_child_name("Alex Yeoh")

    response = sample_address_book.set_person(sample_parent, edited)

    assert response.success
    assert sample_address_book.persons["p001"] is edited
    assert len(sample_address_book) == 4


def test_set_person_rejects_untracked_target(empty_address_book, sample_parent):
    response = empty_address_book.set_person(
        sample_parent, sample_parent.with_child_name("John Doe")
    )

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND
    assert len(empty_address_book) == 0


def test_set_person_rejects_mismatched_id(
    sample_address_book, sample_parent, other_parent
):
    response = sample_address_book.set_person(sample_parent, other_parent)

    assert not response.success
    assert response.error is ErrorCode.VALIDATION_FAILED
    assert sample_address_book.persons["p001"] is sample_parent


def test_remove_person(sample_address_book, other_student):
    response = sample_address_book.remove_person(other_student)

    assert response.success
    assert other_student not in sample_address_book

    response = sample_address_book.remove_person(other_student)

    assert not response.success
    assert response.error is ErrorCode.NOT_FOUND


def test_remove_linked_person_clears_counterpart(sample_address_book, sample_parent):
    assert sample_address_book.link_persons("John Doe", "Jane Doe").success

    response = sample_address_book.remove_person(sample_parent)

    assert response.success
    student = sample_address_book.find_person_by_name("John Doe").data["record"]
    assert student.parent_name is None
