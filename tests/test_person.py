# tests/test_person.py

import pytest

from models.person import Person
from models.types import person_from_dict


def test_validate_name_input_strips():
    assert Person.validate_name_input("  John Doe ") == "John Doe"


@pytest.mark.parametrize("name", ["", "   ", "John_Doe", "John  Doe", "J@ne"])
def test_validate_name_input_rejects(name):
    with pytest.raises(ValueError):
        Person.validate_name_input(name)


def test_validate_phone_input():
    assert Person.validate_phone_input(" 911 ") == "911"

    with pytest.raises(ValueError):
        Person.validate_phone_input("12")

    with pytest.raises(ValueError):
        Person.validate_phone_input("9123-4567")


def test_validate_email_input_normalizes():
    assert Person.validate_email_input(" JohnD@Example.COM ") == "johnd@example.com"

    with pytest.raises(ValueError):
        Person.validate_email_input("johnd.example.com")


def test_validate_address_and_tag_input():
    with pytest.raises(ValueError):
        Person.validate_address_input("  ")

    assert Person.validate_tag_input(" math ") == "math"

    with pytest.raises(ValueError):
        Person.validate_tag_input("two words")


def test_person_from_dict_dispatches_on_kind(sample_student, sample_parent):
    student = person_from_dict(sample_student.to_dict())
    parent = person_from_dict(sample_parent.to_dict())

    assert student.kind is sample_student.kind
    assert student.to_dict() == sample_student.to_dict()
    assert parent.kind is sample_parent.kind
    assert parent.to_dict() == sample_parent.to_dict()


def test_person_from_dict_rejects_unknown_kind(sample_parent):
    data = sample_parent.to_dict()
    data["kind"] = "Teacher"

    with pytest.raises(ValueError):
        person_from_dict(data)
