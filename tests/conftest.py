# tests/conftest.py

import pytest

from models.address_book import AddressBook
from models.parent import Parent
from models.student import Education, Student


@pytest.fixture
def sample_student():
    return Student(
        id="s001",
        name="John Doe",
        phone="98765432",
        email="johnd@example.com",
        address="311, Clementi Ave 2, #02-25",
        lesson_time="Mon 14:00-16:00",
        education=Education.SECONDARY,
        grade="b",
        tags=["math", "weekly"],
    )


@pytest.fixture
def sample_parent():
    return Parent(
        id="p001",
        name="Jane Doe",
        phone="91234567",
        email="janed@example.com",
        address="311, Clementi Ave 2, #02-25",
        tags=["payer"],
        pinned=True,
    )


@pytest.fixture
def other_student():
    return Student(
        id="s002",
        name="Alex Yeoh",
        phone="87438807",
        email="alexyeoh@example.com",
        address="Blk 30 Geylang Street 29, #06-40",
        lesson_time="Wed 10:00-12:00",
        education=Education.PRIMARY,
        grade="A",
    )


@pytest.fixture
def other_parent():
    return Parent(
        id="p002",
        name="Bernice Yu",
        phone="99272758",
        email="berniceyu@example.com",
        address="Blk 30 Lorong 3 Serangoon Gardens, #07-18",
    )


@pytest.fixture
def sample_address_book(sample_student, sample_parent, other_student, other_parent):
    return AddressBook([sample_student, sample_parent, other_student, other_parent])


@pytest.fixture
def empty_address_book():
    return AddressBook()
