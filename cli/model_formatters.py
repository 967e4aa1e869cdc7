# cli/model_formatters.py

# anything that renders contacts for the terminal
from textwrap import dedent
from typing import cast

import core.formatters as formatters
from models.parent import Parent
from models.person import PersonKind
from models.student import Student
from models.types import PersonType

# === shared formatters ===


def format_flags(person: PersonType) -> str:
    flags = []

    if person.is_pinned:
        flags.append(" [PINNED]")

    if person.is_archived:
        flags.append(" [ARCHIVED]")

    return "".join(flags)


def format_tags(person: PersonType) -> str:
    return formatters.format_list_with_and(sorted(person.tags)) or "[NO TAGS]"


def format_person_oneline(person: PersonType) -> str:
    match person.kind:
        case PersonKind.STUDENT:
            return format_student_oneline(cast(Student, person))
        case PersonKind.PARENT:
            return format_parent_oneline(cast(Parent, person))


def format_person_multiline(person: PersonType) -> str:
    match person.kind:
        case PersonKind.STUDENT:
            return format_student_multiline(cast(Student, person))
        case PersonKind.PARENT:
            return format_parent_multiline(cast(Parent, person))


# === student formatters ===


def format_student_oneline(student: Student) -> str:
    parent = formatters.format_optional(student.parent_name, "[NO PARENT]")

    return f"{'Student':<8} | {student.name:<20} | Parent: {parent}{format_flags(student)}"


def format_student_multiline(student: Student) -> str:
    return dedent(
        f"""\
        Student:
        ... Name: {student.name}
        ... Phone: {student.phone}
        ... Email: {student.email}
        ... Address: {student.address}
        ... Lesson Time: {student.lesson_time}
        ... Education: {student.education.value}
        ... Grade: {student.grade}
        ... Parent: {formatters.format_optional(student.parent_name)}
        ... Tags: {format_tags(student)}
        ... Status: {student.status}"""
    )


# === parent formatters ===


def format_parent_oneline(parent: Parent) -> str:
    child = formatters.format_optional(parent.child_name, "[NO CHILD]")

    return f"{'Parent':<8} | {parent.name:<20} | Child: {child}{format_flags(parent)}"


def format_parent_multiline(parent: Parent) -> str:
    return dedent(
        f"""\
        Parent:
        ... Name: {parent.name}
        ... Phone: {parent.phone}
        ... Email: {parent.email}
        ... Address: {parent.address}
        ... Child: {formatters.format_optional(parent.child_name)}
        ... Tags: {format_tags(parent)}
        ... Status: {parent.status}"""
    )
