# core/utils.py

"""
Repository for program-wide utilities.
"""

import uuid


def generate_uuid() -> str:
    return str(uuid.uuid4())


def normalize(text: str) -> str:
    """
    Normalizes free text for case-insensitive comparisons.
    """
    return text.strip().lower()
