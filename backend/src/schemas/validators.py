"""
Shared validation functions for Pydantic schemas.

Limits come from settings so they can be tuned per deployment.
"""
from core.config import get_settings


def validate_text_length(value: str, field_name: str, max_length: int) -> str:
    """
    Ensure a required text field is non-blank and within its length limit.

    Raises:
        ValueError: If the value is blank or too long.
    """
    if not value.strip():
        raise ValueError(f"{field_name} cannot be empty")
    if len(value) > max_length:
        raise ValueError(f"{field_name} exceeds maximum length of {max_length} characters")
    return value


def validate_title(value: str) -> str:
    """Validate a prompt title."""
    return validate_text_length(value, "Title", get_settings().max_title_length)


def validate_content(value: str) -> str:
    """Validate prompt content."""
    return validate_text_length(value, "Content", get_settings().max_content_length)


def validate_tag_name(tag: str) -> str:
    """
    Trim and validate a single tag name.

    Casing is preserved; tag names are compared case-insensitively elsewhere.

    Raises:
        ValueError: If the name is empty or too long.
    """
    trimmed = tag.strip()
    if not trimmed:
        raise ValueError("Tag name cannot be empty")
    max_length = get_settings().max_tag_name_length
    if len(trimmed) > max_length:
        raise ValueError(f"Tag name exceeds maximum length of {max_length} characters")
    return trimmed


def normalize_tag_names(tags: list[str]) -> list[str]:
    """
    Trim a list of tag names, dropping blanks and case-insensitive duplicates.

    The first spelling of a duplicated name wins and input order is preserved.

    Raises:
        ValueError: If any name is not a string or is too long.
    """
    normalized = []
    seen: set[str] = set()
    for tag in tags:
        if not isinstance(tag, str):
            raise ValueError("Tag names must be strings")
        if not tag.strip():
            continue  # Skip empty tags silently
        validated = validate_tag_name(tag)
        key = validated.lower()
        if key not in seen:
            seen.add(key)
            normalized.append(validated)
    return normalized
