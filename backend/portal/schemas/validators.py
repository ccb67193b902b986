"""Shared field validators for request schemas."""


def strip_required(value: str, field_name: str) -> str:
    """Strip surrounding whitespace and reject blank strings."""
    value = value.strip()
    if not value:
        raise ValueError(f"{field_name} cannot be empty or whitespace")
    return value


def strip_optional(value: str | None) -> str | None:
    """Strip surrounding whitespace; blank becomes None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
