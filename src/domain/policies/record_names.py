"""Naming rules shared by record forms."""

MAX_NAME_LENGTH = 120

_HEX_CHARS = set("0123456789abcdef")


def is_valid_record_name(name: str) -> bool:
    """Return True when a record name is fit for display.

    Blank names, names longer than ``MAX_NAME_LENGTH`` and opaque 32-char
    hex identifiers pasted in place of a name are rejected.

    Args:
        name: Asset name, lender or family member name.

    Returns:
        bool: True when the name should be accepted.
    """
    candidate = name.strip()
    if not candidate or len(candidate) > MAX_NAME_LENGTH:
        return False
    if len(candidate) == 32:
        lowered = candidate.lower()
        if all(char in _HEX_CHARS for char in lowered):
            return False
    return True


__all__ = ["MAX_NAME_LENGTH", "is_valid_record_name"]
