"""Exception hierarchy for mdtree"""


class MdtreeError(Exception):
    """Base exception for all mdtree errors."""


class InvalidInputError(MdtreeError):
    """Input is structurally unusable (e.g. None where text is required)."""


class StoreError(MdtreeError):
    """A stored note could not be read back."""


def require_text(value, name: str = "text") -> str:
    """Return value unchanged if it is a str, else raise InvalidInputError."""
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be a str, got {type(value).__name__}")
    return value
