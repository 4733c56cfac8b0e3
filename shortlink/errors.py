"""Error taxonomy for the shortlink core.

Core operations raise subclasses of ``ShortlinkError``. Store implementations
raise ``StoreError`` / ``DuplicateSlugError``, which the allocator and resolver
translate before anything reaches a caller.
"""

from typing import Dict, Optional, Type


class ShortlinkError(Exception):
    """Base class for caller-visible errors."""

    message = "Unexpected error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class SlugOccupied(ShortlinkError):
    """The requested slug is already mapped."""

    message = "This slug is already in use."


class TooManyRetries(ShortlinkError):
    """Every generated candidate collided; the whole request may be retried."""

    message = "Unable to find a random slug to use, try again later."


class StoreUnavailable(ShortlinkError):
    """The backing store failed."""

    message = "There was an error with the database."


class NotFound(ShortlinkError):
    """No mapping exists for the slug."""

    message = "Shortened URL not found."


class MalformedInput(ShortlinkError):
    """The caller's payload could not be parsed or validated."""

    message = "Malformed request."


class StoreError(Exception):
    """Infrastructure failure reported by a store implementation."""


class DuplicateSlugError(Exception):
    """The store's uniqueness constraint rejected an insert."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug already exists: {slug}")


STATUS_CODES: Dict[Type[ShortlinkError], int] = {
    SlugOccupied: 409,
    TooManyRetries: 408,
    StoreUnavailable: 500,
    MalformedInput: 400,
    NotFound: 404,
}


def status_code_for(error: ShortlinkError) -> int:
    """Return the boundary status code for an error.

    Args:
        error: The error raised by a core operation

    Returns:
        HTTP status code (500 for anything outside the table)
    """
    for cls in type(error).__mro__:
        if cls in STATUS_CODES:
            return STATUS_CODES[cls]
    return 500


def error_body(error: ShortlinkError) -> Dict[str, str]:
    """Return the JSON body sent to callers for an error."""
    return {"message": error.message}
