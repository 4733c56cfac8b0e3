"""Validation utilities for shortlink."""

from typing import Tuple

# Path segments routed to something other than a redirect
RESERVED_SLUGS = {"api", "health"}

# Characters that would change how the slug is routed
UNSAFE_SLUG_CHARS = set("/?#%")


def is_valid_destination(url: str) -> Tuple[bool, str]:
    """Validate a destination.

    Destinations are opaque; only presence is checked here.

    Args:
        url: The destination URL

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "A destination URL is required"
    return True, ""


def is_valid_slug(slug: str, max_length: int = 64) -> Tuple[bool, str]:
    """Validate a caller-requested slug.

    Args:
        slug: The slug to validate
        max_length: Maximum length for the slug

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not slug or not isinstance(slug, str):
        return False, "Slug must not be empty"

    if len(slug) > max_length:
        return False, f"Slug must be at most {max_length} characters"

    if not slug.isprintable() or any(c.isspace() for c in slug):
        return False, "Slug must consist of printable, non-whitespace characters"

    if UNSAFE_SLUG_CHARS.intersection(slug):
        return False, "Slug must not contain '/', '?', '#' or '%'"

    if slug.lower() in RESERVED_SLUGS:
        return False, f"'{slug}' is a reserved word and cannot be used"

    return True, ""
