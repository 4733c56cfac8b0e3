"""Common utilities for shortlink."""

from .validators import is_valid_destination, is_valid_slug
from .headers import extract_forwarded_headers, build_base_url, get_client_address
from .url_builder import build_short_url
from .logging_config import setup_logging

__all__ = [
    "is_valid_destination",
    "is_valid_slug",
    "extract_forwarded_headers",
    "build_base_url",
    "get_client_address",
    "build_short_url",
    "setup_logging",
]
