"""Core slug allocation and redirect resolution for shortlink."""

from .allocator import SlugAllocator
from .resolver import RedirectResolver
from .service import ShortlinkService
from .slug import SlugGenerator

__all__ = ["SlugAllocator", "RedirectResolver", "ShortlinkService", "SlugGenerator"]
