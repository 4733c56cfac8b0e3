"""Persistence layer for shortlink."""

from .base import MappingStoreBase
from .postgres import PostgresMappingStore
from .models import UrlMapping

__all__ = ["MappingStoreBase", "PostgresMappingStore", "UrlMapping"]
