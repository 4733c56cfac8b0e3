"""Abstract base class for shortlink store implementations."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import UrlMapping


class MappingStoreBase(ABC):
    """Abstract base class for the slug -> URL mapping store.

    Implementations raise ``shortlink.errors.StoreError`` on infrastructure
    failures and ``shortlink.errors.DuplicateSlugError`` when the uniqueness
    constraint rejects an insert. They never return partial results in place
    of raising.
    """

    def __init__(self, db_config: str):
        """Initialize store.

        Args:
            db_config: Database connection string
        """
        self.db_config = db_config

    @abstractmethod
    async def ensure_schema(self) -> None:
        """Create the mappings table if it does not exist."""
        pass

    @abstractmethod
    async def slug_exists(self, slug: str) -> bool:
        """Check if a slug is already mapped.

        Args:
            slug: The slug to check

        Returns:
            True if exists, False otherwise
        """
        pass

    @abstractmethod
    async def insert_mapping(
        self,
        slug: str,
        destination: str,
        creator_address: str,
    ) -> None:
        """Insert a new mapping with a zero usage count.

        Args:
            slug: The slug to use
            destination: The destination URL
            creator_address: Network address of the creator

        Raises:
            DuplicateSlugError: If the slug is already mapped
        """
        pass

    @abstractmethod
    async def get_mapping(self, slug: str) -> Optional[UrlMapping]:
        """Get the mapping for a slug.

        Args:
            slug: The slug to lookup

        Returns:
            The mapping if found, None otherwise
        """
        pass

    @abstractmethod
    async def increment_usage(self, slug: str) -> bool:
        """Atomically add one to the usage count of a slug.

        Args:
            slug: The slug to update

        Returns:
            True if a row was updated
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.

        Returns:
            True if healthy, False otherwise
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
