"""Service layer composing slug allocation and redirect resolution."""

import logging
from typing import Dict, Optional

from .allocator import SlugAllocator
from .common.validators import is_valid_destination, is_valid_slug
from .database.base import MappingStoreBase
from .database.models import UrlMapping
from .errors import MalformedInput, NotFound, StoreError, StoreUnavailable
from .resolver import RedirectResolver
from .slug import SlugGenerator


class ShortlinkService:
    """Entry point used by the web app and the CLI."""

    def __init__(
        self,
        store: MappingStoreBase,
        slug_generator: Optional[SlugGenerator] = None,
        logger: Optional[logging.Logger] = None,
        enable_custom_slugs: bool = True,
        max_slug_attempts: int = 10,
        max_slug_length: int = 64,
    ):
        """Initialize shortlink service.

        Args:
            store: Mapping store
            slug_generator: Optional slug generator
            logger: Optional logger
            enable_custom_slugs: Whether callers may choose their own slug
            max_slug_attempts: Generated candidates tried before TooManyRetries
            max_slug_length: Maximum length of a caller-chosen slug
        """
        self.store = store
        self.logger = logger or logging.getLogger(__name__)
        self.enable_custom_slugs = enable_custom_slugs
        self.max_slug_length = max_slug_length
        self.allocator = SlugAllocator(
            store=store,
            generator=slug_generator,
            logger=self.logger.getChild("allocator"),
            max_attempts=max_slug_attempts,
        )
        self.resolver = RedirectResolver(
            store=store,
            logger=self.logger.getChild("resolver"),
        )

    async def create_mapping(
        self,
        destination: str,
        requested_slug: Optional[str] = None,
        creator_address: str = "unknown",
    ) -> UrlMapping:
        """Validate input and allocate a slug.

        Raises:
            MalformedInput: If the destination or requested slug is invalid
        """
        is_valid, error = is_valid_destination(destination)
        if not is_valid:
            raise MalformedInput(error)

        if requested_slug is not None:
            if not self.enable_custom_slugs:
                raise MalformedInput("Custom slugs are not enabled")

            is_valid, error = is_valid_slug(requested_slug, self.max_slug_length)
            if not is_valid:
                raise MalformedInput(f"Invalid slug: {error}")

        return await self.allocator.allocate(
            destination=destination,
            requested_slug=requested_slug,
            creator_address=creator_address,
        )

    async def resolve(self, slug: str) -> str:
        """Resolve a slug for redirect, counting the usage."""
        return await self.resolver.resolve(slug)

    async def get_mapping(self, slug: str) -> UrlMapping:
        """Look up a mapping without counting usage.

        Raises:
            NotFound: If no mapping exists
            StoreUnavailable: If the store fails
        """
        try:
            mapping = await self.store.get_mapping(slug)
        except StoreError as e:
            self.logger.error(f"Store error while reading {slug}: {e}")
            raise StoreUnavailable()

        if mapping is None:
            raise NotFound()
        return mapping

    async def health_check(self) -> Dict[str, bool]:
        db_healthy = await self.store.health_check()
        return {
            "database": db_healthy,
            "overall": db_healthy,
        }

    async def close(self) -> None:
        """Close service connections."""
        await self.store.close()
