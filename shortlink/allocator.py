"""Slug allocation: pick a unique slug and durably record the mapping."""

import logging
from typing import Optional

from .database.base import MappingStoreBase
from .database.models import UrlMapping
from .errors import (
    DuplicateSlugError,
    MalformedInput,
    SlugOccupied,
    StoreError,
    StoreUnavailable,
    TooManyRetries,
)
from .slug import SlugGenerator


class SlugAllocator:
    """Assign slugs to destinations.

    The store's uniqueness constraint is what decides a collision. The
    existence pre-check only saves a wasted insert round-trip, so a
    check-then-insert race still ends in a clean retry or ``SlugOccupied``.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        generator: Optional[SlugGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_attempts: int = 10,
    ):
        """Initialize slug allocator.

        Args:
            store: Mapping store
            generator: Optional slug generator
            logger: Optional logger
            max_attempts: Number of generated candidates to try before giving up
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.store = store
        self.generator = generator or SlugGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_attempts = max_attempts

    async def allocate(
        self,
        destination: str,
        requested_slug: Optional[str] = None,
        creator_address: str = "unknown",
    ) -> UrlMapping:
        """Create a mapping for ``destination``.

        Args:
            destination: The destination URL (opaque, must be non-empty)
            requested_slug: Slug to use verbatim instead of a generated one
            creator_address: Network address recorded for audit

        Returns:
            The mapping as read back from the store

        Raises:
            MalformedInput: If destination is empty
            SlugOccupied: If requested_slug is already mapped
            TooManyRetries: If every generated candidate collided
            StoreUnavailable: If the store fails
        """
        if not destination:
            raise MalformedInput("A destination URL is required.")

        if requested_slug is not None:
            slug = await self._claim_requested(requested_slug, destination, creator_address)
        else:
            slug = await self._claim_generated(destination, creator_address)

        return await self._read_back(slug)

    async def _claim_requested(
        self,
        slug: str,
        destination: str,
        creator_address: str,
    ) -> str:
        try:
            if await self.store.slug_exists(slug):
                self.logger.info(f"Requested slug is occupied: {slug}")
                raise SlugOccupied()
            await self.store.insert_mapping(slug, destination, creator_address)
        except DuplicateSlugError:
            self.logger.info(f"Requested slug was claimed concurrently: {slug}")
            raise SlugOccupied()
        except StoreError as e:
            self.logger.error(f"Store error while claiming slug {slug}: {e}")
            raise StoreUnavailable()

        self.logger.info(f"Created mapping: {slug} -> {destination}")
        return slug

    async def _claim_generated(self, destination: str, creator_address: str) -> str:
        for attempt in range(1, self.max_attempts + 1):
            slug = self.generator.generate()

            try:
                collides = await self.store.slug_exists(slug)
            except StoreError as e:
                # An unreadable slot must never be overwritten
                self.logger.warning(
                    f"Existence check failed for {slug}, treating as collision: {e}"
                )
                collides = True

            if collides:
                self.logger.debug(f"Slug collision on attempt {attempt}: {slug}")
                continue

            try:
                await self.store.insert_mapping(slug, destination, creator_address)
            except DuplicateSlugError:
                self.logger.debug(f"Insert collision on attempt {attempt}: {slug}")
                continue
            except StoreError as e:
                self.logger.error(f"Store error while inserting {slug}: {e}")
                raise StoreUnavailable()

            self.logger.info(
                f"Created mapping after {attempt} attempt(s): {slug} -> {destination}"
            )
            return slug

        self.logger.warning(
            f"Unable to generate a free slug after {self.max_attempts} attempts"
        )
        raise TooManyRetries()

    async def _read_back(self, slug: str) -> UrlMapping:
        try:
            mapping = await self.store.get_mapping(slug)
        except StoreError as e:
            self.logger.error(f"Store error while reading back {slug}: {e}")
            raise StoreUnavailable()

        if mapping is None:
            self.logger.error(f"Mapping vanished after insert: {slug}")
            raise StoreUnavailable()
        return mapping
