"""Redirect resolution with best-effort usage counting."""

import logging
from typing import Optional

from .database.base import MappingStoreBase
from .errors import NotFound, StoreError, StoreUnavailable


class RedirectResolver:
    """Resolve slugs to destinations and count usage."""

    def __init__(
        self,
        store: MappingStoreBase,
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.logger = logger or logging.getLogger(__name__)

    async def resolve(self, slug: str) -> str:
        """Return the destination for ``slug`` and add one to its usage count.

        The counter update runs as its own statement after the lookup. If it
        fails the redirect still succeeds and the failure is only logged.

        Args:
            slug: The slug to resolve

        Returns:
            Destination URL

        Raises:
            NotFound: If no mapping exists
            StoreUnavailable: If the lookup itself fails
        """
        try:
            mapping = await self.store.get_mapping(slug)
        except StoreError as e:
            self.logger.error(f"Store error while resolving {slug}: {e}")
            raise StoreUnavailable()

        if mapping is None:
            self.logger.info(f"Slug not found: {slug}")
            raise NotFound()

        await self._count_usage(slug)

        self.logger.debug(f"Resolved {slug} -> {mapping.destination}")
        return mapping.destination

    async def _count_usage(self, slug: str) -> None:
        try:
            updated = await self.store.increment_usage(slug)
        except Exception as e:
            self.logger.warning(f"Unable to update usage_count for {slug}: {e}")
            return

        if not updated:
            self.logger.warning(f"No row updated when counting usage for {slug}")
