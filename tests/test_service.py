"""Tests for service layer."""

import pytest

from shortlink.errors import MalformedInput, NotFound, SlugOccupied, StoreUnavailable
from shortlink.service import ShortlinkService


class TestShortlinkService:
    """Test shortlink service."""

    @pytest.mark.asyncio
    async def test_create_mapping(self, service, sample_urls):
        mapping = await service.create_mapping(sample_urls[0], creator_address="203.0.113.7")

        assert len(mapping.slug) == 10
        assert mapping.destination == sample_urls[0]
        assert mapping.usage_count == 0

    @pytest.mark.asyncio
    async def test_create_with_requested_slug(self, service, sample_urls):
        mapping = await service.create_mapping(sample_urls[0], requested_slug="test123")

        assert mapping.slug == "test123"

    @pytest.mark.asyncio
    async def test_conflict(self, service, sample_urls):
        await service.create_mapping(sample_urls[0], requested_slug="taken")

        with pytest.raises(SlugOccupied):
            await service.create_mapping(sample_urls[1], requested_slug="taken")

        mapping = await service.get_mapping("taken")
        assert mapping.destination == sample_urls[0]

    @pytest.mark.asyncio
    async def test_invalid_slug(self, service, sample_urls):
        with pytest.raises(MalformedInput, match="Invalid slug"):
            await service.create_mapping(sample_urls[0], requested_slug="has space")

    @pytest.mark.asyncio
    async def test_empty_destination(self, service):
        with pytest.raises(MalformedInput):
            await service.create_mapping("")

    @pytest.mark.asyncio
    async def test_custom_slugs_disabled(self, store, slug_generator, sample_urls):
        service = ShortlinkService(store=store, slug_generator=slug_generator, enable_custom_slugs=False)

        with pytest.raises(MalformedInput, match="not enabled"):
            await service.create_mapping(sample_urls[0], requested_slug="mine")

        mapping = await service.create_mapping(sample_urls[0])
        assert mapping.slug != "mine"

    @pytest.mark.asyncio
    async def test_get_mapping_does_not_count(self, service, store, sample_urls):
        created = await service.create_mapping(sample_urls[0])

        mapping = await service.get_mapping(created.slug)

        assert mapping == created
        assert store.calls["increment_usage"] == 0

    @pytest.mark.asyncio
    async def test_get_missing_mapping(self, service):
        with pytest.raises(NotFound):
            await service.get_mapping("nonexistent")

    @pytest.mark.asyncio
    async def test_get_mapping_store_failure(self, service, store):
        store.fail_get = True

        with pytest.raises(StoreUnavailable):
            await service.get_mapping("abc123")

    @pytest.mark.asyncio
    async def test_resolve_counts_usage(self, service, sample_urls):
        created = await service.create_mapping(sample_urls[0])

        assert await service.resolve(created.slug) == sample_urls[0]

        mapping = await service.get_mapping(created.slug)
        assert mapping.usage_count == 1

    @pytest.mark.asyncio
    async def test_health_check(self, service, store):
        health = await service.health_check()
        assert health == {"database": True, "overall": True}

        store.fail_get = True
        health = await service.health_check()
        assert health["overall"] is False

    @pytest.mark.asyncio
    async def test_close(self, service, store):
        await service.close()
        assert store.closed
