"""Tests that the server handles many concurrent requests correctly.

Each request runs as its own task; the only shared resource is the store.
These tests assert uniqueness and exact usage counting under concurrency.
"""

import asyncio
import pytest


@pytest.mark.asyncio
class TestConcurrentConnections:
    """Prove the server handles many simultaneous requests."""

    async def test_concurrent_create_requests(self, client, store):
        """Many concurrent creates with generated slugs; all succeed and slugs are unique."""
        concurrency = 30
        urls = [f"https://example.com/page_{i}" for i in range(concurrency)]
        tasks = [client.post("/", json={"url": url}) for url in urls]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        slugs = []
        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 200, f"Request {i}: status {r.status_code} body={r.text}"
            data = r.json()
            assert data["url"] == urls[i]
            slugs.append(data["slug"])

        assert len(slugs) == len(set(slugs)), "All slugs must be unique under concurrency"
        assert len(store.rows) == concurrency

    async def test_concurrent_same_slug(self, client, store):
        """Concurrent creates of one explicit slug: one 200, the rest 409."""
        tasks = [
            client.post("/", json={"url": f"https://example.com/{i}", "slug": "contested"})
            for i in range(20)
        ]
        responses = await asyncio.gather(*tasks)

        codes = sorted(r.status_code for r in responses)
        assert codes == [200] + [409] * 19

        winner = next(r for r in responses if r.status_code == 200)
        assert store.rows["contested"]["url"] == winner.json()["url"]

    async def test_concurrent_redirect_requests(self, client, store):
        """N concurrent redirects of one slug raise its usage count by exactly N."""
        create_resp = await client.post(
            "/",
            json={"url": "https://example.com/redirect-target", "slug": "hot"},
        )
        assert create_resp.status_code == 200

        concurrency = 40
        tasks = [client.get("/hot", follow_redirects=False) for _ in range(concurrency)]
        responses = await asyncio.gather(*tasks, return_exceptions=True)

        for i, r in enumerate(responses):
            if isinstance(r, Exception):
                pytest.fail(f"Request {i} raised: {r}")
            assert r.status_code == 303, f"Request {i}: status {r.status_code}"
            assert r.headers.get("location") == "https://example.com/redirect-target"

        info = await client.get("/api/urls/hot")
        assert info.json()["usage_count"] == concurrency
