"""
Tests for the SQL-backed key-value store.
"""

import pytest


@pytest.mark.asyncio
async def test_get_missing_key(store):
    assert await store.get("/missing") is None


@pytest.mark.asyncio
async def test_put_then_get(store):
    await store.put("/blog", "https://example.com/posts")
    assert await store.get("/blog") == "https://example.com/posts"


@pytest.mark.asyncio
async def test_put_overwrites(store):
    await store.put("/blog", "https://example.com/one")
    await store.put("/blog", "https://example.com/two")

    assert await store.get("/blog") == "https://example.com/two"
    assert await store.list_keys() == ["/blog"]


@pytest.mark.asyncio
async def test_delete(store):
    await store.put("/blog", "https://example.com")
    await store.delete("/blog")

    assert await store.get("/blog") is None
    assert await store.list_keys() == []


@pytest.mark.asyncio
async def test_delete_missing_key_is_not_an_error(store):
    await store.delete("/never-stored")
    assert await store.list_keys() == []


@pytest.mark.asyncio
async def test_list_keys(store):
    for key in ("/a", "/b", "/c"):
        await store.put(key, f"https://example.com{key}")

    assert sorted(await store.list_keys()) == ["/a", "/b", "/c"]
