import json

import pytest
from unittest.mock import AsyncMock, MagicMock

from pydantic import BaseModel

from judotrack.services.cache_service import CacheService, entity_cache_key


class Item(BaseModel):
    id: int
    name: str


def test_entity_cache_key():
    assert entity_cache_key("training_sessions", 42) == "judotrack:training_sessions:user:42"


class TestGetOrSet:
    @pytest.mark.asyncio
    async def test_without_redis_is_pass_through(self):
        fetch = AsyncMock(return_value=[Item(id=1, name="uchi mata")])

        result = await CacheService.get_or_set(None, "k", fetch, Item, is_list=True)

        assert result == [Item(id=1, name="uchi mata")]
        fetch.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_cache_hit_skips_database(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = json.dumps([{"id": 1, "name": "seoi nage"}])
        fetch = AsyncMock()

        result = await CacheService.get_or_set(redis_client, "k", fetch, Item, is_list=True)

        assert result == [Item(id=1, name="seoi nage")]
        fetch.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_cache_miss_stores_result(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = None
        fetch = AsyncMock(return_value=[Item(id=2, name="o goshi")])

        result = await CacheService.get_or_set(
            redis_client, "k", fetch, Item, expiry_seconds=60, is_list=True
        )

        assert result == [Item(id=2, name="o goshi")]
        redis_client.set.assert_awaited_once_with("k", json.dumps([{"id": 2, "name": "o goshi"}]), ex=60)

    @pytest.mark.asyncio
    async def test_corrupt_entry_is_dropped_and_refetched(self):
        redis_client = AsyncMock()
        redis_client.get.return_value = "{no es json"
        fetch = AsyncMock(return_value=[])

        result = await CacheService.get_or_set(redis_client, "k", fetch, Item, is_list=True)

        assert result == []
        redis_client.delete.assert_awaited_once_with("k")
        fetch.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_redis_read_error_falls_back_to_database(self):
        redis_client = AsyncMock()
        redis_client.get.side_effect = ConnectionError("sin conexión")
        fetch = AsyncMock(return_value=[Item(id=3, name="ippon")])

        result = await CacheService.get_or_set(redis_client, "k", fetch, Item, is_list=True)

        assert result == [Item(id=3, name="ippon")]


class TestInvalidateEntity:
    @pytest.mark.asyncio
    async def test_deletes_exactly_the_user_key(self):
        redis_client = AsyncMock()
        redis_client.delete.return_value = 1

        count = await CacheService.invalidate_entity(redis_client, "techniques", 5)

        assert count == 1
        redis_client.delete.assert_awaited_once_with("judotrack:techniques:user:5")

    @pytest.mark.asyncio
    async def test_without_user_deletes_every_entity_key(self):
        keys = ["judotrack:techniques:user:1", "judotrack:techniques:user:2"]

        async def scan_iter(match):
            assert match == "judotrack:techniques:*"
            for key in keys:
                yield key

        redis_client = MagicMock()
        redis_client.scan_iter = scan_iter
        redis_client.delete = AsyncMock(return_value=2)

        count = await CacheService.invalidate_entity(redis_client, "techniques")

        assert count == 2
        redis_client.delete.assert_awaited_once_with(*keys)

    @pytest.mark.asyncio
    async def test_without_redis_does_nothing(self):
        assert await CacheService.invalidate_entity(None, "techniques", 5) == 0
