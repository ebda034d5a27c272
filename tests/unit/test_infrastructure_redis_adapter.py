"""Unit tests for RedisAdapter with a mocked redis.asyncio client.

Covers the expiry envelope (sliding window capped by the absolute
deadline), prefix deletion via SCAN, and mapping of RedisError to
CacheError results.
"""

import json
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from src.core.result import Failure, Success
from src.domain.value_objects.cache_policy import CacheEntryPolicy
from src.infrastructure.cache.redis_adapter import RedisAdapter, escape_glob
from src.infrastructure.enums import InfrastructureErrorCode
from src.infrastructure.errors import CacheError

NOW = 1_700_000_000.0
POLICY = CacheEntryPolicy(sliding=timedelta(seconds=60), absolute=timedelta(seconds=300))


class FakeClock:
    def __init__(self, now: float = NOW) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def _envelope(value: str, absolute: float, sliding_ms: int = 60_000) -> bytes:
    return json.dumps({"v": value, "s": sliding_ms, "a": absolute}).encode()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def redis_client():
    client = MagicMock()
    client.get = AsyncMock(return_value=None)
    client.set = AsyncMock(return_value=True)
    client.delete = AsyncMock(return_value=1)
    client.pexpire = AsyncMock(return_value=True)
    client.exists = AsyncMock(return_value=1)
    client.ping = AsyncMock(return_value=True)
    client.aclose = AsyncMock()
    return client


@pytest.fixture
def adapter(redis_client, clock):
    return RedisAdapter(redis_client, namespace="test:", clock=clock)


@pytest.mark.unit
class TestRedisAdapterExpiry:
    @pytest.mark.asyncio
    async def test_set_stores_envelope_with_sliding_ttl(self, adapter, redis_client):
        result = await adapter.set("test:property:1", "payload", POLICY)

        assert result == Success(value=None)
        key, raw = redis_client.set.await_args.args
        assert key == "test:property:1"
        assert json.loads(raw) == {"v": "payload", "s": 60_000, "a": NOW + 300}
        assert redis_client.set.await_args.kwargs == {"px": 60_000}

    @pytest.mark.asyncio
    async def test_get_slides_expiration(self, adapter, redis_client):
        redis_client.get.return_value = _envelope("payload", absolute=NOW + 300)

        result = await adapter.get("test:property:1")

        assert result == Success(value="payload")
        redis_client.pexpire.assert_awaited_once_with("test:property:1", 60_000)

    @pytest.mark.asyncio
    async def test_get_near_deadline_caps_ttl_at_time_left(self, adapter, redis_client):
        redis_client.get.return_value = _envelope("payload", absolute=NOW + 20)

        await adapter.get("test:property:1")

        redis_client.pexpire.assert_awaited_once_with("test:property:1", 20_000)

    @pytest.mark.asyncio
    async def test_get_past_deadline_deletes_and_misses(self, adapter, redis_client, clock):
        redis_client.get.return_value = _envelope("payload", absolute=NOW + 300)
        clock.now = NOW + 301

        result = await adapter.get("test:property:1")

        assert result == Success(value=None)
        redis_client.delete.assert_awaited_once_with("test:property:1")
        redis_client.pexpire.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_malformed_envelope_is_serialization_error(self, adapter, redis_client):
        redis_client.get.return_value = b"not json"

        result = await adapter.get("test:property:1")

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == (
            InfrastructureErrorCode.CACHE_SERIALIZATION_ERROR
        )

    @pytest.mark.asyncio
    async def test_json_round_trip_through_envelope(self, adapter, redis_client):
        await adapter.set_json("test:owners", [{"id": 1}], POLICY)
        stored = redis_client.set.await_args.args[1]
        redis_client.get.return_value = stored.encode()

        result = await adapter.get_json("test:owners")

        assert result == Success(value=[{"id": 1}])


@pytest.mark.unit
class TestRedisAdapterKeys:
    def test_escape_glob(self):
        assert escape_glob("test:properties:list[1]*") == r"test:properties:list\[1\]\*"

    @pytest.mark.asyncio
    async def test_remove_by_prefix_scans_and_deletes(self, adapter, redis_client):
        async def scan_iter(match, count):
            assert match == "test:properties:list:*"
            for key in (b"test:properties:list:a", b"test:properties:list:b"):
                yield key

        redis_client.scan_iter = scan_iter
        redis_client.delete.return_value = 2

        result = await adapter.remove_by_prefix("test:properties:list:")

        assert result == Success(value=2)
        redis_client.delete.assert_awaited_once_with(
            b"test:properties:list:a", b"test:properties:list:b"
        )

    @pytest.mark.asyncio
    async def test_remove_reports_whether_key_existed(self, adapter, redis_client):
        redis_client.delete.return_value = 0

        assert await adapter.remove("test:owner:1") == Success(value=False)

    @pytest.mark.asyncio
    async def test_exists(self, adapter, redis_client):
        assert await adapter.exists("test:owner:1") == Success(value=True)


@pytest.mark.unit
class TestRedisAdapterFailures:
    @pytest.mark.asyncio
    async def test_get_connection_error_is_cache_error(self, adapter, redis_client):
        redis_client.get.side_effect = RedisConnectionError("down")

        result = await adapter.get("test:property:1")

        assert isinstance(result, Failure)
        assert isinstance(result.error, CacheError)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_GET_ERROR
        assert result.error.details["key"] == "test:property:1"

    @pytest.mark.asyncio
    async def test_set_connection_error_is_cache_error(self, adapter, redis_client):
        redis_client.set.side_effect = RedisConnectionError("down")

        result = await adapter.set("test:property:1", "x", POLICY)

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == InfrastructureErrorCode.CACHE_SET_ERROR

    @pytest.mark.asyncio
    async def test_ping_failure(self, adapter, redis_client):
        redis_client.ping.side_effect = RedisConnectionError("down")

        result = await adapter.ping()

        assert isinstance(result, Failure)
        assert result.error.infrastructure_code == (
            InfrastructureErrorCode.CACHE_CONNECTION_ERROR
        )

    @pytest.mark.asyncio
    async def test_close(self, adapter, redis_client):
        await adapter.close()

        redis_client.aclose.assert_awaited_once()
