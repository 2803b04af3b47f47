"""
Redis snapshot storage.

Persists the users, tools and departments collections as three
independently keyed JSON snapshots.
"""

import json
from typing import Any, List, Optional

import redis.asyncio as redis

from nexushub.utils.logger import get_logger
from nexushub.utils.metrics import snapshot_write_count

logger = get_logger(__name__)

COLLECTIONS = ("users", "tools", "departments")


class SnapshotStorage:
    """
    Key/value persistence for whole collections.

    One key per collection: '{prefix}_{collection}'.
    Snapshots are written verbatim and trusted verbatim on read.
    No transactions across keys, no conflict detection.
    """

    def __init__(self, url: Optional[str] = None, prefix: str = "nexushub", client: Any = None):
        """
        Args:
            url: Redis connection URL (e.g. redis://localhost:6379)
            prefix: Key prefix shared by the three snapshots
            client: Pre-built async client (takes precedence over url)
        """
        if client is None:
            client = redis.from_url(
                url,
                decode_responses=True,
                socket_keepalive=True,
                socket_timeout=5.0,
            )
        self.redis = client
        self.prefix = prefix

        logger.info(f"Initialized SnapshotStorage: prefix={prefix}")

    def get_key(self, collection: str) -> str:
        if collection not in COLLECTIONS:
            raise ValueError(f"Unknown collection: {collection}")
        return f"{self.prefix}_{collection}"

    async def load(self, collection: str) -> Optional[List[Any]]:
        """
        Read one snapshot.

        Returns:
            The decoded JSON array, or None when the key is absent.

        Raises:
            json.JSONDecodeError: the stored snapshot is malformed.
            Connection errors from redis propagate as well.
        """
        key = self.get_key(collection)
        raw = await self.redis.get(key)
        if raw is None:
            logger.info(f"Snapshot MISS: {key}")
            return None

        logger.debug(f"Snapshot HIT: {key}")
        return json.loads(raw)

    async def save(self, collection: str, payload: List[Any]) -> bool:
        """
        Write one snapshot. Failures are logged, never raised.

        Returns:
            True when the write went through.
        """
        key = self.get_key(collection)
        try:
            await self.redis.set(key, json.dumps(payload))
            snapshot_write_count.labels(collection=collection).inc()
            logger.debug(f"Saved snapshot: {key}, items={len(payload)}")
            return True
        except Exception as e:
            logger.error(f"Snapshot write failed for {key}: {e}")
            return False

    async def ping(self) -> bool:
        return bool(await self.redis.ping())

    async def close(self) -> None:
        """Close Redis connection."""
        await self.redis.aclose()
