"""Redis implementation of the key-value store."""

import logging
from typing import Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from ..exceptions import StoreError
from .base import KVStoreBase


class RedisKVStore(KVStoreBase):
    """Redis-backed store for short link records."""
    
    def __init__(
        self,
        redis_url: str,
        key_prefix: str = "showme:link:",
        logger: Optional[logging.Logger] = None,
        client: Optional[redis.Redis] = None,
    ):
        """Initialize Redis store.
        
        Args:
            redis_url: Redis connection URL (e.g., redis://localhost:6379/0)
            key_prefix: Namespace prefix for link keys
            logger: Optional logger instance
            client: Optional pre-built client (connect() is then a ping only)
        """
        super().__init__(key_prefix)
        self.redis_url = redis_url
        self.logger = logger or logging.getLogger(__name__)
        self.client: Optional[redis.Redis] = client
    
    async def connect(self) -> None:
        """Connect to Redis and verify the connection."""
        if self.client is None:
            self.client = redis.from_url(
                self.redis_url,
                encoding="utf-8",
                decode_responses=True,
            )
        
        try:
            await self.client.ping()
        except RedisError as e:
            self.logger.error(f"Failed to connect to Redis: {e}")
            raise StoreError(f"Failed to connect to Redis: {e}", operation="connect") from e
        
        self.logger.info("Connected to Redis")
    
    def _require_client(self) -> redis.Redis:
        if self.client is None:
            raise StoreError("Redis store is not connected", operation="connect")
        return self.client
    
    async def get(self, key: str) -> Optional[str]:
        client = self._require_client()
        try:
            return await client.get(self.make_key(key))
        except RedisError as e:
            self.logger.error(f"Store get error: {e}")
            raise StoreError(f"Store get failed: {e}", operation="get") from e
    
    async def put(self, key: str, value: str) -> None:
        client = self._require_client()
        try:
            await client.set(self.make_key(key), value)
        except RedisError as e:
            self.logger.error(f"Store put error: {e}")
            raise StoreError(f"Store put failed: {e}", operation="put") from e
    
    async def put_if_absent(self, key: str, value: str) -> bool:
        client = self._require_client()
        try:
            # SET NX returns None when the key already exists
            result = await client.set(self.make_key(key), value, nx=True)
        except RedisError as e:
            self.logger.error(f"Store put_if_absent error: {e}")
            raise StoreError(f"Store put failed: {e}", operation="put_if_absent") from e
        return bool(result)
    
    async def delete(self, key: str) -> bool:
        client = self._require_client()
        try:
            return await client.delete(self.make_key(key)) > 0
        except RedisError as e:
            self.logger.error(f"Store delete error: {e}")
            raise StoreError(f"Store delete failed: {e}", operation="delete") from e
    
    async def exists(self, key: str) -> bool:
        client = self._require_client()
        try:
            return await client.exists(self.make_key(key)) > 0
        except RedisError as e:
            self.logger.error(f"Store exists error: {e}")
            raise StoreError(f"Store exists failed: {e}", operation="exists") from e
    
    async def health_check(self) -> bool:
        if self.client is None:
            return False
        try:
            await self.client.ping()
            return True
        except RedisError as e:
            self.logger.error(f"Health check failed: {e}")
            return False
    
    async def close(self) -> None:
        """Close Redis connection."""
        if self.client:
            await self.client.aclose()
            self.client = None
            self.logger.info("Redis connection closed")
