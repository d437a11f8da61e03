"""Store construction from configuration."""

import logging
from typing import Optional

from .base import KVStoreBase
from .memory import InMemoryKVStore
from .redis_store import RedisKVStore


async def create_store(
    redis_url: Optional[str],
    key_prefix: str,
    logger: Optional[logging.Logger] = None,
) -> KVStoreBase:
    """Build and connect the configured store.
    
    Args:
        redis_url: Redis connection URL; None selects the in-memory store
        key_prefix: Namespace prefix for link keys
        logger: Optional logger
        
    Returns:
        A ready-to-use store
    """
    logger = logger or logging.getLogger(__name__)
    
    if not redis_url:
        logger.warning("REDIS_URL not set - using in-memory store, links will not survive a restart")
        return InMemoryKVStore(key_prefix=key_prefix, logger=logger)
    
    logger.info(f"Connecting to Redis at {redis_url}")
    store = RedisKVStore(redis_url=redis_url, key_prefix=key_prefix, logger=logger)
    await store.connect()
    return store
