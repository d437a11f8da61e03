"""Key-value store layer for short links."""

from .base import KVStoreBase
from .memory import InMemoryKVStore
from .redis_store import RedisKVStore
from .models import ShortLink
from .factory import create_store

__all__ = ["KVStoreBase", "InMemoryKVStore", "RedisKVStore", "ShortLink", "create_store"]
