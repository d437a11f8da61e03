"""In-process key-value store used for development and tests."""

import asyncio
import logging
from typing import Dict, Optional

from .base import KVStoreBase


class InMemoryKVStore(KVStoreBase):
    """Dictionary-backed store. Data lives only as long as the process."""
    
    def __init__(self, key_prefix: str = "", logger: Optional[logging.Logger] = None):
        super().__init__(key_prefix)
        self.logger = logger or logging.getLogger(__name__)
        self._data: Dict[str, str] = {}
        self._lock = asyncio.Lock()
    
    async def get(self, key: str) -> Optional[str]:
        # Single dict lookup with no await, so it needs no lock
        return self._data.get(self.make_key(key))
    
    async def put(self, key: str, value: str) -> None:
        async with self._lock:
            self._data[self.make_key(key)] = value
    
    async def put_if_absent(self, key: str, value: str) -> bool:
        full_key = self.make_key(key)
        async with self._lock:
            if full_key in self._data:
                return False
            self._data[full_key] = value
            return True
    
    async def delete(self, key: str) -> bool:
        async with self._lock:
            return self._data.pop(self.make_key(key), None) is not None
    
    async def health_check(self) -> bool:
        return True
    
    async def close(self) -> None:
        self.logger.debug(f"Discarding {len(self._data)} in-memory keys")
        self._data.clear()
    
    def __len__(self) -> int:
        return len(self._data)
