"""Abstract base class for key-value store implementations."""

from abc import ABC, abstractmethod
from typing import Optional


class KVStoreBase(ABC):
    """Abstract base class for key-value store operations.
    
    Values are opaque strings. Implementations raise StoreError when the
    backend cannot complete an operation; they never report a failure as a
    missing key.
    """
    
    def __init__(self, key_prefix: str = ""):
        """Initialize store.
        
        Args:
            key_prefix: Prefix prepended to every key
        """
        self.key_prefix = key_prefix
    
    def make_key(self, key: str) -> str:
        """Apply the namespace prefix to a key."""
        return f"{self.key_prefix}{key}"
    
    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Get the value stored under a key.
        
        Args:
            key: The key to lookup
            
        Returns:
            The stored value, or None if absent
        """
        pass
    
    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store a value, replacing any existing one.
        
        Args:
            key: The key to write
            value: The value to store
        """
        pass
    
    @abstractmethod
    async def put_if_absent(self, key: str, value: str) -> bool:
        """Store a value only if the key does not exist yet.
        
        Args:
            key: The key to write
            value: The value to store
            
        Returns:
            True if written, False if the key already existed
        """
        pass
    
    @abstractmethod
    async def delete(self, key: str) -> bool:
        """Delete a key.
        
        Args:
            key: The key to delete
            
        Returns:
            True if deleted, False if not found
        """
        pass
    
    async def exists(self, key: str) -> bool:
        """Check if a key exists."""
        return await self.get(key) is not None
    
    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the store is reachable.
        
        Returns:
            True if healthy, False otherwise
        """
        pass
    
    @abstractmethod
    async def close(self) -> None:
        """Close store connections."""
        pass
