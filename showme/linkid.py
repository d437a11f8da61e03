"""Short link ID generation."""

import re
import secrets
import string
from typing import Optional


class LinkIdGenerator:
    """Generate fixed-length short link IDs."""
    
    # Base62 characters (alphanumeric, case-sensitive)
    BASE62_CHARS = string.ascii_letters + string.digits  # a-zA-Z0-9
    
    def __init__(self, length: int = 6, alphabet: Optional[str] = None):
        """Initialize link ID generator.
        
        Args:
            length: Length of every generated ID
            alphabet: Characters to draw from (base62 if not specified)
        """
        if length < 1:
            raise ValueError("ID length must be positive")
        
        self.length = length
        self.alphabet = alphabet or self.BASE62_CHARS
        self._pattern = re.compile(
            "[" + re.escape(self.alphabet) + "]{" + str(length) + "}"
        )
    
    def generate(self) -> str:
        """Generate a random ID from a cryptographically strong source."""
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))
    
    def is_valid(self, link_id: str) -> bool:
        """Check that an ID has the configured length and alphabet.
        
        Args:
            link_id: ID to validate
            
        Returns:
            True if the ID could have been produced by this generator
        """
        if not isinstance(link_id, str):
            return False
        return self._pattern.fullmatch(link_id) is not None
    
    @property
    def id_space(self) -> int:
        """Number of distinct IDs this generator can produce."""
        return len(self.alphabet) ** self.length
