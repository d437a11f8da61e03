"""Business logic service for short links."""

import logging
from typing import Optional, Dict
from datetime import datetime, timezone

from .linkid import LinkIdGenerator
from .store.base import KVStoreBase
from .store.models import ShortLink
from .common.validators import is_valid_url, is_valid_payload
from .exceptions import InvalidTarget, IDSpaceExhausted, LinkNotFound, StoreError


class ShortLinkService:
    """Create and resolve short links.

    The store is the single source of truth: nothing is cached between
    requests, and every operation is one or two awaited store calls.
    """

    def __init__(
        self,
        store: KVStoreBase,
        id_generator: Optional[LinkIdGenerator] = None,
        logger: Optional[logging.Logger] = None,
        max_collision_retries: int = 5,
    ):
        """Initialize short link service.

        Args:
            store: Key-value store holding link records
            id_generator: Optional ID generator (6-character base62 by default)
            logger: Optional logger
            max_collision_retries: Retries allowed after the first colliding ID
        """
        if max_collision_retries < 0:
            raise ValueError("max_collision_retries must be >= 0")

        self.store = store
        self.generator = id_generator or LinkIdGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.max_collision_retries = max_collision_retries

    async def create(self, target_url: str) -> ShortLink:
        """Create a short link for a public URL.

        Args:
            target_url: Absolute http(s) URL to redirect to

        Returns:
            The persisted ShortLink

        Raises:
            InvalidTarget: If the URL fails validation (nothing is written)
            IDSpaceExhausted: If every generated ID collided
            StoreError: If the store fails
        """
        is_valid, error = is_valid_url(target_url)
        if not is_valid:
            raise InvalidTarget(f"Invalid URL: {error}", target=target_url)

        return await self._persist_new_link(target_url)

    async def create_debug(self, payload: str) -> ShortLink:
        """Create a short link for an arbitrary payload, skipping URL checks.

        Used by internal tooling. The collision check and persistence are
        the same as create().
        """
        is_valid, error = is_valid_payload(payload)
        if not is_valid:
            raise InvalidTarget(error, target=payload)

        return await self._persist_new_link(payload)

    async def resolve(self, link_id: str) -> str:
        """Get the redirect target for a link ID.

        Args:
            link_id: The short link ID

        Returns:
            The stored target URL

        Raises:
            LinkNotFound: If the ID is malformed or unknown
        """
        return (await self.get_link(link_id)).target_url

    async def get_link(self, link_id: str) -> ShortLink:
        """Get the full record for a link ID.

        Malformed IDs are rejected without querying the store.
        """
        if not self.generator.is_valid(link_id):
            self.logger.debug(f"Rejected malformed link ID: {link_id!r}")
            raise LinkNotFound(link_id)

        raw = await self.store.get(link_id)
        if raw is None:
            self.logger.debug(f"Short link not found: {link_id}")
            raise LinkNotFound(link_id)

        try:
            return ShortLink.from_json(raw)
        except (ValueError, KeyError, TypeError) as e:
            self.logger.error(f"Corrupt record for {link_id}: {e}")
            raise StoreError(f"Corrupt record for link '{link_id}'", operation="get") from e

    async def health_check(self) -> Dict[str, bool]:
        """Perform health check.

        Returns:
            Dictionary with health status
        """
        store_healthy = await self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    async def _persist_new_link(self, target: str) -> ShortLink:
        """Generate a fresh ID and write the record under it.

        A collision is either an existing record found by the lookup or a
        conditional write refused because another creator got there first.
        """
        attempts = self.max_collision_retries + 1
        created_at = datetime.now(timezone.utc)

        for attempt in range(attempts):
            link_id = self.generator.generate()

            if await self.store.exists(link_id):
                self.logger.debug(f"ID collision on attempt {attempt + 1}: {link_id}")
                continue

            link = ShortLink(id=link_id, target_url=target, created_at=created_at)
            if not await self.store.put_if_absent(link_id, link.to_json()):
                self.logger.debug(f"Conditional write refused on attempt {attempt + 1}: {link_id}")
                continue

            if attempt:
                self.logger.info(f"Generated link ID after {attempt + 1} attempts")
            self.logger.info(f"Created short link: {link_id} -> {target}")
            return link

        self.logger.error(
            f"ID space exhausted after {attempts} attempts "
            f"(length={self.generator.length}, space={self.generator.id_space})"
        )
        raise IDSpaceExhausted(attempts)

    async def close(self) -> None:
        """Close store connections."""
        await self.store.close()
