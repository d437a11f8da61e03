"""Tests for service layer."""

import pytest

from showme.exceptions import InvalidTarget, IDSpaceExhausted, LinkNotFound, StoreError
from showme.service import ShortLinkService
from showme.store.models import ShortLink
from doubles import ScriptedIdGenerator, RecordingStore, RacingStore, FailingStore


class TestShortLinkService:
    """Test short link service."""
    
    @pytest.mark.asyncio
    async def test_create_and_resolve(self, service, sample_urls):
        """Every valid URL resolves back to itself."""
        for url in sample_urls:
            link = await service.create(url)
            
            assert link.target_url == url
            assert link.created_at.tzinfo is not None
            assert await service.resolve(link.id) == url
    
    @pytest.mark.asyncio
    async def test_create_persists_record(self, service, store, sample_urls):
        """The stored record carries id, target and creation time."""
        link = await service.create(sample_urls[0])
        
        stored = ShortLink.from_json(await store.get(link.id))
        assert stored == link
    
    @pytest.mark.asyncio
    async def test_ids_unique_over_many_creates(self, service):
        """10,000 sequential creates never reuse an ID."""
        ids = set()
        for i in range(10_000):
            link = await service.create(f"https://example.com/page/{i}")
            ids.add(link.id)
        
        assert len(ids) == 10_000
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("collisions", [0, 1, 3, 5])
    async def test_retries_exactly_k_times(self, logger, collisions):
        """k existing IDs are skipped, then the next one is used."""
        store = RecordingStore()
        taken = [f"taken{i}" for i in range(collisions)]
        for link_id in taken:
            await store.put(link_id, "occupied")
        
        generator = ScriptedIdGenerator(taken + ["fresh1"])
        service = ShortLinkService(store=store, id_generator=generator, logger=logger, max_collision_retries=5)
        
        link = await service.create("https://example.com/a")
        
        assert link.id == "fresh1"
        assert generator.calls == collisions + 1
        for link_id in taken:
            assert await store.get(link_id) == "occupied"
    
    @pytest.mark.asyncio
    async def test_exhausted_after_bound(self, logger):
        """More collisions than allowed retries fails with IDSpaceExhausted."""
        store = RecordingStore()
        taken = [f"taken{i}" for i in range(6)]
        for link_id in taken:
            await store.put(link_id, "occupied")
        
        generator = ScriptedIdGenerator(taken + ["fresh1"])
        service = ShortLinkService(store=store, id_generator=generator, logger=logger, max_collision_retries=5)
        
        with pytest.raises(IDSpaceExhausted) as exc_info:
            await service.create("https://example.com/a")
        
        assert exc_info.value.attempts == 6
        assert generator.calls == 6
        assert await store.get("fresh1") is None
    
    @pytest.mark.asyncio
    async def test_lost_conditional_write_is_a_collision(self, logger):
        """A write refused after a clean check retries with a new ID."""
        store = RacingStore(lost_races=2)
        generator = ScriptedIdGenerator(["raced1", "raced2", "winner"])
        service = ShortLinkService(store=store, id_generator=generator, logger=logger)
        
        link = await service.create("https://example.com/a")
        
        assert link.id == "winner"
        assert await store.get("raced1") == "taken-by-someone-else"
        assert await service.resolve("winner") == "https://example.com/a"
    
    @pytest.mark.asyncio
    async def test_never_overwrites_existing(self, logger):
        """An existing mapping keeps its original target."""
        store = RecordingStore()
        generator = ScriptedIdGenerator(["same11", "same11", "other1"])
        service = ShortLinkService(store=store, id_generator=generator, logger=logger)
        
        first = await service.create("https://example.com/first")
        second = await service.create("https://example.com/second")
        
        assert first.id == "same11"
        assert second.id == "other1"
        assert await service.resolve("same11") == "https://example.com/first"
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("target", [
        "",
        "not a url",
        "not-a-url",
        "ftp://example.com/file",
        "https://",
        "https://" + "a" * 2050 + ".com",
    ])
    async def test_invalid_target_writes_nothing(self, logger, target):
        """Invalid URLs fail before any store access."""
        store = RecordingStore()
        service = ShortLinkService(store=store, logger=logger)
        
        with pytest.raises(InvalidTarget):
            await service.create(target)
        
        assert store.calls == 0
    
    @pytest.mark.asyncio
    async def test_create_debug_accepts_any_payload(self, service):
        """Debug creation skips URL validation."""
        link = await service.create_debug("graph TB; A-->B")
        
        assert await service.resolve(link.id) == "graph TB; A-->B"
    
    @pytest.mark.asyncio
    async def test_create_debug_accepts_whitespace_payload(self, service):
        """Whitespace is still a non-empty payload."""
        link = await service.create_debug("   ")
        
        assert await service.resolve(link.id) == "   "
    
    @pytest.mark.asyncio
    async def test_create_debug_rejects_empty(self, logger):
        """Debug creation still requires a non-empty payload."""
        store = RecordingStore()
        service = ShortLinkService(store=store, logger=logger)
        
        with pytest.raises(InvalidTarget):
            await service.create_debug("")
        
        assert store.calls == 0
    
    @pytest.mark.asyncio
    async def test_create_debug_checks_collisions(self, logger):
        """Debug creation uses the same collision handling."""
        store = RecordingStore()
        await store.put("taken1", "occupied")
        generator = ScriptedIdGenerator(["taken1", "fresh1"])
        service = ShortLinkService(store=store, id_generator=generator, logger=logger)
        
        link = await service.create_debug("payload")
        
        assert link.id == "fresh1"
        assert await store.get("taken1") == "occupied"
    
    @pytest.mark.asyncio
    async def test_resolve_unknown(self, service):
        """Unknown IDs raise LinkNotFound."""
        with pytest.raises(LinkNotFound):
            await service.resolve("zzzzzz")
    
    @pytest.mark.asyncio
    @pytest.mark.parametrize("link_id", ["doesnotexist", "abc", "abc-12", "../etc", ""])
    async def test_resolve_malformed_skips_store(self, logger, link_id):
        """Malformed IDs never reach the store."""
        store = RecordingStore()
        service = ShortLinkService(store=store, logger=logger)
        
        with pytest.raises(LinkNotFound):
            await service.resolve(link_id)
        
        assert store.calls == 0
    
    @pytest.mark.asyncio
    async def test_resolve_is_read_only(self, logger):
        """Resolving performs no writes."""
        store = RecordingStore()
        service = ShortLinkService(store=store, logger=logger)
        link = await service.create("https://example.com/a")
        writes = store.writes
        
        for _ in range(3):
            await service.resolve(link.id)
        
        assert store.writes == writes
    
    @pytest.mark.asyncio
    async def test_corrupt_record(self, service, store):
        """A record that does not parse is a store error, not a miss."""
        await store.put("broken", "{not json")
        
        with pytest.raises(StoreError):
            await service.resolve("broken")
    
    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, logger):
        """Store failures are not turned into NotFound."""
        service = ShortLinkService(store=FailingStore(), logger=logger)
        
        with pytest.raises(StoreError):
            await service.resolve("abc123")
        with pytest.raises(StoreError):
            await service.create("https://example.com/a")
    
    @pytest.mark.asyncio
    async def test_health_check(self, service):
        """Test health check."""
        health = await service.health_check()
        
        assert health == {"store": True, "overall": True}
    
    def test_negative_retries_rejected(self, store):
        with pytest.raises(ValueError):
            ShortLinkService(store=store, max_collision_retries=-1)
