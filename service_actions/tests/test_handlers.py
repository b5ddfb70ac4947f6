"""
Unit tests for the built-in tool handlers.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from shared.errors import ExternalServiceError, ValidationError
from service_actions.app.caching import TTLCache
from service_actions.app.tools import ToolHandlers, translation_cache_key


class TestToolHandlers:
    """Test cases for ToolHandlers."""

    @pytest.fixture
    def cache(self, fake_clock):
        return TTLCache(default_ttl=60, clock=fake_clock)

    @pytest.fixture
    def metrics(self):
        return MagicMock()

    @pytest.fixture
    def handlers(self, cache, metrics):
        chuck = AsyncMock()
        chuck.get_random_joke.return_value = {"joke": "Chuck counted to infinity. Twice.", "iconUrl": "icon.png"}
        chuck.get_joke_by_category.return_value = {"joke": "Chuck codes in binary.", "iconUrl": "icon.png"}
        chuck.get_categories.return_value = ["dev", "food"]

        dad = AsyncMock()
        dad.get_random_joke.return_value = "I'm reading a book on anti-gravity."

        lingva = AsyncMock()
        lingva.translate.return_value = "hola"

        mymemory = AsyncMock()
        mymemory.translate.return_value = {"translatedText": "bonjour", "match": 0.98}

        return ToolHandlers(chuck, dad, lingva, mymemory, cache, metrics=metrics)

    @pytest.mark.asyncio
    async def test_get_chuck_joke(self, handlers):
        result = await handlers.get_chuck_joke({})

        assert result == {"joke": "Chuck counted to infinity. Twice.", "iconUrl": "icon.png"}

    @pytest.mark.asyncio
    async def test_joke_by_category_passes_category(self, handlers):
        result = await handlers.get_chuck_joke_by_category({"category": "dev"})

        assert result["joke"] == "Chuck codes in binary."
        handlers.chuck_client.get_joke_by_category.assert_awaited_once_with("dev")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("params", [{}, {"category": None}, {"category": ""}])
    async def test_joke_by_category_requires_category(self, handlers, params):
        with pytest.raises(ValidationError, match="Category parameter is required"):
            await handlers.get_chuck_joke_by_category(params)

        handlers.chuck_client.get_joke_by_category.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_get_chuck_categories(self, handlers):
        assert await handlers.get_chuck_categories({}) == {"categories": ["dev", "food"]}

    @pytest.mark.asyncio
    async def test_get_dad_joke(self, handlers):
        assert await handlers.get_dad_joke({}) == {"joke": "I'm reading a book on anti-gravity."}

    @pytest.mark.asyncio
    async def test_lingva_translate_applies_defaults(self, handlers):
        result = await handlers.lingva_translate({"text": "hello"})

        assert result == {
            "originalText": "hello",
            "translatedText": "hola",
            "sourceLanguage": "en",
            "targetLanguage": "es",
            "api": "Lingva",
        }
        handlers.lingva_client.translate.assert_awaited_once_with("hello", "en", "es")

    @pytest.mark.asyncio
    async def test_lingva_translate_requires_text(self, handlers):
        with pytest.raises(ValidationError, match="Text parameter is required"):
            await handlers.lingva_translate({"sourceLang": "en"})

    @pytest.mark.asyncio
    async def test_text_must_be_string(self, handlers):
        with pytest.raises(ValidationError, match="must be a string"):
            await handlers.lingva_translate({"text": 42})

    @pytest.mark.asyncio
    async def test_mymemory_translate_builds_and_caches_result(self, handlers, cache):
        params = {"text": "hello", "sourceLang": "en", "targetLang": "fr"}

        result = await handlers.mymemory_translate(params)

        assert result == {
            "originalText": "hello",
            "translatedText": "bonjour",
            "sourceLanguage": "en",
            "targetLanguage": "fr",
            "match": 0.98,
            "api": "MyMemory",
        }
        assert cache.get(translation_cache_key("hello", "en", "fr")) is result

    @pytest.mark.asyncio
    async def test_mymemory_translate_cache_hit_skips_upstream(self, handlers, metrics):
        params = {"text": "hello", "sourceLang": "en", "targetLang": "fr"}

        first = await handlers.mymemory_translate(params)
        second = await handlers.mymemory_translate(params)

        assert second is first
        handlers.mymemory_client.translate.assert_awaited_once()
        metrics.record_cache_event.assert_any_call("miss")
        metrics.record_cache_event.assert_any_call("hit")

    @pytest.mark.asyncio
    async def test_mymemory_translate_refetches_after_expiry(self, handlers, fake_clock):
        params = {"text": "hello", "targetLang": "fr"}
        await handlers.mymemory_translate(params)

        fake_clock.advance(61)
        handlers.mymemory_client.translate.return_value = {"translatedText": "salut", "match": 0.5}
        result = await handlers.mymemory_translate(params)

        assert result["translatedText"] == "salut"
        assert handlers.mymemory_client.translate.await_count == 2

    @pytest.mark.asyncio
    async def test_mymemory_translate_failure_is_not_cached(self, handlers, cache):
        handlers.mymemory_client.translate.side_effect = ExternalServiceError(
            "mymemory", "Invalid translation response"
        )

        with pytest.raises(ExternalServiceError):
            await handlers.mymemory_translate({"text": "hello"})

        assert len(cache) == 0

    @pytest.mark.asyncio
    async def test_mymemory_translate_requires_text(self, handlers):
        with pytest.raises(ValidationError, match="Text parameter is required"):
            await handlers.mymemory_translate({"text": ""})

        handlers.mymemory_client.translate.assert_not_awaited()

    def test_translation_cache_key(self):
        assert translation_cache_key("hello", "en", "fr") == "en-fr-hello"
