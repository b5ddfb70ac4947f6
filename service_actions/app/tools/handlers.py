"""
Handlers for the built-in tools and the default registry wiring.

Each handler validates its own parameters. Missing parameters raise
``ValidationError``; upstream failures surface as ``ExternalServiceError``
from the adapters.
"""

from typing import Any, Dict, Optional, TYPE_CHECKING

from shared.errors import ValidationError
from shared.logging import get_logger
from ..adapters import ChuckNorrisClient, DadJokeClient, LingvaClient, MyMemoryClient
from ..caching import TTLCache
from .registry import ToolRegistry

if TYPE_CHECKING:  # pragma: no cover - imported for typing only
    from shared.metrics import MetricsCollector


DEFAULT_SOURCE_LANG = "en"
DEFAULT_TARGET_LANG = "es"


def translation_cache_key(text: str, source_lang: str, target_lang: str) -> str:
    """Cache key for a translation request."""
    return f"{source_lang}-{target_lang}-{text}"


def _require_str(params: Dict[str, Any], name: str, missing_message: str) -> str:
    value = params.get(name)
    if value is None or value == "":
        raise ValidationError(missing_message)
    if not isinstance(value, str):
        raise ValidationError(f"{name} parameter must be a string")
    return value


def _language(params: Dict[str, Any], name: str, default: str) -> str:
    value = params.get(name)
    if value is None or value == "":
        return default
    if not isinstance(value, str):
        raise ValidationError(f"{name} parameter must be a string")
    return value


class ToolHandlers:
    """Async handlers backing the built-in tools."""

    def __init__(
        self,
        chuck_client: ChuckNorrisClient,
        dad_joke_client: DadJokeClient,
        lingva_client: LingvaClient,
        mymemory_client: MyMemoryClient,
        translation_cache: TTLCache,
        *,
        metrics: Optional["MetricsCollector"] = None,
    ):
        self.chuck_client = chuck_client
        self.dad_joke_client = dad_joke_client
        self.lingva_client = lingva_client
        self.mymemory_client = mymemory_client
        self.translation_cache = translation_cache
        self.metrics = metrics
        self.logger = get_logger("actions.tool_handlers")

    async def get_chuck_joke(self, params: Dict[str, Any]) -> Dict[str, Any]:
        return await self.chuck_client.get_random_joke()

    async def get_chuck_joke_by_category(self, params: Dict[str, Any]) -> Dict[str, Any]:
        category = _require_str(params, "category", "Category parameter is required")
        return await self.chuck_client.get_joke_by_category(category)

    async def get_chuck_categories(self, params: Dict[str, Any]) -> Dict[str, Any]:
        categories = await self.chuck_client.get_categories()
        return {"categories": categories}

    async def get_dad_joke(self, params: Dict[str, Any]) -> Dict[str, Any]:
        joke = await self.dad_joke_client.get_random_joke()
        return {"joke": joke}

    async def lingva_translate(self, params: Dict[str, Any]) -> Dict[str, Any]:
        text = _require_str(params, "text", "Text parameter is required")
        source_lang = _language(params, "sourceLang", DEFAULT_SOURCE_LANG)
        target_lang = _language(params, "targetLang", DEFAULT_TARGET_LANG)

        translated = await self.lingva_client.translate(text, source_lang, target_lang)
        return {
            "originalText": text,
            "translatedText": translated,
            "sourceLanguage": source_lang,
            "targetLanguage": target_lang,
            "api": "Lingva",
        }

    async def mymemory_translate(self, params: Dict[str, Any]) -> Dict[str, Any]:
        """Translate via MyMemory, serving repeated requests from the cache.

        The lookup and the store are separated by the upstream call, so two
        concurrent identical requests may both miss and both call upstream.
        Both store equivalent results; the last write wins.
        """
        text = _require_str(params, "text", "Text parameter is required")
        source_lang = _language(params, "sourceLang", DEFAULT_SOURCE_LANG)
        target_lang = _language(params, "targetLang", DEFAULT_TARGET_LANG)

        cache_key = translation_cache_key(text, source_lang, target_lang)
        cached = self.translation_cache.get(cache_key)
        if cached is not None:
            self._record_cache_event("hit")
            self.logger.debug("Translation served from cache", source_lang=source_lang, target_lang=target_lang)
            return cached
        self._record_cache_event("miss")

        translation = await self.mymemory_client.translate(text, source_lang, target_lang)
        result = {
            "originalText": text,
            "translatedText": translation["translatedText"],
            "sourceLanguage": source_lang,
            "targetLanguage": target_lang,
            "match": translation["match"],
            "api": "MyMemory",
        }
        self.translation_cache.set(cache_key, result)
        return result

    def _record_cache_event(self, result: str) -> None:
        if self.metrics:
            self.metrics.record_cache_event(result)


def build_default_registry(handlers: ToolHandlers) -> ToolRegistry:
    """Register the built-in tools and freeze the registry."""
    registry = ToolRegistry()
    registry.register(
        "get-chuck-joke",
        "Get a random Chuck Norris joke",
        handlers.get_chuck_joke,
    )
    registry.register(
        "get-chuck-joke-by-category",
        "Get a random Chuck Norris joke by category",
        handlers.get_chuck_joke_by_category,
    )
    registry.register(
        "get-chuck-categories",
        "Get all available categories for Chuck Norris jokes",
        handlers.get_chuck_categories,
    )
    registry.register(
        "get-dad-joke",
        "Get a random dad joke",
        handlers.get_dad_joke,
    )
    registry.register(
        "lingva-translate",
        "Translate text using Lingva API (free/open-source)",
        handlers.lingva_translate,
    )
    registry.register(
        "mymemory-translate",
        "Translate text using MyMemory API with caching",
        handlers.mymemory_translate,
    )
    return registry.freeze()
