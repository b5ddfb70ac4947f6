"""
Unit tests for the upstream API adapters.
"""

import httpx
import pytest

from shared.errors import ExternalServiceError
from service_actions.app.adapters import ChuckNorrisClient, DadJokeClient, LingvaClient, MyMemoryClient

from conftest import json_response


class TestChuckNorrisClient:
    """Test cases for ChuckNorrisClient."""

    @pytest.fixture
    def client(self, upstream):
        return ChuckNorrisClient("https://chuck.test/", transport=upstream.transport())

    @pytest.mark.asyncio
    async def test_get_random_joke(self, client, upstream):
        upstream.add("chuck.test", "/jokes/random", json_response({"value": "joke", "icon_url": "icon.png"}))

        assert await client.get_random_joke() == {"joke": "joke", "iconUrl": "icon.png"}

    @pytest.mark.asyncio
    async def test_get_joke_by_category_sends_query(self, client, upstream):
        upstream.add("chuck.test", "/jokes/random", json_response({"value": "dev joke", "icon_url": "icon.png"}))

        await client.get_joke_by_category("dev")

        assert upstream.requests[0].url.params["category"] == "dev"

    @pytest.mark.asyncio
    async def test_get_categories(self, client, upstream):
        upstream.add("chuck.test", "/jokes/categories", json_response(["animal", "dev"]))

        assert await client.get_categories() == ["animal", "dev"]

    @pytest.mark.asyncio
    async def test_error_status_raises(self, client, upstream):
        upstream.add("chuck.test", "/jokes/random", json_response({"error": "Not Found"}, status_code=404))

        with pytest.raises(ExternalServiceError, match="Chuck Norris API error: Not Found"):
            await client.get_joke_by_category("unknown")

    @pytest.mark.asyncio
    async def test_missing_value_raises(self, client, upstream):
        upstream.add("chuck.test", "/jokes/random", json_response({"icon_url": "icon.png"}))

        with pytest.raises(ExternalServiceError, match="Invalid Chuck Norris API response"):
            await client.get_random_joke()


class TestDadJokeClient:
    """Test cases for DadJokeClient."""

    @pytest.mark.asyncio
    async def test_requests_json(self, upstream):
        upstream.add("dad.test", "/", json_response({"id": "1", "joke": "dad joke", "status": 200}))
        client = DadJokeClient("https://dad.test", transport=upstream.transport())

        assert await client.get_random_joke() == "dad joke"
        assert upstream.requests[0].headers["accept"] == "application/json"


class TestLingvaClient:
    """Test cases for LingvaClient."""

    @pytest.fixture
    def client(self, upstream):
        return LingvaClient("https://lingva.test", transport=upstream.transport())

    @pytest.mark.asyncio
    async def test_translate_encodes_text_in_path(self, client, upstream):
        upstream.add("lingva.test", "/api/v1/en/es/good morning/friend", json_response({"translation": "buenos dias"}))

        assert await client.translate("good morning/friend", "en", "es") == "buenos dias"
        assert upstream.requests[0].url.raw_path == b"/api/v1/en/es/good%20morning%2Ffriend"

    @pytest.mark.asyncio
    async def test_error_status_raises(self, client, upstream):
        upstream.add("lingva.test", "/api/v1/en/es/hi", httpx.Response(500))

        with pytest.raises(ExternalServiceError, match="Lingva API error: Internal Server Error"):
            await client.translate("hi", "en", "es")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        def _fail(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = LingvaClient("https://lingva.test", transport=httpx.MockTransport(_fail))

        with pytest.raises(ExternalServiceError, match="Lingva API error: connection refused"):
            await client.translate("hi", "en", "es")


class TestMyMemoryClient:
    """Test cases for MyMemoryClient."""

    @pytest.fixture
    def client(self, upstream):
        return MyMemoryClient("https://mymemory.test", transport=upstream.transport())

    @pytest.mark.asyncio
    async def test_translate(self, client, upstream):
        upstream.add("mymemory.test", "/get", json_response({"responseData": {"translatedText": "bonjour", "match": 1}}))

        result = await client.translate("hello", "en", "fr")

        assert result == {"translatedText": "bonjour", "match": 1}
        params = upstream.requests[0].url.params
        assert params["q"] == "hello"
        assert params["langpair"] == "en|fr"

    @pytest.mark.asyncio
    async def test_missing_match_defaults_to_zero(self, client, upstream):
        upstream.add("mymemory.test", "/get", json_response({"responseData": {"translatedText": "bonjour"}}))

        assert (await client.translate("hello", "en", "fr"))["match"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("payload", [{}, {"responseData": None}, {"responseData": {"translatedText": ""}}])
    async def test_invalid_payload_raises(self, client, upstream, payload):
        upstream.add("mymemory.test", "/get", json_response(payload))

        with pytest.raises(ExternalServiceError, match="Invalid translation response"):
            await client.translate("hello", "en", "fr")

    @pytest.mark.asyncio
    async def test_non_json_body_raises(self, client, upstream):
        upstream.add("mymemory.test", "/get", httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ExternalServiceError, match="Invalid MyMemory API response"):
            await client.translate("hello", "en", "fr")
