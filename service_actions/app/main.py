"""
Actions Gateway service.

Exposes the tool registry over HTTP:

- POST /actions/echo      echo the caller's message with a random joke
- POST /actions/execute   run a registered tool
- GET  /actions/tools     list registered tools
- GET  /health            liveness

Every route is gated by the ``x-api-key`` shared secret.
"""

from typing import Any, Dict, Optional

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError

from shared.base_service import BaseService
from shared.config import ServiceConfig
from shared.errors import AuthenticationError, FAILED_TO_PROCESS, ValidationError
from shared.timestamps import utc_timestamp
from .adapters import ChuckNorrisClient, DadJokeClient, LingvaClient, MyMemoryClient
from .caching import TTLCache
from .domain import ApiKeyAuthenticator, EchoRequest, ExecuteRequest
from .tools import (
    NO_MESSAGE,
    ToolDispatcher,
    ToolHandlers,
    ToolRegistry,
    build_default_registry,
    failure_message,
)


def _describe_validation_error(exc: PydanticValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


class ActionsService(BaseService):
    """Actions Gateway service implementation.

    Collaborators may be injected; anything not supplied is built from the
    service configuration.
    """

    def __init__(
        self,
        config: Optional[ServiceConfig] = None,
        *,
        registry: Optional[ToolRegistry] = None,
        translation_cache: Optional[TTLCache] = None,
        chuck_client: Optional[ChuckNorrisClient] = None,
        dad_joke_client: Optional[DadJokeClient] = None,
        lingva_client: Optional[LingvaClient] = None,
        mymemory_client: Optional[MyMemoryClient] = None,
    ):
        super().__init__(config)
        timeout = self.config.upstream_timeout

        self.chuck_client = chuck_client if chuck_client is not None else ChuckNorrisClient(
            self.config.chuck_norris_url, timeout=timeout
        )
        self.dad_joke_client = dad_joke_client if dad_joke_client is not None else DadJokeClient(
            self.config.dad_joke_url, timeout=timeout
        )
        self.lingva_client = lingva_client if lingva_client is not None else LingvaClient(
            self.config.lingva_url, timeout=timeout
        )
        self.mymemory_client = mymemory_client if mymemory_client is not None else MyMemoryClient(
            self.config.mymemory_url, timeout=timeout
        )
        self.translation_cache = translation_cache if translation_cache is not None else TTLCache(
            self.config.translation_cache_ttl
        )

        self.handlers = ToolHandlers(
            self.chuck_client,
            self.dad_joke_client,
            self.lingva_client,
            self.mymemory_client,
            self.translation_cache,
            metrics=self.metrics,
        )
        self.registry = registry if registry is not None else build_default_registry(self.handlers)
        self.dispatcher = ToolDispatcher(self.registry, metrics=self.metrics)
        self.authenticator = ApiKeyAuthenticator(self.config.api_key)

        @self.app.on_event("startup")
        async def _startup():
            self.logger.info(
                "Server running",
                url=f"http://localhost:{self.config.port}",
                endpoints=[
                    "POST /actions/echo",
                    "POST /actions/execute",
                    "GET /actions/tools",
                    "GET /health",
                ],
                tools=self.registry.names(),
            )

        self._setup_action_routes()

        # Expose service instance via app state for introspection/testing
        self.app.state.actions_service = self

    async def _guard_request(self, request: Request) -> Optional[Response]:
        """Reject requests that do not carry the shared secret."""
        try:
            self.authenticator.authenticate_request(request)
        except AuthenticationError as exc:
            return JSONResponse(status_code=exc.status_code, content=exc.to_response())
        return None

    async def _read_json_body(self, request: Request) -> Dict[str, Any]:
        """Decode the request body; an empty body reads as ``{}``."""
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            body = await request.json()
        except ValueError as exc:
            raise ValidationError("Request body must be valid JSON") from exc
        if not isinstance(body, dict):
            raise ValidationError("Request body must be a JSON object")
        return body

    def _setup_action_routes(self):
        """Set up the /actions routes."""

        @self.app.post("/actions/echo")
        async def echo(request: Request):
            """Echo the caller's message alongside a random Chuck Norris joke."""
            body = await self._read_json_body(request)
            payload = EchoRequest.model_validate(body)

            try:
                joke = await self.chuck_client.get_random_joke()
            except Exception as exc:
                self.logger.error("Echo failed", error=failure_message(exc))
                return JSONResponse(
                    status_code=500,
                    content={"error": FAILED_TO_PROCESS, "details": failure_message(exc)}
                )

            return {
                "originalMessage": payload.message or NO_MESSAGE,
                "chuckJoke": joke["joke"],
                "iconUrl": joke["iconUrl"],
                "timestamp": utc_timestamp(),
            }

        @self.app.post("/actions/execute")
        async def execute(request: Request):
            """Run a registered tool and wrap its result."""
            body = await self._read_json_body(request)
            try:
                payload = ExecuteRequest.model_validate(body)
            except PydanticValidationError as exc:
                raise ValidationError(_describe_validation_error(exc)) from exc

            result = await self.dispatcher.execute(payload.tool, payload.params, payload.message)
            return result.to_dict()

        @self.app.get("/actions/tools")
        async def list_tools():
            """List registered tools."""
            return {"tools": self.registry.list_all()}


def create_app(config: Optional[ServiceConfig] = None, **collaborators):
    """Create FastAPI application."""
    service = ActionsService(config, **collaborators)
    return service.app


def main():
    ActionsService().run()


if __name__ == "__main__":
    main()
