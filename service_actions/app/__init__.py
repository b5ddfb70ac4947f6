"""
Actions Gateway service package.

The gateway fronts a fixed set of tools that proxy third-party joke and
translation APIs, enforcing:
- Authentication: a single shared secret in the ``x-api-key`` header
- Caching: an in-process TTL cache for MyMemory translations

Structure:
- app.main: FastAPI app, routes, and middleware wiring.
- app.adapters: HTTP clients for the upstream APIs.
- app.caching: TTL cache.
- app.tools: Tool registry, handlers and dispatcher.
- app.domain: Cross-cutting domain helpers (auth, request models).
"""
