"""
Shared utilities for the Actions Gateway.

This package aggregates common building blocks consumed by services:

- config: Service configuration via pydantic-settings
- logging: Structured logging with request correlation
- metrics: Prometheus metrics helpers
- errors: Canonical error types and envelopes
- timestamps: ISO-8601 formatting for response envelopes
- base_service: FastAPI app skeleton (middleware, health, metrics, error handlers)

Any cross-service logic should live here to avoid import cycles across
service packages. Do not import from service_* packages into shared/.
"""
