"""
Infrastructure layer - External adapters for the definition guard.

This layer contains:
- CUE CLI adapters and the shared compiler provider
- In-memory stubs for development and testing
- Observability (structlog configuration, correlation ids)

IMPORT RULES:
- CAN import from: domain, application, config
- Implements ports defined in application layer
"""
