"""SAIH rainfall package.

Subpackages:
- services: Fetching, parsing, decoding and caching of gauge readings.
- schemas: Pydantic response models.
- api: FastAPI application and routes.
- tests: Unit tests for the package.
"""

__all__ = [
    "services",
    "schemas",
    "api",
]
