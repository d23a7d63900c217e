"""
Shared utilities for the CanCan authorization engine.

This package aggregates the ambient building blocks consumed by the
rules package:

- config: Engine configuration via pydantic-settings
- logging: Structured logging via structlog
- errors: Canonical error types and responses

Keep this package free of imports from cancan.rules to avoid import
cycles.
"""
