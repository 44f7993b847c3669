"""
Package: utils
Description: Shared helpers for the Events client.

Current utilities:
- logger: Structured logging configuration and helpers
- json_fields: Field extraction from decoded JSON responses
"""

__all__ = []
