"""Middleware for the routing preview app."""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
