"""API layer - Authentication host middleware"""

from .middleware import TokenAuthMiddleware, build_incoming_request

__all__ = ["TokenAuthMiddleware", "build_incoming_request"]
