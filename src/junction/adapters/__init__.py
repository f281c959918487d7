"""Adapters — bind a route table to a concrete request/response shape.

    ASGIRouter -- ``(Request, ResponseWriter, next)`` over ASGI
    FetchRouter -- ``(Request, ctx, next)`` returning ``Response`` values
"""

from junction.adapters.asgi import ASGIRouter, create_router
from junction.adapters.base import BaseRouter
from junction.adapters.fetch import FetchRouter, create_fetch_router

__all__ = [
    "ASGIRouter",
    "BaseRouter",
    "FetchRouter",
    "create_fetch_router",
    "create_router",
]
