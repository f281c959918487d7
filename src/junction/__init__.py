"""Junction — a request-dispatch core for Python web services.

Resolves a method and path to an ordered chain of handlers (middleware
plus terminal actions) and runs them onion-style, sync or async alike.

Basic usage::

    from junction import create_router

    async def hello(request, writer, next):
        await writer.end(f"hello {request.params['name']}")

    app = create_router().get("/hello/:name", hello).handler()

The routing core is usable on its own::

    from junction import Router, execute

    found = Router().add("GET", "/users/:id", show_user).find("GET", "/users/7")
    result = await execute(found.handlers, req, res)
"""

__version__ = "0.1.0"
__all__ = [
    "ASGIRouter",
    "ConfigurationError",
    "FetchRouter",
    "FindResult",
    "HTTPError",
    "HandlerOptions",
    "JunctionError",
    "Next",
    "NotFound",
    "Request",
    "Response",
    "Router",
    "callback_wrapper",
    "compile_pattern",
    "create_fetch_router",
    "create_router",
    "execute",
    "timeout",
]

# public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ASGIRouter": "junction.adapters.asgi",
    "ConfigurationError": "junction.errors",
    "FetchRouter": "junction.adapters.fetch",
    "FindResult": "junction.routing.route",
    "HTTPError": "junction.errors",
    "HandlerOptions": "junction.config",
    "JunctionError": "junction.errors",
    "Next": "junction.middleware.protocol",
    "NotFound": "junction.errors",
    "Request": "junction.http.request",
    "Response": "junction.http.response",
    "Router": "junction.routing.router",
    "callback_wrapper": "junction.middleware.callback",
    "compile_pattern": "junction.routing.pattern",
    "create_fetch_router": "junction.adapters.fetch",
    "create_router": "junction.adapters.asgi",
    "execute": "junction.middleware.chain",
    "timeout": "junction.middleware.timeout",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import junction`` fast while providing a clean top-level API.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
