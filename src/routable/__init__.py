"""Routable — resolve urls against path templates with wildcard parameters.

Map templates to callbacks, then resolve concrete urls into whatever the
callbacks build.

Basic usage::

    from routable import Router

    router = Router()
    router.map("users/:id", lambda ctx: ("user", ctx.params["id"]))
    router.map("files/:path:/download", lambda ctx: ("file", ctx.params["path"]))

    router.resolve("users/42")                   # ("user", "42")
    router.resolve("files/a/b/c/download")       # ("file", "a/b/c")
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "InvalidTemplate",
    "RoutableError",
    "RouteContext",
    "RouteMatch",
    "RouteNotFound",
    "RouteOptions",
    "Router",
    "RouterConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routable`` fast while providing a clean top-level API.
    """
    if name == "Router":
        from routable.routing.router import Router

        return Router

    if name == "RouterConfig":
        from routable.config import RouterConfig

        return RouterConfig

    if name in ("RouteContext", "RouteMatch", "RouteOptions"):
        from routable.routing import route as _route

        return getattr(_route, name)

    if name in ("ConfigurationError", "InvalidTemplate", "RoutableError", "RouteNotFound"):
        from routable import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
