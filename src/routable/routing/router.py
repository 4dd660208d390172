"""Router — template registry, two-pass matching, and memoized resolution.

Templates are registered at startup (or later; every registration clears
the cache). Resolution normalizes the url, reuses a memoized match when one
exists, otherwise tries exact templates before wildcard templates, then
merges query, route default, and global parameters before handing a
``RouteContext`` to the route's callback.
"""

import inspect
import logging
from collections.abc import Callable
from dataclasses import replace
from types import MappingProxyType
from typing import Any

from routable._internal.types import ResolveCallback
from routable.config import RouterConfig
from routable.errors import ConfigurationError, RouteNotFound
from routable.routing.cache import ResultCache
from routable.routing.matcher import match_segments
from routable.routing.normalize import normalize, query_params, split_path, split_query
from routable.routing.registry import RouteRegistry
from routable.routing.route import RouteContext, RouteMatch, RouteOptions, parse_template

logger = logging.getLogger("routable.routing")


class Router:
    """Url router with wildcard parameters and a result cache.

    Usage::

        router = Router()
        router.map("users/:id", lambda ctx: UserScreen(ctx.params["id"]))
        router.map("files/:path:/download", download)
        router.set_global_param("lang", "en")

        screen = router.resolve("https://example.com/users/42?tab=photos")
    """

    __slots__ = ("_cache", "_config", "_global_params", "_host", "_registry", "_root_url")

    def __init__(self, config: RouterConfig | None = None, *, host: Any = None) -> None:
        self._config = config or RouterConfig()
        self._registry = RouteRegistry()
        self._cache = ResultCache()
        self._global_params: dict[str, Any] = {}
        self._host = host
        self._root_url = self._config.root_url

    # -- Registration --

    def map(
        self,
        pattern: str,
        options: RouteOptions | ResolveCallback | None = None,
        *,
        defaults: dict[str, str] | None = None,
    ) -> "Router":
        """Map a template to a callback or ``RouteOptions``.

        *pattern* is e.g. ``"users/:id"``, ``"groups/:id/topics/:topic_id"``
        or ``"files/:path:/download"``. Mapping an identical template again
        replaces its options. Returns the router for chaining.

        Raises ``InvalidTemplate`` right away when the router is strict.
        """
        if options is None:
            options = RouteOptions()
        elif not isinstance(options, RouteOptions):
            options = RouteOptions(callback=options)
        if defaults:
            options = replace(options, default_params={**options.default_params, **defaults})

        template = parse_template(pattern)
        if self._config.strict:
            template.validate()

        self._registry.add(template, options)
        # A new template may match urls already memoized for another one
        self._cache.clear()
        logger.debug("Mapped %r (wildcard=%s)", template.pattern, template.has_wildcard)
        return self

    def route(
        self, pattern: str, *, defaults: dict[str, str] | None = None
    ) -> Callable[[ResolveCallback], ResolveCallback]:
        """Decorator form of ``map``::

        @router.route("users/:id")
        def user(ctx):
            return UserScreen(ctx.params["id"])
        """

        def decorator(callback: ResolveCallback) -> ResolveCallback:
            self.map(pattern, callback, defaults=defaults)
            return callback

        return decorator

    @property
    def routes(self) -> list[tuple[str, RouteOptions]]:
        """Every (template, options) pair in resolution order."""
        return [(template.pattern, options) for template, options in self._registry.routes]

    def check(self) -> None:
        """Validate every registered template.

        Raises ``InvalidTemplate`` for the first malformed one, so a bad
        template surfaces at startup instead of on first use.
        """
        for template, _ in self._registry.routes:
            template.validate()

    # -- Host, root url, global params --

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def host(self) -> Any:
        """Host context handed to callbacks when ``resolve`` gets none."""
        return self._host

    @host.setter
    def host(self, host: Any) -> None:
        self._host = host

    @property
    def root_url(self) -> str | None:
        return self._root_url

    @root_url.setter
    def root_url(self, url: str | None) -> None:
        self._root_url = url

    @property
    def global_params(self) -> dict[str, Any]:
        """A copy of the parameters applied to every resolution."""
        return dict(self._global_params)

    def set_global_param(self, key: str, value: Any) -> "Router":
        """Set a parameter every resolution gets unless the url binds it."""
        self._global_params[key] = value
        return self

    def clear_cache(self) -> None:
        """Forget every memoized match."""
        self._cache.clear()

    # -- Matching --

    def match(self, url: str) -> RouteMatch:
        """Match *url* against the registered templates.

        Returns a ``RouteMatch`` holding the path-derived params only.
        Raises ``RouteNotFound`` if no template matches.
        Raises ``InvalidTemplate`` if a malformed wildcard template is tried.
        """
        key = normalize(url)

        if self._config.cache:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Cache hit for %r -> %r", key, cached.template.pattern)
                return cached

        parts = split_path(key)
        # Exact templates first so a generic wildcard cannot shadow them
        found = self._match_bucket(parts, wildcard=False)
        if found is None:
            found = self._match_bucket(parts, wildcard=True)

        if found is None:
            logger.debug("No route for %r", url)
            raise RouteNotFound(url)

        logger.debug("Matched %r -> %r %r", key, found.template.pattern, found.params)
        if self._config.cache:
            self._cache.put(key, found)
        return found

    def find(self, url: str) -> RouteMatch | None:
        """Like ``match`` but returns ``None`` when nothing matches."""
        try:
            return self.match(url)
        except RouteNotFound:
            return None

    def _match_bucket(self, parts: list[str], wildcard: bool) -> RouteMatch | None:
        for template, options in self._registry.entries(wildcard):
            params = match_segments(
                template.segments, parts, wildcard, pattern=template.pattern
            )
            if params is not None:
                # Read-only: the match is shared through the cache
                return RouteMatch(
                    template=template, options=options, params=MappingProxyType(params)
                )
        return None

    # -- Resolution --

    def params_for(self, url: str) -> dict[str, Any]:
        """Return the final parameters for *url*.

        Path bindings first, query values on top of them, then route
        defaults and global params for names still unbound.
        """
        return self._merge_params(self.match(url), url)

    def _merge_params(self, found: RouteMatch, url: str) -> dict[str, Any]:
        params: dict[str, Any] = dict(found.params)

        if self._config.query_params:
            params.update(query_params(split_query(url)))

        for name, value in found.options.default_params.items():
            params.setdefault(name, value)
        for name, value in dict(self._global_params).items():
            params.setdefault(name, value)
        return params

    def _context_for(self, found: RouteMatch, url: str, extra: Any, host: Any) -> RouteContext:
        return RouteContext(
            params=self._merge_params(found, url),
            extra=extra,
            host=self._host if host is None else host,
            url=url,
            template=found.template.pattern,
        )

    def resolve(self, url: str, extra: Any = None, host: Any = None) -> Any:
        """Resolve *url* and return whatever the route's callback returns.

        Returns ``None`` for routes mapped without a callback.
        Raises ``RouteNotFound`` if no template matches.
        """
        found = self.match(url)
        callback = found.options.callback
        if callback is None:
            logger.debug("Route %r has no callback", found.template.pattern)
            return None
        return callback(self._context_for(found, url, extra, host))

    async def resolve_async(self, url: str, extra: Any = None, host: Any = None) -> Any:
        """Like ``resolve``, for callbacks that may be ``async def``.

        A coroutine (or any awaitable) returned by the callback is awaited;
        a plain return value is passed through.
        """
        found = self.match(url)
        callback = found.options.callback
        if callback is None:
            logger.debug("Route %r has no callback", found.template.pattern)
            return None
        result = callback(self._context_for(found, url, extra, host))
        if inspect.isawaitable(result):
            result = await result
        return result

    def resolve_root(self, extra: Any = None, host: Any = None) -> Any:
        """Resolve the configured root url.

        Raises ``ConfigurationError`` if no root url is set.
        """
        if self._root_url is None:
            msg = "No root url configured. Set Router.root_url or RouterConfig.root_url."
            raise ConfigurationError(msg)
        return self.resolve(self._root_url, extra, host)
