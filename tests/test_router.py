"""Tests for routable.routing.router — registration, matching, caching, resolution."""

from typing import Any

import pytest

from routable.config import RouterConfig
from routable.errors import ConfigurationError, InvalidTemplate, RouteNotFound
from routable.routing.route import RouteContext, RouteOptions
from routable.routing.router import Router


def _params(ctx: RouteContext) -> dict[str, Any]:
    return ctx.params


def _context(ctx: RouteContext) -> RouteContext:
    return ctx


class TestRouterMatching:
    def test_single_param(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.resolve("users/42") == {"id": "42"}

    def test_multiple_params(self) -> None:
        r = Router()
        r.map("groups/:id/topics/:topic_id", _params)

        assert r.resolve("groups/5/topics/20") == {"id": "5", "topic_id": "20"}

    def test_absolute_url(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.resolve("https://example.com/users/42/") == {"id": "42"}

    def test_root_route(self) -> None:
        r = Router()
        r.map("", lambda ctx: "home")
        r.map("users", lambda ctx: "users")

        assert r.resolve("") == "home"
        assert r.resolve("/") == "home"
        assert r.resolve("users") == "users"

    def test_first_registered_wins(self) -> None:
        r = Router()
        r.map("users/:id", lambda ctx: "by-id")
        r.map("users/:name", lambda ctx: "by-name")

        assert r.resolve("users/42") == "by-id"

    def test_exact_beats_wildcard(self) -> None:
        r = Router()
        r.map("a/:x:", lambda ctx: "wildcard")
        r.map("a/:x", lambda ctx: "exact")

        assert r.resolve("a/1") == "exact"
        assert r.resolve("a/1/2") == "wildcard"

    def test_wildcard_greedy_capture(self) -> None:
        r = Router()
        r.map("files/:path:/download", _params)

        assert r.resolve("files/a/b/c/download") == {"path": "a/b/c"}

    def test_wildcard_at_end(self) -> None:
        r = Router()
        r.map("any/:rest:", _params)

        assert r.resolve("any/x/y/z") == {"rest": "x/y/z"}

    def test_match_returns_path_params_only(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        found = r.match("users/1?x=5")
        assert found.template.pattern == "users/:id"
        assert dict(found.params) == {"id": "1"}


class TestRouterNotFound:
    def test_raises(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        with pytest.raises(RouteNotFound) as exc_info:
            r.resolve("posts/1")
        assert exc_info.value.url == "posts/1"
        assert "posts/1" in str(exc_info.value)

    def test_empty_router(self) -> None:
        with pytest.raises(RouteNotFound):
            Router().resolve("anything")

    def test_find_returns_none(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.find("posts/1") is None
        assert r.find("users/1") is not None

    def test_failure_not_cached(self) -> None:
        r = Router()
        with pytest.raises(RouteNotFound):
            r.match("users/1")
        assert r._cache.get("users/1") is None

        r.map("users/:id", _params)
        assert r.resolve("users/1") == {"id": "1"}


class TestRouterInvalidTemplate:
    def test_raised_at_match_time(self) -> None:
        r = Router()
        r.map("a/:w:/:bad", _params)

        with pytest.raises(InvalidTemplate):
            r.resolve("a/x/y")

    def test_raised_for_any_input(self) -> None:
        r = Router()
        r.map("a/:w:/:bad", _params)

        with pytest.raises(InvalidTemplate):
            r.resolve("completely/different")

    def test_exact_routes_unaffected(self) -> None:
        r = Router()
        r.map("a/:w:/:bad", _params)
        r.map("users/:id", _params)

        assert r.resolve("users/1") == {"id": "1"}

    def test_earlier_wildcard_unaffected(self) -> None:
        r = Router()
        r.map("files/:path:", _params)
        r.map("a/:w:/:bad", _params)

        assert r.resolve("files/a/b") == {"path": "a/b"}

    def test_strict_raises_on_map(self) -> None:
        r = Router(RouterConfig(strict=True))

        with pytest.raises(InvalidTemplate):
            r.map("a/:w:/:bad", _params)
        assert r.routes == []

    def test_check(self) -> None:
        r = Router()
        r.map("users/:id", _params)
        r.check()

        r.map("a/:w:/:bad", _params)
        with pytest.raises(InvalidTemplate, match="a/:w:/:bad"):
            r.check()


class TestRouterCache:
    def test_idempotent(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        first = r.resolve("users/42")
        second = r.resolve("users/42")
        assert first == second == {"id": "42"}
        assert r._cache.get("users/42") is not None

    def test_absolute_and_bare_share_entry(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        r.resolve("https://example.com/users/42")
        cached = r._cache.get("users/42")
        r.resolve("/users/42/")
        assert cached is not None
        assert r.match("/users/42/") is cached

    def test_clear_cache_same_result(self) -> None:
        r = Router()
        r.map("files/:path:/download", _params)

        before = r.resolve("files/a/b/download?x=1")
        r.clear_cache()
        assert r._cache.get("files/a/b/download") is None
        assert r.resolve("files/a/b/download?x=1") == before

    def test_cache_disabled(self) -> None:
        r = Router(RouterConfig(cache=False))
        r.map("users/:id", _params)

        assert r.resolve("users/1") == {"id": "1"}
        assert r.resolve("users/1") == {"id": "1"}
        assert r._cache.get("users/1") is None

    def test_map_clears_cache(self) -> None:
        r = Router()
        r.map("a/:x:", lambda ctx: "wildcard")
        assert r.resolve("a/1") == "wildcard"

        r.map("a/:x", lambda ctx: "exact")
        assert r.resolve("a/1") == "exact"

    def test_callback_mutation_does_not_leak(self) -> None:
        def mutate(ctx: RouteContext) -> dict[str, Any]:
            ctx.params["id"] = "tampered"
            return ctx.params

        r = Router()
        r.map("users/:id", mutate)
        r.resolve("users/1")

        assert dict(r.match("users/1").params) == {"id": "1"}

    def test_cached_match_params_are_read_only(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        with pytest.raises(TypeError):
            r.match("users/42").params["id"] = "x"  # type: ignore[index]
        with pytest.raises(TypeError):
            r.find("users/42").params["id"] = "x"  # type: ignore[index, union-attr]

        assert r.resolve("users/42") == {"id": "42"}
        assert r.match("users/42").params == {"id": "42"}


class TestRouterQueryParams:
    def test_merged(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.resolve("users/1?x=5&y=6") == {"id": "1", "x": "5", "y": "6"}

    def test_per_call_not_cached(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.resolve("users/1?x=5") == {"id": "1", "x": "5"}
        assert r.resolve("users/1?x=9") == {"id": "1", "x": "9"}
        assert r.resolve("users/1") == {"id": "1"}
        assert r._cache.get("users/1").params == {"id": "1"}  # type: ignore[union-attr]

    def test_query_overrides_path_binding(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert r.resolve("users/1?id=2") == {"id": "2"}

    def test_disabled(self) -> None:
        r = Router(RouterConfig(query_params=False))
        r.map("users/:id", _params)

        assert r.resolve("users/1?x=5") == {"id": "1"}


class TestRouterGlobalParams:
    def test_global_added(self) -> None:
        r = Router()
        r.map("users/:id", _params)
        r.set_global_param("lang", "en")

        assert r.resolve("users/1") == {"id": "1", "lang": "en"}

    def test_local_binding_wins(self) -> None:
        r = Router()
        r.map("settings/:lang", _params)
        r.set_global_param("lang", "en")

        assert r.resolve("settings/de") == {"lang": "de"}

    def test_query_wins(self) -> None:
        r = Router()
        r.map("users/:id", _params)
        r.set_global_param("lang", "en")

        assert r.resolve("users/1?lang=fr") == {"id": "1", "lang": "fr"}

    def test_chainable(self) -> None:
        r = Router()
        assert r.set_global_param("a", 1).set_global_param("b", 2) is r
        assert r.global_params == {"a": 1, "b": 2}

    def test_applies_after_cache(self) -> None:
        r = Router()
        r.map("users/:id", _params)
        r.resolve("users/1")

        r.set_global_param("lang", "en")
        assert r.resolve("users/1") == {"id": "1", "lang": "en"}

    def test_non_string_values(self) -> None:
        session = object()
        r = Router()
        r.map("users/:id", _params)
        r.set_global_param("session", session)

        assert r.resolve("users/1")["session"] is session

    def test_global_params_is_a_copy(self) -> None:
        r = Router()
        r.global_params["x"] = 1
        assert r.global_params == {}


class TestRouterDefaults:
    def test_route_defaults_fill_gaps(self) -> None:
        r = Router()
        r.map("users/:id", _params, defaults={"tab": "info"})

        assert r.resolve("users/1") == {"id": "1", "tab": "info"}
        assert r.resolve("users/1?tab=photos") == {"id": "1", "tab": "photos"}

    def test_route_defaults_beat_globals(self) -> None:
        r = Router()
        r.map("users/:id", RouteOptions(callback=_params, default_params={"lang": "de"}))
        r.set_global_param("lang", "en")

        assert r.resolve("users/1") == {"id": "1", "lang": "de"}

    def test_params_for(self) -> None:
        r = Router()
        r.map("users/:id", None, defaults={"tab": "info"})
        r.set_global_param("lang", "en")

        assert r.params_for("users/1?x=5") == {"id": "1", "x": "5", "tab": "info", "lang": "en"}


class TestRouterContext:
    def test_context_fields(self) -> None:
        r = Router()
        r.map("users/:id", _context)
        extra = {"animate": True}
        host = object()

        ctx = r.resolve("/users/1?x=2", extra, host)
        assert ctx.params == {"id": "1", "x": "2"}
        assert ctx.extra is extra
        assert ctx.host is host
        assert ctx.url == "/users/1?x=2"
        assert ctx.template == "users/:id"

    def test_default_host(self) -> None:
        host = object()
        r = Router(host=host)
        r.map("users/:id", _context)

        assert r.resolve("users/1").host is host

    def test_host_setter(self) -> None:
        r = Router()
        r.map("users/:id", _context)
        r.host = "activity"

        assert r.resolve("users/1").host == "activity"
        assert r.resolve("users/1", host="other").host == "other"

    def test_missing_callback_returns_none(self) -> None:
        r = Router()
        r.map("about")

        assert r.resolve("about") is None

    def test_route_decorator(self) -> None:
        r = Router()

        @r.route("users/:id", defaults={"tab": "info"})
        def user(ctx: RouteContext) -> str:
            return f"{ctx.params['id']}:{ctx.params['tab']}"

        assert r.resolve("users/7") == "7:info"
        assert user(RouteContext(params={"id": "1", "tab": "x"}, extra=None, host=None, url="")) == "1:x"

    def test_map_chainable(self) -> None:
        r = Router()
        assert r.map("a", _params).map("b", _params) is r
        assert [p for p, _ in r.routes] == ["a", "b"]


class TestRouterRootUrl:
    def test_unset(self) -> None:
        r = Router()
        assert r.root_url is None
        with pytest.raises(ConfigurationError):
            r.resolve_root()

    def test_from_config(self) -> None:
        r = Router(RouterConfig(root_url="home"))
        r.map("home", lambda ctx: "home screen")

        assert r.root_url == "home"
        assert r.resolve_root() == "home screen"

    def test_setter(self) -> None:
        r = Router()
        r.map("users/:id", _params)
        r.root_url = "users/me"

        assert r.resolve_root() == {"id": "me"}


class TestRouterAsync:
    @pytest.mark.anyio
    async def test_async_callback(self) -> None:
        async def load(ctx: RouteContext) -> str:
            return f"user {ctx.params['id']}"

        r = Router()
        r.map("users/:id", load)

        assert await r.resolve_async("users/42") == "user 42"

    @pytest.mark.anyio
    async def test_sync_callback(self) -> None:
        r = Router()
        r.map("users/:id", _params)

        assert await r.resolve_async("users/42") == {"id": "42"}

    @pytest.mark.anyio
    async def test_missing_callback(self) -> None:
        r = Router()
        r.map("about")

        assert await r.resolve_async("about") is None

    @pytest.mark.anyio
    async def test_not_found(self) -> None:
        with pytest.raises(RouteNotFound):
            await Router().resolve_async("nope")
