"""Shared type aliases used across routable modules."""

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeAlias

if TYPE_CHECKING:
    from routable.routing.route import RouteContext

# Resolve callback — receives the RouteContext and returns an application result
ResolveCallback: TypeAlias = Callable[["RouteContext"], Any]

# Parameter name -> bound value, as extracted from a url
Params: TypeAlias = dict[str, str]
