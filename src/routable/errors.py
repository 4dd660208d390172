"""Routable exception hierarchy.

Shared across the matcher, registry, router, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class RoutableError(Exception):
    """Base for all routable-specific errors."""


class ConfigurationError(RoutableError):
    """Raised when router configuration is invalid.

    Typically surfaced at startup by ``Router.check()`` or ``routable check``.
    """


class InvalidTemplate(ConfigurationError):  # noqa: N818
    """A route template that can never be matched unambiguously.

    Raised when a wildcard parameter is directly followed by another
    parameter (``"a/:rest:/:id"``): nothing marks where the wildcard stops.
    Only the offending template is affected; other templates keep matching.
    """

    def __init__(self, template: str, detail: str) -> None:
        self.template = template
        self.detail = detail
        super().__init__(f"Invalid route template {template!r}: {detail}")


@dataclass(frozen=True, slots=True)
class RouteNotFound(RoutableError):  # noqa: N818
    """No registered template matches the url.

    Carries the url exactly as it was handed to the router.
    """

    url: str

    def __str__(self) -> str:
        return f"No route found for url {self.url}"
