"""Route registry — two insertion-ordered buckets of templates.

Templates without wildcard parameters live in one bucket, templates with
at least one wildcard in the other. The router always tries the first
bucket before the second, so a generic wildcard route never shadows an
exact one. Within a bucket the first registered template wins.
"""

from routable.routing.route import RouteOptions, Template


class RouteRegistry:
    """Ordered (template, options) storage.

    Usage::

        registry = RouteRegistry()
        registry.add(parse_template("users/:id"), RouteOptions(callback=show_user))
        for template, options in registry.entries(wildcard=False):
            ...
    """

    __slots__ = ("_routes", "_wildcard_routes")

    def __init__(self) -> None:
        self._routes: dict[str, tuple[Template, RouteOptions]] = {}
        self._wildcard_routes: dict[str, tuple[Template, RouteOptions]] = {}

    def add(self, template: Template, options: RouteOptions) -> None:
        """Register *template*. An identical pattern is overwritten in place."""
        bucket = self._wildcard_routes if template.has_wildcard else self._routes
        bucket[template.pattern] = (template, options)

    def entries(self, wildcard: bool) -> list[tuple[Template, RouteOptions]]:
        """Return one bucket in registration order."""
        bucket = self._wildcard_routes if wildcard else self._routes
        return list(bucket.values())

    @property
    def routes(self) -> list[tuple[Template, RouteOptions]]:
        """Every entry in resolution order: exact bucket, then wildcard bucket."""
        return self.entries(wildcard=False) + self.entries(wildcard=True)
