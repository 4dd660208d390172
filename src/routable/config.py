"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = RouterConfig(strict=True, root_url="home")
    """

    # Memoize path bindings per normalized url
    cache: bool = True

    # Validate templates when they are mapped instead of when first matched
    strict: bool = False

    # The url an application opens first (see Router.resolve_root)
    root_url: str | None = None

    # Merge ``?key=value`` pairs from the url into the resolved params
    query_params: bool = True
