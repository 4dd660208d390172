"""Template, Segment, RouteOptions, RouteContext and RouteMatch dataclasses."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from routable._internal.types import ResolveCallback
from routable.errors import InvalidTemplate
from routable.routing.normalize import normalize, split_path

PARAM_MARKER = ":"


class SegmentKind(Enum):
    LITERAL = "literal"
    PARAM = "param"
    WILDCARD = "wildcard"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route template.

    Literal:   ``users``    (kind=LITERAL, value="users")
    Param:     ``:id``      (kind=PARAM, value="id")
    Wildcard:  ``:path:``   (kind=WILDCARD, value="path")
    """

    raw: str
    kind: SegmentKind = SegmentKind.LITERAL
    value: str = ""

    @property
    def is_param(self) -> bool:
        """True for both plain and wildcard parameters."""
        return self.kind is not SegmentKind.LITERAL

    @classmethod
    def parse(cls, raw: str) -> "Segment":
        if not raw.startswith(PARAM_MARKER):
            return cls(raw=raw, kind=SegmentKind.LITERAL, value=raw)
        name = raw[len(PARAM_MARKER) :]
        if name.endswith(PARAM_MARKER):
            return cls(raw=raw, kind=SegmentKind.WILDCARD, value=name[: -len(PARAM_MARKER)])
        return cls(raw=raw, kind=SegmentKind.PARAM, value=name)


@dataclass(frozen=True, slots=True)
class Template:
    """A registered route pattern, parsed once at registration.

    ``pattern`` is the normalized form; two patterns that normalize to the
    same string are the same template.
    """

    pattern: str
    segments: tuple[Segment, ...]

    @property
    def has_wildcard(self) -> bool:
        return any(seg.kind is SegmentKind.WILDCARD for seg in self.segments)

    def validate(self) -> None:
        """Raise ``InvalidTemplate`` if a wildcard is followed by a parameter."""
        check_wildcards(self.segments, self.pattern)


def check_wildcards(segments: Sequence[Segment], pattern: str) -> None:
    """Raise ``InvalidTemplate`` if a wildcard is followed by a parameter.

    ``"files/:path:/:name"`` can never be matched: there is no literal
    to tell where ``path`` stops and ``name`` starts.
    """
    for current, following in zip(segments, segments[1:]):
        if current.kind is SegmentKind.WILDCARD and following.is_param:
            msg = (
                f"wildcard parameter {current.raw} cannot be directly "
                f"followed by a parameter {following.raw}"
            )
            raise InvalidTemplate(pattern, msg)


def parse_template(pattern: str) -> Template:
    """Parse a route template string into a ``Template``.

    Examples::

        "users/:id"              -> [Literal users, Param id]
        "/groups/:id/topics/"    -> [Literal groups, Param id, Literal topics]
        "files/:path:/download"  -> [Literal files, Wildcard path, Literal download]
        ""                       -> []  (the root route)
    """
    normalized = normalize(pattern)
    segments = tuple(Segment.parse(part) for part in split_path(normalized))
    return Template(pattern=normalized, segments=segments)


@dataclass(frozen=True, slots=True)
class RouteOptions:
    """What to do when a template matches.

    ``callback`` builds the application result from a ``RouteContext``.
    A route without a callback is informational: it matches, but resolving
    it yields ``None``. ``default_params`` fill in names the url leaves
    unbound.
    """

    callback: ResolveCallback | None = None
    default_params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RouteContext:
    """Everything a callback gets to build its result."""

    params: dict[str, Any]
    extra: Any
    host: Any
    url: str
    template: str = ""


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful match: the cached unit.

    ``params`` holds the path-derived bindings only, never query values.
    """

    template: Template
    options: RouteOptions
    params: Mapping[str, str]
