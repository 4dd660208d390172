"""Segment-by-segment matching of one template against one url.

Two-pointer scan over template segments and url parts. Plain parameters
bind exactly one part; a wildcard parameter greedily binds every part up to
the next literal of the template (or the end of the url), joined with ``/``.
"""

from collections.abc import Sequence

from routable._internal.types import Params
from routable.routing.route import Segment, SegmentKind, check_wildcards


def match_segments(
    segments: Sequence[Segment],
    parts: Sequence[str],
    allow_wildcard: bool,
    *,
    pattern: str = "",
) -> Params | None:
    """Match url *parts* against template *segments*.

    Returns the bound parameters, or ``None`` if the template does not
    match. Without *allow_wildcard* the arity must be equal and wildcard
    segments behave like plain parameters. With it, url parts left over
    after the last template segment are tolerated.

    Raises ``InvalidTemplate`` (in wildcard mode) when a wildcard parameter
    is directly followed by another parameter.

    Examples::

        [users, :id]                 vs  users/42          -> {"id": "42"}
        [files, :path:, download]    vs  files/a/b/download -> {"path": "a/b"}
        [any, :rest:]                vs  any/x/y/z         -> {"rest": "x/y/z"}
    """
    if not allow_wildcard:
        if len(segments) != len(parts):
            return None
    else:
        check_wildcards(segments, pattern)

    params: Params = {}
    seg_index = 0
    part_index = 0

    while seg_index < len(segments) and part_index < len(parts):
        seg = segments[seg_index]
        part = parts[part_index]

        if seg.kind is SegmentKind.LITERAL:
            if seg.value != part:
                return None
            part_index += 1

        elif seg.kind is SegmentKind.WILDCARD and allow_wildcard:
            following = segments[seg_index + 1] if seg_index + 1 < len(segments) else None
            stop = following.value if following is not None else None
            consumed: list[str] = []
            for candidate in parts[part_index:]:
                if candidate == stop:
                    break
                consumed.append(candidate)
            params[seg.value] = "/".join(consumed)
            part_index += len(consumed)

        else:
            params[seg.value] = part
            part_index += 1

        seg_index += 1

    if seg_index < len(segments):
        return None
    return params
