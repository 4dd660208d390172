"""Path normalization shared by templates and incoming urls.

Absolute urls and bare paths normalize to the same key, so
``"https://example.com/users/42/"`` and ``"/users/42"`` resolve identically
and share one cache entry.
"""

import re
from urllib.parse import parse_qs, unquote

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")
_AUTHORITY_END = re.compile(r"[/?#]")


def _strip_authority(text: str) -> str:
    prefix = _SCHEME_PREFIX.match(text)
    if prefix is None:
        return text
    rest = text[prefix.end() :]
    end = _AUTHORITY_END.search(rest)
    return rest[end.start() :] if end else ""


def normalize(raw: str) -> str:
    """Return the matching and caching key for *raw*.

    Examples::

        "users/42"                       -> "users/42"
        "/users/42/"                     -> "users/42"
        "https://example.com/users/42"   -> "users/42"
        "users/42?tab=photos#top"        -> "users/42"
        "  /  "                          -> ""

    The empty string is a valid key: it is the root route.
    """
    text = raw.strip()
    if not text:
        return ""
    text = _strip_authority(text)
    text = text.split("#", 1)[0].split("?", 1)[0]
    return unquote(text).strip("/")


def split_path(normalized: str) -> list[str]:
    """Split a normalized path into segments. ``""`` has no segments."""
    if not normalized:
        return []
    return normalized.split("/")


def split_query(raw: str) -> str:
    """Return the raw query string of *raw* (without ``?`` and fragment)."""
    _, _, query = raw.strip().split("#", 1)[0].partition("?")
    return query


def query_params(query: str) -> dict[str, str]:
    """Parse a raw query string. A repeated key keeps its first value.

    Blank values are kept: ``"flag="`` -> ``{"flag": ""}``.
    """
    parsed = parse_qs(query, keep_blank_values=True)
    return {name: values[0] for name, values in parsed.items()}
