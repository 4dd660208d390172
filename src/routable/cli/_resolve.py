"""Locate the Router a ``routable`` sub-command operates on.

The target is ``"<source>[:<name>]"`` where *source* is either a dotted
module (``myapp.urls``) or a path to a python file (``conf/urls.py``).
*name* defaults to ``router``.
"""

import importlib
import importlib.util
from pathlib import Path
from types import ModuleType

from routable.routing.router import Router

DEFAULT_NAME = "router"

# Everything resolve_router raises for a bad target
LOAD_ERRORS = (ImportError, AttributeError, TypeError, FileNotFoundError)


def _load_file(path: Path) -> ModuleType:
    if not path.is_file():
        msg = f"No router file at {path}"
        raise FileNotFoundError(msg)
    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        msg = f"Cannot load {path} as a python module"
        raise ImportError(msg)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _load_source(source: str) -> ModuleType:
    if source.endswith(".py") or "/" in source:
        return _load_file(Path(source))
    return importlib.import_module(source)


def resolve_router(target: str) -> Router:
    """Return the Router named by *target*.

    A plain function found under *name* is treated as a builder and called
    with no arguments; whatever it returns must be a Router.

    Raises ``ModuleNotFoundError`` / ``FileNotFoundError`` for a missing
    source, ``AttributeError`` for a missing name and ``TypeError`` when
    nothing Router-shaped comes out.
    """
    source, sep, name = target.rpartition(":")
    if not sep or not name or "/" in name or name.endswith(".py"):
        source, name = target, DEFAULT_NAME

    found = getattr(_load_source(source), name)
    if isinstance(found, Router):
        return found
    if not callable(found):
        msg = f"{target!r} names a {type(found).__name__}, expected a Router"
        raise TypeError(msg)

    try:
        built = found()
    except Exception as exc:
        msg = f"Building a router via {target!r} failed: {exc}"
        raise TypeError(msg) from exc
    if not isinstance(built, Router):
        msg = f"{target!r} returned a {type(built).__name__}, expected a Router"
        raise TypeError(msg)
    return built
