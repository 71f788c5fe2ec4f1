"""Path key rendering, parsing and container shape checks."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, TypeGuard


type Key = int | str

_INDEX_TOKEN = re.compile(r"0|[1-9][0-9]*")


def render_key(key: Key) -> str:
    """Render a container key as it appears inside a path segment."""
    return str(key)


def parse_key(token: str) -> Key:
    """Turn a decoded path token back into a list index or a map name.

    Only canonical decimal integers become indices, so ``"007"`` stays a name.
    """
    if _INDEX_TOKEN.fullmatch(token):
        return int(token)
    return token


def is_container(value: Any) -> TypeGuard[Mapping[Any, Any] | list[Any] | tuple[Any, ...]]:
    """Return True for values that flattening may expand."""
    return isinstance(value, (Mapping, list, tuple))


def is_sequential_list(container: Any) -> bool:
    """Return True when ``container`` has list shape.

    Lists and tuples always qualify. A mapping qualifies when its keys are
    exactly ``0..n-1`` in insertion order.
    """
    if isinstance(container, (list, tuple)):
        return True
    if not isinstance(container, Mapping):
        return False
    return all(
        isinstance(key, int) and not isinstance(key, bool) and key == position
        for position, key in enumerate(container)
    )


def iter_items(container: Mapping[Any, Any] | list[Any] | tuple[Any, ...]) -> list[tuple[Key, Any]]:
    """Return ``(key, value)`` pairs in the container's natural order."""
    if isinstance(container, Mapping):
        return list(container.items())
    return list(enumerate(container))
