"""Flatten nested structures into delimiter-encoded path keys."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from .config import PathConfig
from .keys import is_container, is_sequential_list, iter_items, render_key


if TYPE_CHECKING:
    from collections.abc import Mapping


def flatten(
    source: Any,
    destination: dict[str, Any] | None = None,
    config: PathConfig | Mapping[str, Any] | None = None,
    start: str = "",
) -> dict[str, Any]:
    """Flatten ``source`` into ``destination`` and return it.

    Every leaf of ``source`` becomes one entry keyed by its encoded path,
    prefixed with ``start``. Empty containers are leaves. Entries already in
    ``destination`` are kept unless a path of ``source`` overwrites them.

    Example with ``start="$"``, ``prefix="{"``, ``suffix="}"`` and
    ``suffix_end=True``::

        {"assokey": ["Foo"]}  ->  {"${assokey}[0]": "Foo"}
    """
    if destination is None:
        destination = {}
    _flatten_into(source, destination, PathConfig.coerce(config), start, set())
    return destination


def _flatten_into(
    source: Any,
    destination: dict[str, Any],
    config: PathConfig,
    start: str,
    active: set[int],
) -> None:
    if not is_container(source) or not source:
        return

    if id(source) in active:
        msg = f"cannot flatten cyclic structure at path: {start!r}"
        raise ValueError(msg)
    active.add(id(source))

    if config.uses_list_style and is_sequential_list(source):
        if not config.suffix_end:
            # drop map suffix already written by the enclosing level
            start = start.rstrip(config.suffix)
        prefix, suffix, suffix_end = config.prefix_list, config.suffix_list, config.suffix_list_end
    else:
        prefix, suffix, suffix_end = config.prefix, config.suffix, config.suffix_end

    for key, value in iter_items(source):
        segment = prefix + render_key(key)
        if is_container(value) and value:
            _flatten_into(value, destination, config, start + segment + suffix, active)
            continue
        if suffix_end:
            segment += suffix
        destination[start + segment] = value

    active.discard(id(source))
