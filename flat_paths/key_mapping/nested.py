"""Nested structure reconstruction from delimiter-encoded path keys."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

from .config import PathConfig
from .keys import Key, is_sequential_list, parse_key


logger = logging.getLogger(__name__)


def split_path(flat_key: str, config: PathConfig | Mapping[str, Any] | None = None, start: str = "") -> list[Key]:
    """Split an encoded path key into its container keys.

    Characters of ``start`` are trimmed from the left, every configured
    decoration is replaced by the splitter, and the result is split on it.
    """
    config = PathConfig.coerce(config)
    splitter = config.splitter

    normalized = str(flat_key).lstrip(start)
    for token in config.normalization_table:
        normalized = normalized.replace(token, splitter)
    normalized = normalized.strip(splitter)
    return [parse_key(part) for part in normalized.split(splitter)]


class _Reconstruction:
    """Bookkeeping for one unflatten call."""

    def __init__(self, root: MutableMapping[Any, Any], *, owns_root: bool) -> None:
        self.root = root
        # containers created here may be turned into lists once complete
        self.owned: set[int] = {id(root)} if owns_root else set()
        self.visited: dict[int, MutableMapping[Any, Any]] = {id(root): root}
        # values taken from the flat source are copied, never written into
        self.leaves: dict[int, Any] = {}

    def assign(self, path: list[Key], value: Any) -> None:
        cursor = self.root
        for key in path[:-1]:
            cursor = self._child(cursor, key)
        cursor[path[-1]] = value
        self.leaves[id(value)] = value

    def _child(self, parent: MutableMapping[Any, Any], key: Key) -> MutableMapping[Any, Any]:
        current = parent.get(key)
        if isinstance(current, MutableMapping) and self.leaves.get(id(current)) is not current:
            child = current
        else:
            if isinstance(current, Mapping):
                child = dict(current)
            elif isinstance(current, (list, tuple)):
                logger.debug("converting sequence at key %r to a mapping", key)
                child = dict(enumerate(current))
            else:
                if current is not None:
                    logger.debug("replacing leaf %r at key %r with a container", current, key)
                child = {}
            parent[key] = child
            self.owned.add(id(child))
        self.visited[id(child)] = child
        return child

    def settle(self) -> Any:
        """Turn owned list-shaped mappings into lists and return the root."""
        return self._settle(self.root)

    def _settle(self, node: MutableMapping[Any, Any]) -> Any:
        for key, child in list(node.items()):
            if isinstance(child, MutableMapping) and self.visited.get(id(child)) is child:
                node[key] = self._settle(child)
        if id(node) in self.owned and node and is_sequential_list(node):
            return list(node.values())
        return node


def unflatten(
    source: Mapping[str, Any],
    destination: MutableMapping[Any, Any] | None = None,
    config: PathConfig | Mapping[str, Any] | None = None,
    start: str = "",
) -> Any:
    """Rebuild a nested structure from a flat mapping of encoded path keys.

    The same configuration used for flattening must be given. The end-suffix
    options are ignored here. Mappings whose keys come out as ``0..n-1`` in
    order are returned as lists.

    When ``destination`` is given it is updated in place and returned;
    unrelated keys are kept and existing values at a path are overwritten.
    Otherwise a new structure is returned, which is a list when the root
    itself is list-shaped.
    """
    config = PathConfig.coerce(config)
    if destination is None:
        reconstruction = _Reconstruction({}, owns_root=True)
    else:
        reconstruction = _Reconstruction(destination, owns_root=False)

    for flat_key, value in source.items():
        reconstruction.assign(split_path(flat_key, config, start), value)

    return reconstruction.settle()
