"""MutableMapping accumulator of flattened path keys."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any, override

from flat_paths.key_mapping import PathConfig, flatten, unflatten


class FlatMapping(MutableMapping[str, Any]):
    """Dict-like store of encoded path keys with nested import/export.

    Nested structures merged in are flattened with the mapping's
    configuration and ``start`` prefix, so repeated merges accumulate into
    one flat keyspace that ``to_nested`` turns back into a structure.
    """

    def __init__(
        self,
        config: PathConfig | Mapping[str, Any] | None = None,
        start: str = "",
        data: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__()
        self._config = PathConfig.coerce(config)
        self._start = start
        self._data: dict[str, Any] = dict(data) if data else {}

    @classmethod
    def from_nested(
        cls,
        source: Any,
        config: PathConfig | Mapping[str, Any] | None = None,
        start: str = "",
    ) -> FlatMapping:
        """Create a mapping holding the flattened form of ``source``."""
        mapping = cls(config=config, start=start)
        mapping.merge_nested(source)
        return mapping

    @property
    def config(self) -> PathConfig:
        return self._config

    @property
    def start(self) -> str:
        return self._start

    def merge_nested(self, source: Any) -> None:
        """Flatten ``source`` into this mapping, overwriting matching paths."""
        _ = flatten(source, self._data, self._config, self._start)

    def to_nested(self) -> Any:
        """Return a fresh nested structure rebuilt from the stored paths."""
        return unflatten(self._data, config=self._config, start=self._start)

    @override
    def __getitem__(self, key: str) -> Any:
        return self._data[key]

    @override
    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    @override
    def __delitem__(self, key: str) -> None:
        del self._data[key]

    @override
    def __iter__(self) -> Iterator[str]:
        """Iterate path keys in insertion order."""
        return iter(self._data)

    @override
    def __len__(self) -> int:
        return len(self._data)

    def copy(self) -> dict[str, Any]:
        """Return a detached plain-dict snapshot of the stored paths."""
        return dict(self._data)

    @override
    def __repr__(self) -> str:
        """Represent mapping as a plain dictionary string."""
        return repr(self._data)

    @override
    def __str__(self) -> str:
        """Render mapping as a plain dictionary string."""
        return str(self._data)
