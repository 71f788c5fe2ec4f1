"""Delimiter configuration shared by flattening and unflattening."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any


if TYPE_CHECKING:
    from collections.abc import Mapping


_DELIMITERS = ("prefix", "suffix", "prefix_list", "suffix_list")
_END_FLAGS = ("suffix_end", "suffix_list_end")


class PathConfigError(ValueError):
    """Raised when a path encoding configuration cannot be used."""


@dataclass(frozen=True)
class PathConfig:
    """Prefixes and suffixes used to encode one nesting step of a path.

    Map keys are decorated with ``prefix``/``suffix`` and list indices with
    ``prefix_list``/``suffix_list``. The ``*_end`` flags decide whether the
    suffix is also written after the last segment of a path; they only
    matter when encoding.
    """

    prefix: str = ""
    suffix: str = "."
    suffix_end: bool = False
    prefix_list: str = "["
    suffix_list: str = "]"
    suffix_list_end: bool = True

    def __post_init__(self) -> None:
        for name in _DELIMITERS:
            if not isinstance(getattr(self, name), str):
                msg = f"{name} must be a string"
                raise PathConfigError(msg)
        for name in _END_FLAGS:
            if not isinstance(getattr(self, name), bool):
                msg = f"{name} must be a boolean"
                raise PathConfigError(msg)
        if not any(getattr(self, name) for name in _DELIMITERS):
            msg = "at least one of prefix, suffix, prefix-list or suffix-list must be non-empty"
            raise PathConfigError(msg)

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None) -> PathConfig:
        """Build a configuration from an options mapping.

        Option names may be given hyphenated (``suffix-list-end``) or as
        attribute names (``suffix_list_end``). Missing options keep their
        defaults.
        """
        if not options:
            return cls()

        known = {field.name for field in fields(cls)}
        kwargs: dict[str, Any] = {}
        for name, value in options.items():
            attribute = name.replace("-", "_")
            if attribute not in known:
                msg = f"unknown path option: {name}"
                raise PathConfigError(msg)
            kwargs[attribute] = value
        return cls(**kwargs)

    @classmethod
    def coerce(cls, config: PathConfig | Mapping[str, Any] | None) -> PathConfig:
        """Return ``config`` as a ``PathConfig``."""
        if isinstance(config, cls):
            return config
        return cls.from_options(config)

    @property
    def uses_list_style(self) -> bool:
        """True when list indices get their own decoration."""
        return bool(self.prefix_list or self.suffix_list)

    @property
    def splitter(self) -> str:
        """Single delimiter every decoration is normalized to when decoding."""
        return self.suffix or self.prefix or self.prefix_list or self.suffix_list

    @property
    def normalization_table(self) -> tuple[str, ...]:
        """Substrings replaced by the splitter, in replacement order."""
        splitter = self.splitter
        candidates = (
            self.prefix,
            self.suffix,
            self.suffix + self.prefix,
            self.prefix_list,
            self.suffix_list,
            self.suffix_list + self.prefix_list,
            splitter + splitter,
        )
        return tuple(dict.fromkeys(token for token in candidates if token))

    def to_options(self) -> dict[str, Any]:
        """Return the configuration as a hyphenated options mapping."""
        return {field.name.replace("_", "-"): getattr(self, field.name) for field in fields(self)}
