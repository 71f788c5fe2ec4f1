"""Path encoding, flattening and nested reconstruction utilities."""

from .config import PathConfig, PathConfigError
from .flatten import flatten
from .nested import split_path, unflatten


__all__ = ["PathConfig", "PathConfigError", "flatten", "split_path", "unflatten"]
