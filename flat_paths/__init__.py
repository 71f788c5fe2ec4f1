"""flat-paths - convert nested structures to and from delimiter-encoded path keys"""

from ._version import version as __version__
from .key_mapping import PathConfig, PathConfigError, flatten, split_path, unflatten
from .mappings import FlatMapping


__all__ = [
    "FlatMapping",
    "PathConfig",
    "PathConfigError",
    "__version__",
    "flatten",
    "split_path",
    "unflatten",
]
