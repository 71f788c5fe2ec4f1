"""Mapping facades over flattened path keys."""

from .flat import FlatMapping


__all__ = ["FlatMapping"]
