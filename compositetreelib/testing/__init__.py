"""Testing utilities for CompositeTreeLib consumers."""

from .fixtures import tree_from_dict, tree_to_dict, TreeShapeHelper

__all__ = [
    "tree_from_dict",
    "tree_to_dict",
    "TreeShapeHelper",
]
