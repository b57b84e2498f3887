"""Test fixtures for CompositeTreeLib consumers.

These helpers build trees from literal data and describe trees back as
plain data, so tests can state expected shapes compactly.
"""

from typing import Any, Dict, List, Union

from ..api import enumerate_folders, folder_sizes, shares_nodes
from ..core.node import File, Folder, Node

# A folder is a dict of name -> spec; a file is an int size.
# Lists of (name, spec) pairs are accepted too, for duplicate names.
TreeSpec = Union[int, Dict[str, Any], List[Any]]


def tree_from_dict(name: str, spec: TreeSpec) -> Node:
    """Build a tree from nested literal data.

    Example:
        root = tree_from_dict("projet", {
            "index.ts": 15,
            "components": {"Button.tsx": 8},
        })

    Args:
        name: Name of the node to build
        spec: int for a file, dict (or list of pairs) for a folder

    Returns:
        The built File or Folder
    """
    if isinstance(spec, int):
        return File(name, spec)

    folder = Folder(name)
    items = spec.items() if isinstance(spec, dict) else spec
    for child_name, child_spec in items:
        folder.add(tree_from_dict(child_name, child_spec))
    return folder


def tree_to_dict(node: Node) -> TreeSpec:
    """Describe a tree as nested literal data (inverse of tree_from_dict).

    Folders with duplicate child names come back as lists of pairs so that
    no child is lost.
    """
    if not node.is_composite():
        return node.get_size()

    pairs = [(child.name, tree_to_dict(child)) for child in node.get_children()]
    names = [name for name, _ in pairs]
    if len(set(names)) != len(names):
        return pairs
    return dict(pairs)


class TreeShapeHelper:
    """Assertion helpers for tree tests.

    Example:
        helper = TreeShapeHelper(root)
        assert helper.folder_paths()[0] == "projet"
        helper.assert_independent_of(deep_clone(root))
    """

    def __init__(self, root: Node):
        self.root = root

    def folder_paths(self) -> List[str]:
        return [path for _, path in enumerate_folders(self.root)]

    def sizes(self) -> Dict[str, int]:
        return folder_sizes(self.root)

    def assert_size_invariant(self) -> None:
        """Check every folder's size equals the sum of its children's."""
        for folder, path in enumerate_folders(self.root):
            expected = sum(child.get_size() for child in folder.get_children())
            assert folder.get_size() == expected, (
                f"{path}: size {folder.get_size()} != children total {expected}"
            )

    def assert_independent_of(self, other: Node) -> None:
        """Check no node object is shared with another tree."""
        assert not shares_nodes(self.root, other), "trees share node references"
