"""High-level API for CompositeTreeLib.

These functions operate on a whole tree from its root. None of them mutate
the tree they are given: callers that want to edit a tree someone else may
still be holding clone it first, edit the clone, then swap references.
"""

import logging
from typing import Callable, Dict, Iterator, List, Optional, Tuple, Union

from .config import RenderConfig, TraversalStrategy
from .core.node import File, Folder, Node, NodeKind
from .core.traverser import (
    PATH_SEPARATOR,
    DepthFirstPostOrderTraverser,
    DepthFirstPreOrderTraverser,
    Visit,
    create_traverser,
)
from .core.collector import SizeCollector, StatsCollector, TreeStats

logger = logging.getLogger(__name__)


def new_leaf(name: str, size: int) -> File:
    """Create a file node. Neither argument is validated."""
    return File(name, size)


def new_container(name: str) -> Folder:
    """Create an empty folder node."""
    return Folder(name)


def deep_clone(node: Node) -> Node:
    """Copy a tree structurally.

    Files become new files with the same name and size; folders become new
    folders holding clones of their children in the same order. The result
    shares no node with the source, so editing one never shows in the other.

    Args:
        node: Root of the tree to copy

    Returns:
        Independent copy of the tree
    """
    if node.kind is NodeKind.FILE:
        return File(node.name, node.size)

    clone = Folder(node.name)
    # Explicit stack of (source, copy) folder pairs; deep trees stay off
    # the interpreter's call stack
    stack = [(node, clone)]
    while stack:
        source, target = stack.pop()
        for child in source.get_children():
            if child.kind is NodeKind.FILE:
                target.add(File(child.name, child.size))
                continue
            child_clone = Folder(child.name)
            target.add(child_clone)
            stack.append((child, child_clone))
    return clone


def walk(root: Node,
         strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE,
         max_depth: Optional[int] = None) -> Iterator[Visit]:
    """Traverse a tree and yield a Visit per node.

    Args:
        root: Starting node
        strategy: Traversal order (dfs_pre, dfs_post, bfs)
        max_depth: Maximum depth to visit (None = unlimited)

    Yields:
        Visit(node, depth, path) records

    Raises:
        UnknownStrategyError: If strategy name is not recognized
    """
    yield from create_traverser(strategy).traverse(root, max_depth=max_depth)


def enumerate_folders(root: Node) -> List[Tuple[Folder, str]]:
    """List every folder with its path, depth-first pre-order.

    The root comes first, so ``enumerate_folders(root)[0]`` is the default
    insertion destination. Files are never included; a file root therefore
    gives an empty list.

    Args:
        root: Root of the tree

    Returns:
        List of (folder, path) tuples in child insertion order
    """
    return [
        (visit.node, visit.path)
        for visit in DepthFirstPreOrderTraverser().traverse(root)
        if visit.node.is_composite()
    ]


def find_by_path(root: Node, path: str) -> Optional[Folder]:
    """Look up a folder by its slash-joined path.

    The first segment names the root and is not compared. Each following
    segment selects the first child *folder* with that name, so when
    siblings share a name only the first is reachable.

    Args:
        root: Root of the tree
        path: Path such as ``"projet/src/components"``

    Returns:
        The folder, or None if any segment does not resolve
    """
    if path == root.name:
        return root if root.is_composite() else None

    current = root
    for segment in path.split(PATH_SEPARATOR)[1:]:
        if not current.is_composite():
            break
        current = next(
            (child for child in current.get_children()
             if child.is_composite() and child.name == segment),
            None,
        )
        if current is None:
            break
    else:
        if current.is_composite():
            return current

    logger.debug("No folder at path %r under %r", path, root.name)
    return None


def find_nodes(root: Node,
               predicate: Callable[[Node], bool],
               strategy: Union[TraversalStrategy, str] = TraversalStrategy.DEPTH_FIRST_PRE
               ) -> Iterator[Node]:
    """Find every node that matches a predicate.

    Args:
        root: Root of the tree
        predicate: Function returning True for wanted nodes
        strategy: Traversal order

    Yields:
        Matching nodes in traversal order

    Example:
        >>> big = list(find_nodes(root, lambda n: n.get_size() > 20))
    """
    for visit in walk(root, strategy):
        if predicate(visit.node):
            yield visit.node


def render_tree(root: Node, config: Optional[RenderConfig] = None) -> str:
    """Render a whole tree as indented text (see ``Node.display``)."""
    return root.display(0, config)


def folder_sizes(root: Node) -> Dict[str, int]:
    """Map each folder path to its aggregate size.

    Uses post-order so every folder comes after its contents. When two
    folders share a path, the first one in child order is kept, which is
    the one ``find_by_path`` would return.

    Args:
        root: Root of the tree

    Returns:
        Dictionary of path -> size in KB
    """
    collector = SizeCollector()
    sizes: Dict[str, int] = {}
    for visit in DepthFirstPostOrderTraverser().traverse(root):
        if visit.node.is_composite():
            sizes.setdefault(visit.path, collector.collect(visit))
    return sizes


def get_tree_stats(root: Node) -> TreeStats:
    """Count files and folders and measure total size and depth.

    Args:
        root: Root of the tree

    Returns:
        TreeStats for the whole tree

    Example:
        >>> stats = get_tree_stats(create_demo_structure())
        >>> stats.file_count, stats.total_size
        (9, 140)
    """
    collector = StatsCollector()
    for visit in DepthFirstPreOrderTraverser().traverse(root):
        collector.collect(visit)
    return collector.stats


def shares_nodes(first: Node, second: Node) -> bool:
    """Check whether any node object is reachable from both trees.

    Args:
        first: Root of one tree
        second: Root of the other tree

    Returns:
        True if at least one node is shared by reference
    """
    seen = {id(visit.node) for visit in walk(first)}
    return any(id(visit.node) in seen for visit in walk(second))
