"""Tree traversal strategies for CompositeTreeLib.

Traversers implement different orders for walking a tree of ``File`` and
``Folder`` nodes. Each visit carries the node, its depth and its path so that
callers never have to rebuild paths from parent links (nodes do not know
their parent).
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, NamedTuple, Optional, Union

from ..config import TraversalStrategy
from ..errors import UnknownStrategyError
from .node import Folder, Node

PATH_SEPARATOR = "/"


class Visit(NamedTuple):
    """One step of a traversal."""
    node: Node
    depth: int   # Root = 0
    path: str    # Slash-joined names from root to node, inclusive


def join_path(parent_path: str, name: str) -> str:
    """Append a node name to its parent's path."""
    return f"{parent_path}{PATH_SEPARATOR}{name}"


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies.

    Children are always visited in insertion order. There is no visited-set:
    a node that was (wrongly) added in two places is visited once per place,
    which matches how its size is counted.
    """

    @abstractmethod
    def traverse(self, root: Node, max_depth: Optional[int] = None) -> Iterator[Visit]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to visit (None = unlimited)

        Yields:
            Visit records
        """
        pass

    def _should_explore(self, visit: Visit, max_depth: Optional[int]) -> bool:
        """Check if children of the visited node should be explored."""
        if not visit.node.is_composite():
            return False
        if max_depth is None:
            return True
        return visit.depth < max_depth

    @staticmethod
    def _children_of(visit: Visit) -> Iterator[Visit]:
        folder: Folder = visit.node
        for child in folder.get_children():
            yield Visit(child, visit.depth + 1, join_path(visit.path, child.name))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a folder before its children. This is the order used to list
    insertion destinations and to clone trees.
    """

    def traverse(self, root: Node, max_depth: Optional[int] = None) -> Iterator[Visit]:
        # Explicit stack keeps deep trees off the interpreter's call stack
        stack = [Visit(root, 0, root.name)]
        while stack:
            visit = stack.pop()
            yield visit
            if self._should_explore(visit, max_depth):
                stack.extend(reversed(list(self._children_of(visit))))


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal strategy.

    Visits children before their folder. Good for aggregate values like
    folder sizes.
    """

    def traverse(self, root: Node, max_depth: Optional[int] = None) -> Iterator[Visit]:
        # Each entry carries whether its children were already pushed
        stack = [(Visit(root, 0, root.name), False)]
        while stack:
            visit, expanded = stack.pop()
            if expanded or not self._should_explore(visit, max_depth):
                yield visit
                continue
            stack.append((visit, True))
            stack.extend((child, False) for child in reversed(list(self._children_of(visit))))


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits every node at depth N before any node at depth N+1.
    """

    def traverse(self, root: Node, max_depth: Optional[int] = None) -> Iterator[Visit]:
        queue: Deque[Visit] = deque([Visit(root, 0, root.name)])
        while queue:
            visit = queue.popleft()
            yield visit
            if self._should_explore(visit, max_depth):
                queue.extend(self._children_of(visit))


_STRATEGIES = {
    TraversalStrategy.DEPTH_FIRST_PRE: DepthFirstPreOrderTraverser,
    TraversalStrategy.DEPTH_FIRST_POST: DepthFirstPostOrderTraverser,
    TraversalStrategy.BREADTH_FIRST: BreadthFirstTraverser,
}


def create_traverser(strategy: Union[TraversalStrategy, str]) -> TreeTraverser:
    """Create a traverser instance by strategy.

    Args:
        strategy: TraversalStrategy member or its value (dfs_pre, dfs_post, bfs)

    Returns:
        TreeTraverser instance

    Raises:
        UnknownStrategyError: If strategy name is not recognized
    """
    if isinstance(strategy, str):
        try:
            strategy = TraversalStrategy(strategy.lower())
        except ValueError:
            raise UnknownStrategyError(
                f"Unknown traversal strategy: {strategy}. "
                f"Choose from: {', '.join(s.value for s in TraversalStrategy)}"
            ) from None
    return _STRATEGIES[strategy]()
