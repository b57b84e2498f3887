"""Core tree model, traversal and collection."""

from .node import NodeKind, Node, File, Folder, node_size, render_node
from .traverser import (
    Visit,
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
    join_path,
    PATH_SEPARATOR,
)
from .collector import (
    TreeStats,
    DataCollector,
    PathCollector,
    SizeCollector,
    StatsCollector,
    CustomCollector,
)

__all__ = [
    'NodeKind',
    'Node',
    'File',
    'Folder',
    'node_size',
    'render_node',
    'Visit',
    'TreeTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'BreadthFirstTraverser',
    'create_traverser',
    'join_path',
    'PATH_SEPARATOR',
    'TreeStats',
    'DataCollector',
    'PathCollector',
    'SizeCollector',
    'StatsCollector',
    'CustomCollector',
]
