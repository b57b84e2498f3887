"""CompositeTreeLib - composite file/folder trees in memory.

Files have a fixed size; folders report the sum of everything below them.
Trees are built and edited through the node objects themselves and
inspected through whole-tree helpers:

    from compositetreelib import new_container, new_leaf, find_by_path

    root = new_container("projet")
    root.add(new_leaf("index.ts", 15))
    print(root.display())

Edits that other code must not observe half-done go through TreeSession,
which clones, edits the clone and swaps the root.
"""

import logging

__version__ = "0.1.0"

from .config import (
    TraversalStrategy,
    RenderConfig,
    SessionConfig,
    LoggingConfig,
)
from .errors import CompositeTreeError, UnknownStrategyError, ConfigError
from .core import (
    NodeKind,
    Node,
    File,
    Folder,
    Visit,
    TreeStats,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    BreadthFirstTraverser,
    create_traverser,
)
from .api import (
    new_leaf,
    new_container,
    deep_clone,
    walk,
    enumerate_folders,
    find_by_path,
    find_nodes,
    render_tree,
    folder_sizes,
    get_tree_stats,
    shares_nodes,
)
from .demo import create_demo_structure
from .session import TreeSession, parse_size
from .log import configure_logging, get_logger

# Library stays silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Config
    "TraversalStrategy",
    "RenderConfig",
    "SessionConfig",
    "LoggingConfig",
    # Errors
    "CompositeTreeError",
    "UnknownStrategyError",
    "ConfigError",
    # Model
    "NodeKind",
    "Node",
    "File",
    "Folder",
    # Traversal
    "Visit",
    "TreeStats",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "BreadthFirstTraverser",
    "create_traverser",
    # API
    "new_leaf",
    "new_container",
    "deep_clone",
    "walk",
    "enumerate_folders",
    "find_by_path",
    "find_nodes",
    "render_tree",
    "folder_sizes",
    "get_tree_stats",
    "shares_nodes",
    "create_demo_structure",
    "TreeSession",
    "parse_size",
    # Logging
    "configure_logging",
    "get_logger",
]
