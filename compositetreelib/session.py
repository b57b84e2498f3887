"""Editing session over a composite tree.

A TreeSession owns the caller's current root and applies every edit
copy-on-write: clone the whole tree, edit the clone, then swap the root
reference. Anyone still holding the old root (a view animating from the
previous state, say) keeps a complete and consistent tree.

The session is also the layer that sanitizes raw user input. The tree model
itself accepts anything; here blank names and names containing "/" are
ignored, paths must start with the root name, and unparsable sizes fall
back to a default before anything reaches the model.
"""

import logging
import re
from typing import Callable, List, Optional, Tuple

from .api import deep_clone, enumerate_folders, find_by_path
from .config import SessionConfig
from .core.node import File, Folder, Node
from .core.traverser import PATH_SEPARATOR
from .demo import create_demo_structure

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_size(text: Optional[str], default: int) -> int:
    """Parse the leading integer of a size field.

    ``"12"`` and ``"12 KB"`` both give 12. Missing, unparsable or zero
    input gives ``default``. Negative values are passed through unchanged.

    Args:
        text: Raw text from a size input
        default: Fallback size

    Returns:
        Size in KB
    """
    if text is None:
        return default
    match = _LEADING_INT.match(str(text))
    if not match:
        return default
    return int(match.group(1)) or default


def split_path(path: str) -> Tuple[str, str]:
    """Split a path into (parent path, last name).

    Returns:
        ("", path) when the path has a single segment
    """
    parent, sep, name = path.rpartition(PATH_SEPARATOR)
    if not sep:
        return "", path
    return parent, name


class TreeSession:
    """Holds the current tree and applies edits to it copy-on-write.

    Every successful edit stores the replaced root in ``previous_root``.
    That is a single snapshot for observers, not an undo history.

    Example:
        >>> session = TreeSession()
        >>> session.add_file("notes.md", "3", "projet/src")
        True
        >>> session.total_size
        143
    """

    def __init__(self, config: Optional[SessionConfig] = None,
                 factory: Callable[[], Folder] = create_demo_structure):
        """Initialize session with a freshly built tree.

        Args:
            config: Session configuration (defaults to SessionConfig())
            factory: Builds the initial root, and again on reset()

        Raises:
            ConfigError: If config fails validation
        """
        self.config = config or SessionConfig()
        self.config.validate_or_raise()
        self._factory = factory
        self._root: Folder = factory()
        self._previous_root: Optional[Folder] = None

    @property
    def root(self) -> Folder:
        return self._root

    @property
    def previous_root(self) -> Optional[Folder]:
        return self._previous_root

    @property
    def total_size(self) -> int:
        return self._root.get_size()

    def destinations(self) -> List[str]:
        """Paths of every folder a new node could be added to, root first."""
        return [path for _, path in enumerate_folders(self._root)]

    def default_destination(self) -> str:
        return self._root.name

    def render(self) -> str:
        """Render the current tree with the session's render config."""
        return self._root.display(0, self.config.render)

    def reset(self) -> None:
        """Rebuild the tree from the factory and drop the previous snapshot."""
        self._root = self._factory()
        self._previous_root = None
        logger.info("Session reset to %r", self._root.name)

    def add_file(self, name: str, size_text: Optional[str] = None,
                 destination: Optional[str] = None) -> bool:
        """Add a file under a destination folder.

        Args:
            name: File name; surrounding whitespace is stripped, "/" is refused
            size_text: Raw size input, parsed with parse_size()
            destination: Folder path (defaults to the root)

        Returns:
            True if the tree changed, False for a blank name, a name
            containing "/" or an unknown destination
        """
        name = self._clean_name(name)
        if name is None:
            return False
        size = parse_size(size_text, self.config.default_size)
        return self._add(File(name, size), destination)

    def add_folder(self, name: str, destination: Optional[str] = None) -> bool:
        """Add an empty folder under a destination folder.

        Args:
            name: Folder name; surrounding whitespace is stripped, "/" is refused
            destination: Folder path (defaults to the root)

        Returns:
            True if the tree changed
        """
        name = self._clean_name(name)
        if name is None:
            return False
        return self._add(Folder(name), destination)

    def remove(self, path: str) -> bool:
        """Remove the node (file or folder) at a path.

        The parent folder is resolved like find_by_path(), except that the
        first segment must be the root name. Within the parent, the
        first child whose name matches the last segment is removed. The
        root cannot be removed.

        Args:
            path: Path of the node, root name included

        Returns:
            True if the tree changed
        """
        parent_path, name = split_path(path)
        if not parent_path:
            logger.debug("Refusing to remove root %r", path)
            return False

        new_root = deep_clone(self._root)
        parent = self._resolve(new_root, parent_path)
        if parent is None:
            logger.debug("Cannot remove %r: parent folder not found", path)
            return False

        target = next((child for child in parent.get_children() if child.name == name), None)
        if target is None:
            logger.debug("Cannot remove %r: no such node", path)
            return False

        parent.remove(target)
        self._commit(new_root)
        logger.info("Removed %r (%d KB)", path, target.get_size())
        return True

    def _add(self, node: Node, destination: Optional[str]) -> bool:
        destination = destination or self.default_destination()
        new_root = deep_clone(self._root)
        target = self._resolve(new_root, destination)
        if target is None:
            logger.debug("Cannot add %r: destination %r not found", node.name, destination)
            return False

        target.add(node)
        self._commit(new_root)
        logger.info("Added %r to %r", node.name, destination)
        return True

    def _clean_name(self, name: Optional[str]) -> Optional[str]:
        """Strip a user-supplied name, or return None if it is unusable.

        Blank names and names containing the path separator are refused:
        the latter would create a node no path can reach.
        """
        name = (name or "").strip()
        if not name:
            logger.debug("Ignoring blank name")
            return None
        if PATH_SEPARATOR in name:
            logger.debug("Ignoring name %r containing %r", name, PATH_SEPARATOR)
            return None
        return name

    def _resolve(self, root: Folder, path: str) -> Optional[Folder]:
        # find_by_path does not compare the first segment; user paths must
        # name the root explicitly
        if path.split(PATH_SEPARATOR, 1)[0] != root.name:
            return None
        return find_by_path(root, path)

    def _commit(self, new_root: Folder) -> None:
        self._previous_root = self._root
        self._root = new_root
