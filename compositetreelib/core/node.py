"""Node abstraction for CompositeTreeLib.

A tree is built from exactly two kinds of node: ``File`` (a leaf with a fixed
size) and ``Folder`` (a container whose size is the sum of its children).
The set is closed, so behaviour that differs per kind is written once as a
function that dispatches on ``node.kind`` rather than spread across
overridden methods.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from ..config import RenderConfig


class NodeKind(Enum):
    """Tag identifying which variant a node is."""
    FILE = "file"
    FOLDER = "folder"


class Node(ABC):
    """Common capability set of files and folders.

    Every node has a name, a size and a kind. Names are not required to be
    unique among siblings. Only File and Folder are concrete.
    """

    __slots__ = ("_name",)

    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        """Variant tag; subclasses set it as a class attribute."""
        pass

    def __init__(self, name: str):
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def is_composite(self) -> bool:
        """Check if this node can hold children.

        Returns:
            True for folders, False for files
        """
        return self.kind is NodeKind.FOLDER

    def get_size(self) -> int:
        """Return the size of this node in KB.

        Files report their stored size. Folders recompute the sum over
        their whole subtree on every call.
        """
        return node_size(self)

    def display(self, indent: int = 0, config: Optional[RenderConfig] = None) -> str:
        """Render this node and its descendants as indented text.

        Args:
            indent: Indent level of this node's own line
            config: Rendering options (defaults to RenderConfig())

        Returns:
            One line per node, children indented one level below their folder
        """
        return render_node(self, indent, config)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r}, size={self.get_size()})"


class File(Node):
    """Leaf node. Name and size are fixed at construction."""

    __slots__ = ("_size",)

    kind = NodeKind.FILE

    def __init__(self, name: str, size: int):
        super().__init__(name)
        self._size = size

    @property
    def size(self) -> int:
        return self._size


class Folder(Node):
    """Container node holding an ordered sequence of children."""

    __slots__ = ("_children",)

    kind = NodeKind.FOLDER

    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[Node] = []

    def add(self, node: Node) -> None:
        """Append a node to the end of the child sequence.

        No uniqueness or cycle check is made. A node must be added to at
        most one folder; a node reachable twice is counted twice.
        """
        self._children.append(node)

    def remove(self, node: Node) -> None:
        """Remove the first child that is ``node`` itself.

        Matching is by identity, not by name, so same-named siblings are
        each removable. Removing a node that is not a child does nothing.
        """
        for index, child in enumerate(self._children):
            if child is node:
                del self._children[index]
                return

    def get_children(self) -> List[Node]:
        """Return a shallow copy of the child sequence.

        Changing the returned list does not change the folder. The child
        nodes themselves are shared, not copied.
        """
        return list(self._children)


def node_size(node: Node) -> int:
    """Compute the size of any node.

    Args:
        node: File or Folder

    Returns:
        The file's stored size, or the sum over every file below a
        folder (0 for an empty folder)
    """
    total = 0
    stack = [node]
    while stack:
        current = stack.pop()
        if current.kind is NodeKind.FILE:
            total += current._size
        else:
            stack.extend(current._children)
    return total


def render_node(node: Node, indent: int = 0,
                config: Optional[RenderConfig] = None) -> str:
    """Render a node (recursively for folders) as indented text.

    File lines read ``<prefix><name> (<size> KB)``; folder lines read
    ``<prefix><name> (<size> KB total)`` and are followed by each child
    rendered one indent level deeper.
    """
    if config is None:
        config = RenderConfig()
    return "\n".join(_render_lines(node, indent, config))


def _render_lines(node: Node, indent: int, config: RenderConfig) -> List[str]:
    lines = []
    stack = [(node, indent)]
    while stack:
        current, level = stack.pop()
        prefix = config.indent_unit * level
        if current.kind is NodeKind.FILE:
            icon = f"{config.file_icon} " if config.show_icons else ""
            lines.append(f"{prefix}{icon}{current.name} ({current._size} {config.unit})")
            continue

        icon = f"{config.folder_icon} " if config.show_icons else ""
        lines.append(f"{prefix}{icon}{current.name} ({node_size(current)} {config.unit} total)")
        stack.extend((child, level + 1) for child in reversed(current._children))
    return lines
