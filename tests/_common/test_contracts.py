"""Contract tests every node kind must satisfy.

Both File and Folder must:
1. Report a name, a size and whether they are composite
2. Render without side effects
3. Survive deep_clone with identical size and rendering
4. Behave identically whether built directly or via the constructors
"""

import sys
from abc import ABC, abstractmethod
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from compositetreelib import (
    File,
    Folder,
    Node,
    NodeKind,
    deep_clone,
    new_container,
    new_leaf,
    shares_nodes,
)


class NodeContract(ABC):
    """Base contract shared by all node kinds."""

    expected_kind: NodeKind

    @abstractmethod
    def make_node(self) -> Node:
        """Create a populated node of the kind under test."""
        pass

    @abstractmethod
    def expected_size(self) -> int:
        pass

    def test_is_node(self):
        assert isinstance(self.make_node(), Node)

    def test_kind_matches_discriminator(self):
        node = self.make_node()
        assert node.kind is self.expected_kind
        assert node.is_composite() is (self.expected_kind is NodeKind.FOLDER)

    def test_size(self):
        assert self.make_node().get_size() == self.expected_size()

    def test_display_first_line_names_node(self):
        node = self.make_node()
        first_line = node.display().split("\n")[0]
        assert first_line.startswith(node.name)
        assert f"({self.expected_size()} KB" in first_line

    def test_display_indent_prefixes_every_line(self):
        node = self.make_node()
        flat = node.display().split("\n")
        indented = node.display(3).split("\n")
        assert indented == ["      " + line for line in flat]

    def test_clone_is_equivalent_and_independent(self):
        node = self.make_node()
        clone = deep_clone(node)
        assert clone.kind is node.kind
        assert clone.get_size() == node.get_size()
        assert clone.display() == node.display()
        assert not shares_nodes(node, clone)


class TestFileContract(NodeContract):
    expected_kind = NodeKind.FILE

    def make_node(self):
        return File("logo.png", 45)

    def expected_size(self):
        return 45


class TestFolderContract(NodeContract):
    expected_kind = NodeKind.FOLDER

    def make_node(self):
        folder = Folder("assets")
        folder.add(File("logo.png", 45))
        folder.add(File("styles.css", 10))
        nested = Folder("fonts")
        nested.add(File("inter.woff2", 30))
        folder.add(nested)
        return folder

    def expected_size(self):
        return 85


class TestEmptyFolderContract(NodeContract):
    expected_kind = NodeKind.FOLDER

    def make_node(self):
        return Folder("empty")

    def expected_size(self):
        return 0


@pytest.mark.parametrize("build", [
    lambda: (File("a", 1), new_leaf("a", 1)),
    lambda: (Folder("f"), new_container("f")),
])
def test_constructors_match_classes(build):
    direct, via_api = build()
    assert type(direct) is type(via_api)
    assert direct.display() == via_api.display()
