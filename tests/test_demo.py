"""Tests for the demo structure and the testing helpers."""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from compositetreelib import File, create_demo_structure, find_by_path, shares_nodes
from compositetreelib.testing import TreeShapeHelper, tree_from_dict, tree_to_dict


def test_demo_shape():
    assert tree_to_dict(create_demo_structure()) == {
        "src": {
            "index.ts": 15,
            "app.ts": 25,
            "components": {"Button.tsx": 8, "Card.tsx": 12, "Modal.tsx": 18},
        },
        "assets": {"logo.png": 45, "styles.css": 10},
        "package.json": 2,
        "README.md": 5,
    }


def test_demo_sizes():
    root = create_demo_structure()
    assert root.name == "projet"
    assert root.get_size() == 140
    assert TreeShapeHelper(root).sizes() == {
        "projet": 140,
        "projet/src": 78,
        "projet/src/components": 38,
        "projet/assets": 55,
    }


def test_demo_builds_independent_trees():
    first, second = create_demo_structure(), create_demo_structure()
    assert not shares_nodes(first, second)
    find_by_path(first, "projet/src").add(File("new.ts", 5))
    assert second.get_size() == 140


def test_tree_from_dict_round_trip_with_duplicates():
    spec = [("a", 1), ("a", {"b": 2}), ("c", {})]
    root = tree_from_dict("r", spec)
    assert root.get_size() == 3
    assert tree_to_dict(root) == spec


def test_tree_from_dict_file_root():
    node = tree_from_dict("f.txt", 4)
    assert not node.is_composite()
    assert tree_to_dict(node) == 4


def test_shape_helper_paths():
    helper = TreeShapeHelper(create_demo_structure())
    assert helper.folder_paths()[0] == "projet"
    helper.assert_size_invariant()
