"""
PyBST: Unbalanced binary search tree with level-order structural queries.
"""

__version__ = "0.1.0"

from .bst import (
    OrderedTree,
    TreeNode,
    InsertStatus,
    DeleteStatus,
    natural_compare,
)
from .values import (
    KeyKind,
    MalformedInputError,
    MalformedInputWarning,
    parse_value,
    load_keys,
    build_tree,
)

__all__ = [
    "OrderedTree",
    "TreeNode",
    "InsertStatus",
    "DeleteStatus",
    "natural_compare",
    "KeyKind",
    "MalformedInputError",
    "MalformedInputWarning",
    "parse_value",
    "load_keys",
    "build_tree",
]
