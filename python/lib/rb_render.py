#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
rb_render.py
------------

Text renderings of a :class:`red_black_tree.RedBlackTree`.

Only the tree's public read surface is used: ``tree.root``, each node's
``value`` / ``color`` / ``left`` / ``right`` and the traversal generators.

>>> from red_black_tree import RedBlackTree
>>> print(render(RedBlackTree(items=[2, 1, 3])))
└── 2 (B)
    ├── 1 (R)
    └── 3 (R)
"""

from __future__ import annotations

from typing import Any, Iterable, List, Tuple

from red_black_tree import Color, RedBlackTree

_BRANCH = "├── "
_TAIL = "└── "
_PIPE = "│   "
_BLANK = "    "


def render(tree: RedBlackTree) -> str:
    """Draw *tree* as an indented diagram, one ``value (R|B)`` line per node."""
    root = tree.root
    if root is None:
        return tree.config.empty_label

    lines: List[str] = []
    # (node, prefix, is_last_child)
    stack: List[Tuple[Any, str, bool]] = [(root, "", True)]
    while stack:
        node, prefix, is_tail = stack.pop()
        lines.append(f"{prefix}{_TAIL if is_tail else _BRANCH}{node.value} ({node.color.value})")
        child_prefix = prefix + (_BLANK if is_tail else _PIPE)
        # pushed right first so the left child is drawn first
        if node.right:
            stack.append((node.right, child_prefix, True))
        if node.left:
            stack.append((node.left, child_prefix, not node.right))
    return "\n".join(lines)


def format_pairs(pairs: Iterable[Tuple[Any, Color]]) -> str:
    """Flatten a traversal into ``"  5.B  3.R ..."`` form."""
    return "".join(f"  {value}.{color.value}" for value, color in pairs)
