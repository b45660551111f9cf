#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
red_black_tree.py
-----------------

An ordered container backed by a **Red‑Black** binary search tree.
Elements are kept in the order imposed by a caller‑supplied comparator and
every search, insertion and deletion runs in O(log n).

Features
~~~~~~~~
* `tree.insert(value)` / `tree.insert_node(node)` – duplicates allowed,
  equal values are placed to the right of existing ones
* `tree.search(value)` / `value in tree` – membership test
* `tree.delete(value)` – remove one matching node, returns ``False`` if absent
* `tree.remove_node(node)` – delete by node reference
* `tree.pre_order()`, `tree.in_order()`, `tree.post_order()` – lazy
  ``(value, Color)`` sequences
* `len(tree)`, iteration (values in ascending order)
* `tree.min_value()`, `tree.max_value()`
* `tree.validate()` – check every red‑black invariant (useful for debugging)

Each tree owns a single **sentinel** (`self._nil`) standing in for every absent
child and for the parent of the root.  The sentinel is falsy, always black and
read‑only: any attempt to write one of its links or its colour raises
``InvariantViolation``.

Typical usage
~~~~~~~~~~~~~
>>> from red_black_tree import RedBlackTree
>>> rbt = RedBlackTree()
>>> for v in (5, 2, 8):
...     rbt.insert(v)
>>> list(rbt)
[2, 5, 8]
>>> rbt.delete(5)
True
>>> rbt.delete(5)
False
>>> [(v, c.value) for v, c in rbt.pre_order()]
[(8, 'B'), (2, 'R')]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import (
    Any,
    Callable,
    Generator,
    Generic,
    Iterable,
    List,
    Optional,
    Tuple,
    TypeVar,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


# ----------------------------------------------------------------------
#  Colours
# ----------------------------------------------------------------------
class Color(Enum):
    """Node colour; the value is the one-letter tag used when printing."""

    RED = "R"
    BLACK = "B"


RED = Color.RED
BLACK = Color.BLACK


# ----------------------------------------------------------------------
#  Errors
# ----------------------------------------------------------------------
class RedBlackTreeError(Exception):
    """Base class for errors raised by this module."""


class InvariantViolation(RedBlackTreeError, RuntimeError):
    """The balancing engine reached a state that a correct tree never has."""


# ----------------------------------------------------------------------
#  Configuration
# ----------------------------------------------------------------------
@dataclass
class TreeConfig:
    """Per-tree options.

    ``check_invariants`` runs :meth:`RedBlackTree.validate` after every public
    mutation.  ``empty_label`` is what ``str(tree)`` and the renderer print for
    a tree with no nodes.
    """

    check_invariants: bool = False
    empty_label: str = "Empty Red-Black Tree"


def natural_order(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``<`` and ``>``."""
    return (a > b) - (a < b)


# ----------------------------------------------------------------------
#  Nodes
# ----------------------------------------------------------------------
class Node(Generic[T]):
    """A tree cell.  Links are ``None`` while the node is detached.

    ``value`` is fixed at construction; the tree's ordering depends on it.
    """

    __slots__ = ("_value", "color", "left", "right", "parent")

    def __init__(self, value: T) -> None:
        self._value = value
        self.color = RED
        self.left: Optional[Node[T]] = None
        self.right: Optional[Node[T]] = None
        self.parent: Optional[Node[T]] = None

    @property
    def value(self) -> T:
        return self._value

    @property
    def is_red(self) -> bool:
        return self.color is RED

    def __repr__(self) -> str:
        return f"<{self.color.value} {self.value!r}>"


def _read_only(name: str, getter: Callable[[Any], Any]) -> property:
    def fset(self: Any, _: Any) -> None:
        logger.error("write to sentinel attribute %r", name)
        raise InvariantViolation(f"attempted to set {name!r} on the sentinel")

    return property(getter, fset)


class _Sentinel(Node[Any]):
    """The per-tree nil marker.  Black, valueless, linked to itself."""

    __slots__ = ()

    value = _read_only("value", lambda self: None)
    color = _read_only("color", lambda self: BLACK)
    left = _read_only("left", lambda self: self)
    right = _read_only("right", lambda self: self)
    parent = _read_only("parent", lambda self: self)

    def __init__(self) -> None:
        pass

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "<nil>"


# ----------------------------------------------------------------------
#  Tree
# ----------------------------------------------------------------------
class RedBlackTree(Generic[T]):
    """
    An ordered multiset implemented with a red‑black binary search tree.

    Ordering comes from *comparator*, a function returning a negative number,
    zero or a positive number when its first argument sorts before, equal to
    or after the second.  The comparator must be a consistent total order;
    this is not checked.
    """

    __slots__ = ("_root", "_nil", "_size", "_compare", "_config")

    # ------------------------------------------------------------------
    #   Construction / basic container protocol
    # ------------------------------------------------------------------
    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        items: Optional[Iterable[T]] = None,
        config: Optional[TreeConfig] = None,
    ) -> None:
        """
        Create an empty tree, optionally filled from *items*.

        Parameters
        ----------
        comparator : callable(a, b) -> int   optional
            Defaults to :func:`natural_order`.
        items : iterable   optional
            Each element is passed to :meth:`insert` in iteration order.
        config : TreeConfig   optional
        """
        self._nil: Node[T] = _Sentinel()
        self._root: Optional[Node[T]] = None
        self._size: int = 0
        self._compare: Comparator = comparator or natural_order
        self._config: TreeConfig = config or TreeConfig()

        if items is not None:
            for value in items:
                self.insert(value)

    @property
    def root(self) -> Optional[Node[T]]:
        """The root node, or ``None`` for an empty tree."""
        return self._root

    @property
    def config(self) -> TreeConfig:
        return self._config

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return self.search(value)  # type: ignore[arg-type]

    def __iter__(self) -> Generator[T, None, None]:
        """Yield values in ascending order."""
        for value, _ in self.in_order():
            yield value

    def clear(self) -> None:
        """Detach every node, leaving each with ``None`` links."""
        nodes: List[Node[T]] = [self._root] if self._root is not None else []
        while nodes:
            node = nodes.pop()
            for child in (node.left, node.right):
                if child is not self._nil:
                    nodes.append(child)
            node.left = node.right = node.parent = None
        self._root = None
        self._size = 0

    def _top(self) -> Node[T]:
        return self._root if self._root is not None else self._nil

    # ------------------------------------------------------------------
    #   Search
    # ------------------------------------------------------------------
    def _locate(self, value: T) -> Optional[Node[T]]:
        """Return a node comparator-equal to *value*, or ``None``."""
        cur = self._top()
        while cur is not self._nil:
            order = self._compare(value, cur.value)
            if order == 0:
                return cur
            cur = cur.left if order < 0 else cur.right
        return None

    def search(self, value: T) -> bool:
        """Return ``True`` iff some stored value compares equal to *value*."""
        return self._locate(value) is not None

    def _minimum_node(self, node: Node[T]) -> Node[T]:
        while node.left is not self._nil:
            node = node.left
        return node

    def _maximum_node(self, node: Node[T]) -> Node[T]:
        while node.right is not self._nil:
            node = node.right
        return node

    def min_value(self) -> T:
        """Return the smallest stored value."""
        if self._root is None:
            raise ValueError("Tree is empty")
        return self._minimum_node(self._root).value

    def max_value(self) -> T:
        """Return the largest stored value."""
        if self._root is None:
            raise ValueError("Tree is empty")
        return self._maximum_node(self._root).value

    # ------------------------------------------------------------------
    #   Left / right rotations – the only link rewiring primitives
    # ------------------------------------------------------------------
    def _replace_child(self, parent: Node[T], old: Node[T], new: Node[T]) -> None:
        """Point whichever slot of *parent* held *old* at *new*."""
        if parent is self._nil:
            self._root = new if new is not self._nil else None
        elif old is parent.left:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, x: Node[T]) -> None:
        """Left‑rotate the subtree rooted at `x`."""
        if x is self._nil:
            return
        y = x.right
        if y is self._nil:
            logger.error("rotate_left on %r with nil right child", x)
            raise InvariantViolation("rotate_left called on a node with nil right child")
        logger.debug("rotate left at %r", x.value)
        x.right = y.left
        if y.left is not self._nil:
            y.left.parent = x
        y.parent = x.parent
        self._replace_child(x.parent, x, y)
        y.left = x
        x.parent = y

    def _rotate_right(self, y: Node[T]) -> None:
        """Right‑rotate the subtree rooted at `y`."""
        if y is self._nil:
            return
        x = y.left
        if x is self._nil:
            logger.error("rotate_right on %r with nil left child", y)
            raise InvariantViolation("rotate_right called on a node with nil left child")
        logger.debug("rotate right at %r", y.value)
        y.left = x.right
        if x.right is not self._nil:
            x.right.parent = y
        x.parent = y.parent
        self._replace_child(y.parent, y, x)
        x.right = y
        y.parent = x

    # ------------------------------------------------------------------
    #   Insertion
    # ------------------------------------------------------------------
    def insert(self, value: T) -> None:
        """Insert *value*.  Equal values go to the right of existing ones."""
        self.insert_node(Node(value))

    def insert_node(self, node: Node[T]) -> None:
        """Link a caller-built, detached *node* into the tree."""
        if node.parent is not None or isinstance(node, _Sentinel):
            raise ValueError("node is already linked into a tree")

        parent = self._nil
        cur = self._top()
        while cur is not self._nil:
            parent = cur
            if self._compare(cur.value, node.value) > 0:
                cur = cur.left
            else:
                cur = cur.right

        node.parent = parent
        node.left = self._nil
        node.right = self._nil
        node.color = RED

        if parent is self._nil:
            self._root = node
        elif self._compare(parent.value, node.value) > 0:
            parent.left = node
        else:
            parent.right = node

        self._size += 1
        logger.debug("inserted %r under %r", node.value, parent)
        self._fix_insert(node)
        self._after_mutation()

    def _fix_insert(self, z: Node[T]) -> None:
        """Restore red‑black properties after inserting red node `z`."""
        while z.parent.color is RED:
            grandparent = z.parent.parent
            if z.parent is grandparent.left:
                uncle = grandparent.right
                if uncle.color is RED:
                    z.parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is z.parent.right:
                        z = z.parent
                        self._rotate_left(z)
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotate_right(z.parent.parent)
            else:
                uncle = grandparent.left
                if uncle.color is RED:
                    z.parent.color = BLACK
                    uncle.color = BLACK
                    grandparent.color = RED
                    z = grandparent
                else:
                    if z is z.parent.left:
                        z = z.parent
                        self._rotate_right(z)
                    z.parent.color = BLACK
                    z.parent.parent.color = RED
                    self._rotate_left(z.parent.parent)
        self._root.color = BLACK  # type: ignore[union-attr]

    # ------------------------------------------------------------------
    #   Deletion
    # ------------------------------------------------------------------
    def delete(self, value: T) -> bool:
        """Remove one node equal to *value*.  Returns ``False`` if none exists."""
        node = self._locate(value)
        if node is None:
            logger.debug("delete: %r not found", value)
            return False
        self._delete_node(node)
        self._after_mutation()
        return True

    def remove_node(self, node: Node[T]) -> None:
        """Remove exactly *node*, which must currently belong to this tree."""
        if not self._owns(node):
            raise ValueError("node does not belong to this tree")
        self._delete_node(node)
        self._after_mutation()

    def _owns(self, node: Node[T]) -> bool:
        if isinstance(node, _Sentinel):
            return False
        while True:
            parent = node.parent
            if parent is self._nil:
                return node is self._root
            if parent is None or isinstance(parent, _Sentinel):
                # detached, or rooted under another tree's sentinel
                return False
            node = parent

    def _transplant(self, u: Node[T], v: Node[T]) -> None:
        """Put the subtree rooted at `v` where `u` was.  The sentinel is never relinked."""
        self._replace_child(u.parent, u, v)
        if v is not self._nil:
            v.parent = u.parent

    def _delete_node(self, z: Node[T]) -> None:
        """
        Unlink `z` and repair the colouring.

        With two children the in‑order successor node is spliced into `z`'s
        place, so every surviving node keeps its own value.  `x` is whatever
        now fills the slot that lost a node (possibly the sentinel); since the
        sentinel has no usable parent link, `x`'s parent and side are carried
        explicitly into the fix‑up.
        """
        removed_color = z.color
        if z.left is self._nil or z.right is self._nil:
            x = z.left if z.right is self._nil else z.right
            x_parent = z.parent
            x_is_left = x_parent is not self._nil and z is x_parent.left
            self._transplant(z, x)
        else:
            y = self._minimum_node(z.right)
            removed_color = y.color
            x = y.right
            if y.parent is z:
                x_parent, x_is_left = y, False
            else:
                x_parent, x_is_left = y.parent, True
                self._transplant(y, y.right)
                y.right = z.right
                y.right.parent = y
            self._transplant(z, y)
            y.left = z.left
            y.left.parent = y
            y.color = z.color

        z.left = z.right = z.parent = None
        self._size -= 1
        logger.debug("deleted %r", z.value)

        if removed_color is BLACK:
            self._fix_delete(x, x_parent, x_is_left)

    def _fix_delete(self, x: Node[T], parent: Node[T], x_is_left: bool) -> None:
        """
        Resolve the double‑black deficiency at `x` (child of `parent` on the
        given side) after a black node was removed.
        """
        while parent is not self._nil and x.color is BLACK:
            if x_is_left:
                w = parent.right
                if w is self._nil:
                    self._malformed(parent)
                if w.color is RED:
                    logger.debug("delete fix-up: red sibling %r", w.value)
                    w.color = BLACK
                    parent.color = RED
                    self._rotate_left(parent)
                    w = parent.right
                if w.left.color is BLACK and w.right.color is BLACK:
                    w.color = RED
                    x = parent
                    parent = x.parent
                    x_is_left = x is parent.left
                else:
                    if w.right.color is BLACK:
                        logger.debug("delete fix-up: near nephew red under %r", w.value)
                        w.left.color = BLACK
                        w.color = RED
                        self._rotate_right(w)
                        w = parent.right
                    w.color = parent.color
                    parent.color = BLACK
                    w.right.color = BLACK
                    self._rotate_left(parent)
                    x = self._top()
                    break
            else:
                w = parent.left
                if w is self._nil:
                    self._malformed(parent)
                if w.color is RED:
                    logger.debug("delete fix-up: red sibling %r", w.value)
                    w.color = BLACK
                    parent.color = RED
                    self._rotate_right(parent)
                    w = parent.left
                if w.right.color is BLACK and w.left.color is BLACK:
                    w.color = RED
                    x = parent
                    parent = x.parent
                    x_is_left = x is parent.left
                else:
                    if w.left.color is BLACK:
                        logger.debug("delete fix-up: near nephew red under %r", w.value)
                        w.right.color = BLACK
                        w.color = RED
                        self._rotate_left(w)
                        w = parent.left
                    w.color = parent.color
                    parent.color = BLACK
                    w.left.color = BLACK
                    self._rotate_right(parent)
                    x = self._top()
                    break
        if x is not self._nil:
            x.color = BLACK

    def _malformed(self, parent: Node[T]) -> None:
        logger.error("delete fix-up: %r has no sibling for the deficient side", parent)
        raise InvariantViolation(f"double-black under {parent!r} without a sibling")

    def _after_mutation(self) -> None:
        if self._config.check_invariants:
            self.validate()

    # ------------------------------------------------------------------
    #   Traversals – explicit stacks, so deep trees cannot hit the
    #   recursion limit
    # ------------------------------------------------------------------
    def pre_order(self) -> Generator[Tuple[T, Color], None, None]:
        """Yield ``(value, colour)`` pairs node, left subtree, right subtree."""
        if self._root is None:
            return
        stack: List[Node[T]] = [self._root]
        while stack:
            node = stack.pop()
            yield node.value, node.color
            if node.right is not self._nil:
                stack.append(node.right)
            if node.left is not self._nil:
                stack.append(node.left)

    def in_order(self) -> Generator[Tuple[T, Color], None, None]:
        """Yield ``(value, colour)`` pairs in ascending order."""
        stack: List[Node[T]] = []
        cur = self._top()
        while stack or cur is not self._nil:
            while cur is not self._nil:
                stack.append(cur)
                cur = cur.left
            cur = stack.pop()
            yield cur.value, cur.color
            cur = cur.right

    def post_order(self) -> Generator[Tuple[T, Color], None, None]:
        """Yield ``(value, colour)`` pairs left subtree, right subtree, node."""
        stack: List[Node[T]] = []
        last: Optional[Node[T]] = None
        cur = self._top()
        while stack or cur is not self._nil:
            if cur is not self._nil:
                stack.append(cur)
                cur = cur.left
                continue
            top = stack[-1]
            if top.right is not self._nil and top.right is not last:
                cur = top.right
            else:
                stack.pop()
                yield top.value, top.color
                last = top

    # ------------------------------------------------------------------
    #   Validation
    # ------------------------------------------------------------------
    def validate(self) -> int:
        """
        Verify every red‑black invariant and return the root's black-height.

        Raises ``InvariantViolation`` naming the first broken rule.
        """
        if self._root is None:
            if self._size:
                self._invalid(f"empty tree reports size {self._size}")
            return 0
        if self._root.parent is not self._nil:
            self._invalid("root has a parent")
        if self._root.color is not BLACK:
            self._invalid("root is not black")

        count = 0
        # (node, black nodes above it); leaf depth recorded when hitting nil
        heights: List[int] = []
        stack: List[Tuple[Node[T], int]] = [(self._root, 0)]
        while stack:
            node, above = stack.pop()
            count += 1
            if node.is_red and (node.left.is_red or node.right.is_red):
                self._invalid(f"red node {node!r} has a red child")
            here = above + (1 if node.color is BLACK else 0)
            for child in (node.left, node.right):
                if child is self._nil:
                    heights.append(here)
                    continue
                if child.parent is not node:
                    self._invalid(f"{child!r} does not link back to parent {node!r}")
                stack.append((child, here))
        if min(heights) != max(heights):
            self._invalid("black-height mismatch")
        if count != self._size:
            self._invalid(f"tree holds {count} nodes but reports {self._size}")

        previous: Optional[T] = None
        for i, (value, _) in enumerate(self.in_order()):
            if i and self._compare(previous, value) > 0:
                self._invalid(f"in-order sequence out of order at {value!r}")
            previous = value
        return heights[0]

    @staticmethod
    def _invalid(message: str) -> None:
        logger.error("invariant violated: %s", message)
        raise InvariantViolation(message)

    # ------------------------------------------------------------------
    #   String forms
    # ------------------------------------------------------------------
    def __str__(self) -> str:
        if self._root is None:
            return self._config.empty_label
        return "".join(f"  {v}.{c.value}" for v, c in self.pre_order())

    def __repr__(self) -> str:
        return f"RedBlackTree([{', '.join(repr(v) for v in self)}])"
