"""A red-black tree of comparable keys, built around a shared sentinel node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from itertools import islice
from typing import Any, Optional


class Color(Enum):
    """Colour of a tree node."""

    RED = "red"
    BLACK = "black"


@dataclass(eq=False)
class Node:
    """A tree node; links to the tree's sentinel stand for missing children."""

    key: Any
    color: Color = Color.RED
    parent: Optional["Node"] = field(default=None, repr=False)
    left: Optional["Node"] = field(default=None, repr=False)
    right: Optional["Node"] = field(default=None, repr=False)


class RBTree:
    """A red-black tree that keeps duplicate keys and hands out its nodes."""

    def __init__(self) -> None:
        nil = Node(key=None, color=Color.BLACK)
        nil.left = nil.right = nil.parent = nil
        self.nil: Node = nil
        self.root: Node = nil
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the keys in ascending order."""
        stack: list[Node] = []
        cur = self.root
        while stack or cur is not self.nil:
            while cur is not self.nil:
                stack.append(cur)
                cur = cur.left
            node = stack.pop()
            yield node.key
            cur = node.right

    def clear(self) -> None:
        """Remove every node from the tree."""
        self.root = self.nil
        self.nil.parent = self.nil
        self._size = 0

    def insert(self, key: Any) -> Node:
        """Insert ``key`` and return the root node after rebalancing."""
        parent = self.nil
        cur = self.root
        while cur is not self.nil:
            parent = cur
            cur = cur.left if key < cur.key else cur.right

        node = Node(key=key, color=Color.RED, parent=parent, left=self.nil, right=self.nil)
        if parent is self.nil:
            self.root = node
        elif key < parent.key:
            parent.left = node
        else:
            parent.right = node

        self._insert_fixup(node)
        self._size += 1
        return self.root

    def find(self, key: Any) -> Optional[Node]:
        """Return a node holding ``key``, or None if there is none."""
        cur = self.root
        while cur is not self.nil:
            if key == cur.key:
                return cur
            cur = cur.left if key < cur.key else cur.right
        return None

    def min(self) -> Optional[Node]:
        """Return the node with the smallest key, or None if the tree is empty."""
        if self.root is self.nil:
            return None
        return self._leftmost(self.root)

    def max(self) -> Optional[Node]:
        """Return the node with the largest key, or None if the tree is empty."""
        if self.root is self.nil:
            return None
        cur = self.root
        while cur.right is not self.nil:
            cur = cur.right
        return cur

    def erase(self, node: Node) -> None:
        """Remove ``node``, which must belong to this tree."""
        if node is None or node is self.nil:
            raise ValueError("cannot erase the sentinel or a missing node")

        moved = node
        moved_color = node.color
        if node.left is self.nil:
            replacement = node.right
            self._transplant(node, node.right)
        elif node.right is self.nil:
            replacement = node.left
            self._transplant(node, node.left)
        else:
            moved = self._leftmost(node.right)
            moved_color = moved.color
            replacement = moved.right
            if moved is not node.right:
                self._transplant(moved, moved.right)
                moved.right = node.right
                moved.right.parent = moved
            else:
                replacement.parent = moved
            self._transplant(node, moved)
            moved.left = node.left
            moved.left.parent = moved
            moved.color = node.color

        if moved_color is Color.BLACK:
            self._delete_fixup(replacement)

        node.parent = node.left = node.right = None
        self._size -= 1

    def to_array(self, n: int) -> list[Any]:
        """Return at most the first ``n`` keys in ascending order."""
        if n < 0:
            raise ValueError("n must not be negative")
        return list(islice(self, n))

    def _leftmost(self, node: Node) -> Node:
        while node.left is not self.nil:
            node = node.left
        return node

    def _left_rotate(self, x: Node) -> None:
        y = x.right
        x.right = y.left
        if y.left is not self.nil:
            y.left.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.left:
            x.parent.left = y
        else:
            x.parent.right = y
        y.left = x
        x.parent = y

    def _right_rotate(self, x: Node) -> None:
        y = x.left
        x.left = y.right
        if y.right is not self.nil:
            y.right.parent = x
        y.parent = x.parent
        if x.parent is self.nil:
            self.root = y
        elif x is x.parent.right:
            x.parent.right = y
        else:
            x.parent.left = y
        y.right = x
        x.parent = y

    def _insert_fixup(self, node: Node) -> None:
        while node.parent.color is Color.RED:
            grand = node.parent.parent
            if node.parent is grand.left:
                uncle = grand.right
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.right:
                        node = node.parent
                        self._left_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._right_rotate(node.parent.parent)
            else:
                uncle = grand.left
                if uncle.color is Color.RED:
                    node.parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grand.color = Color.RED
                    node = grand
                else:
                    if node is node.parent.left:
                        node = node.parent
                        self._right_rotate(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._left_rotate(node.parent.parent)
        self.root.color = Color.BLACK

    def _transplant(self, u: Node, v: Node) -> None:
        if u.parent is self.nil:
            self.root = v
        elif u is u.parent.left:
            u.parent.left = v
        else:
            u.parent.right = v
        v.parent = u.parent

    def _delete_fixup(self, x: Node) -> None:
        while x is not self.root and x.color is Color.BLACK:
            if x is x.parent.left:
                w = x.parent.right
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._left_rotate(x.parent)
                    w = x.parent.right
                if w.left.color is Color.BLACK and w.right.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.right.color is Color.BLACK:
                        w.left.color = Color.BLACK
                        w.color = Color.RED
                        self._right_rotate(w)
                        w = x.parent.right
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.right.color = Color.BLACK
                    self._left_rotate(x.parent)
                    x = self.root
            else:
                w = x.parent.left
                if w.color is Color.RED:
                    w.color = Color.BLACK
                    x.parent.color = Color.RED
                    self._right_rotate(x.parent)
                    w = x.parent.left
                if w.right.color is Color.BLACK and w.left.color is Color.BLACK:
                    w.color = Color.RED
                    x = x.parent
                else:
                    if w.left.color is Color.BLACK:
                        w.right.color = Color.BLACK
                        w.color = Color.RED
                        self._left_rotate(w)
                        w = x.parent.left
                    w.color = x.parent.color
                    x.parent.color = Color.BLACK
                    w.left.color = Color.BLACK
                    self._right_rotate(x.parent)
                    x = self.root
        x.color = Color.BLACK