# redblack

A red-black tree that holds comparable keys in sorted order. Duplicate keys
are allowed. Insertion and erasure rebalance the tree, so lookups, insertions
and erasures take logarithmic time.

## Installation

```
pip install .
```

## Usage

```python
from redblack.tree import RBTree

tree = RBTree()
for key in (10, 5, 8, 34, 67, 23, 156, 24, 2, 12):
    tree.insert(key)

len(tree)              # 10
list(tree)             # [2, 5, 8, 10, 12, 23, 24, 34, 67, 156]

tree.min().key         # 2
tree.max().key         # 156

node = tree.find(23)   # a Node holding 23, or None if the key is absent
tree.erase(node)
tree.find(23)          # None

tree.to_array(3)       # the smallest three keys: [2, 5, 8]

tree.clear()
len(tree)              # 0
```

## API

Everything lives in `redblack.tree`.

- `RBTree()` creates an empty tree. Its `root` attribute is the root node, and
  its `nil` attribute is the black sentinel node that stands in for every
  missing child; an empty tree has `root is nil`.
- `RBTree.insert(key)` adds a key and returns the tree's root node after
  rebalancing. A key equal to an existing one is placed to its right.
- `RBTree.find(key)` returns a node holding `key`, or `None`.
- `RBTree.min()` and `RBTree.max()` return the nodes with the smallest and
  largest keys, or `None` when the tree is empty.
- `RBTree.erase(node)` removes a node that belongs to the tree. Passing `None`
  or the sentinel raises `ValueError`. The erased node's `parent`, `left` and
  `right` are set to `None`.
- `RBTree.to_array(n)` returns a list of at most `n` keys in ascending order;
  a negative `n` raises `ValueError`.
- Iterating over a tree yields every key in ascending order; `len()` gives the
  number of keys held.
- `RBTree.clear()` removes every node.

Each `Node` carries `key`, `color` (a `Color` member: `Color.RED` or
`Color.BLACK`), `parent`, `left` and `right`. Links to the tree's sentinel mark
missing children and the root's missing parent.

Keys only need to support `<` and `==` with one another. The tree stores keys
alone; it does not map keys to values.

## Running the tests

```
pip install -e ".[test]"
pytest
```