# arboles

Tree data structures and the queries commonly asked of them, with a small
command that compares the heights of binary search trees and AVL trees built
from the same random keys.

## Structures

- `arboles.nodes`: `Element` (a `key` and an optional `value`), `TreeNode`
  (an element with `left`, `right` and a `height` kept up to date only by AVL
  trees; `node.key` and `node.is_leaf()`), and `tree_height(node)`, the
  number of nodes on the longest downward path (0 for no node).
- `arboles.binary_tree.BinaryTree`: a general binary tree built by hand with
  `set_root`, `attach_left` and `attach_right`. Setting a root that already
  exists, or attaching a child where one already is, returns the existing
  node unchanged. `len()`, `is_empty()` and `is_full()` (capacity 100 by
  default) are available.
- `arboles.bst.BinarySearchTree`: an unbalanced search tree. `insert` raises
  `DuplicateKeyError` for a key already present, `delete` returns whether a
  node was removed, and `search` returns the stored `Element` or `None`.
- `arboles.avl.AVLTree`: a self-balancing search tree with the same
  operations; `insert` returns `False` for a duplicate key instead of
  raising. `Balance` names the balance states of a node.
- `arboles.containers`: `BoundedList` (1-based `insert`, `delete_at`, `get`,
  plus `append`, `find`, `remove_key` and `render`) and `BoundedQueue`
  (`enqueue`, `dequeue`, `peek`). Adding to a full container raises
  `ContainerFullError`; bad positions and empty removals raise `IndexError`.

## Queries

All queries take a `BinaryTree` and return plain Python values: lists of
nodes, elements or keys, integers, booleans, or `None` when nothing is found.

- `arboles.binary_queries`: `leaves`, `interior_nodes` (nodes with both
  children), `find_key` (every node holding a key), `parent_key`,
  `children_keys` (every key in the branch below the match) and
  `sibling_key`.
- `arboles.binary_levels`: `level` (root is level 1), `branch_height`,
  `keys_at_level` and `equivalent` (same shape and same keys).

Trees read as n-ary trees, the left child being the first child and the
right child the next sibling:

- `arboles.nary_traversal`: `breadth_first` (keys level by level) and
  `count_leaves`.
- `arboles.nary_queries`: `similar` (same shape, any keys), `parent` (the
  root counts as its own parent), `siblings` (raises `KeyError` for an
  unknown key), `height`, `level` and `internal_nodes`.
- `arboles.nary_shape`: `leaves_same_level`.

## Height comparison

`arboles.balance` rebuilds a binary tree as an AVL tree (`build_avl`,
`height_difference`, the absolute difference of heights), and loads random
unique keys into a search tree and an AVL tree (`generate_unique_keys`,
`build_bst`, `build_avl_from_keys`, `bst_avl_height_difference`, and
`compare_trees`, which repeats the comparison and returns the differences).
`generate_unique_keys` raises `ValueError` when the range is too small.

## Loading trees from text

`arboles.loader.load_binary_tree(tree, lines, output)` fills a `BinaryTree`
in pre-order from one entry per line: each key is followed by its left and
then its right subtree, and `.` stands for a missing child. Invalid entries
are reported on `output` and asked for again. `parse_key` parses a single
entry and `read_non_negative` asks until it gets a whole number of 0 or more.

```python
import io

from arboles.binary_tree import BinaryTree
from arboles.binary_queries import leaves
from arboles.loader import load_binary_tree

tree = BinaryTree()
load_binary_tree(tree, ["1", "2", ".", ".", "3", ".", "."], io.StringIO())
print([node.key for node in leaves(tree)])  # [2, 3]
```

## Installation

```
pip install .
```

## Command line

```
arboles
```

asks for a number of repetitions. Each repetition loads unique random keys
into a binary search tree and an AVL tree and prints both heights and their
difference. Options:

- `-n`, `--repetitions`: number of repetitions instead of asking for it
- `--count`: keys per tree (default 10)
- `--minimum`, `--maximum`: range of the keys (default 1 to 100)
- `--seed`: seed for the random keys

## What it does not do

The only command is the height comparison. The tree queries are library
functions: there is no command that loads a tree interactively and runs them,
and trees are kept in memory only, never saved.

## Tests

```
pip install .[test]
pytest
```