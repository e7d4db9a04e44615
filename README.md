# dsakit

Classic binary tree, binary search tree and graph algorithms, written
against a small `Node` dataclass and plain adjacency lists. There are no
dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Building trees

`dsakit.node.Node` holds an integer `data` and optional `left` and
`right` children, and has an `is_leaf` property.

`create_tree` reads values in preorder, with `-1` marking an empty
child. `build_from_level_order` reads them level by level instead; its
first value always becomes the root. Both raise `ValueError` when the
values run out before the tree is complete.

```python
from dsakit.node import create_tree, build_from_level_order

root = create_tree([1, 3, 7, -1, -1, 11, -1, -1, 5, 17, -1, -1, -1])
same = build_from_level_order([1, 3, 5, 7, 11, 17, -1, -1, -1, -1, -1, -1, -1])
```

## Traversals

`dsakit.traversal` returns values as lists:

```python
from dsakit.traversal import inorder, preorder, postorder, level_order, zigzag

inorder(root)       # [7, 3, 11, 1, 17, 5]
preorder(root)      # [1, 3, 7, 11, 5, 17]
level_order(root)   # [[1], [3, 5], [7, 11, 17]]
zigzag(root)        # [1, 5, 3, 7, 11, 17]
```

Also: `postorder`, `morris_inorder` (inorder without a stack, restoring
the tree afterwards) and `reverse_level_order` (breadth-first order,
reversed).

## Views

`dsakit.views` has `left_view`, `right_view`, `top_view`, `bottom_view`,
`vertical_order`, `diagonal`, `diagonal_recursive` and `boundary`
(root, left edge, leaves, then the right edge bottom up).

```python
from dsakit.views import left_view, top_view, boundary

left_view(root)   # [1, 3, 7]
boundary(root)
```

## Tree properties

`dsakit.properties` has `height`, `diameter` (both counted in nodes),
`is_balanced`, `is_identical`, `is_sum_tree`, `count_leaves`,
`longest_path_sum` and `max_non_adjacent_sum`.

## Paths and ancestors

`dsakit.paths`:

- `k_sum_paths(root, k)` counts downward paths adding up to `k`.
- `kth_ancestor(root, k, node)` returns the ancestor's value, or `None`.
- `lca(root, n1, n2)` returns the lowest common ancestor `Node`, or `None`.
- `min_burn_time(root, target)` returns the steps for fire starting at
  `target` to reach every node; it raises `ValueError` for an empty tree
  or a missing target.
- `flatten(root)` rearranges the tree in place into a right-leaning list
  in preorder.

## Binary search trees

```python
from dsakit.bst import build_bst, delete, is_valid_bst, kth_smallest, lca_bst

tree = build_bst([10, 8, 21, 7, 27, 5, 4, 3])
tree = delete(tree, 3)
is_valid_bst(tree)      # True
kth_smallest(tree, 3)   # 7
lca_bst(tree, 8, 21)    # 10
```

`build_bst` stops at the first `-1`; equal values go to the left. Also
available: `insert`, `min_node` (raises `ValueError` on an empty tree),
`bst_from_preorder` and `balance`, which returns a new height-balanced
tree holding the inorder values of the given one.

## Graphs

```python
from dsakit.graph import Graph, bfs, dfs, has_cycle_bfs, has_cycle_dfs

g = Graph()
g.add_edge(0, 1, directed=False)
g.add_edge(1, 2, directed=False)
print(g.render())

adjacency = [[1], [0, 2], [1]]
bfs(adjacency)            # [0, 1, 2], starting from node 0
dfs(adjacency, 0)         # [0, 1, 2]
has_cycle_dfs(adjacency)  # False
has_cycle_bfs(adjacency)  # False
```

The cycle checks treat the adjacency list as an undirected graph. `dfs`
raises `ValueError` when the start node is not in the graph.

## What it does not do

dsakit is a library only. It has no command-line program and does not
prompt for or read trees or graphs from the terminal; build them from
lists of values in your own code.