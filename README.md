# dsakit

Classic data structures and algorithms in plain Python, with no third-party
dependencies. Everything is a function or a small class you call from your
own code; the sorting and search functions work on ordinary lists.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.sorting`

`bubble_sort`, `insertion_sort`, `selection_sort`, `merge_sort`,
`quick_sort`, `shell_sort`, `radix_sort`, `counting_sort(data, k)` and
`bucket_sort`. Each takes an iterable and returns a new sorted list, leaving
the input untouched.

- `radix_sort` accepts non-negative integers only and raises `ValueError`
  otherwise.
- `counting_sort(data, k)` accepts integers in `0..k` and raises `ValueError`
  for anything outside that range or for a negative `k`.
- `bucket_sort` accepts numbers in `[0, 1)` and raises `ValueError` otherwise.

### `dsakit.searching`

`linear_search(data, value)`, `binary_search(data, item)` and
`interpolation_search(data, value)` return the index of a match, or `None`
when there is none. The binary and interpolation searches expect ascending
input.

### `dsakit.labs`

- `remove_from_stack(stack, item)`: the stack (bottom first) without any
  occurrence of `item`.
- `is_vowel(char)`: whether a character is `a e i o u` in either case.
- `reverse_vowels(text)`: reverses the order of the vowels across two
  space-separated words; text without a second word is returned unchanged.
- `replace_char(text, old, new)`: replaces one character with another;
  both must be single characters.

### `dsakit.heaps`

`MaxHeap` and `MinHeap` are array-backed binary heaps with `push`, `pop`,
`peek`, `len()` and iteration (which yields the items in stored level
order). `pop` and `peek` raise `IndexError` on an empty heap.
`build_max_heap(values)` and `build_min_heap(values)` rearrange values
bottom-up into heap order and return the list.

### `dsakit.bintree`

A `Node` dataclass (`data`, `left`, `right`) and functions on it:
`inorder`, `preorder`, `postorder` (each returns a list of values),
`max_depth`, `bst_insert(root, value)` (equal values go right; returns the
root), `bst_search(root, value)` (returns the node or `None`) and
`bst_from_preorder(values)`.

### `dsakit.avl`

`AVLTree(values)` keeps distinct keys balanced by rotations. `insert(key)`
ignores a key that is already present; `preorder()` returns the keys in
node, left, right order; `root` holds the top node.

### `dsakit.huffman`

- `build_huffman_tree(text)` returns a `HuffmanNode` root; empty text raises
  `ValueError`.
- `generate_codes(root)` maps each character to its string of `0` and `1`.
- `encode(text, codes)` concatenates the codes; an unknown character raises
  `ValueError`.
- `decode(bits, root)` walks the tree back to text; invalid bits, a
  truncated code, or a single-leaf tree raise `ValueError`.

### `dsakit.treegraph`

`AdjacencyTree(edges)` stores a tree as undirected adjacency lists, with
`add_edge(u, v)` (recording `u` as the parent of `v`), `find_root(n)` (the
first of the nodes `1..n` without a parent), `dfs(start)`,
`preorder(root)`, `postorder(root)` and `inorder(root)` (first child's
subtree, then the node, then the remaining children). `load_edges(path)`
reads `u v` integer pairs, one per line, skipping blank lines.

### `dsakit.mst`

- `DisjointSet(n)`: union-find with path compression and union by rank;
  `union` returns `False` when both elements are already in one set.
- `kruskal(n, edges)`: returns `(total_weight, chosen_edges)` for a minimum
  spanning forest; edges are `(u, v, weight)` triples.
- `kruskal_cost(n, edges)`: returns only the cost.
- `prim(n, edges)` and `prim_from_adjacency(adjacency)`: the weight of the
  spanning tree grown from vertex 0.

Vertices outside `0..n-1` raise `ValueError`.

### Problem collections

- `dsakit.problems_strings`: `helpful_maths`, `can_form_names`,
  `count_misplaced`, `find_added_character`, `alphabet_size_needed`,
  `find_decreasing_pair`.
- `dsakit.problems_greedy`: `can_defeat_dragons`, `equal_candies`,
  `grow_the_tree`, `min_strength_difference`, `make_equal_operations`,
  `medium_number`, `can_reduce_to_one`, `min_total_distance`, `towers`,
  `first_triple`, `twins_min_coins`, `lantern_radius`, `max_teams`,
  `max_wealthy`.
- `dsakit.problems_arrays`: `contains_duplicate`, `height_checker`,
  `smaller_numbers_than_current`, `intersection`, `kth_largest`,
  `maximum_product`, `trimmed_mean`, `minimum_difference_pairs`,
  `barrels_max_difference`, `sorted_adjacent_differences`,
  `basketball_wins`, `advantage`, `choose_two_numbers`,
  `search_insert_index`.

Each takes its input as Python values and returns the answer; invalid input
raises `ValueError`.

## Examples

```python
from dsakit.sorting import merge_sort
from dsakit.searching import binary_search
from dsakit.heaps import MaxHeap
from dsakit.huffman import build_huffman_tree, generate_codes, encode, decode

data = merge_sort([10, 13, 7, 9, 2])
print(data)                      # [2, 7, 9, 10, 13]
print(binary_search(data, 9))    # 2

heap = MaxHeap([10, 20, 15, 30, 40])
print(heap.peek())               # 40

text = "huffman coding example"
root = build_huffman_tree(text)
codes = generate_codes(root)
assert decode(encode(text, codes), root) == text
```

## Command line

`dsakit-tree` reads a file of tree edges, one `u v` pair per line, and
prints a depth-first traversal starting at node 0:

```
dsakit-tree tree.txt
```

The path defaults to `tree.txt`. If the file does not exist, the traversal
covers node 0 alone.

## What it does not do

`dsakit-tree` is the only command. The exercises, sorts, heaps and trees are
library functions: there are no interactive programs that prompt for input
on the terminal.