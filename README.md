# algokit

A collection of classic algorithms and data structures in plain Python, with
no dependencies outside the standard library.

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.sorting` | `heap_sort`, `insertion_sort`, `selection_sort`, `shell_sort`, `exchange_sort`, `bubble_sort`, `merge_sort`, `quick_sort`; `bubble_sort_steps` yields a `BubbleStep` for every comparison |
| `algokit.searching` | `linear_search`, `binary_search` (both return an index or `None`) |
| `algokit.distribution` | `radix_sort`, `counting_sort_text`, `fill_buckets`, `bucket_sort`, `bucket_sort_fractions` |
| `algokit.strings` | `prefix_table`, `kmp_search`, `rabin_karp_search`, `anagram_deletions` |
| `algokit.traversal` | `UndirectedGraph` with `breadth_first`, `depth_first`, `is_bipartite` and `describe`; `matrix_breadth_first` |
| `algokit.paths` | `bellman_ford` (raises `NegativeCycleError`), `dijkstra`, `prim_mst`, and the `Edge` record |
| `algokit.arithmetic` | `mod_pow`, `factorial`, `fibonacci`, `fibonacci_series`, `common_factor`, `is_palindrome_number`, `is_power_of_four`, `count_squares`, `swap_bits`, `kth_symbol` |
| `algokit.problems` | Freivalds' check (`freivald`, `is_product`), `segment_union_length`, `longest_increasing_subsequence` |
| `algokit.bst` | `TreeNode`, `preorder`, `inorder`, `postorder`, `level_of`, `bst_insert`, `min_node`, `bst_delete` |
| `algokit.line_coding` | text waveforms for line-coding schemes: `Scheme`, `render`, `render_all`, `main` |
| `algokit.structures` | `LinkedList` with `push` and `nth_from_end`; `reverse_array` |
| `algokit.grids` | `spiral_order`, `solve_maze` |

Sorting functions take any iterable and return a new sorted list; the input is
left untouched. Graph distances use `math.inf` for unreachable vertices.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Examples

```python
from algokit.sorting import heap_sort, merge_sort
from algokit.arithmetic import mod_pow
from algokit.traversal import UndirectedGraph
from algokit.paths import Edge, bellman_ford

heap_sort([12, 11, 13, 5, 6, 7])   # [5, 6, 7, 11, 12, 13]
merge_sort([3, 1, 2])              # [1, 2, 3]
mod_pow(2, 10, 1000)               # 24

graph = UndirectedGraph(3)
graph.add_edge(0, 1)
graph.add_edge(1, 2)
graph.breadth_first(0)             # [0, 1, 2]
graph.is_bipartite(0)              # True

bellman_ford(3, [Edge(0, 1, 4), Edge(1, 2, -1)], 0)   # [0, 4, 3]
```

## Line-coding waveforms

The `algokit-linecode` command draws a bit sequence in every supported
line-coding scheme (unipolar NRZ, polar NRZ-L, NRZ-I, RZ, Manchester,
differential Manchester, AMI and pseudoternary). Give the bits as arguments:

```
algokit-linecode 1 0 1 1 0
```

or, with no arguments, on standard input as the number of bits followed by the
bits:

```
echo "5 1 0 1 1 0" | algokit-linecode
```

The same drawings are available from Python through `render(scheme, bits)` and
`render_all(bits)`.

## What it does not do

There is no Huffman coding in this package, and no command other than
`algokit-linecode`; everything else is used as a library.