# dsalgo

A collection of classic data structures and algorithms in plain Python, with
no dependencies beyond the standard library. It is a library: every module is
imported and called from your own code.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsalgo.arrays` | maximum subarray sum (`max_subarray_sum_brute`, `max_subarray_sum_prefix`, `max_subarray_sum_kadane`), `PrefixSums`, `sort_012`, `trapped_water` |
| `dsalgo.bits` | `get_bit`, `set_bit`, `clear_bit`, `update_bit`, `clear_last_bits`, `clear_bits_range`, `count_set_bits`, `count_set_bits_fast` |
| `dsalgo.searching` | `binary_search`, `lower_bound`, `upper_bound`, `count_occurrences`, `linear_search`, `jump_search` |
| `dsalgo.strings` | `reverse_string`, `sort_by_length` |
| `dsalgo.generic_tree` | `GenericNode`, `build_generic_tree`, `describe`, `generic_diameter`, `node_to_root_path`, `distance_between` |
| `dsalgo.queues` | `reverse_queue`, `reverse_queue_recursive` |
| `dsalgo.heaps` | `heapify`, `build_max_heap`, `heap_sort`, `MaxHeap`, `k_largest` |
| `dsalgo.stacks` | `infix_to_postfix`, `precedence`, `BoundedStack`, `StackOverflowError`, `StackUnderflowError` |
| `dsalgo.dynamic` | `knapsack_01`, `subset_sum`, `can_partition`, `lcs_length`, `longest_common_subsequence`, `min_insertions_for_palindrome`, `travelling_salesman` |
| `dsalgo.greedy` | `max_activities`, `fractional_knapsack`, `job_sequencing`, `optimal_merge_cost` |
| `dsalgo.disjoint_set` | `UnionFind` |
| `dsalgo.network_flow` | `ford_fulkerson`, `FlowResult` |
| `dsalgo.backtracking` | `hamiltonian_cycles`, `n_queens`, `rat_in_maze_paths`, `tower_of_hanoi` |
| `dsalgo.graphs` | `Graph` (`bfs`, `dfs`), `articulation_points`, `greedy_coloring`, `is_bipartite` |
| `dsalgo.shortest_paths` | `bellman_ford`, `dijkstra`, `floyd_warshall`, `NegativeCycleError` |
| `dsalgo.spanning_tree` | `kruskal_weight`, `prim_weight` |
| `dsalgo.linked_list` | `ListNode`, `LinkedList` |
| `dsalgo.avl` | `AVLTree` |
| `dsalgo.binary_tree` | `TreeNode`, `BinarySearchTree`, `bst_insert`, `inorder`, `preorder`, `postorder`, `level_order`, `morris_inorder`, `height`, `diameter`, `build_level_order`, `build_preorder`, `largest_bst` |
| `dsalgo.list_partition` | `segregate_even_odd` |

## Examples

```python
from dsalgo.arrays import PrefixSums, max_subarray_sum_kadane, trapped_water
from dsalgo.heaps import heap_sort
from dsalgo.stacks import infix_to_postfix
from dsalgo.disjoint_set import UnionFind
from dsalgo.backtracking import tower_of_hanoi

max_subarray_sum_kadane([-2, 1, -3, 4, -1, 2, 1, -5, 4])   # 6
trapped_water([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])        # 6
heap_sort([5, 4, 3, 6, 1, 2, 7])                           # [1, 2, 3, 4, 5, 6, 7]
infix_to_postfix("a^(b*c-d/(e+f))")                        # "abc*def+/-^"
PrefixSums([1, 2, 3, 4]).range_sum(2, 3)                   # 5 (1-based, inclusive)

sets = UnionFind(5)
sets.union(0, 1)                                           # True
sets.same_set(0, 1)                                        # True
sets.count_sets()                                          # 4

list(tower_of_hanoi(2))   # [(1, 'A', 'B'), (2, 'A', 'C'), (1, 'B', 'C')]
```

A few behaviours worth knowing:

- `max_subarray_sum_kadane` resets its running sum at zero, so a sequence of
  only negative numbers gives 0; the brute-force and prefix-sum versions give
  the largest single element instead.
- `hamiltonian_cycles`, `rat_in_maze_paths`, `tower_of_hanoi` and
  `generic_tree.describe` are generators.
- `linear_search` and `jump_search` return `None` when the key is absent.

## Errors

Errors are raised as exceptions: a full `BoundedStack` raises
`StackOverflowError`, an empty one `StackUnderflowError`; `bellman_ford`
raises `NegativeCycleError` when a negative cycle can be reached from the
source; out-of-range positions and vertices raise `IndexError`, and malformed
input such as a non-square matrix or an unbalanced expression raises
`ValueError`.

## What the package does not do

- It has no general-purpose sorting module: the only sort offered is
  `heaps.heap_sort` (and the special-case `arrays.sort_012`). There are no
  bubble, insertion, selection, counting, merge or quick sorts, and no
  inversion counting.
- It has no number-theory helpers such as a greatest common divisor, a prime
  sieve or splitting a number into a sum of two primes.
- It has no command-line interface; everything is used from Python code.