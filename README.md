# dsalab

A collection of classic data structures and algorithms. Each is usable as a
Python library and comes with a small interactive menu program for the
terminal.

| Module | What it provides |
| --- | --- |
| `dsalab.obst` | Optimal binary search tree cost by dynamic programming (`optimal_bst`, `optimal_bst_cost`, `OptimalBST`) |
| `dsalab.bst` | An integer binary search tree with traversals, minimum, maximum and mirroring (`IntBST`) |
| `dsalab.expression_tree` | Expression trees built from prefix expressions (`ExprNode`, `build_from_prefix`, `postorder`, `is_operator`) |
| `dsalab.dictionary_bst` | A word/meaning dictionary on an unbalanced binary search tree (`WordBST`) |
| `dsalab.flights` | A city flight graph with BFS, DFS and a connectivity check (`FlightGraph`) |
| `dsalab.offices` | Office networks and their minimum spanning tree by Prim's algorithm (`OfficeNetwork`, `MSTEdge`) |
| `dsalab.avl_dictionary` | A height-balanced word/meaning dictionary (`AVLDictionary`) |

## Installing

```
pip install .
```

No third-party libraries are needed at run time. Python 3.10 or later is
required.

## Using the library

```python
from dsalab.obst import optimal_bst_cost

print(optimal_bst_cost([0.2, 0.5, 0.3]))  # 1.5
```

```python
from dsalab.bst import IntBST

tree = IntBST([10, 20, 5, 30, 40, 6, 3, 2])
print(list(tree.inorder()))    # [2, 3, 5, 6, 10, 20, 30, 40]
print(list(tree.preorder()))   # [10, 5, 3, 2, 6, 20, 30, 40]
print(tree.minimum(), tree.maximum())
tree.mirror()
```

```python
from dsalab.expression_tree import build_from_prefix, postorder

print(postorder(build_from_prefix("+a*bc")))  # ['a', 'b', 'c', '*', '+']
```

```python
from dsalab.avl_dictionary import AVLDictionary

words = AVLDictionary()
words.insert("cat", "small animal")
words.insert("dog", "another pet")
words.insert("apple", "fruit")
print(words.get("dog"))
print(words.height())
```

```python
from dsalab.offices import OfficeNetwork

network = OfficeNetwork(["A", "B", "C", "D", "E"])
network.set_cost(0, 1, 4)
network.set_cost(0, 3, 3)
network.set_cost(0, 4, 5)
network.set_cost(1, 2, 2)
network.set_cost(2, 3, 1)
network.set_cost(2, 4, 1)
for edge in network.prims(0):
    print(edge.source, edge.target, edge.cost)
```

Operations that cannot be carried out raise exceptions: `minimum()` and
`maximum()` on an empty `IntBST` raise `ValueError`; looking up or updating
a missing word raises `KeyError`; an index outside a graph raises
`IndexError`; and `OfficeNetwork.prims` raises `ValueError` when some office
cannot be reached.

## Menu programs

Each module also comes with an interactive program that reads choices from
standard input:

```
dsalab-obst              # optimal BST cost from key probabilities
dsalab-bst               # integer binary search tree
dsalab-expression-tree   # prefix expression to postorder
dsalab-dictionary        # word dictionary on a binary search tree
dsalab-flights           # flight path graph traversals
dsalab-offices           # minimum cost to connect offices
dsalab-avl               # word dictionary on an AVL tree
```

## What it does not do

The package has no hash tables, no patient priority queue and no on-disk
record storage; every structure lives in memory only and is lost when its
program exits.

## Running the tests

```
pip install ".[test]"
pytest
```