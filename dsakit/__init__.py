"""Classic data structures and algorithms: sorting, searching, heaps, binary and AVL trees, Huffman coding, spanning trees and sorting-based problems."""

__version__ = "0.1.0"

__all__ = [
    "sorting",
    "searching",
    "labs",
    "heaps",
    "bintree",
    "avl",
    "huffman",
    "treegraph",
    "mst",
    "problems_strings",
    "problems_greedy",
    "problems_arrays",
]