"""Classic data structures and algorithms: arrays, bits, searching, trees, graphs, heaps, stacks and dynamic programming."""

__version__ = "0.1.0"