"""Classic algorithms: arrays, greedy, Huffman, LRU caches, heaps, matrix, searching, sorting, strings."""

__version__ = "0.1.0"