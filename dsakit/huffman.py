"""Huffman coding trees and prefix codes."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; leaves carry a symbol."""

    weight: int
    symbol: Hashable | None = None
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _build(leaves: Iterable[tuple[Hashable, int]]) -> HuffmanNode:
    order = itertools.count()
    heap = [(weight, next(order), HuffmanNode(weight, symbol)) for symbol, weight in leaves]
    if not heap:
        raise ValueError("a Huffman tree needs at least one symbol")
    heapq.heapify(heap)
    while len(heap) > 1:
        low_weight, _, low = heapq.heappop(heap)
        high_weight, _, high = heapq.heappop(heap)
        weight = low_weight + high_weight
        heapq.heappush(heap, (weight, next(order), HuffmanNode(weight, None, low, high)))
    return heap[0][2]


def _walk(node: HuffmanNode | None, code: str) -> Iterator[tuple[HuffmanNode, str]]:
    if node is None:
        return
    if node.is_leaf:
        yield node, code
    yield from _walk(node.left, code + "0")
    yield from _walk(node.right, code + "1")


def build_tree(frequencies: Iterable[int]) -> HuffmanNode:
    """Build a Huffman tree; each leaf's symbol is the position of its weight."""
    return _build(enumerate(frequencies))


def huffman_codes(frequencies: Iterable[int]) -> list[str]:
    """Codes of the leaves in pre-order of the Huffman tree."""
    return [code for _, code in _walk(build_tree(frequencies), "")]


def huffman_table(symbols: Sequence[Hashable], frequencies: Sequence[int]) -> dict[Hashable, str]:
    """Map each symbol to its Huffman code, in pre-order of the tree."""
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    root = _build(zip(symbols, frequencies))
    return {leaf.symbol: code for leaf, code in _walk(root, "")}