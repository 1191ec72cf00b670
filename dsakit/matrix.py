"""Matrix problems."""

from __future__ import annotations

from collections.abc import Sequence


def _largest_in_histogram(heights: Sequence[int]) -> int:
    best = 0
    stack: list[int] = []
    for position, height in enumerate([*heights, 0]):
        while stack and heights[stack[-1]] >= height:
            top = heights[stack.pop()]
            left = stack[-1] + 1 if stack else 0
            best = max(best, top * (position - left))
        stack.append(position)
    return best


def max_rectangle_area(matrix: Sequence[Sequence[int]]) -> int:
    """Area of the largest all-ones rectangle in a binary matrix."""
    rows = [list(row) for row in matrix]
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows of the matrix must have the same length")
    heights = [0] * width
    best = 0
    for row in rows:
        heights = [height + 1 if cell == 1 else 0 for height, cell in zip(heights, row)]
        best = max(best, _largest_in_histogram(heights))
    return best