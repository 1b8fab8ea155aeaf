"""Huffman tree construction, code tables, encoding and decoding."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from dataclasses import dataclass


@dataclass(eq=False)
class HuffmanNode:
    """A Huffman tree node; leaves carry a character, inner nodes carry None."""

    ch: str | None
    freq: int
    left: HuffmanNode | None = None
    right: HuffmanNode | None = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_huffman_tree(text: str) -> HuffmanNode:
    """Build a Huffman tree from the character frequencies of text."""
    if not text:
        raise ValueError("cannot build a Huffman tree from empty text")
    order = itertools.count()
    heap = [
        (freq, next(order), HuffmanNode(ch, freq))
        for ch, freq in Counter(text).items()
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        merged = HuffmanNode(None, left.freq + right.freq, left, right)
        heapq.heappush(heap, (merged.freq, next(order), merged))
    return heap[0][2]


def generate_codes(root: HuffmanNode | None) -> dict[str, str]:
    """Map each leaf character to its path of '0' (left) and '1' (right)."""
    codes: dict[str, str] = {}
    stack = [(root, "")] if root is not None else []
    while stack:
        node, code = stack.pop()
        if node.is_leaf:
            codes[node.ch] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes


def encode(text: str, codes: dict[str, str]) -> str:
    """Concatenate the code of every character in text."""
    try:
        return "".join(codes[ch] for ch in text)
    except KeyError as exc:
        raise ValueError(f"no code for character {exc.args[0]!r}") from None


def decode(bits: str, root: HuffmanNode) -> str:
    """Walk the tree bit by bit, emitting a character at each leaf."""
    if not bits:
        return ""
    if root.is_leaf:
        raise ValueError("a single-leaf tree cannot decode any bits")
    result: list[str] = []
    current = root
    for bit in bits:
        if bit == "0":
            current = current.left
        elif bit == "1":
            current = current.right
        else:
            raise ValueError(f"invalid bit {bit!r}")
        if current.is_leaf:
            result.append(current.ch)
            current = root
    if current is not root:
        raise ValueError("encoded data ends in the middle of a code")
    return "".join(result)