"""Small stack and string exercises."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

_VOWELS = frozenset("aeiou")


def remove_from_stack(stack: Sequence[Any], item: Any) -> list[Any]:
    """Return the stack (bottom first) without any occurrence of item."""
    return [value for value in stack if value != item]


def is_vowel(char: str) -> bool:
    """Tell whether a character is one of a, e, i, o, u in either case."""
    return char.lower() in _VOWELS


def reverse_vowels(text: str) -> str:
    """Reverse the order of vowels across two space-separated words.

    Everything before the first space is the first word; every non-space
    character after it makes up the second. A text without a second word
    is returned unchanged.
    """
    first, sep, rest = text.partition(" ")
    second = rest.replace(" ", "") if sep else ""
    if not second:
        return text
    joined = first + second
    vowels = [c for c in joined if is_vowel(c)]
    swapped = "".join(vowels.pop() if is_vowel(c) else c for c in joined)
    return f"{swapped[:len(first)]} {swapped[len(first):]}"


def replace_char(text: str, old: str, new: str) -> str:
    """Replace every occurrence of the character old with the character new."""
    if len(old) != 1 or len(new) != 1:
        raise ValueError("old and new must be single characters")
    return text.replace(old, new)