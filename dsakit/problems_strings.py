"""Short string puzzles solved by sorting characters."""

from __future__ import annotations

from functools import reduce


def helpful_maths(expression: str) -> str:
    """Rearrange the summands of a '+'-joined sum into non-decreasing order."""
    digits = sorted(ch for ch in expression if ch != "+")
    return "+".join(digits)


def can_form_names(guest: str, host: str, pile: str) -> bool:
    """Tell whether the letters of pile are exactly those of guest and host."""
    return sorted(pile) == sorted(guest + host)


def count_misplaced(text: str) -> int:
    """Count positions whose character differs from the sorted text's."""
    return sum(a != b for a, b in zip(text, sorted(text)))


def find_added_character(s: str, t: str) -> str:
    """Return the character that t holds in addition to the letters of s."""
    code = reduce(lambda acc, ch: acc ^ ord(ch), s + t, 0)
    return chr(code)


def alphabet_size_needed(text: str) -> int:
    """Return the size of the alphabet, starting at 'a', that text needs."""
    if not text:
        raise ValueError("text must not be empty")
    return ord(max(text)) - ord("a") + 1


def find_decreasing_pair(text: str) -> tuple[int, int] | None:
    """Return 1-based positions (i, i + 1) of the first descent, or None if sorted."""
    for index, (current, following) in enumerate(zip(text, text[1:]), start=1):
        if current > following:
            return index, index + 1
    return None