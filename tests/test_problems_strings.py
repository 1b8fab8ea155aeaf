import random
import string

import pytest

from dsakit.problems_strings import (
    alphabet_size_needed,
    can_form_names,
    count_misplaced,
    find_added_character,
    find_decreasing_pair,
    helpful_maths,
)


def test_helpful_maths_sorts_summands():
    assert helpful_maths("3+2+1") == "1+2+3"


def test_helpful_maths_single_and_empty():
    assert helpful_maths("2") == "2"
    assert helpful_maths("") == ""


@pytest.mark.parametrize("expression", ["1+1+3+1+3", "2+1+2+3", "3+3+3"])
def test_helpful_maths_is_idempotent_and_keeps_summands(expression):
    result = helpful_maths(expression)
    assert helpful_maths(result) == result
    assert sorted(result.split("+")) == sorted(expression.split("+"))
    parts = result.split("+")
    assert all(a <= b for a, b in zip(parts, parts[1:]))


def test_can_form_names_accepts_exact_letters():
    assert can_form_names("SANTACLAUS", "DEDMOROZ", "SANTAMOROZDEDCLAUS")
    guest, host = "PAPAINOEL", "JOULUPUKKI"
    assert can_form_names(guest, host, (guest + host)[::-1])


def test_can_form_names_rejects_extra_or_missing_letters():
    assert not can_form_names("PAPAINOEL", "JOULUPUKKI", "JOULNAPAOILELUPUKKI")
    assert not can_form_names("AB", "CD", "ABC")


def test_count_misplaced_example():
    assert count_misplaced("lol") == 2


def test_count_misplaced_sorted_text_has_none():
    assert count_misplaced("".join(sorted("codeforces"))) == 0


@pytest.mark.parametrize("seed", range(5))
def test_count_misplaced_bounds(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("abc") for _ in range(12))
    result = count_misplaced(text)
    assert 0 <= result <= len(text)
    assert result != 1


def test_find_added_character_at_end():
    assert find_added_character("abcd", "abcde") == "e"


def test_find_added_character_shuffled():
    assert find_added_character("ab", "bab") == "b"
    assert find_added_character("", "y") == "y"


@pytest.mark.parametrize("k", [1, 5, 13, 26])
def test_alphabet_size_needed_matches_prefix(k):
    letters = list(string.ascii_lowercase[:k])
    random.Random(k).shuffle(letters)
    assert alphabet_size_needed("".join(letters)) == k


def test_alphabet_size_needed_rejects_empty():
    with pytest.raises(ValueError):
        alphabet_size_needed("")


def test_find_decreasing_pair_example():
    assert find_decreasing_pair("abacaba") == (2, 3)


def test_find_decreasing_pair_none_when_sorted():
    assert find_decreasing_pair("aabcfg") is None
    assert find_decreasing_pair("") is None


@pytest.mark.parametrize("seed", range(5))
def test_find_decreasing_pair_points_at_descent(seed):
    rng = random.Random(seed)
    text = "".join(rng.choice("xyz") for _ in range(10)) + "za"
    i, j = find_decreasing_pair(text)
    assert j == i + 1
    assert text[i - 1] > text[j - 1]
    prefix = text[:i]
    assert list(prefix) == sorted(prefix)