"""Tests for the Manacher longest-palindrome solver."""

from __future__ import annotations

import random
import string

import pytest

from palindromes.manacher import (
    SEPARATOR,
    PalindromeMatch,
    build_transformed_sequence,
    find_longest_palindrome_matches,
    find_longest_palindromes,
    palindrome_radii,
)


def _brute_force_max_length(text: str) -> int:
    best = 0
    for start in range(len(text)):
        for end in range(start + 1, len(text) + 1):
            candidate = text[start:end]
            if candidate == candidate[::-1]:
                best = max(best, end - start)
    return best


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", []),
        ("a", ["a"]),
        ("aba", ["aba"]),
        ("cbbd", ["bb"]),
        ("bananas", ["anana"]),
        ("abba", ["abba"]),
        ("abccba xyzzyx", ["abccba", "xyzzyx"]),
        ("levelmadamlevel", ["levelmadamlevel"]),
        ("aabbccddeeff", ["aa", "bb", "cc", "dd", "ee", "ff"]),
        ("google", ["goog"]),
    ],
)
def test_known_inputs(text: str, expected: list[str]) -> None:
    assert find_longest_palindromes(text) == expected


def test_all_unique_characters_report_every_position() -> None:
    assert find_longest_palindromes("abcd") == ["a", "b", "c", "d"]


def test_duplicate_values_are_reported_per_position() -> None:
    assert find_longest_palindromes("aaxaa") == ["aaxaa"]
    assert find_longest_palindromes("aa-bb+aa") == ["aa", "bb", "aa"]


def test_separator_glyphs_in_input_are_ordinary_characters() -> None:
    assert find_longest_palindromes("#a#") == ["#a#"]
    assert find_longest_palindromes("#ab") == ["#", "a", "b"]
    assert find_longest_palindromes("a##b") == ["##"]


def test_transformed_sequence_layout() -> None:
    transformed = build_transformed_sequence("ab")
    assert transformed == [SEPARATOR, "a", SEPARATOR, "b", SEPARATOR]
    assert build_transformed_sequence("") == [SEPARATOR]


def test_radius_array_matches_hand_computation() -> None:
    # transformed: | a | b | a |
    assert palindrome_radii("aba") == [0, 1, 0, 3, 0, 1, 0]
    assert palindrome_radii("") == [0]


def test_match_metadata() -> None:
    text = "xabbay"
    (match,) = find_longest_palindrome_matches(text)
    assert isinstance(match, PalindromeMatch)
    assert match.start == 1
    assert match.length == 4
    assert match.end == 4
    assert match.value == "abba"


def test_empty_input_yields_no_matches() -> None:
    assert find_longest_palindrome_matches("") == []


def test_invalid_input_type() -> None:
    with pytest.raises(TypeError):
        find_longest_palindromes(123)  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        palindrome_radii(["a", "b"])  # type: ignore[arg-type]


def test_repeated_calls_are_identical() -> None:
    text = "abacabadabacaba"
    assert find_longest_palindromes(text) == find_longest_palindromes(text)


def test_random_inputs_satisfy_palindrome_properties() -> None:
    rng = random.Random(7)
    for _ in range(300):
        length = rng.randint(1, 14)
        text = "".join(rng.choices("abc", k=length))
        matches = find_longest_palindrome_matches(text)
        expected_length = _brute_force_max_length(text)

        assert matches, text
        starts = [match.start for match in matches]
        assert starts == sorted(set(starts)), text
        for match in matches:
            assert match.length == expected_length, text
            assert match.value == match.value[::-1], text
            assert text[match.start : match.end + 1] == match.value, text


def test_long_input_is_handled() -> None:
    text = "".join(random.Random(3).choices(string.ascii_lowercase, k=5_000))
    body = "a" * 10_001
    assert find_longest_palindromes(text + body + text[::-1]) == [
        text + body + text[::-1]
    ]
