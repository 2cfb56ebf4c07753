"""Quadratic expand-around-center palindrome solver.

The solver visits every one of the ``2n - 1`` centres of the input, grows a
palindrome outwards from each, and keeps every palindrome of the maximal
length.  It is slower than :mod:`palindromes.manacher` but simple enough to
serve as a reference when cross-checking results and as the baseline in
:mod:`palindromes.profiling`.
"""

from __future__ import annotations

from typing import List, Tuple


def expand_from_center(text: str, left: int, right: int) -> Tuple[int, int]:
    """Return the (start, end) indices after expanding around a center.

    Parameters
    ----------
    text:
        String to inspect.
    left, right:
        Starting indices for the expansion. When *left == right* the expansion
        considers odd-length palindromes, otherwise even-length palindromes.
        An even centre whose two characters differ yields ``end < start``.
    """

    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return left + 1, right - 1


def longest_palindromes_quadratic(text: str) -> List[str]:
    """Return every longest palindromic substring of *text* in O(n^2) time.

    Centres are visited left to right, the odd centre on a character before the
    even centre to its right, so the output is ordered by start index exactly
    like :func:`palindromes.manacher.find_longest_palindromes`.

    Raises
    ------
    TypeError
        If *text* is not a string.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")

    best_length = 0
    spans: List[Tuple[int, int]] = []
    for center in range(len(text)):
        for left, right in ((center, center), (center, center + 1)):
            start, end = expand_from_center(text, left, right)
            length = end - start + 1
            if length <= 0 or length < best_length:
                continue
            if length > best_length:
                best_length = length
                spans = []
            spans.append((start, end))

    return [text[start : end + 1] for start, end in spans]


__all__ = ["expand_from_center", "longest_palindromes_quadratic"]
