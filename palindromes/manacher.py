"""Linear-time search for every longest palindromic substring.

This module implements Manacher's algorithm.  The input is interleaved with an
out-of-band separator so that odd- and even-length palindromes share a single
indexing scheme, a radius array is filled in one left-to-right pass that reuses
mirrored radii inside the rightmost known palindrome, and every centre reaching
the global maximum radius is mapped back to a substring of the original text.

Unlike :func:`palindromes.expand_around_center.longest_palindromes_quadratic`
the scan is O(n) in both time and memory.  Results are reported by position,
so two occurrences of the same palindrome are returned as separate entries.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List, Optional

logger = logging.getLogger(__name__)

# Not a ``str``, so it never compares equal to a character of the input.
SEPARATOR = None


@dataclass(frozen=True)
class PalindromeMatch:
    """A maximal palindrome located inside *text*.

    Attributes
    ----------
    text:
        Original string.
    start:
        Inclusive start index of the palindrome inside *text*.
    length:
        Number of characters in the palindrome.
    """

    text: str
    start: int
    length: int

    @property
    def end(self) -> int:
        """Return the inclusive end index of the palindrome."""

        return self.start + self.length - 1

    @property
    def value(self) -> str:
        """Return the palindromic substring."""

        return self.text[self.start : self.start + self.length]


def _validate_text(text: str) -> None:
    if not isinstance(text, str):
        raise TypeError("text must be a string")


def build_transformed_sequence(text: str) -> List[Optional[str]]:
    """Return *text* with :data:`SEPARATOR` before, between and after characters.

    The result always has ``2 * len(text) + 1`` slots; even slots hold the
    separator and odd slots hold the original characters.
    """

    _validate_text(text)
    transformed: List[Optional[str]] = [SEPARATOR]
    for char in text:
        transformed.append(char)
        transformed.append(SEPARATOR)
    return transformed


def palindrome_radii(text: str) -> List[int]:
    """Return the Manacher radius array for *text*.

    ``radii[i]`` is the radius of the longest palindrome of the transformed
    sequence centred at ``i``, which is also the length of the corresponding
    palindrome in *text*.  The first and last entries are boundary separators
    and always hold ``0``.
    """

    transformed = build_transformed_sequence(text)
    size = len(transformed)
    radii = [0] * size
    center = right_boundary = 0

    for index in range(1, size - 1):
        if right_boundary > index:
            mirror = 2 * center - index
            radii[index] = min(right_boundary - index, radii[mirror])

        radius = radii[index]
        while (
            index - radius - 1 >= 0
            and index + radius + 1 < size
            and transformed[index - radius - 1] == transformed[index + radius + 1]
        ):
            radius += 1
        radii[index] = radius

        if index + radius > right_boundary:
            center, right_boundary = index, index + radius

    return radii


def find_longest_palindrome_matches(text: str) -> List[PalindromeMatch]:
    """Return every longest palindrome in *text* with its position.

    Parameters
    ----------
    text:
        Input string.  The empty string yields an empty list rather than a
        zero-length match.

    Raises
    ------
    TypeError
        If *text* is not a string.

    Returns
    -------
    list of PalindromeMatch
        Matches of equal, maximal length ordered by ascending start index.
    """

    radii = palindrome_radii(text)
    if not text:
        return []

    interior = radii[1:-1]
    max_length = max(interior)
    matches = [
        PalindromeMatch(text=text, start=(index - max_length) // 2, length=max_length)
        for index, radius in enumerate(radii)
        if 0 < index < len(radii) - 1 and radius == max_length
    ]
    logger.debug(
        "Scanned %d characters: max_length=%d matches=%d",
        len(text),
        max_length,
        len(matches),
    )
    return matches


def find_longest_palindromes(text: str) -> List[str]:
    """Return every longest palindromic substring of *text*.

    Substrings are listed in order of increasing start position and are not
    deduplicated by value.  ``find_longest_palindromes("")`` returns ``[]``.
    """

    return [match.value for match in find_longest_palindrome_matches(text)]


__all__ = [
    "PalindromeMatch",
    "SEPARATOR",
    "build_transformed_sequence",
    "find_longest_palindrome_matches",
    "find_longest_palindromes",
    "palindrome_radii",
]
