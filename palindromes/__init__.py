"""Longest palindromic substring solvers."""

from .expand_around_center import expand_from_center, longest_palindromes_quadratic
from .manacher import (
    PalindromeMatch,
    build_transformed_sequence,
    find_longest_palindrome_matches,
    find_longest_palindromes,
    palindrome_radii,
)
from .profiling import (
    SolverMismatchError,
    SolverProfile,
    generate_text,
    profile_solvers,
    write_profiles_to_csv,
)

__all__ = [
    "PalindromeMatch",
    "SolverMismatchError",
    "SolverProfile",
    "build_transformed_sequence",
    "expand_from_center",
    "find_longest_palindrome_matches",
    "find_longest_palindromes",
    "generate_text",
    "longest_palindromes_quadratic",
    "palindrome_radii",
    "profile_solvers",
    "write_profiles_to_csv",
]
