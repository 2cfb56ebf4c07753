"""Command line demonstration of the Manacher palindrome solver.

This script exposes a small harness around ``palindromes.manacher`` so the
solver can be exercised directly from the command line.  Without arguments it
prints the longest palindromic substrings of a set of built-in demo inputs;
otherwise each positional argument is analysed in turn.

The heavy lifting happens in ``palindromes.manacher``.  Here we only
orchestrate inputs and emit human-readable lines.
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import logging
from typing import Iterator, List, Sequence

from palindromes.manacher import find_longest_palindromes

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DemoCase:
    """Container describing a demo input and the palindromes it must yield."""

    text: str
    expected: Sequence[str]


def _iter_demo_cases() -> Iterator[DemoCase]:
    """Yield the built-in demonstration cases."""

    yield DemoCase("google", ["goog"])
    yield DemoCase("", [])
    yield DemoCase("a", ["a"])
    yield DemoCase("aba", ["aba"])
    yield DemoCase("cbbd", ["bb"])
    yield DemoCase("bananas", ["anana"])
    yield DemoCase("abba", ["abba"])
    yield DemoCase("abccba xyzzyx", ["abccba", "xyzzyx"])
    yield DemoCase("levelmadamlevel", ["levelmadamlevel"])
    yield DemoCase("aabbccddeeff", ["aa", "bb", "cc", "dd", "ee", "ff"])


def format_result(text: str, palindromes: Sequence[str]) -> str:
    """Return the report line for *text* and its longest *palindromes*."""

    header = f'Longest palindromic substrings of "{text}":'
    if not palindromes:
        return f"{header} No palindromes found."
    return f"{header} {' '.join(palindromes)}"


def _run_demo() -> List[str]:
    lines = []
    for case in _iter_demo_cases():
        palindromes = find_longest_palindromes(case.text)
        if palindromes != list(case.expected):
            raise RuntimeError(
                "Demo case expectation mismatch:"
                f" {case.text!r} expected {list(case.expected)!r}"
                f" but received {palindromes!r}"
            )
        lines.append(format_result(case.text, palindromes))
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Print the longest palindromes for the supplied or built-in inputs."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "text",
        nargs="*",
        help="Strings to analyse. Defaults to the built-in demo inputs.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.text:
        lines = [format_result(text, find_longest_palindromes(text)) for text in args.text]
    else:
        logger.info("No input supplied; running built-in demo cases")
        lines = _run_demo()

    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
