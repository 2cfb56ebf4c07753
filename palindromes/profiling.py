"""Profiling helpers comparing the palindrome solvers.

The public API covers the following capabilities:

* ``profile_solvers`` – runs the linear Manacher solver and the quadratic
  expand-around-center solver under ``tracemalloc`` and asserts that both
  report the same palindromes.
* ``write_profiles_to_csv`` – persists collected metrics for regression
  analysis.
* ``generate_text`` – builds deterministic workloads from a seeded RNG.
* ``main`` – CLI entry point producing a reproducible metrics file.
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import csv
import logging
import random
import time
import tracemalloc
from pathlib import Path
from typing import Callable, Iterable, List, Sequence, Tuple

from palindromes.expand_around_center import longest_palindromes_quadratic
from palindromes.manacher import find_longest_palindromes

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("palindrome_profiles.csv")
DEFAULT_LENGTH = 2_000
DEFAULT_ALPHABET = "ab"
DEFAULT_SEED = 13

Solver = Callable[[str], List[str]]


class SolverMismatchError(RuntimeError):
    """Raised when the palindrome solvers disagree on the same input."""


@dataclass(frozen=True)
class SolverProfile:
    """Profiling information captured for a single solver run."""

    name: str
    match_count: int
    max_length: int
    time_seconds: float
    peak_bytes: int

    def to_row(self) -> List[str]:
        """Serialise the profile for CSV persistence."""

        return [
            self.name,
            str(self.match_count),
            str(self.max_length),
            f"{self.time_seconds:.9f}",
            str(self.peak_bytes),
        ]


def generate_text(
    length: int, *, alphabet: str = DEFAULT_ALPHABET, seed: int = DEFAULT_SEED
) -> str:
    """Return a pseudo-random string of *length* characters drawn from *alphabet*.

    Small alphabets produce many overlapping palindromes, which is the
    interesting case for comparing the solvers.
    """

    if isinstance(length, bool) or not isinstance(length, int):
        raise ValueError("length must be an integer")
    if length < 0:
        raise ValueError("length must be non-negative")
    if not alphabet:
        raise ValueError("alphabet must contain at least one character")
    rng = random.Random(seed)
    return "".join(rng.choices(alphabet, k=length))


def _run(name: str, solver: Solver, text: str) -> Tuple[List[str], float, int]:
    tracemalloc.start()
    try:
        start = time.perf_counter()
        result = solver(text)
        elapsed = time.perf_counter() - start
        current, peak = tracemalloc.get_traced_memory()
        logger.debug("%s traced memory: current=%d peak=%d", name, current, peak)
    finally:
        if tracemalloc.is_tracing():
            tracemalloc.stop()
    return result, elapsed, peak


def profile_solvers(text: str) -> Tuple[SolverProfile, SolverProfile]:
    """Profile both solvers on *text* and return their metrics.

    Raises
    ------
    TypeError
        If *text* is not a string.
    SolverMismatchError
        If the solvers return different palindromes.
    """

    if not isinstance(text, str):
        raise TypeError("text must be a string")

    profiles = []
    results = []
    for name, solver in (
        ("manacher", find_longest_palindromes),
        ("expand_around_center", longest_palindromes_quadratic),
    ):
        result, elapsed, peak = _run(name, solver, text)
        results.append(result)
        profiles.append(
            SolverProfile(
                name=name,
                match_count=len(result),
                max_length=len(result[0]) if result else 0,
                time_seconds=elapsed,
                peak_bytes=peak,
            )
        )

    if results[0] != results[1]:
        raise SolverMismatchError(
            "Palindrome solvers produced divergent results: "
            f"manacher={results[0]!r}, expand_around_center={results[1]!r}"
        )

    manacher_profile, quadratic_profile = profiles
    logger.info(
        "Profiled %d characters: manacher=%.6fs expand_around_center=%.6fs",
        len(text),
        manacher_profile.time_seconds,
        quadratic_profile.time_seconds,
    )
    return manacher_profile, quadratic_profile


def write_profiles_to_csv(
    path: Path, profiles: Iterable[SolverProfile], *, newline: str = ""
) -> None:
    """Persist profiling results to ``path`` using a deterministic header."""

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline=newline) as handle:
        writer = csv.writer(handle)
        writer.writerow(
            ["solver", "match_count", "max_length", "time_seconds", "peak_bytes"]
        )
        for profile in profiles:
            writer.writerow(profile.to_row())


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point for profiling the palindrome solvers."""

    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--text",
        type=str,
        default=None,
        help="Profile this exact string instead of a generated workload.",
    )
    source.add_argument(
        "--length",
        type=int,
        default=None,
        help=f"Length of the generated workload (default: {DEFAULT_LENGTH}).",
    )
    parser.add_argument(
        "--alphabet",
        type=str,
        default=DEFAULT_ALPHABET,
        help="Characters used when generating the workload.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=DEFAULT_SEED,
        help="Seed for the workload generator.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT,
        help="Destination CSV file for profiling results.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.text is not None:
        text = args.text
    else:
        length = args.length if args.length is not None else DEFAULT_LENGTH
        try:
            text = generate_text(length, alphabet=args.alphabet, seed=args.seed)
        except ValueError as exc:
            parser.error(str(exc))

    try:
        profiles = profile_solvers(text)
    except SolverMismatchError as exc:
        logger.error("Failed to profile solvers: %s", exc)
        return 1

    write_profiles_to_csv(args.output, profiles)
    logger.info("Profiles written to %s", args.output)
    return 0


__all__ = [
    "SolverMismatchError",
    "SolverProfile",
    "generate_text",
    "main",
    "profile_solvers",
    "write_profiles_to_csv",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
