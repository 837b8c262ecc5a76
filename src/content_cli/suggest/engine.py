"""Typo-tolerant "did you mean" suggestions for unknown command names."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from rapidfuzz.distance import OSA

SINGLE_HEADER = "Did you mean this?"
MULTI_HEADER = "Did you mean one of these?"
INDENT = "    "


@dataclass(frozen=True)
class Match:
    """A candidate command that is close enough to the typed token."""

    name: str
    distance: int
    index: int  # Position in the candidate sequence
    full_distance: int = 0  # Distance to the whole name, ignoring prefixes


class SuggestionEngine:
    """Ranks command names by edit distance to a mistyped token."""

    def __init__(self, max_results: int = 3, max_ratio: float = 0.5) -> None:
        """Initialize the engine.

        Args:
            max_results: Maximum number of names shown in a message
            max_ratio: Largest accepted distance, as a fraction of the
                query length
        """
        self.max_results = max_results
        self.max_ratio = max_ratio

    def distance(self, query: str, candidate: str) -> int:
        """Score a candidate against the query (lower is closer).

        Uses optimal string alignment distance, which counts insertions,
        deletions, substitutions and adjacent transpositions. The
        candidate's prefix of the query's length is also scored, so an
        abbreviation is as close as a one-off typo of the full name.
        """
        query = query.casefold()
        candidate = candidate.casefold()
        full = OSA.distance(query, candidate)
        prefix = OSA.distance(query, candidate[: len(query)])
        return min(full, prefix)

    def find_matches(self, query: str, candidates: Sequence[str]) -> list[Match]:
        """Return every plausible candidate, closest first.

        Args:
            query: The token the user typed
            candidates: Registered command names, in registration order

        Returns:
            Matches sorted by distance, then by distance to the whole
            name (so exact names beat longer names they prefix); remaining
            ties keep the candidates' order
        """
        if not query:
            return []

        limit = len(query) * self.max_ratio
        matches = []
        for index, name in enumerate(candidates):
            score = self.distance(query, name)
            if score <= limit:
                full = OSA.distance(query.casefold(), name.casefold())
                matches.append(Match(name=name, distance=score, index=index, full_distance=full))

        # sorted() is stable, so full ties stay in input order
        return sorted(matches, key=lambda m: (m.distance, m.full_distance))

    def format(self, matches: Sequence[Match]) -> str:
        """Render matches as the message printed under the usage help."""
        lines = [f"{INDENT}{m.name}" for m in matches[: self.max_results]]

        if not lines:
            return ""
        if len(lines) == 1:
            return f"\n{SINGLE_HEADER}\n{lines[0]}\n"
        return "\n".join([f"\n{MULTI_HEADER}", *lines]) + "\n"

    def suggest(self, query: str, candidates: Sequence[str]) -> str:
        """Build the suggestion message for a mistyped command."""
        return self.format(self.find_matches(query, candidates))


_default_engine = SuggestionEngine()


def find_matches(query: str, candidates: Sequence[str]) -> list[Match]:
    """Rank candidates with the default engine."""
    return _default_engine.find_matches(query, candidates)


def suggest(query: str, candidates: Sequence[str]) -> str:
    """Suggest the closest command names, or return "" if none is close.

    Example:
        >>> print(suggest("buidl", ["build", "develop", "serve"]))
        <BLANKLINE>
        Did you mean this?
            build
        <BLANKLINE>
    """
    return _default_engine.suggest(query, candidates)
