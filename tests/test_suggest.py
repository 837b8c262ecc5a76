"""Tests for the suggestion engine."""

import pytest

from content_cli.suggest import Match, SuggestionEngine, find_matches, suggest


COMMANDS = ["build", "develop", "serve"]


class TestSuggest:
    """Test the formatted suggestion message."""

    def test_transposed_letters(self) -> None:
        """Test a swapped pair of letters suggests the intended command."""
        result = suggest("buidl", COMMANDS)

        assert result == "\nDid you mean this?\n    build\n"

    def test_missing_letter(self) -> None:
        """Test a dropped letter still finds the command."""
        result = suggest("buld", ["build"])

        assert "Did you mean this?" in result
        assert "    build" in result

    def test_abbreviation_lists_several(self) -> None:
        """Test an abbreviation matching several commands uses the plural header."""
        result = suggest("dev", ["develop", "deploy", "delete"])

        assert result == (
            "\nDid you mean one of these?\n"
            "    develop\n"
            "    deploy\n"
            "    delete\n"
        )

    def test_unrelated_token(self) -> None:
        """Test nothing is suggested for an unrelated token."""
        assert suggest("xyz123", COMMANDS) == ""

    def test_empty_inputs(self) -> None:
        """Test empty query and empty candidates."""
        assert suggest("", []) == ""
        assert suggest("", COMMANDS) == ""
        assert suggest("build", []) == ""

    def test_at_most_three_lines(self) -> None:
        """Test output is truncated to three candidates."""
        candidates = ["stat", "start", "state", "stats", "status"]

        result = suggest("stat", candidates)
        lines = [line for line in result.splitlines() if line.startswith("    ")]

        assert result.startswith("\nDid you mean one of these?\n")
        assert lines == ["    stat", "    state", "    stats"]

    def test_case_insensitive(self) -> None:
        """Test case differences do not count as edits."""
        assert suggest("BUILD", COMMANDS) == "\nDid you mean this?\n    build\n"

    def test_deterministic(self) -> None:
        """Test repeated calls give identical output."""
        candidates = ["deploy", "develop", "delete"]

        assert suggest("dep", candidates) == suggest("dep", candidates)

    def test_does_not_mutate_candidates(self) -> None:
        """Test the candidate list is left untouched."""
        candidates = ["serve", "build", "develop"]

        suggest("buidl", candidates)

        assert candidates == ["serve", "build", "develop"]

    @pytest.mark.parametrize("query", ["", " ", "-", "--verbose", "ünïcödé", "a" * 200])
    def test_always_returns_string(self, query: str) -> None:
        """Test arbitrary tokens never raise."""
        assert isinstance(suggest(query, COMMANDS + ["", "a"]), str)


class TestFindMatches:
    """Test ranking and filtering."""

    def test_exact_match_ranks_first(self) -> None:
        """Test an exact name is the top match."""
        matches = find_matches("serve", ["reserve", "serve", "sever"])

        assert matches[0].name == "serve"
        assert matches[0].distance == 0

    def test_exact_match_beats_longer_prefixed_name(self) -> None:
        """Test an exact name outranks an earlier name that starts with it."""
        matches = find_matches("build", ["builder", "build"])

        assert [m.name for m in matches] == ["build", "builder"]
        assert [m.full_distance for m in matches] == [0, 2]
        assert suggest("build", ["builder", "build"]).splitlines()[2] == "    build"

    def test_ties_keep_input_order(self) -> None:
        """Test candidates at equal distance stay in registration order."""
        matches = find_matches("dev", ["delete", "develop", "deploy"])

        assert [m.name for m in matches] == ["develop", "delete", "deploy"]
        assert [m.index for m in matches] == [1, 0, 2]

    def test_threshold_scales_with_query(self) -> None:
        """Test the accepted distance is half the query length."""
        engine = SuggestionEngine()

        assert [m.name for m in engine.find_matches("srve", ["serve"])] == ["serve"]
        assert engine.find_matches("ab", ["xy"]) == []

    def test_custom_ratio(self) -> None:
        """Test a stricter engine drops looser matches."""
        engine = SuggestionEngine(max_ratio=0.1)

        assert engine.find_matches("buidl", COMMANDS) == []

    def test_untruncated(self) -> None:
        """Test find_matches keeps every plausible candidate."""
        candidates = ["stat", "start", "state", "stats", "status"]

        assert len(find_matches("stat", candidates)) == 5


class TestSuggestionEngine:
    """Test engine configuration and formatting."""

    def test_distance_counts_transposition_once(self) -> None:
        """Test adjacent swaps cost one edit."""
        engine = SuggestionEngine()

        assert engine.distance("buidl", "build") == 1

    def test_distance_uses_prefix(self) -> None:
        """Test an abbreviation scores against the candidate prefix."""
        engine = SuggestionEngine()

        assert engine.distance("dev", "develop") == 0
        assert engine.distance("dep", "develop") == 1

    def test_format_respects_max_results(self) -> None:
        """Test a custom result limit."""
        engine = SuggestionEngine(max_results=1)
        matches = [Match(name="a", distance=0, index=0), Match(name="b", distance=0, index=1)]

        assert engine.format(matches) == "\nDid you mean this?\n    a\n"

    def test_format_empty(self) -> None:
        """Test formatting no matches."""
        assert SuggestionEngine().format([]) == ""
