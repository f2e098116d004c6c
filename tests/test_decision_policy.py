"""Tests for ranking candidates and choosing between redirect and choices."""

from typing import List

import pytest

from urlspell.correction import decide, rank_candidates
from urlspell.models import Candidate, FixupStatus, Similarity


def make_candidates(*pairs) -> List[Candidate]:
    """Helper to create candidates from (name, Similarity) pairs."""
    return [Candidate(name, similarity) for name, similarity in pairs]


class TestRankCandidates:
    """Test ranking of candidates."""

    def test_best_first(self) -> None:
        """Candidates are ordered by similarity, best first."""
        candidates = make_candidates(
            ("c", Similarity.VERY_DIFFERENT),
            ("b", Similarity.SIMPLE_TYPO),
            ("a", Similarity.MISCAPITALIZED),
        )

        ranked = rank_candidates(candidates)

        assert [c.name for c in ranked] == ["a", "b", "c"]

    def test_stable_among_equals(self) -> None:
        """Equal candidates keep their enumeration order."""
        candidates = make_candidates(
            ("z", Similarity.TRANSPOSITION),
            ("m", Similarity.VERY_DIFFERENT),
            ("a", Similarity.TRANSPOSITION),
            ("y", Similarity.TRANSPOSITION),
        )

        ranked = rank_candidates(candidates)

        assert [c.name for c in ranked] == ["z", "a", "y", "m"]

    def test_does_not_modify_input(self) -> None:
        """Ranking returns a new list."""
        candidates = make_candidates(
            ("b", Similarity.SIMPLE_TYPO),
            ("a", Similarity.MISCAPITALIZED),
        )

        rank_candidates(candidates)

        assert [c.name for c in candidates] == ["b", "a"]


class TestDecide:
    """Test the redirect gate."""

    def test_no_candidates(self) -> None:
        """No candidates means no correction."""
        decision = decide([])

        assert decision.status is FixupStatus.OK
        assert decision.best is None

    def test_single_close_candidate_redirects(self) -> None:
        """A single close match redirects."""
        decision = decide(make_candidates(("index.html", Similarity.MISSING_CHARACTER)))

        assert decision.status is FixupStatus.MOVED_PERMANENTLY
        assert decision.best.name == "index.html"

    def test_unique_best_class_redirects(self) -> None:
        """A best class held by one candidate redirects despite other candidates."""
        decision = decide(make_candidates(
            ("foo.txt", Similarity.VERY_DIFFERENT),
            ("foo.html", Similarity.MISSING_CHARACTER),
            ("fo.html", Similarity.SIMPLE_TYPO),
        ))

        assert decision.status is FixupStatus.MOVED_PERMANENTLY
        assert decision.best.name == "foo.html"

    def test_tied_best_class_offers_choices(self) -> None:
        """Two candidates sharing the best class are ambiguous."""
        decision = decide(make_candidates(
            ("abdc", Similarity.TRANSPOSITION),
            ("acbd", Similarity.TRANSPOSITION),
        ))

        assert decision.status is FixupStatus.MULTIPLE_CHOICES
        assert [c.name for c in decision.candidates] == ["abdc", "acbd"]

    def test_tie_below_best_still_redirects(self) -> None:
        """Ties among worse classes do not block a redirect."""
        decision = decide(make_candidates(
            ("a", Similarity.SIMPLE_TYPO),
            ("b", Similarity.SIMPLE_TYPO),
            ("c", Similarity.MISCAPITALIZED),
        ))

        assert decision.status is FixupStatus.MOVED_PERMANENTLY
        assert decision.best.name == "c"

    def test_single_basename_match_offers_choices(self) -> None:
        """A sole basename-only match never redirects."""
        decision = decide(make_candidates(("foo.html", Similarity.VERY_DIFFERENT)))

        assert decision.status is FixupStatus.MULTIPLE_CHOICES
        assert len(decision.candidates) == 1

    def test_basename_matches_offer_choices(self) -> None:
        """Several basename-only matches offer choices."""
        decision = decide(make_candidates(
            ("foo.html", Similarity.VERY_DIFFERENT),
            ("Foo.gif", Similarity.VERY_DIFFERENT),
        ))

        assert decision.status is FixupStatus.MULTIPLE_CHOICES
        assert [c.name for c in decision.candidates] == ["foo.html", "Foo.gif"]

    @pytest.mark.parametrize("similarity", [
        Similarity.IDENTICAL,
        Similarity.MISCAPITALIZED,
        Similarity.TRANSPOSITION,
        Similarity.MISSING_CHARACTER,
        Similarity.EXTRA_CHARACTER,
        Similarity.SIMPLE_TYPO,
    ])
    def test_every_close_class_can_redirect(self, similarity: Similarity) -> None:
        """Each class better than very different is eligible for a redirect."""
        decision = decide([Candidate("x", similarity)])

        assert decision.status is FixupStatus.MOVED_PERMANENTLY

    def test_adding_worse_candidate_keeps_target(self) -> None:
        """A strictly worse extra candidate does not change the redirect target."""
        base = make_candidates(("indx.html", Similarity.EXTRA_CHARACTER))
        extended = base + make_candidates(("inde.html", Similarity.SIMPLE_TYPO))

        assert decide(base).best == decide(extended).best
        assert decide(extended).status is FixupStatus.MOVED_PERMANENTLY
