"""Decision policy for spelling-correction candidates.

Candidates are ranked by Similarity (best first, enumeration order kept
among equals) and the ranking decides between a redirect and a list of
choices.

Conditions for an immediate redirect:
    a) the best candidate was not found by basename matching alone, AND
    b) it is the only candidate OR no other candidate shares its class.

Otherwise a "300 Multiple Choices" list of the candidates is returned.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from urlspell.models import Candidate, FixupStatus, Similarity


@dataclass
class Decision:
    """What to do with a set of candidates."""
    status: FixupStatus                  # OK, MOVED_PERMANENTLY or MULTIPLE_CHOICES
    candidates: List[Candidate] = field(default_factory=list)  # Ranked, best first

    @property
    def best(self) -> Optional[Candidate]:
        """The top-ranked candidate, or None if there are none."""
        return self.candidates[0] if self.candidates else None


def rank_candidates(candidates: Sequence[Candidate]) -> List[Candidate]:
    """Sort candidates best first, keeping enumeration order among equals."""
    return sorted(candidates, key=lambda c: c.similarity)


def decide(candidates: Sequence[Candidate]) -> Decision:
    """Choose between no correction, a redirect and a list of choices.

    Args:
        candidates: Candidates in directory enumeration order.

    Returns:
        Decision with status OK if there are no candidates,
        MOVED_PERMANENTLY if the best class is held by exactly one candidate
        that is not VERY_DIFFERENT, and MULTIPLE_CHOICES otherwise.

    Example:
        >>> decide([Candidate("abdc", Similarity.TRANSPOSITION),
        ...         Candidate("acbd", Similarity.TRANSPOSITION)]).status
        <FixupStatus.MULTIPLE_CHOICES: 'multiple_choices'>
    """
    if not candidates:
        return Decision(status=FixupStatus.OK)

    ranked = rank_candidates(candidates)
    best = ranked[0]

    if best.similarity is not Similarity.VERY_DIFFERENT and (
        len(ranked) == 1 or best.similarity != ranked[1].similarity
    ):
        return Decision(status=FixupStatus.MOVED_PERMANENTLY, candidates=ranked)

    return Decision(status=FixupStatus.MULTIPLE_CHOICES, candidates=ranked)
