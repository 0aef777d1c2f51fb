"""
Vote state machine for one (recipe, user) pair.

States are NoVote, Liked, ThumbsUp and ThumbsDown. A user holds at most one
vote per recipe; casting the held kind again removes it, casting another
kind replaces it. Counts are derived from the previous snapshot rather than
re-read after the write.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Optional, Tuple

from domain.enums import VoteKind


class VoteChange(str, Enum):
    """Row operation needed to move to the new state"""

    CREATE = "create"
    DELETE = "delete"
    REPLACE = "replace"


def empty_counts() -> Dict[VoteKind, int]:
    return {kind: 0 for kind in VoteKind}


@dataclass(frozen=True)
class VoteState:
    counts: Dict[VoteKind, int] = field(default_factory=empty_counts)
    user_kind: Optional[VoteKind] = None

    @classmethod
    def from_rows(
        cls, kinds: Iterable[VoteKind], user_kind: Optional[VoteKind] = None
    ) -> "VoteState":
        counts = empty_counts()
        for kind in kinds:
            counts[VoteKind(kind)] += 1
        return cls(counts=counts, user_kind=user_kind)

    def count(self, kind: VoteKind) -> int:
        return self.counts.get(kind, 0)


def transition(state: VoteState, kind: VoteKind) -> Tuple[VoteState, VoteChange]:
    kind = VoteKind(kind)
    counts = dict(state.counts)
    for k in VoteKind:
        counts.setdefault(k, 0)

    if state.user_kind is None:
        counts[kind] += 1
        return VoteState(counts=counts, user_kind=kind), VoteChange.CREATE

    # counts never go below zero, even after drift from concurrent voters
    counts[state.user_kind] = max(0, counts[state.user_kind] - 1)
    if state.user_kind == kind:
        return VoteState(counts=counts, user_kind=None), VoteChange.DELETE

    counts[kind] += 1
    return VoteState(counts=counts, user_kind=kind), VoteChange.REPLACE
