from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, FrozenSet, Hashable, Iterable, Mapping, NamedTuple, Optional, Sequence, Tuple

MemberId = Hashable


class DrawFailure(str, enum.Enum):
    INSUFFICIENT_PARTICIPANTS = "insufficient_participants"
    DUPLICATE_MEMBERS = "duplicate_members"
    INFEASIBLE = "infeasible"


class Exclusion(NamedTuple):
    giver: MemberId
    blocked: MemberId


class Assignment(NamedTuple):
    giver: MemberId
    receiver: MemberId


@dataclass(frozen=True)
class DrawConstraints:
    members: Tuple[MemberId, ...]
    exclusions: FrozenSet[Exclusion]
    anti_recurrence: Mapping[MemberId, MemberId]

    @classmethod
    def build(
        cls,
        members: Sequence[MemberId],
        exclusions: Optional[Iterable[Tuple[MemberId, MemberId]]] = None,
        anti_recurrence: Optional[Mapping[MemberId, MemberId]] = None,
    ) -> "DrawConstraints":
        exclusion_set = frozenset(Exclusion(giver, blocked) for giver, blocked in exclusions or ())
        history: Dict[MemberId, MemberId] = dict(anti_recurrence or {})
        return cls(
            members=tuple(members),
            exclusions=exclusion_set,
            anti_recurrence=MappingProxyType(history),
        )

    def is_allowed(self, giver: MemberId, receiver: MemberId) -> bool:
        if giver == receiver:
            return False
        if (giver, receiver) in self.exclusions:
            return False
        if giver in self.anti_recurrence and self.anti_recurrence[giver] == receiver:
            return False
        return True


def validate(constraints: DrawConstraints) -> Optional[DrawFailure]:
    if len(constraints.members) < 2:
        return DrawFailure.INSUFFICIENT_PARTICIPANTS
    if len(set(constraints.members)) != len(constraints.members):
        return DrawFailure.DUPLICATE_MEMBERS
    return None
