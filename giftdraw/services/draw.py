from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Optional, Sequence, Tuple

from loguru import logger

from giftdraw.services.constraints import (
    Assignment,
    DrawConstraints,
    DrawFailure,
    MemberId,
    validate,
)
from giftdraw.services.exact_matcher import exact_match
from giftdraw.services.shuffle_matcher import DEFAULT_MAX_ATTEMPTS, shuffle_match

STRATEGY_SHUFFLE = "shuffle"
STRATEGY_EXACT = "exact"


@dataclass(frozen=True)
class DrawResult:
    assignments: Tuple[Assignment, ...] = ()
    failure: Optional[DrawFailure] = None
    strategy: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None and bool(self.assignments)

    def as_mapping(self) -> Dict[MemberId, MemberId]:
        return {assignment.giver: assignment.receiver for assignment in self.assignments}

    @classmethod
    def success(cls, assignments: Iterable[Assignment], strategy: str) -> "DrawResult":
        return cls(assignments=tuple(assignments), strategy=strategy)

    @classmethod
    def failed(cls, failure: DrawFailure) -> "DrawResult":
        return cls(failure=failure)


def run_draw(
    members: Sequence[MemberId],
    exclusions: Optional[Iterable[Tuple[MemberId, MemberId]]] = None,
    anti_recurrence: Optional[Mapping[MemberId, MemberId]] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> DrawResult:
    """Assign every member exactly one receiver, or explain why that is impossible.

    The randomized matcher runs first; the exact matcher always runs when it
    gives up and is the only component allowed to report ``INFEASIBLE``.
    Pass ``rng`` or ``seed`` to make the draw reproducible.
    """
    constraints = DrawConstraints.build(members, exclusions, anti_recurrence)

    failure = validate(constraints)
    if failure is not None:
        return DrawResult.failed(failure)

    if rng is None:
        rng = random.Random(seed)

    assignments = shuffle_match(constraints, rng, max_attempts=max_attempts)
    if assignments is not None:
        return DrawResult.success(assignments, STRATEGY_SHUFFLE)

    logger.bind(members=len(constraints.members), attempts=max_attempts).debug(
        "Randomized draw exhausted, falling back to exact matching"
    )
    assignments = exact_match(constraints, rng)
    if assignments is None:
        return DrawResult.failed(DrawFailure.INFEASIBLE)
    return DrawResult.success(assignments, STRATEGY_EXACT)
