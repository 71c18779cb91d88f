from __future__ import annotations

import random
from typing import List, Optional

from giftdraw.services.constraints import Assignment, DrawConstraints


def build_edges(constraints: DrawConstraints) -> List[List[int]]:
    members = constraints.members
    return [
        [index for index, receiver in enumerate(members) if constraints.is_allowed(giver, receiver)]
        for giver in members
    ]


def exact_match(
    constraints: DrawConstraints,
    rng: Optional[random.Random] = None,
) -> Optional[List[Assignment]]:
    members = constraints.members
    edges = build_edges(constraints)
    if rng is not None:
        for candidates in edges:
            rng.shuffle(candidates)

    match: List[int] = [-1] * len(members)

    def augment(giver: int, seen: List[bool]) -> bool:
        for receiver in edges[giver]:
            if seen[receiver]:
                continue
            seen[receiver] = True
            if match[receiver] == -1 or augment(match[receiver], seen):
                match[receiver] = giver
                return True
        return False

    matched = 0
    for giver in range(len(members)):
        if augment(giver, [False] * len(members)):
            matched += 1

    if matched != len(members):
        return None

    receiver_of = [-1] * len(members)
    for receiver, giver in enumerate(match):
        receiver_of[giver] = receiver

    return [Assignment(members[giver], members[receiver]) for giver, receiver in enumerate(receiver_of)]
