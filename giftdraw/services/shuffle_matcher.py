from __future__ import annotations

import random
from typing import List, Optional

from giftdraw.services.constraints import Assignment, DrawConstraints

DEFAULT_MAX_ATTEMPTS = 500


def shuffle_match(
    constraints: DrawConstraints,
    rng: random.Random,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> Optional[List[Assignment]]:
    givers = list(constraints.members)

    for _ in range(max_attempts):
        receivers = list(givers)
        rng.shuffle(receivers)

        assignments: List[Assignment] = []
        for giver, receiver in zip(givers, receivers):
            if not constraints.is_allowed(giver, receiver):
                break
            assignments.append(Assignment(giver, receiver))
        else:
            return assignments

    return None
