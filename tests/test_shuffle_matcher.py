import random

from giftdraw.services.constraints import Assignment, DrawConstraints
from giftdraw.services.shuffle_matcher import shuffle_match

from helpers import assert_valid_draw


class RotatingRandom:
    def shuffle(self, items):
        items[:] = items[1:] + items[:1]


class IdentityRandom:
    def __init__(self):
        self.calls = 0

    def shuffle(self, items):
        self.calls += 1


def test_shuffle_match_valid_permutation():
    members = [1, 2, 3, 4, 5, 6]
    assignments = shuffle_match(DrawConstraints.build(members), random.Random(3))
    assert assignments is not None
    assert_valid_draw(assignments, members)


def test_shuffle_match_pairs_givers_in_member_order():
    constraints = DrawConstraints.build(["a", "b", "c"])
    assignments = shuffle_match(constraints, RotatingRandom())
    assert assignments == [Assignment("a", "b"), Assignment("b", "c"), Assignment("c", "a")]


def test_shuffle_match_gives_up_after_budget():
    rng = IdentityRandom()
    assert shuffle_match(DrawConstraints.build(["a", "b", "c"]), rng, max_attempts=7) is None
    assert rng.calls == 7


def test_shuffle_match_rejects_excluded_pairs():
    constraints = DrawConstraints.build(["a", "b", "c"], [("a", "b")])
    assert shuffle_match(constraints, RotatingRandom(), max_attempts=3) is None


def test_shuffle_match_infeasible_returns_none():
    constraints = DrawConstraints.build(["a", "b"], [("a", "b"), ("b", "a")])
    assert shuffle_match(constraints, random.Random(1), max_attempts=50) is None


def test_shuffle_match_respects_anti_recurrence():
    members = ["a", "b", "c", "d"]
    history = {"a": "b", "b": "c", "c": "d", "d": "a"}
    for seed in range(20):
        assignments = shuffle_match(DrawConstraints.build(members, None, history), random.Random(seed))
        if assignments is not None:
            assert_valid_draw(assignments, members, anti_recurrence=history)
