import itertools


def assert_valid_draw(assignments, members, exclusions=(), anti_recurrence=None):
    anti_recurrence = anti_recurrence or {}
    givers = [assignment.giver for assignment in assignments]
    receivers = [assignment.receiver for assignment in assignments]
    assert len(assignments) == len(members)
    assert sorted(givers) == sorted(members)
    assert sorted(receivers) == sorted(members)
    for giver, receiver in assignments:
        assert giver != receiver
        assert (giver, receiver) not in set(exclusions)
        assert anti_recurrence.get(giver) != receiver


def brute_force_feasible(members, exclusions=(), anti_recurrence=None):
    anti_recurrence = anti_recurrence or {}
    blocked = set(exclusions)
    for receivers in itertools.permutations(members):
        if all(
            giver != receiver
            and (giver, receiver) not in blocked
            and anti_recurrence.get(giver) != receiver
            for giver, receiver in zip(members, receivers)
        ):
            return True
    return False
