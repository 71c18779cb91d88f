from giftdraw.services.constraints import DrawConstraints, DrawFailure, Exclusion, validate


def test_build_normalizes_inputs():
    constraints = DrawConstraints.build(["a", "b"], [("a", "b")], {"b": "a"})
    assert constraints.members == ("a", "b")
    assert constraints.exclusions == frozenset({Exclusion("a", "b")})
    assert dict(constraints.anti_recurrence) == {"b": "a"}


def test_build_does_not_alias_caller_data():
    members = ["a", "b", "c"]
    history = {"a": "b"}
    constraints = DrawConstraints.build(members, None, history)
    members.append("d")
    history["c"] = "a"
    assert constraints.members == ("a", "b", "c")
    assert "c" not in constraints.anti_recurrence


def test_is_allowed_rules():
    constraints = DrawConstraints.build(["a", "b", "c"], [("a", "b")], {"b": "c"})
    assert not constraints.is_allowed("a", "a")
    assert not constraints.is_allowed("a", "b")
    assert not constraints.is_allowed("b", "c")
    assert constraints.is_allowed("a", "c")
    assert constraints.is_allowed("b", "a")
    assert constraints.is_allowed("c", "a")


def test_exclusions_are_directional():
    constraints = DrawConstraints.build(["a", "b"], [("a", "b")])
    assert not constraints.is_allowed("a", "b")
    assert constraints.is_allowed("b", "a")


def test_validate_too_few_members():
    assert validate(DrawConstraints.build([])) == DrawFailure.INSUFFICIENT_PARTICIPANTS
    assert validate(DrawConstraints.build(["a"])) == DrawFailure.INSUFFICIENT_PARTICIPANTS


def test_validate_duplicates():
    assert validate(DrawConstraints.build(["a", "a"])) == DrawFailure.DUPLICATE_MEMBERS
    assert validate(DrawConstraints.build(["a", "b", "a"])) == DrawFailure.DUPLICATE_MEMBERS


def test_validate_accepts_distinct_members():
    assert validate(DrawConstraints.build(["a", "b"], [("a", "b"), ("b", "a")])) is None
