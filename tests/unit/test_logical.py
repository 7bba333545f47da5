from __future__ import annotations

import pytest

from runtypes import (
    Callback,
    Failure,
    Intersect,
    Literal,
    Null,
    Number,
    Record,
    String,
    Union,
    Unknown,
    ValidationError,
    match,
)

Circle = Record({"kind": Literal("circle"), "radius": Number})
Square = Record({"kind": Literal("square"), "side": Number})
Shape = Union(Circle, Square)


def test_union_accepts_any_alternative() -> None:
    runtype = Union(Number, String)
    assert runtype.guard(1)
    assert runtype.guard("x")


def test_union_failure_names_the_whole_union_without_key() -> None:
    assert Union(Number, String).validate(None) == Failure("Expected number | string, but was null")


def test_union_reports_nested_failure_of_the_only_shape_match() -> None:
    runtype = Union(Null, Record({"name": String}))
    assert runtype.validate({"name": 1}) == Failure("Expected string, but was number", "name")


def test_union_stays_keyless_when_several_alternatives_fail_deeper() -> None:
    result = Shape.validate({"kind": "triangle"})
    assert isinstance(result, Failure)
    assert result.key is None
    assert result.message.startswith("Expected {")


def test_union_returns_first_successful_result() -> None:
    def handler(value: float) -> float:
        return value

    checked = Union(Callback(Number, Number), Unknown).check(handler)
    assert checked is not handler
    with pytest.raises(ValidationError):
        checked("x")


def test_union_requires_alternatives() -> None:
    with pytest.raises(ValueError, match="at least one"):
        Union()


def test_or_builds_a_union_without_mutating_operands() -> None:
    runtype = Number.Or(String)
    assert runtype.tag == "union"
    assert runtype.alternatives == (Number, String)
    assert Number.tag == "number"


def test_union_match_dispatches_to_first_matching_case() -> None:
    describe = Shape.match(
        lambda circle: f"circle r={circle['radius']}",
        lambda square: f"square s={square['side']}",
    )
    assert describe({"kind": "circle", "radius": 2}) == "circle r=2"
    assert describe({"kind": "square", "side": 3}) == "square s=3"


def test_union_match_raises_when_nothing_matches() -> None:
    describe = Shape.match(lambda _: "circle", lambda _: "square")
    with pytest.raises(ValidationError, match="No alternatives were matched"):
        describe({"kind": "triangle"})


def test_union_match_requires_one_case_per_alternative() -> None:
    with pytest.raises(ValueError, match="one per alternative"):
        Shape.match(lambda _: "circle")


def test_union_match_is_order_sensitive() -> None:
    describe = Union(Number, Unknown).match(lambda _: "number", lambda _: "anything")
    assert describe(1) == "number"
    assert describe("x") == "anything"


def test_standalone_match_over_pairs() -> None:
    classify = match(
        (Number, lambda n: n * 2),
        (String, lambda s: s.upper()),
        (Null, lambda _: "nothing"),
    )
    assert classify(2) == 4
    assert classify("a") == "A"
    assert classify(None) == "nothing"
    with pytest.raises(ValidationError):
        classify([])


def test_intersect_returns_original_value() -> None:
    runtype = Record({"a": Number}).And(Record({"b": String}))
    payload = {"a": 1, "b": "x", "c": None}
    assert runtype.check(payload) is payload


def test_intersect_propagates_first_failure_unchanged() -> None:
    left = Record({"a": Number})
    right = Record({"b": String})
    payload = {"a": 1, "b": 2}
    assert Intersect(left, right).validate(payload) == right.validate(payload)
    assert Intersect(left, right).validate(payload) == Failure("Expected string, but was number", "b")


def test_intersect_short_circuits_in_declaration_order() -> None:
    seen: list[str] = []
    first = Number.with_constraint(lambda _: seen.append("first") or False)
    second = Number.with_constraint(lambda _: seen.append("second") or True)
    assert not Intersect(first, second).guard(1)
    assert seen == ["first"]


def test_intersect_requires_intersectees() -> None:
    with pytest.raises(ValueError, match="at least one"):
        Intersect()
