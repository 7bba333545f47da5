"""Randomized invariant tests for the validation core:
- Agreement: guard(v) is True exactly when validate(v) succeeds
- Identity: check returns the very object it was given
- Union totality: a value accepted by an alternative is accepted by the union
- Intersection: accepted exactly when every intersectee accepts
- Brand transparency: a brand validates like its entity
"""

from __future__ import annotations

import random
from typing import Any

from runtypes import (
    Array,
    Boolean,
    Failure,
    Intersect,
    Literal,
    Null,
    Number,
    Record,
    Runtype,
    String,
    Success,
    Tuple,
    Union,
    Unknown,
    ValidationError,
    undefined,
)

SEED = 42
NUM_TRIALS = 50

_RUNTYPES: list[Runtype[Any]] = [
    Unknown,
    Boolean,
    Number,
    String,
    Null,
    Literal(1),
    Literal("a"),
    Array(Number),
    Array(String.Or(Null)),
    Tuple(Number, String),
    Record({"a": Number}),
    Record({"a": Number, "b": Array(Boolean)}),
    Number.with_constraint(lambda n: n >= 0, name="NonNegative"),
]


def _random_value(rng: random.Random, depth: int = 0) -> Any:
    kinds = ["none", "undefined", "bool", "int", "float", "str"]
    if depth < 3:
        kinds += ["list", "dict"]
    kind = rng.choice(kinds)
    if kind == "none":
        return None
    if kind == "undefined":
        return undefined
    if kind == "bool":
        return rng.random() < 0.5
    if kind == "int":
        return rng.randint(-3, 3)
    if kind == "float":
        return rng.uniform(-10, 10)
    if kind == "str":
        return rng.choice(["", "a", "b", "1"])
    if kind == "list":
        return [_random_value(rng, depth + 1) for _ in range(rng.randint(0, 3))]
    return {rng.choice(["a", "b", "c"]): _random_value(rng, depth + 1) for _ in range(rng.randint(0, 3))}


def test_guard_agrees_with_validate() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        for runtype in _RUNTYPES:
            assert runtype.guard(value) == isinstance(runtype.validate(value), Success)


def test_check_returns_the_same_object() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        for runtype in _RUNTYPES:
            if runtype.guard(value):
                assert runtype.check(value) is value
            else:
                try:
                    runtype.check(value)
                except ValidationError:
                    continue
                raise AssertionError(f"{runtype!r} accepted {value!r} in check but not in guard")


def test_union_accepts_whatever_an_alternative_accepts() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        alternatives = rng.sample(_RUNTYPES, 3)
        union = Union(*alternatives)
        value = _random_value(rng)
        assert union.guard(value) == any(alternative.guard(value) for alternative in alternatives)


def test_union_match_dispatches_to_first_accepting_alternative() -> None:
    rng = random.Random(SEED)
    union = Union(Number, String, Null, Array(Unknown))
    matcher = union.match(
        lambda n: "number",
        lambda s: "string",
        lambda _: "null",
        lambda items: "array",
    )
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        if union.guard(value):
            assert matcher(value) in {"number", "string", "null", "array"}


def test_intersection_is_the_conjunction_of_its_parts() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        intersectees = rng.sample(_RUNTYPES, 2)
        intersect = Intersect(*intersectees)
        value = _random_value(rng)
        assert intersect.guard(value) == all(part.guard(value) for part in intersectees)


def test_brand_validates_like_its_entity() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        entity = rng.choice(_RUNTYPES)
        branded = entity.with_brand("Tagged")
        value = _random_value(rng)
        assert branded.validate(value) == entity.validate(value)


def test_failures_always_carry_a_message() -> None:
    rng = random.Random(SEED)
    for _ in range(NUM_TRIALS):
        value = _random_value(rng)
        for runtype in _RUNTYPES:
            result = runtype.validate(value)
            if isinstance(result, Failure):
                assert result.message
