from __future__ import annotations

from enum import Enum

import pytest

from runtypes import (
    Array,
    Boolean,
    Callback,
    Dictionary,
    Function,
    Guard,
    InstanceOf,
    Intersect,
    Lazy,
    Literal,
    Never,
    Null,
    Number,
    Partial,
    Promise,
    Record,
    String,
    Success,
    Symbol,
    Tuple,
    Undefined,
    Unknown,
    create,
)
from runtypes.constants import REFLECT_TAGS
from runtypes.reflect import (
    Reflect,
    ReflectArray,
    ReflectConstraint,
    ReflectRecord,
    ReflectUnion,
)


class Color(Enum):
    RED = 1


class Point:
    pass


def test_reflect_is_cached_per_runtype() -> None:
    runtype = Array(Number)
    assert runtype.reflect is runtype.reflect
    assert runtype.reflect.runtype is runtype


@pytest.mark.parametrize(
    ("runtype", "tag"),
    [
        (Unknown, "unknown"),
        (Never, "never"),
        (Boolean, "boolean"),
        (Number, "number"),
        (String, "string"),
        (Symbol, "symbol"),
        (Function, "function"),
        (Literal("x"), "literal"),
        (Array(Number), "array"),
        (Record({}), "record"),
        (Partial({}), "partial"),
        (Dictionary(Number), "dictionary"),
        (Tuple(Number), "tuple"),
        (Number.Or(String), "union"),
        (Intersect(Number), "intersect"),
        (Number.with_constraint(lambda n: True), "constraint"),
        (InstanceOf(Point), "instanceof"),
        (Number.with_brand("Id"), "brand"),
        (Callback(Number), "callback"),
        (Promise(Number), "promise"),
    ],
)
def test_every_combinator_reflects_its_tag(runtype, tag) -> None:
    assert runtype.reflect.tag == tag
    assert tag in REFLECT_TAGS


def test_structural_reflects_expose_children() -> None:
    record = Record({"name": String, "scores": Array(Number)}).reflect
    assert isinstance(record, ReflectRecord)
    assert record.is_readonly is False
    assert set(record.fields) == {"name", "scores"}
    scores = record.fields["scores"]
    assert isinstance(scores, ReflectArray)
    assert scores.element is Number.reflect

    union = Number.Or(String).reflect
    assert isinstance(union, ReflectUnion)
    assert union.alternatives == (Number.reflect, String.reflect)

    assert Tuple(Number, String).reflect.components == (Number.reflect, String.reflect)
    assert Intersect(Number, String).reflect.intersectees == (Number.reflect, String.reflect)
    assert Dictionary(String, "number").reflect.key == "number"
    assert Dictionary(String, "number").reflect.value is String.reflect
    assert Callback(Number, String).reflect.args == (Number.reflect, String.reflect)
    assert Promise(Number).reflect.type is Number.reflect


def test_refinement_reflects_keep_metadata() -> None:
    def is_even(n: float) -> bool:
        return n % 2 == 0

    constraint = Number.with_constraint(is_even, name="even", args={"step": 2}).reflect
    assert isinstance(constraint, ReflectConstraint)
    assert constraint.underlying is Number.reflect
    assert constraint.constraint is is_even
    assert constraint.name == "even"
    assert constraint.args == {"step": 2}

    brand = String.with_brand("UserId").reflect
    assert brand.brand == "UserId"
    assert brand.entity is String.reflect

    assert InstanceOf(Point).reflect.ctor is Point
    assert Literal(3).reflect.value == 3


def test_readonly_flag_is_reflected() -> None:
    assert Array(Number).as_readonly().reflect.is_readonly is True
    assert Record({"a": Number}).as_readonly().reflect.is_readonly is True


def test_to_dict_describes_nested_shape() -> None:
    runtype = Record({"tags": Array(String.Or(Null))})
    assert runtype.reflect.to_dict() == {
        "tag": "record",
        "is_readonly": False,
        "fields": {
            "tags": {
                "tag": "array",
                "is_readonly": False,
                "element": {
                    "tag": "union",
                    "alternatives": [{"tag": "string"}, {"tag": "literal", "value": None}],
                },
            }
        },
    }


def test_to_dict_encodes_non_json_literals_by_repr() -> None:
    assert Undefined.reflect.to_dict() == {"tag": "literal", "value": "undefined"}
    assert Literal(Color.RED).reflect.to_dict() == {"tag": "literal", "value": "<Color.RED: 1>"}


def test_to_dict_describes_constraints_by_name() -> None:
    payload = Guard(lambda value: True, name="anything", args=[1]).reflect.to_dict()
    assert payload["tag"] == "constraint"
    assert payload["name"] == "anything"
    assert payload["args"] == [1]
    assert payload["underlying"] == {"tag": "unknown"}


def test_to_dict_cuts_cycles() -> None:
    tree = Lazy(lambda: Record({"children": Array(tree)}))
    assert tree.reflect.to_dict() == {
        "tag": "record",
        "is_readonly": False,
        "fields": {
            "children": {
                "tag": "array",
                "is_readonly": False,
                "element": {"tag": "record", "recursive": True},
            }
        },
    }


def test_unknown_tags_cannot_be_reflected() -> None:
    with pytest.raises(ValueError, match="Unsupported runtype tag"):
        create(Success, tag="mystery").reflect


def test_reflect_variants_cover_every_tag() -> None:
    variants = {cls.tag for cls in Reflect.__subclasses__()}
    assert variants == set(REFLECT_TAGS)
