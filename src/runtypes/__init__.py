"""Runtime validation of untyped data against composable type descriptions.

    from runtypes import Array, Number, Record, String

    User = Record({"name": String, "tags": Array(String), "age": Number})
    user = User.check(payload)

Every runtype offers ``check`` (raise on mismatch), ``validate`` (return a
result), ``guard`` (return a bool) and ``reflect`` (inspect the shape).
"""
from __future__ import annotations

from runtypes.contract import Contract
from runtypes.decorator import checked
from runtypes.errors import ValidationError
from runtypes.match import Case, match
from runtypes.reflect import Reflect, reflect_runtype
from runtypes.result import Failure, Result, Success
from runtypes.runtype import Runtype, create
from runtypes.show import show
from runtypes.types import (
    Array,
    Boolean,
    Brand,
    Callback,
    Constraint,
    ConstraintCheck,
    Dictionary,
    Function,
    Guard,
    InstanceOf,
    Intersect,
    Lazy,
    Literal,
    LiteralBase,
    Never,
    Null,
    Number,
    Partial,
    Promise,
    Record,
    String,
    Symbol,
    Tuple,
    Undefined,
    Union,
    Unknown,
    Void,
)
from runtypes.values import type_of, undefined

__version__ = "0.1.0"

__all__ = [
    "Array",
    "Boolean",
    "Brand",
    "Callback",
    "Case",
    "Constraint",
    "ConstraintCheck",
    "Contract",
    "Dictionary",
    "Failure",
    "Function",
    "Guard",
    "InstanceOf",
    "Intersect",
    "Lazy",
    "Literal",
    "LiteralBase",
    "Never",
    "Null",
    "Number",
    "Partial",
    "Promise",
    "Record",
    "Reflect",
    "Result",
    "Runtype",
    "String",
    "Success",
    "Symbol",
    "Tuple",
    "Undefined",
    "Union",
    "Unknown",
    "ValidationError",
    "Void",
    "__version__",
    "checked",
    "create",
    "match",
    "reflect_runtype",
    "show",
    "type_of",
    "undefined",
]
