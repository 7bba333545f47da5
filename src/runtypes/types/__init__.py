"""Runtype constructors, one per combinator kind."""
from __future__ import annotations

from runtypes.types.callables import Callback, Promise
from runtypes.types.lazy import Lazy
from runtypes.types.logical import Intersect, Union
from runtypes.types.primitives import (
    Boolean,
    Function,
    InstanceOf,
    Literal,
    LiteralBase,
    Never,
    Null,
    Number,
    String,
    Symbol,
    Undefined,
    Unknown,
    Void,
)
from runtypes.types.refinement import Brand, Constraint, ConstraintCheck, Guard
from runtypes.types.structural import Array, Dictionary, Partial, Record, Tuple

__all__ = [
    "Array",
    "Boolean",
    "Brand",
    "Callback",
    "Constraint",
    "ConstraintCheck",
    "Dictionary",
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
    "String",
    "Symbol",
    "Tuple",
    "Undefined",
    "Union",
    "Unknown",
    "Void",
]
