from __future__ import annotations

from pathlib import Path

# Reflection tags, one per combinator kind.
TAG_UNKNOWN = "unknown"
TAG_NEVER = "never"
TAG_VOID = "void"
TAG_BOOLEAN = "boolean"
TAG_NUMBER = "number"
TAG_STRING = "string"
TAG_SYMBOL = "symbol"
TAG_LITERAL = "literal"
TAG_ARRAY = "array"
TAG_RECORD = "record"
TAG_PARTIAL = "partial"
TAG_DICTIONARY = "dictionary"
TAG_TUPLE = "tuple"
TAG_UNION = "union"
TAG_INTERSECT = "intersect"
TAG_FUNCTION = "function"
TAG_CONSTRAINT = "constraint"
TAG_INSTANCEOF = "instanceof"
TAG_BRAND = "brand"
TAG_CALLBACK = "callback"
TAG_PROMISE = "promise"

REFLECT_TAGS = (
    TAG_UNKNOWN,
    TAG_NEVER,
    TAG_VOID,
    TAG_BOOLEAN,
    TAG_NUMBER,
    TAG_STRING,
    TAG_SYMBOL,
    TAG_LITERAL,
    TAG_ARRAY,
    TAG_RECORD,
    TAG_PARTIAL,
    TAG_DICTIONARY,
    TAG_TUPLE,
    TAG_UNION,
    TAG_INTERSECT,
    TAG_FUNCTION,
    TAG_CONSTRAINT,
    TAG_INSTANCEOF,
    TAG_BRAND,
    TAG_CALLBACK,
    TAG_PROMISE,
)

DICTIONARY_KEY_KINDS = ("string", "number")

NEVER_MESSAGE = "Expected nothing, but was something"
NO_MATCH_MESSAGE = "No alternatives were matched"

# CLI configuration and exit codes.
CONFIG_FILENAME = Path("runtypes.yaml")
ENV_LOG_LEVEL = "RUNTYPES_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")

EXIT_SUCCESS = 0
EXIT_INVALID = 1
EXIT_INTERNAL_ERROR = 2
