"""Lexemes and type tags of the .vxd format.

One declaration per statement, any number of statements per line::

    NAME: string = "hello";  AGE: int32 = 30;
"""
import string

TYPE_SEPARATOR = ":"
ASSIGN = "="
TERMINATOR = ";"
QUOTE = '"'
NULL_LITERAL = "null"

# Type tags
STRING = "string"
INT32 = "int32"
INT64 = "int64"
UINT32 = "uint32"
UINT64 = "uint64"
FLOAT32 = "float32"
FLOAT64 = "float64"
BOOL = "bool"
CHAR = "char"

TYPE_TAGS: frozenset[str] = frozenset({
    STRING, INT32, INT64, UINT32, UINT64, FLOAT32, FLOAT64, BOOL, CHAR,
})

TRUE_LITERAL = "true"
FALSE_LITERAL = "false"

# ---------------------------------------------------------------------------
# Character classes
# ---------------------------------------------------------------------------
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_CHARS = IDENT_START | frozenset(string.digits)
DIGITS = frozenset(string.digits)
SIGNS = frozenset("+-")
EXPONENT_MARKS = frozenset("eE")
FLOAT_WORDS = frozenset({"inf", "infinity", "nan"})

# ---------------------------------------------------------------------------
# Integer ranges (inclusive)
# ---------------------------------------------------------------------------
INT_RANGES: dict[str, tuple[int, int]] = {
    INT32:  (-(2 ** 31), 2 ** 31 - 1),
    INT64:  (-(2 ** 63), 2 ** 63 - 1),
    UINT32: (0, 2 ** 32 - 1),
    UINT64: (0, 2 ** 64 - 1),
}

UNSIGNED_TAGS = frozenset({UINT32, UINT64})
FLOAT_TAGS = frozenset({FLOAT32, FLOAT64})
