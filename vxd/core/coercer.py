"""Value coercer — turns a type tag and raw value text into a TypedValue.

Null policy
-----------
An absent value, an empty value and the literal ``null`` are NULL for every
type.  Text that does not parse under its tag's rule is NULL as well, never
an error.  Only an unknown type tag raises (VxdError, UNSUPPORTED_TYPE).
"""
from __future__ import annotations

from typing import Callable, Optional

from vxd.core import syntax
from vxd.core.errors import VxdError
from vxd.core.values import NULL, TypedValue, ValueType


# ---------------------------------------------------------------------------
# Literal recognisers
# ---------------------------------------------------------------------------

def _digit_run(text: str, i: int) -> int:
    """Index of the first non-digit at or after ``i``."""
    while i < len(text) and text[i] in syntax.DIGITS:
        i += 1
    return i


def parse_integer(text: str, type_tag: str) -> Optional[int]:
    """Parse a decimal integer literal for one of the integer tags.

    Signed tags allow a leading '+' or '-'; unsigned tags allow no sign.
    Returns None when the text is not a literal or is out of range.
    """
    lo, hi = syntax.INT_RANGES[type_tag]
    start = 0
    if text[:1] in syntax.SIGNS:
        if type_tag in syntax.UNSIGNED_TAGS:
            return None
        start = 1
    if start == len(text) or _digit_run(text, start) != len(text):
        return None
    try:
        n = int(text)
    except ValueError:      # beyond int()'s digit limit
        return None
    return n if lo <= n <= hi else None


def is_float_literal(text: str) -> bool:
    """True for ``[sign] digits [. digits] [e [sign] digits]`` or inf/nan."""
    i = 1 if text[:1] in syntax.SIGNS else 0
    if text[i:].lower() in syntax.FLOAT_WORDS:
        return True

    end = _digit_run(text, i)
    digits = end - i
    i = end
    if i < len(text) and text[i] == ".":
        end = _digit_run(text, i + 1)
        digits += end - i - 1
        i = end
    if digits == 0:
        return False

    if i < len(text) and text[i] in syntax.EXPONENT_MARKS:
        i += 1
        if i < len(text) and text[i] in syntax.SIGNS:
            i += 1
        end = _digit_run(text, i)
        if end == i:
            return False
        i = end
    return i == len(text)


def unquote(text: str) -> str:
    """Strip one leading and one trailing double quote when both are present."""
    if len(text) >= 2 and text[0] == syntax.QUOTE and text[-1] == syntax.QUOTE:
        return text[1:-1]
    return text


# ---------------------------------------------------------------------------
# Per-tag coercion  (text is already trimmed, non-empty and not "null")
# ---------------------------------------------------------------------------

def _to_string(text: str) -> TypedValue:
    return TypedValue.string(unquote(text))


def _integer(value_type: ValueType) -> Callable[[str], TypedValue]:
    def coerce_int(text: str) -> TypedValue:
        n = parse_integer(text, value_type.value)
        return NULL if n is None else TypedValue(value_type, n)
    return coerce_int


def _to_float32(text: str) -> TypedValue:
    return TypedValue.float32(float(text)) if is_float_literal(text) else NULL


def _to_float64(text: str) -> TypedValue:
    return TypedValue.float64(float(text)) if is_float_literal(text) else NULL


def _to_bool(text: str) -> TypedValue:
    if text == syntax.TRUE_LITERAL:
        return TypedValue.bool_(True)
    if text == syntax.FALSE_LITERAL:
        return TypedValue.bool_(False)
    return NULL


def _to_char(text: str) -> TypedValue:
    return TypedValue.char(text[0])


_COERCERS: dict[str, Callable[[str], TypedValue]] = {
    syntax.STRING:  _to_string,
    syntax.INT32:   _integer(ValueType.INT32),
    syntax.INT64:   _integer(ValueType.INT64),
    syntax.UINT32:  _integer(ValueType.UINT32),
    syntax.UINT64:  _integer(ValueType.UINT64),
    syntax.FLOAT32: _to_float32,
    syntax.FLOAT64: _to_float64,
    syntax.BOOL:    _to_bool,
    syntax.CHAR:    _to_char,
}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def is_null_text(raw_value: Optional[str]) -> bool:
    """True for an absent, blank or literal ``null`` value."""
    if raw_value is None:
        return True
    text = raw_value.strip()
    return not text or text == syntax.NULL_LITERAL


def coerce(type_tag: str, raw_value: Optional[str]) -> TypedValue:
    """Return the TypedValue for ``raw_value`` under ``type_tag``.

    Raises VxdError for a tag outside the recognised set; the caller adds
    line context.
    """
    convert = _COERCERS.get(type_tag)
    if convert is None:
        raise VxdError.unsupported_type(type_tag)
    if is_null_text(raw_value):
        return NULL
    return convert(raw_value.strip())


def is_degraded(raw_value: Optional[str], result: TypedValue) -> bool:
    """True when real value text was present but coercion produced NULL."""
    return result.is_null and not is_null_text(raw_value)
