"""Typed values produced by the coercer.

A value is one of nine payload-carrying variants or the NULL marker.
NULL is a real variant, so a variable explicitly set to null is distinct
from a variable that was never declared (``store.get(name) is None``).
"""
from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Any

from vxd.core import syntax


class ValueType(Enum):
    STRING  = syntax.STRING
    INT32   = syntax.INT32
    INT64   = syntax.INT64
    UINT32  = syntax.UINT32
    UINT64  = syntax.UINT64
    FLOAT32 = syntax.FLOAT32
    FLOAT64 = syntax.FLOAT64
    BOOL    = syntax.BOOL
    CHAR    = syntax.CHAR
    NULL    = syntax.NULL_LITERAL

    @property
    def label(self) -> str:
        """Display name, e.g. ``Int32`` or ``Null``."""
        return self.name.capitalize()


def to_float32(x: float) -> float:
    """Round a Python float to IEEE-754 single precision."""
    if math.isnan(x) or math.isinf(x):
        return x
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


@dataclass(frozen=True)
class TypedValue:
    """One tagged value.  ``value`` is None only for the NULL variant."""
    type:  ValueType
    value: Any = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------
    @classmethod
    def string(cls, s: str) -> TypedValue:
        return cls(ValueType.STRING, s)

    @classmethod
    def int32(cls, n: int) -> TypedValue:
        return cls(ValueType.INT32, n)

    @classmethod
    def int64(cls, n: int) -> TypedValue:
        return cls(ValueType.INT64, n)

    @classmethod
    def uint32(cls, n: int) -> TypedValue:
        return cls(ValueType.UINT32, n)

    @classmethod
    def uint64(cls, n: int) -> TypedValue:
        return cls(ValueType.UINT64, n)

    @classmethod
    def float32(cls, x: float) -> TypedValue:
        return cls(ValueType.FLOAT32, to_float32(x))

    @classmethod
    def float64(cls, x: float) -> TypedValue:
        return cls(ValueType.FLOAT64, x)

    @classmethod
    def bool_(cls, b: bool) -> TypedValue:
        return cls(ValueType.BOOL, b)

    @classmethod
    def char(cls, c: str) -> TypedValue:
        return cls(ValueType.CHAR, c)

    # ------------------------------------------------------------------
    @property
    def is_null(self) -> bool:
        return self.type is ValueType.NULL

    def to_python(self) -> Any:
        return self.value

    def __str__(self) -> str:
        if self.is_null:
            return "Null"
        if self.type is ValueType.BOOL:
            return "true" if self.value else "false"
        return str(self.value)

    def __repr__(self) -> str:
        if self.is_null:
            return "Null"
        return f"{self.type.label}({self.value!r})"


NULL = TypedValue(ValueType.NULL)
