"""Human-readable rendering of parsed variables."""
from __future__ import annotations

import sys
from typing import Mapping, TextIO

from vxd.core.values import TypedValue


def format_variable(name: str, value: TypedValue) -> str:
    """``NAME: int32 -> 30``, or ``NAME: Null`` for the null marker."""
    if value.is_null:
        return f"{name}: Null"
    return f"{name}: {value.type.value} -> {value}"


def format_variables(variables: Mapping[str, TypedValue]) -> list[str]:
    """One line per variable, sorted by name."""
    return [format_variable(name, variables[name]) for name in sorted(variables)]


def print_variables(
    variables: Mapping[str, TypedValue], stream: TextIO | None = None,
) -> None:
    out = stream or sys.stdout
    for line in format_variables(variables):
        out.write(line + "\n")
