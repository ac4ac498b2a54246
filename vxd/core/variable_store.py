"""Variable store for one parse call.

Maps declaration name → TypedValue.  The last declaration of a name wins;
nothing is merged.  The parser freezes the store once the input is
exhausted, after which it is read-only.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from vxd.core.values import TypedValue


class VariableStore:
    """Maps 'NAME' → TypedValue (NULL included)."""

    def __init__(self) -> None:
        self._vars: dict[str, TypedValue] = {}
        self._frozen = False

    # ------------------------------------------------------------------
    def insert(self, name: str, value: TypedValue) -> None:
        if self._frozen:
            raise TypeError("VariableStore is read-only after parsing")
        self._vars[name] = value

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # ------------------------------------------------------------------
    def get(self, name: str) -> Optional[TypedValue]:
        """The value for ``name``, or None if it was never declared."""
        return self._vars.get(name)

    def snapshot(self) -> Mapping[str, TypedValue]:
        """Read-only live view of every entry."""
        return MappingProxyType(self._vars)

    def items(self):
        return self._vars.items()

    def as_dict(self) -> dict[str, TypedValue]:
        return dict(self._vars)

    def to_python(self) -> dict[str, Any]:
        """Plain payloads; NULL becomes None."""
        return {name: val.to_python() for name, val in self._vars.items()}

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f"VariableStore({self._vars!r})"
