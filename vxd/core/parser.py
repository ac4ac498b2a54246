"""Parser driver — reads lines, matches declarations, coerces, stores.

Responsibilities
----------------
- Pull lines from a line source (any iterable of str, a text, or a file)
- Run the matcher on each line and the coercer on each declaration
- Insert results into a fresh VariableStore, last declaration wins
- Fail fast: a read failure or unknown type tag raises VxdError and the
  variables collected so far are discarded
- Record values that degraded to NULL as Diagnostics (and WARNING logs)

Usage
-----
    result = VxdParser().parse_file("config.vxd")
    result.get("AGE")        # TypedValue | None
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Mapping, Optional, Union

from vxd.core.coercer import coerce, is_degraded
from vxd.core.constants import DEFAULT_ENCODING
from vxd.core.errors import VxdError
from vxd.core.matcher import match_declarations
from vxd.core.values import TypedValue
from vxd.core.variable_store import VariableStore

LogFn = Callable[[str, str], None]       # (level, message)


@dataclass
class Diagnostic:
    """A value whose text was present but did not parse under its type."""
    line_num:  int
    name:      str
    type_tag:  str
    raw_value: str

    def __str__(self) -> str:
        return (f"line {self.line_num}: {self.name}: {self.type_tag} = "
                f"{self.raw_value!r} is not a valid {self.type_tag}, stored as Null")


@dataclass
class ParseResult:
    """Outcome of a successful parse.  ``variables`` is frozen."""
    variables:   VariableStore
    diagnostics: list[Diagnostic] = field(default_factory=list)
    line_count:  int = 0

    def get(self, name: str) -> Optional[TypedValue]:
        return self.variables.get(name)

    def get_variables(self) -> Mapping[str, TypedValue]:
        return self.variables.snapshot()


class VxdParser:
    """Parses .vxd input into a ParseResult.

    Parameters
    ----------
    strict_types : bool
        True  → a declaration with an unknown type tag aborts the parse.
        False → such declarations are not recognised and are skipped.
    warn_on_degrade : bool
        Log a WARNING for every value that fell back to NULL.
    encoding : str
        Default text encoding for parse_file().
    log_fn : LogFn | None
        Receives (level, message) progress and diagnostic messages.
    """

    def __init__(
        self,
        strict_types:    bool          = True,
        warn_on_degrade: bool          = True,
        encoding:        str           = DEFAULT_ENCODING,
        log_fn:          LogFn | None  = None,
    ) -> None:
        self._strict   = strict_types
        self._warn     = warn_on_degrade
        self._encoding = encoding
        self._log      = log_fn or (lambda lvl, msg: None)

    @classmethod
    def from_settings(cls, settings, log_fn: LogFn | None = None) -> "VxdParser":
        """Build a parser from a SettingsManager's [PARSER] section."""
        return cls(
            strict_types    = settings.strict_types,
            warn_on_degrade = settings.warn_on_degrade,
            encoding        = settings.encoding,
            log_fn          = log_fn,
        )

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def parse(self, lines: Iterable[str]) -> ParseResult:
        """Parse every line produced by ``lines``.

        Read errors raised while iterating (OSError, UnicodeDecodeError)
        are re-raised as VxdError.
        """
        if isinstance(lines, str):
            raise TypeError("parse() takes an iterable of lines; use parse_text() for a str")
        store = VariableStore()
        diagnostics: list[Diagnostic] = []
        line_num = 0

        source = iter(lines)
        while True:
            try:
                line = next(source)
            except StopIteration:
                break
            except (OSError, UnicodeDecodeError) as exc:
                err = VxdError.io_error(exc, line_num)
                self._log("ERROR", err.reason)
                raise err from exc

            line_num += 1
            self._parse_line(line.rstrip("\r\n"), line_num, store, diagnostics)

        store.freeze()
        self._log("SUCCESS", f"Parsed {len(store)} variable(s) from {line_num} line(s)")
        return ParseResult(store, diagnostics, line_num)

    def parse_text(self, text: str) -> ParseResult:
        """Split ``text`` with universal newlines, exactly as parse_file() would."""
        return self.parse(io.StringIO(text, newline=None))

    def parse_file(
        self, path: Union[str, Path], encoding: Optional[str] = None,
    ) -> ParseResult:
        """Open ``path``, parse it, and close it on every exit path."""
        self._log("INFO", f"Parsing {path}")
        try:
            f = open(path, encoding=encoding or self._encoding)
        except (OSError, LookupError) as exc:   # LookupError: unknown encoding
            err = VxdError.io_error(exc)
            self._log("ERROR", err.reason)
            raise err from exc
        with f:
            return self.parse(f)

    # ------------------------------------------------------------------

    def _parse_line(
        self,
        line:        str,
        line_num:    int,
        store:       VariableStore,
        diagnostics: list[Diagnostic],
    ) -> None:
        for decl in match_declarations(line, line_num, known_tags_only=not self._strict):
            try:
                value = coerce(decl.type_tag, decl.raw_value)
            except VxdError:
                err = VxdError.unsupported_type(
                    decl.type_tag, line=line, line_num=line_num, start=decl.tag_column,
                )
                self._log("ERROR", str(err))
                raise err from None

            if is_degraded(decl.raw_value, value):
                diag = Diagnostic(line_num, decl.name, decl.type_tag, decl.raw_value)
                diagnostics.append(diag)
                if self._warn:
                    self._log("WARNING", str(diag))

            store.insert(decl.name, value)


# ---------------------------------------------------------------------------
# Convenience functions
# ---------------------------------------------------------------------------

def parse(lines: Iterable[str], **options) -> ParseResult:
    return VxdParser(**options).parse(lines)


def parse_text(text: str, **options) -> ParseResult:
    return VxdParser(**options).parse_text(text)


def parse_file(path: Union[str, Path], **options) -> ParseResult:
    return VxdParser(**options).parse_file(path)
