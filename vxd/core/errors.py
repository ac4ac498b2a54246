"""Fatal parse failures.

Only two conditions abort a parse: the line source failing and a type tag
outside the recognised set.  Everything else degrades to NULL.
"""
from __future__ import annotations

from enum import Enum

ERROR_POINTER_CHAR = "^"
ERROR_ELLIPSIS = "..."

MAX_ERROR_CONTEXT_LEN = 60
"""Characters kept on either side of the offending region in messages."""


class VxdErrorCategory(Enum):
    IO = "io"
    UNSUPPORTED_TYPE = "unsupported type"


class VxdError(Exception):
    """Raised when a parse call fails; no variables are returned."""

    def __init__(
        self,
        message: str,
        *,
        category: VxdErrorCategory,
        reason: str = "",
        line_num: int = 0,
    ) -> None:
        """
        Args:
            message:
                The formatted message to be displayed.
            category:
                Which of the fatal conditions occurred.
            reason:
                One-sentence summary without location details.
            line_num:
                1-based line of the failure; 0 when not applicable.
        """
        super().__init__(message)
        self.category = category
        self.reason = reason or message
        self.line_num = line_num

    @classmethod
    def io_error(cls, exc: BaseException, line_num: int = 0) -> VxdError:
        where = f" after line {line_num}" if line_num else ""
        reason = f"Failed to read input{where}: {exc}"
        return cls(reason, category=VxdErrorCategory.IO, reason=reason,
                   line_num=line_num)

    @classmethod
    def unsupported_type(
        cls,
        type_tag: str,
        *,
        line: str = "",
        line_num: int = 0,
        start: int = 0,
    ) -> VxdError:
        """Build an UNSUPPORTED_TYPE error pointing at ``type_tag`` in ``line``.

        ``start`` is the 0-based index of the tag within ``line``.  When no
        line is given the message is the reason alone.
        """
        reason = f"Unsupported type: {type_tag}"
        if not line:
            return cls(reason, category=VxdErrorCategory.UNSUPPORTED_TYPE,
                       reason=reason, line_num=line_num)

        end = start + max(len(type_tag), 1)
        if len(line) - end > MAX_ERROR_CONTEXT_LEN:
            line = line[:end + MAX_ERROR_CONTEXT_LEN] + ERROR_ELLIPSIS
        offset = start
        if start > MAX_ERROR_CONTEXT_LEN:
            cut = start - MAX_ERROR_CONTEXT_LEN
            line = ERROR_ELLIPSIS + line[cut:]
            offset = MAX_ERROR_CONTEXT_LEN + len(ERROR_ELLIPSIS)

        message = (
            f"{reason}\n"
            f"Line {line_num}, index {start}:\n"
            f"{line}\n"
            f"{' ' * offset}{ERROR_POINTER_CHAR * (end - start)}"
        )
        return cls(message, category=VxdErrorCategory.UNSUPPORTED_TYPE,
                   reason=reason, line_num=line_num)
