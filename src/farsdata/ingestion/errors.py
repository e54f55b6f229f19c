from __future__ import annotations

from dataclasses import dataclass

import pandas as pd


@dataclass(frozen=True)
class LoadErrorInfo:
    code: str
    kind: str
    message: str


# Exceptions a single year's load may raise without aborting a multi-year batch.
RECOVERABLE_LOAD_ERRORS: tuple[type[BaseException], ...] = (
    OSError,
    EOFError,
    KeyError,
    ValueError,
)


def classify_load_error(exc: Exception) -> LoadErrorInfo:
    """Classify accident-file load failures into stable codes for logs and the API."""

    text = str(exc)

    if isinstance(exc, FileNotFoundError):
        return LoadErrorInfo(code="missing_file", kind="io", message=text)

    if isinstance(exc, KeyError):
        return LoadErrorInfo(code="missing_column", kind="schema", message=f"missing column: {text}")

    if isinstance(exc, (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError, EOFError)):
        return LoadErrorInfo(code="parse_error", kind="parse", message=text)

    # bz2 raises OSError("Invalid data stream") for corrupt or uncompressed input.
    if isinstance(exc, OSError):
        return LoadErrorInfo(code="parse_error", kind="io", message=text)

    return LoadErrorInfo(code="unknown", kind="unknown", message=text)
