from __future__ import annotations


class FarsDataError(Exception):
    """Base class for errors raised by farsdata."""


class InvalidStateError(FarsDataError, ValueError):
    def __init__(self, state_num: int) -> None:
        super().__init__(f"invalid STATE number: {state_num}")
        self.state_num = state_num


class InvalidYearWarning(UserWarning):
    """Emitted when one year of a multi-year load could not be read."""

    def __init__(self, year: object) -> None:
        super().__init__(f"invalid year: {year}")
        self.year = year
