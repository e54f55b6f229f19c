from __future__ import annotations

from enum import Enum
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ReasonCode(str, Enum):
    NO_DATA = "no_data"
    NO_ACCIDENTS = "no_accidents"


class EmptyReason(BaseModel):
    code: ReasonCode
    message: str
    suggestion: str | None = None


class ItemsResponse(BaseModel, Generic[T]):
    items: list[T] = Field(default_factory=list)
    reason: EmptyReason | None = None


class InvalidYear(BaseModel):
    year: str
    code: str
    message: str


class MonthCounts(BaseModel):
    MONTH: int
    counts: dict[str, Optional[int]] = Field(default_factory=dict)


class SummaryResponse(ItemsResponse[MonthCounts]):
    years: list[str] = Field(default_factory=list)
    invalid_years: list[InvalidYear] = Field(default_factory=list)
