from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class AccidentRecord(BaseModel):
    """One row of a FARS accident file.

    Only the four columns farsdata reads are typed; every other column is kept
    as an extra field so records round-trip without losing data.
    """

    model_config = ConfigDict(extra="allow")

    MONTH: int
    STATE: int
    LATITUDE: Optional[float] = None
    LONGITUD: Optional[float] = None
