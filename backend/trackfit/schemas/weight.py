from datetime import date as date_type
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator


class WeightCreate(BaseModel):
    """Body of POST /api/weights: {"date": "2025-05-01", "weight": 89.4}."""

    # Strict: "85" or true are rejected rather than coerced
    date: StrictStr
    # NaN and Infinity parse as JSON here but are not numbers we can store
    weight: Annotated[StrictFloat, Field(allow_inf_nan=False)]

    @field_validator("date")
    @classmethod
    def _iso_date(cls, value: str) -> str:
        date_type.fromisoformat(value)
        return value


class WeightRead(BaseModel):
    date: date_type
    weight: float

    model_config = ConfigDict(from_attributes=True)


class MergedPointRead(BaseModel):
    """One chart row; either value may be null."""

    date: str
    weight: Optional[float] = None
    target: Optional[float] = None

    model_config = ConfigDict(from_attributes=True)


class MessageResponse(BaseModel):
    message: str
