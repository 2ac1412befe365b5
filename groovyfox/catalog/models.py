"""Pydantic models for the shoe and festival reference data."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ShoeType(str, Enum):
    """Shoe categories Foxy knows about."""

    HEELS = "heels"
    OXFORDS = "oxfords"
    TRAINERS = "trainers"
    FLATS = "flats"


class ShoeModel(BaseModel):
    """A single shoe model in the catalog."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    colour: str
    type: ShoeType
    price: float = Field(ge=0)
    image_url: str
    festival_ids: tuple[int, ...] = ()

    @field_validator("colour")
    @classmethod
    def normalize_colour(cls, v: str) -> str:
        return v.strip().lower()


class DateRange(BaseModel):
    """Inclusive range of days a festival runs."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_order(self) -> "DateRange":
        if self.start_date > self.end_date:
            raise ValueError(
                f"start_date {self.start_date} is after end_date {self.end_date}"
            )
        return self


class FestivalLocation(BaseModel):
    """A festival Foxy attends, with the models brought along."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    id: int = Field(gt=0)
    city: str
    name: str
    period: DateRange
    image_url: str
    model_ids: tuple[int, ...] = ()
