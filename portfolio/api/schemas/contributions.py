from datetime import date
from enum import Enum
from typing import Literal

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import model_validator

DAYS_PER_WEEK = 7


class ContributionLevel(str, Enum):
    """Quartile bucket GitHub assigns to a day's activity."""

    NONE = "NONE"
    FIRST_QUARTILE = "FIRST_QUARTILE"
    SECOND_QUARTILE = "SECOND_QUARTILE"
    THIRD_QUARTILE = "THIRD_QUARTILE"
    FOURTH_QUARTILE = "FOURTH_QUARTILE"


class ContributionDay(BaseModel):
    """Single day of the contribution calendar."""

    model_config = ConfigDict(frozen=True)

    date: date
    count: int = Field(ge=0, strict=True)
    level: ContributionLevel


class ContributionWeek(BaseModel):
    """Calendar week holding its days in chronological order."""

    model_config = ConfigDict(frozen=True)

    start_date: date
    days: list[ContributionDay] = Field(min_length=1, max_length=DAYS_PER_WEEK)

    @model_validator(mode="after")
    def check_days_ascending(self) -> "ContributionWeek":
        for previous, current in zip(self.days, self.days[1:]):
            if current.date <= previous.date:
                raise ValueError("contribution days must be in ascending order")
        return self


class ContributionCalendar(BaseModel):
    """One year of contribution weeks plus the server-side total."""

    model_config = ConfigDict(frozen=True)

    weeks: list[ContributionWeek]
    total: int = Field(ge=0, strict=True)

    @model_validator(mode="after")
    def check_weeks_ascending(self) -> "ContributionCalendar":
        for previous, current in zip(self.weeks, self.weeks[1:]):
            if current.start_date <= previous.start_date:
                raise ValueError("contribution weeks must be in ascending order")
        return self


class GridCell(BaseModel):
    """Colored square for one day, positioned at `row` within its column."""

    row: int
    date: date
    count: int
    level: ContributionLevel
    color: str
    title: str


class GridColumn(BaseModel):
    """One calendar week rendered top to bottom."""

    week_start: date
    cells: list[GridCell]
    empty_slots: int


class ActivityGrid(BaseModel):
    """Render output of the GitHub activity panel."""

    status: Literal["loading", "loaded", "failed"]
    header: str
    total: int | None = None
    show_progress: bool = False
    columns: list[GridColumn] = Field(default_factory=list)
