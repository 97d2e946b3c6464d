from collections.abc import Callable
from datetime import date
from datetime import timedelta

import pytest

from portfolio.api.schemas.contributions import ContributionCalendar
from portfolio.api.schemas.contributions import ContributionDay
from portfolio.api.schemas.contributions import ContributionLevel
from portfolio.api.schemas.contributions import ContributionWeek

FIRST_WEEK_START = date(2025, 10, 19)
LEVELS = list(ContributionLevel)


def _day_count(week_index: int, offset: int) -> int:
    return (week_index + offset) % len(LEVELS)


def _week_dates(week_index: int, length: int) -> list[date]:
    week_start = FIRST_WEEK_START + timedelta(weeks=week_index)
    return [week_start + timedelta(days=offset) for offset in range(length)]


@pytest.fixture
def calendar_payload() -> Callable[..., dict[str, object]]:
    """Build a GitHub GraphQL contribution calendar response body."""

    def build(total: int, week_lengths: list[int]) -> dict[str, object]:
        weeks = []
        for week_index, length in enumerate(week_lengths):
            dates = _week_dates(week_index, length)
            weeks.append(
                {
                    "firstDay": dates[0].isoformat(),
                    "contributionDays": [
                        {
                            "date": day.isoformat(),
                            "contributionCount": _day_count(week_index, offset),
                            "contributionLevel": LEVELS[
                                _day_count(week_index, offset)
                            ].value,
                        }
                        for offset, day in enumerate(dates)
                    ],
                }
            )
        return {
            "data": {
                "user": {
                    "contributionsCollection": {
                        "contributionCalendar": {
                            "totalContributions": total,
                            "weeks": weeks,
                        }
                    }
                }
            }
        }

    return build


@pytest.fixture
def make_calendar() -> Callable[..., ContributionCalendar]:
    """Build a typed calendar with consecutive days and cycling levels."""

    def build(total: int, week_lengths: list[int]) -> ContributionCalendar:
        weeks = []
        for week_index, length in enumerate(week_lengths):
            dates = _week_dates(week_index, length)
            weeks.append(
                ContributionWeek(
                    start_date=dates[0],
                    days=[
                        ContributionDay(
                            date=day,
                            count=_day_count(week_index, offset),
                            level=LEVELS[_day_count(week_index, offset)],
                        )
                        for offset, day in enumerate(dates)
                    ],
                )
            )
        return ContributionCalendar(weeks=weeks, total=total)

    return build
