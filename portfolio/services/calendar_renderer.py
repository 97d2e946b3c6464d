from collections.abc import Mapping

from portfolio.api.schemas.contributions import ActivityGrid
from portfolio.api.schemas.contributions import ContributionCalendar
from portfolio.api.schemas.contributions import ContributionLevel
from portfolio.api.schemas.contributions import DAYS_PER_WEEK
from portfolio.api.schemas.contributions import GridCell
from portfolio.api.schemas.contributions import GridColumn
from portfolio.services.contribution_panel import Failed
from portfolio.services.contribution_panel import FetchState
from portfolio.services.contribution_panel import Loading
from portfolio.services.level_colors import LEVEL_COLOR_MAP

LOADING_HEADER = "Loading…"
UNAVAILABLE_HEADER = "Contribution count unavailable"


def total_header(total: int) -> str:
    return f"{total} contributions in the last year"


def build_columns(
    calendar: ContributionCalendar,
    colors: Mapping[ContributionLevel, str],
) -> list[GridColumn]:
    """Lay out weeks as columns (oldest first) and days as rows (earliest on top).

    A short week keeps its cells at their own row indexes and leaves the
    remaining slots empty.
    """

    columns: list[GridColumn] = []
    for week in calendar.weeks:
        cells = [
            GridCell(
                row=row,
                date=day.date,
                count=day.count,
                level=day.level,
                color=colors[day.level],
                title=f"{day.date.isoformat()}: {day.count} contributions",
            )
            for row, day in enumerate(week.days)
        ]
        columns.append(
            GridColumn(
                week_start=week.start_date,
                cells=cells,
                empty_slots=DAYS_PER_WEEK - len(cells),
            )
        )
    return columns


def render(
    state: FetchState,
    colors: Mapping[ContributionLevel, str] = LEVEL_COLOR_MAP,
) -> ActivityGrid:
    """Describe the activity panel for the given fetch state."""

    if isinstance(state, Loading):
        return ActivityGrid(status="loading", header=LOADING_HEADER, show_progress=True)
    if isinstance(state, Failed):
        return ActivityGrid(status="failed", header=UNAVAILABLE_HEADER)

    calendar = state.calendar
    return ActivityGrid(
        status="loaded",
        header=total_header(calendar.total),
        total=calendar.total,
        columns=build_columns(calendar, colors),
    )
