from collections.abc import Mapping
from types import MappingProxyType

from portfolio.api.schemas.contributions import ContributionLevel
from portfolio.services.theme import Theme

# NONE is the empty square; quartiles ramp up in contrast against it.
LEVEL_COLOR_MAP: Mapping[ContributionLevel, str] = MappingProxyType(
    {
        ContributionLevel.NONE: "#ebedf0",
        ContributionLevel.FIRST_QUARTILE: "#9be9a8",
        ContributionLevel.SECOND_QUARTILE: "#40c463",
        ContributionLevel.THIRD_QUARTILE: "#30a14e",
        ContributionLevel.FOURTH_QUARTILE: "#216e39",
    }
)

DARK_LEVEL_COLOR_MAP: Mapping[ContributionLevel, str] = MappingProxyType(
    {
        ContributionLevel.NONE: "#161b22",
        ContributionLevel.FIRST_QUARTILE: "#0e4429",
        ContributionLevel.SECOND_QUARTILE: "#006d32",
        ContributionLevel.THIRD_QUARTILE: "#26a641",
        ContributionLevel.FOURTH_QUARTILE: "#39d353",
    }
)


def level_colors(theme: Theme) -> Mapping[ContributionLevel, str]:
    """Return the level color ramp for the given theme."""

    if theme is Theme.DARK:
        return DARK_LEVEL_COLOR_MAP
    return LEVEL_COLOR_MAP
