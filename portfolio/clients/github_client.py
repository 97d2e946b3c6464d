import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from portfolio.api.schemas.contributions import ContributionCalendar
from portfolio.api.schemas.contributions import ContributionDay
from portfolio.api.schemas.contributions import ContributionWeek

logger = logging.getLogger(__name__)

GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
USER_AGENT = "portfolio-site"

CONTRIBUTION_CALENDAR_QUERY = """
query($login: String!) {
  user(login: $login) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          firstDay
          contributionDays {
            date
            contributionCount
            contributionLevel
          }
        }
      }
    }
  }
}
"""


class ContributionFetchError(Exception):
    """Base class for failures of a single contribution calendar fetch."""


class NetworkError(ContributionFetchError):
    """Raised when the transport fails, times out or GitHub is unavailable."""


class AuthError(ContributionFetchError):
    """Raised when the credential is missing or rejected by GitHub."""


class MalformedResponse(ContributionFetchError):
    """Raised when the response does not match the calendar contract."""


def _require_mapping(container: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = container.get(key)
    if not isinstance(value, Mapping):
        raise MalformedResponse(f"GitHub response is missing {key}")
    return value


def _require_list(container: Mapping[str, Any], key: str) -> list[Any]:
    value = container.get(key)
    if not isinstance(value, list):
        raise MalformedResponse(f"GitHub response is missing {key}")
    return value


def parse_contribution_calendar(payload: Any) -> ContributionCalendar:
    """Validate a GraphQL response body and build a typed calendar.

    Raises:
        MalformedResponse: If any expected field is missing or invalid.
    """

    if not isinstance(payload, Mapping):
        raise MalformedResponse("GitHub GraphQL response is invalid")

    if payload.get("errors"):
        raise MalformedResponse("GitHub GraphQL returned errors")

    data = _require_mapping(payload, "data")
    user = data.get("user")
    if not isinstance(user, Mapping):
        raise MalformedResponse("GitHub user not found")

    collection = _require_mapping(user, "contributionsCollection")
    calendar = _require_mapping(collection, "contributionCalendar")
    raw_weeks = _require_list(calendar, "weeks")

    try:
        weeks = []
        for raw_week in raw_weeks:
            if not isinstance(raw_week, Mapping):
                raise MalformedResponse("GitHub contribution week is invalid")
            days = []
            for raw_day in _require_list(raw_week, "contributionDays"):
                if not isinstance(raw_day, Mapping):
                    raise MalformedResponse("GitHub contribution day is invalid")
                days.append(
                    ContributionDay(
                        date=raw_day.get("date"),
                        count=raw_day.get("contributionCount"),
                        level=raw_day.get("contributionLevel"),
                    )
                )
            weeks.append(
                ContributionWeek(start_date=raw_week.get("firstDay"), days=days)
            )

        return ContributionCalendar(
            weeks=weeks, total=calendar.get("totalContributions")
        )
    except ValidationError as exc:
        raise MalformedResponse("GitHub contribution calendar is invalid") from exc


async def fetch_calendar(
    account_id: str,
    auth_token: str,
    graphql_url: str = GITHUB_GRAPHQL_URL,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float | None = 20.0,
) -> ContributionCalendar:
    """Fetch one year of contribution calendar data for `account_id`.

    Exactly one request is sent per call and nothing is cached. The token is
    only ever placed in the Authorization header.

    Raises:
        ValueError: If `account_id` is empty.
        AuthError: If the token is missing or GitHub answers 401/403.
        NetworkError: On transport, decoding and redirect failures, timeouts
            and other non-2xx answers.
        MalformedResponse: If the body is not the expected calendar shape.
    """

    if not account_id:
        raise ValueError("account_id is required")
    if not auth_token:
        raise AuthError("GitHub token is not configured")

    headers = {
        "Authorization": f"Bearer {auth_token}",
        "Content-Type": "application/json",
        "User-Agent": USER_AGENT,
    }
    body = {"query": CONTRIBUTION_CALENDAR_QUERY, "variables": {"login": account_id}}

    logger.debug("Fetching contribution calendar for %s", account_id)
    owns_client = client is None
    http_client = client if client is not None else httpx.AsyncClient(timeout=timeout)
    try:
        response = await http_client.post(graphql_url, json=body, headers=headers)
    except httpx.RequestError as exc:
        raise NetworkError(f"GitHub request failed: {type(exc).__name__}") from exc
    finally:
        if owns_client:
            await http_client.aclose()

    if response.status_code in {401, 403}:
        raise AuthError(f"GitHub rejected the token ({response.status_code})")
    if not response.is_success:
        raise NetworkError(f"GitHub request failed ({response.status_code})")

    try:
        payload = response.json()
    except ValueError as exc:
        raise MalformedResponse("GitHub response is not valid JSON") from exc

    calendar = parse_contribution_calendar(payload)
    logger.debug(
        "Fetched %d weeks, %d contributions for %s",
        len(calendar.weeks),
        calendar.total,
        account_id,
    )
    return calendar
