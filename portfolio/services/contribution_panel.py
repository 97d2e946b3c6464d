import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable

from pydantic import BaseModel
from pydantic import ConfigDict

from portfolio.api.schemas.contributions import ContributionCalendar
from portfolio.clients.github_client import ContributionFetchError
from portfolio.clients.github_client import GITHUB_GRAPHQL_URL
from portfolio.clients.github_client import fetch_calendar

logger = logging.getLogger(__name__)

CalendarFetcher = Callable[..., Awaitable[ContributionCalendar]]


class Loading(BaseModel):
    """The single fetch has not resolved yet."""

    model_config = ConfigDict(frozen=True)


class Loaded(BaseModel):
    """The fetch succeeded with a fully validated calendar."""

    model_config = ConfigDict(frozen=True)

    calendar: ContributionCalendar


class Failed(BaseModel):
    """The fetch failed; the concrete error kind is kept for logging."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    error: ContributionFetchError

    @property
    def kind(self) -> str:
        return type(self.error).__name__


FetchState = Loading | Loaded | Failed


class ContributionPanel:
    """Owner of the contribution `FetchState` for one mounted view.

    `mount()` starts exactly one fetch. The state leaves `Loading` once and
    never changes again; results that arrive after `unmount()` are dropped.
    """

    def __init__(
        self,
        account_id: str,
        auth_token: str,
        graphql_url: str = GITHUB_GRAPHQL_URL,
        timeout: float | None = 20.0,
        fetcher: CalendarFetcher | None = None,
    ) -> None:
        self.account_id = account_id
        self._auth_token = auth_token
        self._graphql_url = graphql_url
        self._timeout = timeout
        self._fetcher = fetcher
        self._state: FetchState = Loading()
        self._mounted = False
        self._task: asyncio.Task[None] | None = None

    @property
    def state(self) -> FetchState:
        return self._state

    @property
    def mounted(self) -> bool:
        return self._mounted

    @property
    def task(self) -> "asyncio.Task[None] | None":
        return self._task

    def mount(self) -> "asyncio.Task[None]":
        """Schedule the single fetch on the running event loop."""

        if self._task is not None:
            raise RuntimeError("contribution panel is already mounted")

        self._mounted = True
        self._task = asyncio.create_task(self._load())
        self._task.add_done_callback(_log_crashed_fetch)
        return self._task

    def unmount(self) -> None:
        self._mounted = False

    async def _load(self) -> None:
        fetcher = self._fetcher or fetch_calendar
        try:
            calendar = await fetcher(
                self.account_id,
                self._auth_token,
                self._graphql_url,
                timeout=self._timeout,
            )
        except ContributionFetchError as exc:
            logger.warning(
                "GitHub contribution fetch failed (%s): %s", type(exc).__name__, exc
            )
            self._resolve(Failed(error=exc))
        else:
            self._resolve(Loaded(calendar=calendar))

    def _resolve(self, state: FetchState) -> None:
        if not self._mounted:
            logger.debug("Discarding contribution result after unmount")
            return
        if not isinstance(self._state, Loading):
            return
        self._state = state


def _log_crashed_fetch(task: "asyncio.Task[None]") -> None:
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("Contribution fetch task crashed", exc_info=exc)
