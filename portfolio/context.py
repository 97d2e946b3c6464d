import asyncio
from contextlib import suppress

from sqlalchemy.orm import Session
from sqlalchemy.orm import sessionmaker

from portfolio.content import SITE_CONTENT
from portfolio.content import SiteContent
from portfolio.services.contribution_panel import ContributionPanel
from portfolio.services.theme import Theme
from portfolio.services.theme import ThemePreference
from portfolio.settings import Settings


class SiteContext:
    """Top-level owner of the site's mutable state.

    Routes receive it through `get_site_context` instead of reaching for
    module globals.
    """

    def __init__(
        self,
        settings: Settings,
        theme: ThemePreference,
        contributions: ContributionPanel,
        content: SiteContent = SITE_CONTENT,
    ) -> None:
        self.settings = settings
        self.theme = theme
        self.contributions = contributions
        self.content = content

    def mount(self) -> None:
        self.theme.load()
        self.contributions.mount()

    async def unmount(self) -> None:
        self.contributions.unmount()

        task = self.contributions.task
        if task is not None and not task.done():
            task.cancel()
            with suppress(asyncio.CancelledError):
                await task


def build_site_context(
    settings: Settings, session_factory: sessionmaker[Session]
) -> SiteContext:
    token = settings.github_token.get_secret_value() if settings.github_token else ""
    return SiteContext(
        settings=settings,
        theme=ThemePreference(session_factory, default=Theme(settings.default_theme)),
        contributions=ContributionPanel(
            account_id=settings.github_login,
            auth_token=token,
            graphql_url=settings.github_graphql_url,
            timeout=settings.github_timeout_seconds,
        ),
    )
