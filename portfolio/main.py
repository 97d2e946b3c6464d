from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from portfolio.api.routes.site import router
from portfolio.context import build_site_context
from portfolio.core.middleware import RateLimitMiddleware
from portfolio.core.observability import configure_logging
from portfolio.core.observability import init_sentry
from portfolio.db import Base
from portfolio.db import create_db_engine
from portfolio.db import create_session_factory
from portfolio.settings import Settings

RATE_LIMITED_ROUTES = frozenset({("POST", "/theme/toggle")})


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the portfolio application.

    The lifespan owns the database engine and the SiteContext: startup loads
    the theme and mounts the contribution panel, shutdown unmounts it.
    """

    app_settings = settings or Settings()
    configure_logging(app_settings.log_level)
    init_sentry(app_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = create_db_engine(app_settings.database_url)
        Base.metadata.create_all(bind=engine)
        site = build_site_context(app_settings, create_session_factory(engine))

        app.state.engine = engine
        app.state.site = site
        site.mount()
        try:
            yield
        finally:
            await site.unmount()
            engine.dispose()

    app = FastAPI(lifespan=lifespan)
    app.add_middleware(
        RateLimitMiddleware,
        routes=RATE_LIMITED_ROUTES,
        requests_per_window=app_settings.rate_limit_per_minute,
        window_seconds=app_settings.rate_limit_window_seconds,
    )
    app.include_router(router)
    return app


app = create_app()
