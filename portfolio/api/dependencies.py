from fastapi import Request

from portfolio.context import SiteContext


def get_site_context(request: Request) -> SiteContext:
    """Return the SiteContext created by the application lifespan."""

    return request.app.state.site
