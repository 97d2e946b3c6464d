from datetime import datetime
from pathlib import Path

from fastapi import APIRouter
from fastapi import Depends
from fastapi import HTTPException
from fastapi import Request
from fastapi.responses import HTMLResponse
from fastapi.responses import RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy import text

from portfolio.api.dependencies import get_site_context
from portfolio.api.schemas.contributions import ActivityGrid
from portfolio.context import SiteContext
from portfolio.services.calendar_renderer import render
from portfolio.services.level_colors import level_colors
from portfolio.services.theme import Theme

TEMPLATES_DIR = Path(__file__).resolve().parent.parent.parent / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse)
def index(request: Request, site: SiteContext = Depends(get_site_context)):
    """Render the portfolio page with the current activity panel."""

    theme = site.theme.current
    activity = render(site.contributions.state, level_colors(theme))
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "theme": theme.value,
            "content": site.content,
            "activity": activity,
            "github_login": site.contributions.account_id,
            "rendered_at": datetime.now().strftime("%H:%M"),
        },
    )


@router.get("/api/contributions")
def get_contributions(
    theme: Theme = Theme.LIGHT, site: SiteContext = Depends(get_site_context)
) -> ActivityGrid:
    """Return the activity panel grid description."""

    return render(site.contributions.state, level_colors(theme))


@router.get("/api/theme")
def get_theme(site: SiteContext = Depends(get_site_context)) -> dict[str, str]:
    return {"theme": site.theme.current.value}


@router.post("/theme/toggle")
def toggle_theme(site: SiteContext = Depends(get_site_context)) -> RedirectResponse:
    """Flip the site theme, persist it and send the browser back home."""

    site.theme.toggle()
    return RedirectResponse(url="/", status_code=303)


@router.get("/health/live")
def health_live() -> dict[str, str]:
    """Return liveness probe response for health checks."""

    return {"status": "ok"}


@router.get("/health/db")
def health_db(request: Request) -> dict[str, str]:
    try:
        with request.app.state.engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except Exception as exc:
        raise HTTPException(
            status_code=500, detail="Database connection failed"
        ) from exc

    return {"status": "ok"}
