import asyncio
import re

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from portfolio.clients.github_client import AuthError
from portfolio.clients.github_client import NetworkError
from portfolio.main import create_app
from portfolio.services.level_colors import DARK_LEVEL_COLOR_MAP
from portfolio.settings import Settings


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+pysqlite:///{tmp_path / 'portfolio.db'}",
        github_login="octocat",
        github_token="test-token",
        sentry_dsn=None,
    )


@pytest.fixture
def fetch_calls(monkeypatch, make_calendar) -> list[str]:
    """Serve an 842-contribution year whose last week has three days."""

    calls: list[str] = []
    calendar = make_calendar(total=842, week_lengths=[7] * 51 + [3])

    async def fake_fetch_calendar(account_id, auth_token, graphql_url, timeout):
        calls.append(account_id)
        return calendar

    monkeypatch.setattr(
        "portfolio.services.contribution_panel.fetch_calendar", fake_fetch_calendar
    )
    return calls


def failing_fetch(error):
    async def fake_fetch_calendar(account_id, auth_token, graphql_url, timeout):
        raise error

    return fake_fetch_calendar


def test_index_renders_loaded_calendar(settings, fetch_calls) -> None:
    with TestClient(create_app(settings)) as client:
        response = client.get("/")

    assert response.status_code == 200
    assert "842 contributions in the last year" in response.text
    assert response.text.count('class="calendar-week"') == 52
    assert response.text.count('class="calendar-slot"') == 4
    assert response.text.count('class="calendar-day"') == 51 * 7 + 3
    assert "@octocat" in response.text
    assert "Work Experience" in response.text
    assert "Featured Projects" in response.text
    assert '<span class="experience-logo">TC</span>' in response.text
    assert re.search(r'<p class="footer-clock">\d{2}:\d{2}</p>', response.text)


def test_contributions_api_returns_grid(settings, fetch_calls) -> None:
    with TestClient(create_app(settings)) as client:
        response = client.get("/api/contributions")

    body = response.json()
    assert response.status_code == 200
    assert body["status"] == "loaded"
    assert body["total"] == 842
    assert len(body["columns"]) == 52
    assert len(body["columns"][-1]["cells"]) == 3
    assert body["columns"][-1]["empty_slots"] == 4


def test_contributions_api_uses_dark_ramp(settings, fetch_calls) -> None:
    with TestClient(create_app(settings)) as client:
        response = client.get("/api/contributions", params={"theme": "dark"})

    cell = response.json()["columns"][0]["cells"][0]
    assert cell["color"] == DARK_LEVEL_COLOR_MAP[cell["level"]]


def test_contributions_fetched_once_per_mount(settings, fetch_calls) -> None:
    with TestClient(create_app(settings)) as client:
        client.get("/")
        client.get("/api/contributions")
        client.get("/")

    assert fetch_calls == ["octocat"]


@pytest.mark.parametrize(
    "error",
    [AuthError("GitHub rejected the token (401)"), NetworkError("unreachable")],
)
def test_failed_fetch_shows_unavailable_total(monkeypatch, settings, error) -> None:
    monkeypatch.setattr(
        "portfolio.services.contribution_panel.fetch_calendar", failing_fetch(error)
    )

    with TestClient(create_app(settings)) as client:
        page = client.get("/")
        api = client.get("/api/contributions")

    assert page.status_code == 200
    assert "Contribution count unavailable" in page.text
    assert 'class="calendar-week"' not in page.text
    assert api.json() == {
        "status": "failed",
        "header": "Contribution count unavailable",
        "total": None,
        "show_progress": False,
        "columns": [],
    }


def test_pending_fetch_shows_loading(monkeypatch, settings) -> None:
    async def hanging_fetch_calendar(account_id, auth_token, graphql_url, timeout):
        await asyncio.Event().wait()

    monkeypatch.setattr(
        "portfolio.services.contribution_panel.fetch_calendar", hanging_fetch_calendar
    )

    with TestClient(create_app(settings)) as client:
        response = client.get("/")

    assert "Loading…" in response.text
    assert 'class="activity-progress"' in response.text
    assert 'class="calendar-week"' not in response.text


def test_theme_toggle_persists_across_restart(settings, fetch_calls) -> None:
    with TestClient(create_app(settings), follow_redirects=False) as client:
        before = client.get("/api/theme")
        toggled = client.post("/theme/toggle")
        after = client.get("/api/theme")
        page = client.get("/")

    assert before.json() == {"theme": "light"}
    assert toggled.status_code == 303
    assert toggled.headers["location"] == "/"
    assert after.json() == {"theme": "dark"}
    assert 'class="theme-dark"' in page.text

    with TestClient(create_app(settings)) as client:
        restarted = client.get("/api/theme")

    assert restarted.json() == {"theme": "dark"}


def test_health_endpoints(settings, fetch_calls) -> None:
    with TestClient(create_app(settings)) as client:
        live = client.get("/health/live")
        db = client.get("/health/db")

    assert live.json() == {"status": "ok"}
    assert db.status_code == 200
    assert db.json() == {"status": "ok"}


def test_settings_reads_github_login_from_environment(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_LOGIN", "hubot")
    monkeypatch.setenv("GITHUB_TOKEN", "env-token")

    settings = Settings()

    assert settings.github_login == "hubot"
    assert settings.github_token.get_secret_value() == "env-token"
    assert "env-token" not in repr(settings)


def test_settings_reject_empty_github_login(monkeypatch) -> None:
    monkeypatch.setenv("GITHUB_LOGIN", "")

    with pytest.raises(ValidationError):
        Settings()

    with pytest.raises(ValidationError):
        Settings(github_login="")
