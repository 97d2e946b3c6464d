from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

RateLimitedRoute = tuple[str, str]


class SlidingWindow:
    """Timestamps of the accepted requests of one client on one route."""

    def __init__(self, limit: int, window_seconds: int) -> None:
        self.limit = limit
        self.window_seconds = window_seconds
        self._hits: deque[float] = deque()

    def admit(self, now: float) -> int | None:
        """Record a request at `now`.

        Returns None when the request is accepted, otherwise the number of
        seconds until the oldest hit leaves the window.
        """

        while self._hits and self._hits[0] <= now - self.window_seconds:
            self._hits.popleft()

        if len(self._hits) < self.limit:
            self._hits.append(now)
            return None

        return max(1, int(self._hits[0] + self.window_seconds - now))


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Per-client request limit for the write routes of the site."""

    def __init__(
        self,
        app,
        routes: frozenset[RateLimitedRoute],
        requests_per_window: int = 30,
        window_seconds: int = 60,
    ) -> None:
        super().__init__(app)
        self.routes = routes
        # Zero or negative settings would block every request.
        self.limit = max(1, requests_per_window)
        self.window_seconds = max(1, window_seconds)
        self._windows: dict[tuple[RateLimitedRoute, str], SlidingWindow] = {}
        self._lock = RLock()

    def window_for(self, route: RateLimitedRoute, client: str) -> SlidingWindow:
        key = (route, client)
        window = self._windows.get(key)
        if window is None:
            window = SlidingWindow(self.limit, self.window_seconds)
            self._windows[key] = window
        return window

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        route = (request.method, request.url.path)
        if route not in self.routes:
            return await call_next(request)

        with self._lock:
            retry_after = self.window_for(route, client_address(request)).admit(
                monotonic()
            )

        if retry_after is not None:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too Many Requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)


def client_address(request: Request) -> str:
    """First hop of X-Forwarded-For, else the socket peer."""

    forwarded = request.headers.get("x-forwarded-for", "")
    first_hop = forwarded.split(",")[0].strip()
    if first_hop:
        return first_hop

    if request.client and request.client.host:
        return request.client.host

    return "unknown"
