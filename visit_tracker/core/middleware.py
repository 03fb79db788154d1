from collections import deque
from collections.abc import Awaitable
from collections.abc import Callable
from threading import RLock
from time import monotonic

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response


GRID_PATH = "/streaks/grid"


class GridRateLimitMiddleware(BaseHTTPMiddleware):
    """Sliding-window limit on grid composition requests, keyed by client.

    The client key is the socket peer address. `X-Forwarded-For` is only
    honoured when `trust_forwarded_for` is set, i.e. when a proxy that
    overwrites the header sits in front of the app.
    """

    def __init__(
        self,
        app,
        requests_per_window: int = 30,
        window_seconds: int = 60,
        trust_forwarded_for: bool = False,
    ) -> None:
        super().__init__(app)
        self.max_requests = max(1, requests_per_window)
        self.window_seconds = max(1, window_seconds)
        self.trust_forwarded_for = trust_forwarded_for
        self._buckets: dict[str, deque[float]] = {}
        self._last_sweep = 0.0
        self._lock = RLock()

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.method != "POST" or request.url.path != GRID_PATH:
            return await call_next(request)

        retry_after = self.register_request(self.client_key(request), monotonic())
        if retry_after is not None:
            return JSONResponse(
                status_code=429,
                content={"detail": "Too Many Requests"},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)

    def register_request(self, key: str, now: float) -> int | None:
        """Record a request for key; return Retry-After seconds when over limit."""

        cutoff = now - self.window_seconds
        with self._lock:
            if now - self._last_sweep >= self.window_seconds:
                self._sweep(cutoff)
                self._last_sweep = now

            bucket = self._buckets.get(key)
            if bucket is not None:
                while bucket and bucket[0] <= cutoff:
                    bucket.popleft()
                if not bucket:
                    del self._buckets[key]
                    bucket = None

            if bucket is not None and len(bucket) >= self.max_requests:
                return max(1, int(self.window_seconds - (now - bucket[0])))

            self._buckets.setdefault(key, deque()).append(now)
            return None

    def tracked_clients(self) -> int:
        with self._lock:
            return len(self._buckets)

    def _sweep(self, cutoff: float) -> None:
        # Buckets whose newest request left the window hold nothing useful.
        stale = [key for key, bucket in self._buckets.items() if bucket[-1] <= cutoff]
        for key in stale:
            del self._buckets[key]

    def client_key(self, request: Request) -> str:
        if self.trust_forwarded_for:
            forwarded_for = request.headers.get("x-forwarded-for")
            if forwarded_for:
                return forwarded_for.split(",")[0].strip() or "unknown"

        if request.client and request.client.host:
            return request.client.host

        return "unknown"
