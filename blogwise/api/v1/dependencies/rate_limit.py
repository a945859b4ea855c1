"""Rate-limit dependency for mutating and analysis routes."""

from collections.abc import Callable

from fastapi import HTTPException, Request, status

from blogwise.core.rate_limit import get_rate_limiter

TOO_MANY_REQUESTS_DETAIL = "Too Many Requests"


def client_key(request: Request) -> str:
    """Client address, trusting proxy headers first."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()
    if request.client and request.client.host:
        return request.client.host
    return "unknown"


def rate_limited(max_requests: int, window_ms: int) -> Callable[[Request], None]:
    """Build a dependency that rejects bursts with 429 and ``Retry-After``."""

    def dependency(request: Request) -> None:
        decision = get_rate_limiter().allow(
            client_key(request),
            request.url.path,
            max_requests,
            window_ms,
        )
        if not decision.allowed:
            raise HTTPException(
                status_code=status.HTTP_429_TOO_MANY_REQUESTS,
                detail=TOO_MANY_REQUESTS_DETAIL,
                headers={"Retry-After": str(decision.retry_after_seconds)},
            )

    return dependency
