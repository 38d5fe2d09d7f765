from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
import logging
import time

logger = logging.getLogger("access")

SILENT_PATHS = ("/", "/health", "/liveness", "/readiness")


class AccessLoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        x_forwarded_for = request.headers.get("x-forwarded-for")
        ip = (
            x_forwarded_for.split(",")[0].strip()
            if x_forwarded_for
            else (request.client.host if request.client else "-")
        )

        path = request.url.path
        method = request.method
        user_agent = request.headers.get("user-agent", "")

        # Probes from the orchestrator carry no user-agent
        if path in SILENT_PATHS and not user_agent:
            return await call_next(request)

        start = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start) * 1000

        logger.info(
            f"🛰️ {method} {path} -> {response.status_code} in {elapsed_ms:.1f}ms",
            extra={
                "ip": ip,
                "path": path,
                "method": method,
                "status": response.status_code,
                "user_agent": user_agent,
                "user_id": request.headers.get("x-user-id"),
            },
        )
        return response
