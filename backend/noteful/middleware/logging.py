"""
Noteful API — Request Logging Middleware
=========================================

What:  One log line per HTTP request: method, path (with query string,
       so searchTerm/folderId/tagId are visible), status, duration,
       request id and client address.
When:  Runs inside RequestIDMiddleware so the request id is already set.

Level by status:
    5xx → ERROR, 4xx → WARNING, otherwise INFO

Request bodies are never logged (they carry passwords on /api/users).
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from noteful.middleware.request_id import request_id_var

logger = logging.getLogger("noteful.access")


class RequestLoggingMiddleware(BaseHTTPMiddleware):

    # Probed every few seconds by orchestration; not worth a log line
    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path
        if path in self.QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        target = f"{path}?{request.url.query}" if request.url.query else path
        client_ip = request.client.host if request.client else "unknown"
        rid = request_id_var.get("")

        response = await call_next(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        status = response.status_code
        if status >= 500:
            log_level = logging.ERROR
        elif status >= 400:
            log_level = logging.WARNING
        else:
            log_level = logging.INFO

        logger.log(
            log_level,
            "%s %s %d %.1fms [%s] from %s",
            request.method,
            target,
            status,
            duration_ms,
            rid,
            client_ip,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": path,
                "query": request.url.query,
                "status": status,
                "duration_ms": round(duration_ms, 2),
                "client_ip": client_ip,
            },
        )
        return response
