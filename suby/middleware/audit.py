"""Audit logging middleware — records every state-changing request to audit_trail."""


import asyncio
import logging
import time
from collections.abc import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from suby.core.config import settings
from suby.db.base import async_session_factory
from suby.domain.audit import AuditTrail

logger = logging.getLogger(__name__)

# Methods that mutate state
_WRITE_METHODS = {"POST", "PUT", "PATCH", "DELETE"}

# Strong refs so fire-and-forget tasks are not garbage collected mid-flight
_pending: set[asyncio.Task] = set()


def entity_type_for(path: str) -> str | None:
    """`/api/v1/firms/<id>` -> `firm`; `/api/v1/vendors/login` -> `vendor`."""
    parts = [p for p in path.strip("/").split("/") if p]
    if len(parts) >= 3 and parts[0] == "api":
        return parts[2].rstrip("s")
    return parts[0] if parts else None


class AuditMiddleware(BaseHTTPMiddleware):
    """Logs all write operations.

    Each audit row is written in a background task AFTER the response is
    produced so it never adds latency to the request. Failures are logged
    and never raised to the caller.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start = time.monotonic()
        response = await call_next(request)
        duration_ms = round((time.monotonic() - start) * 1000)

        if request.method in _WRITE_METHODS:
            task = asyncio.create_task(
                self._record(
                    method=request.method,
                    path=request.url.path,
                    status_code=response.status_code,
                    duration_ms=duration_ms,
                    vendor_id=getattr(request.state, "vendor_id", None),
                    ip_address=request.client.host if request.client else None,
                    user_agent=request.headers.get("user-agent"),
                )
            )
            _pending.add(task)
            task.add_done_callback(_pending.discard)

        return response

    async def _record(
        self,
        *,
        method: str,
        path: str,
        status_code: int,
        duration_ms: int,
        vendor_id: str | None,
        ip_address: str | None,
        user_agent: str | None,
    ) -> None:
        try:
            async with async_session_factory() as session:
                session.add(
                    AuditTrail(
                        client_id=settings.default_client_id,
                        vendor_id=vendor_id,
                        ip_address=ip_address,
                        user_agent=(user_agent or "")[:512] or None,
                        method=method,
                        path=path[:500],
                        status_code=status_code,
                        duration_ms=duration_ms,
                        entity_type=entity_type_for(path),
                        description=f"{method} {path} -> {status_code} ({duration_ms}ms)",
                    )
                )
                await session.commit()
        except Exception:  # pragma: no cover
            logger.exception("Failed to write audit row for %s %s", method, path)
