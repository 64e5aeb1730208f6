"""
booking_platform.observability.middleware

HTTP middleware for request-scoped logging and audit context.

Responsibilities:
- Generate/propagate request IDs.
- Resolve the acting user from a verified bearer token for audit stamping.
"""

from __future__ import annotations

import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.status import HTTP_401_UNAUTHORIZED
from starlette.types import ASGIApp

from booking_platform.auth.jwt import JwtConfig, JwtValidationError, user_id_from_token
from booking_platform.db.auditing import acting_user

REQUEST_ID_HEADER = "x-request-id"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    - Propagates or generates a request id
    - Anonymous requests run as the system (no user id); a bad token is rejected
    """

    def __init__(self, app: ASGIApp, *, jwt_cfg: JwtConfig) -> None:
        super().__init__(app)
        self._jwt_cfg = jwt_cfg

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        )
        try:
            token = _bearer_token(request)
            try:
                user_id = user_id_from_token(cfg=self._jwt_cfg, token=token) if token else None
            except JwtValidationError as e:
                structlog.get_logger(__name__).warning("invalid_bearer_token", error=str(e))
                response: Response = JSONResponse(
                    status_code=HTTP_401_UNAUTHORIZED, content={"detail": "Invalid bearer token"}
                )
            else:
                structlog.contextvars.bind_contextvars(user_id=user_id)
                reset_token = acting_user.set(user_id)
                try:
                    response = await call_next(request)
                finally:
                    acting_user.reset(reset_token)
        finally:
            structlog.contextvars.clear_contextvars()

        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _bearer_token(request: Request) -> str | None:
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    if scheme.lower() != "bearer" or not credentials.strip():
        return None
    return credentials.strip()


# --- Module Notes -----------------------------------------------------------
# Identity is taken only from a signed token; client-supplied id headers are ignored.
