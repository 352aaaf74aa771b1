"""Request ID middleware.

Takes the request ID from ``X-Request-ID`` or generates a UUID, stores it in
``request.state.request_id`` and the logging context, returns it in the
response header, and clears the logging context when the request ends.
"""

from __future__ import annotations

from kickstart_service.app.middleware.base import HeaderContextMiddleware, generate_uuid


class RequestIDMiddleware(HeaderContextMiddleware):
    """Add unique request ID to all requests for correlation.

    Usage:
        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)

        @app.get("/")
        async def root(request: Request):
            return {"request_id": request.state.request_id}
    """

    header_name = "x-request-id"
    state_key = "request_id"
    log_context_key = "request_id"
    should_clear_context_on_finish = True

    def generate_value(self) -> str:
        return generate_uuid()
