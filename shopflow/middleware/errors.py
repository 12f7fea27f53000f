import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

errors_log = logging.getLogger("errors")
access_log = logging.getLogger("access")


class ErrorEnvelopeMiddleware(BaseHTTPMiddleware):
    """
    Cualquier excepción no controlada -> 500 {"error": "<mensaje crudo>"}.
    La transacción del servicio ya hizo rollback al llegar aquí.
    """

    async def dispatch(self, request, call_next):
        started = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            errors_log.exception("%s %s failed: %s", request.method, request.url.path, exc)
            response = JSONResponse(status_code=500, content={"error": str(exc)})
        elapsed_ms = (time.perf_counter() - started) * 1000
        access_log.info(
            "%s %s -> %s (%.1f ms)", request.method, request.url.path, response.status_code, elapsed_ms
        )
        return response


def install_error_envelope(app):
    app.add_middleware(ErrorEnvelopeMiddleware)
