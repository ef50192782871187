# app/core/observability.py
import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        ms = (time.perf_counter() - start) * 1000

        # lo deja get_current_user en rutas protegidas
        user_id = getattr(request.state, "user_id", None)
        logging.getLogger("finance.req").info(
            "%s %s -> %s in %.1fms user=%s",
            request.method,
            request.url.path,
            response.status_code,
            ms,
            user_id,
        )
        return response
