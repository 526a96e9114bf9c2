"""
Logging setup and per-request logging middleware.
"""
import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, datefmt=DATE_FORMAT)
    logging.getLogger("uvicorn").setLevel(level.upper())
    logging.getLogger("uvicorn.access").setLevel(level.upper())


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs method, path, status code and processing time of every request."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        client_host = request.client.host if request.client else "unknown"

        logger.info("[request] %s %s - client: %s", request.method, request.url.path, client_host)

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            logger.error(
                "[request failed] %s %s - %s - %.3fs",
                request.method, request.url.path, e, process_time,
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            "[request done] %s %s - status: %s - %.3fs",
            request.method, request.url.path, response.status_code, process_time,
        )
        return response
