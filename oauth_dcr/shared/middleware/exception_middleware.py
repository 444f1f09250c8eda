# oauth_dcr/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions escaping the
endpoints, reports them to the log and returns a generic error response.
Internal details are never sent to the caller.
"""

import time
import logging
from typing import Callable

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from oauth_dcr.domain.exceptions import DomainException

# Configure logger
logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_BODY = "Internal Server Error"


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures unexpected exceptions and turns them into a bare 500 response.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DomainException as exc:
            # Store failures and other domain errors that were not handled by the use case
            logger.error(
                f"Domain exception: {str(exc)} | Code: {exc.internal_code} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return self._internal_error()

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return self._internal_error()

        except Exception as exc:
            logger.exception(
                f"Uncaught error: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return self._internal_error()

    @staticmethod
    def _internal_error() -> PlainTextResponse:
        return PlainTextResponse(
            INTERNAL_SERVER_ERROR_BODY,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
