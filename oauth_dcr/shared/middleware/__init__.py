# oauth_dcr/shared/middleware/__init__.py

from oauth_dcr.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from oauth_dcr.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
