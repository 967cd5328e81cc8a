"""HTTP middleware: request ID, correlation ID, security headers.

Applied in create_app(); the last one added is the outermost. Requests are
never cut off by a timeout, so a deletion cascade always runs to completion
or to a reported failed step.
"""

from app.middleware.correlation_id import CorrelationIDMiddleware
from app.middleware.request_id import RequestIDMiddleware
from app.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
]
