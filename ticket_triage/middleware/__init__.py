"""
HTTP middleware
"""
from ticket_triage.middleware.logging_middleware import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
