# core/middleware.py
from core.log import get_request_logger


class RequestLogMiddleware:
    """Log every request and hand views a request-scoped logger as ``request.logger``."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.logger = get_request_logger(request)
        request.logger.info("request")
        return self.get_response(request)
