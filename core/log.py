# core/log.py
import logging

logger = logging.getLogger("userbook.request")


class RequestLoggerAdapter(logging.LoggerAdapter):
    """
    Logger bound to one request.
    Appends the request context as key=value pairs, e.g.
        msg=User created id=4 method=POST path=/users/create
    """

    def process(self, msg, kwargs):
        context = " ".join(f"{key}={value}" for key, value in self.extra.items())
        return (f"{msg} {context}" if context else msg), kwargs


def get_request_logger(request, base=None):
    return RequestLoggerAdapter(base or logger, {"method": request.method, "path": request.path})
