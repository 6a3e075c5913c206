from functools import wraps
from django.shortcuts import render
from django.http import HttpResponse

from core.log import get_request_logger

NOT_FOUND_ERROR = "Page not found"


def not_found(request, *args, **kwargs):
    """Unmatched route: the listing page with an error and a 404 status."""
    context = {"users": [], "error": NOT_FOUND_ERROR}
    return render(request, "users_templates/home.html", context, status=404)


def request_logger(request):
    """``request.logger`` when the middleware ran, else a fresh one."""
    logger = getattr(request, "logger", None)
    if logger is None:
        logger = request.logger = get_request_logger(request)
    return logger


def page_view(template_name=None, methods=("GET",)):
    """
    Decorator for user/address views that handles common functionality:
    - Answers methods outside ``methods`` with the 404 page
    - Provides consistent template rendering
    - Makes sure ``request.logger`` is set
    """
    def decorator(view_func):
        @wraps(view_func)
        def _wrapped_view(request, *args, **kwargs):
            if request.method not in methods:
                return not_found(request)

            request_logger(request)

            response = view_func(request, *args, **kwargs)

            # If the response is already an HttpResponse, return it
            if isinstance(response, HttpResponse):
                return response

            # If the response is a tuple of (template, context)
            if isinstance(response, tuple) and len(response) == 2:
                template_override, context = response
                template_to_use = template_override or template_name
            else:
                # Response is just context
                template_to_use = template_name
                context = response if isinstance(response, dict) else {}

            return render(request, template_to_use, context)

        return _wrapped_view
    return decorator
