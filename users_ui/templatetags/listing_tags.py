# users_ui/templatetags/listing_tags.py
from django import template

register = template.Library()


@register.filter
def page_range(total_pages):
    """1..total_pages, for the pager links."""
    try:
        return range(1, int(total_pages) + 1)
    except (TypeError, ValueError):
        return range(0)


@register.filter
def subtract(value, arg):
    try:
        return int(value) - int(arg)
    except (TypeError, ValueError):
        return ""
