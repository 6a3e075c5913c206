# core/db_utils.py
import math


# -----------------------------
# Pagination helpers
# -----------------------------
def page_offset(page: int, limit: int) -> int:
    """Rows to skip before ``page`` (1-based) when pages hold ``limit`` rows."""
    return (page - 1) * limit


def total_pages(count: int, limit: int) -> int:
    return math.ceil(count / limit) if limit else 0


def count_and_fetch(queryset, limit, offset, fields=None):
    """
    Run the COUNT and the page fetch for a filtered, ordered queryset.
    Returns (rows, count); rows are dicts when ``fields`` is given.
    Example:
        rows, count = count_and_fetch(User.objects.filter(newsletter=True), 3, 0, ["id", "name"])
    """
    count = queryset.count()
    page_qs = queryset.values(*fields) if fields else queryset
    rows = list(page_qs[offset:offset + limit])
    return rows, count
