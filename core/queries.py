# core/queries.py
"""
Query layer and lifecycle operations for users and their addresses.

Functions here talk to the ORM only. They raise on storage errors and
leave logging and redirect decisions to the views.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from django.db.models import Prefetch
from django.utils import timezone

from core import core_models
from core.db_utils import count_and_fetch, page_offset, total_pages

# --- Columns returned by the listing (plain dicts, like a raw query) ---
LISTING_FIELDS = ["id", "name", "occupation", "newsletter", "created_at"]


@dataclass
class UserPage:
    users: List[dict] = field(default_factory=list)
    count: int = 0
    current_page: int = 1
    total_pages: int = 0
    limit: int = 3


# -------------------------
# Listing
# -------------------------
def list_users(page: int = 1, limit: int = 3, q: Optional[str] = None,
               newsletter: Optional[bool] = None) -> UserPage:
    """
    One page of users, newest first.
    ``q`` filters by name substring (backend default case rules);
    ``newsletter`` filters by the flag when not None.
    """
    qs = core_models.User.objects.all()
    if q:
        qs = qs.filter(name__contains=q)
    if newsletter is not None:
        qs = qs.filter(newsletter=newsletter)
    qs = qs.order_by("-created_at", "-id")

    rows, count = count_and_fetch(qs, limit, page_offset(page, limit), LISTING_FIELDS)
    return UserPage(
        users=rows,
        count=count,
        current_page=page,
        total_pages=total_pages(count, limit),
        limit=limit,
    )


# -------------------------
# Lookup
# -------------------------
def get_user_with_addresses(user_id, newest_first: bool = False):
    """Return the user with ``addresses`` prefetched, or None."""
    addresses = core_models.Address.objects.all()
    if newest_first:
        addresses = addresses.order_by("-created_at", "-id")
    return (
        core_models.User.objects.filter(pk=user_id)
        .prefetch_related(Prefetch("addresses", queryset=addresses))
        .first()
    )


# -------------------------
# Users
# -------------------------
def create_user(name: str, occupation: Optional[str] = None, newsletter: bool = False):
    return core_models.User.objects.create(
        name=name.strip(),
        occupation=occupation,
        newsletter=newsletter,
    )


def update_user(user_id, name: str, occupation: Optional[str] = None, newsletter: bool = False) -> int:
    """Update the matching row, if any. Returns the number of rows changed."""
    return core_models.User.objects.filter(pk=user_id).update(
        name=name.strip(),
        occupation=occupation,
        newsletter=newsletter,
        # auto_now is skipped by QuerySet.update()
        updated_at=timezone.now(),
    )


def delete_user(user_id) -> Tuple[int, int]:
    """
    Remove the user's addresses, then the user.
    The two deletes are separate statements, not one transaction: if the
    second fails the user row survives without its addresses.
    Returns (addresses_deleted, users_deleted).
    """
    addresses_deleted, _ = core_models.Address.objects.filter(user_id=user_id).delete()
    users_deleted, _ = core_models.User.objects.filter(pk=user_id).delete()
    return addresses_deleted, users_deleted


# -------------------------
# Addresses
# -------------------------
def create_address(user_id, street: str, city: str, number: Optional[str] = None):
    """Create an address for an existing user; raises User.DoesNotExist otherwise."""
    owner = core_models.User.objects.get(pk=user_id)
    return core_models.Address.objects.create(
        user=owner,
        street=street.strip(),
        number=number,
        city=city.strip(),
    )


def delete_address(address_id) -> int:
    # Deletes by id only; the caller's userId is not checked against the row
    deleted, _ = core_models.Address.objects.filter(pk=address_id).delete()
    return deleted
