"""Shared fixtures for the test suite."""

from datetime import timedelta

import pytest
from django.utils import timezone

from core.core_models import Address, User


@pytest.fixture()
def make_user(db):
    """Factory for User rows; ``age_minutes`` pushes created_at into the past."""

    def _make(name="Alice", occupation=None, newsletter=False, age_minutes=None):
        user = User.objects.create(name=name, occupation=occupation, newsletter=newsletter)
        if age_minutes is not None:
            created = timezone.now() - timedelta(minutes=age_minutes)
            User.objects.filter(pk=user.pk).update(created_at=created)
            user.refresh_from_db()
        return user

    return _make


@pytest.fixture()
def make_address(db):
    """Factory for Address rows owned by ``user``."""

    def _make(user, street="Main Street", number="10", city="Lisbon", age_minutes=None):
        address = Address.objects.create(user=user, street=street, number=number, city=city)
        if age_minutes is not None:
            created = timezone.now() - timedelta(minutes=age_minutes)
            Address.objects.filter(pk=address.pk).update(created_at=created)
            address.refresh_from_db()
        return address

    return _make
