# core/models.py
# Django loads models from here; definitions live in core_models.
from core.core_models import User, Address  # noqa: F401
