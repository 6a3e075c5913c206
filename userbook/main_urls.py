# userbook/main_urls.py
from django.urls import path, re_path, include
from users_ui import base_views
from users_ui.users import user_views

# --- URL patterns ---
urlpatterns = [
    # Listing (root)
    path("", user_views.user_list, name="home"),

    # Users and their addresses
    path("users/", include("users_ui.users.user_urls")),
    path("address/", include("users_ui.address.address_urls")),

    # Everything else → 404 page
    re_path(r"^", base_views.not_found, name="not_found"),
]
