# users_ui/address/address_urls.py
from django.urls import path
from . import address_views

app_name = "address"

urlpatterns = [
    path("create", address_views.create_address, name="create"),
    path("delete", address_views.delete_address, name="delete"),
]
