# users_ui/users/user_urls.py
from django.urls import path
from . import user_views

app_name = "users"

urlpatterns = [
    # Create form + submit (must come before <user_id>)
    path("create", user_views.create_user, name="create"),
    # GET falls through to the detail lookup, as /users/<user_id> would
    path("update", user_views.update_or_detail, name="update"),

    # Edit page / delete; an empty id is looked up as the user "edit"
    path("edit/", user_views.user_detail, {"user_id": "edit"}),
    path("edit/<str:user_id>", user_views.user_edit, name="edit"),
    path("delete/<str:user_id>", user_views.delete_user, name="delete"),

    # Detail view
    path("<str:user_id>", user_views.user_detail, name="detail"),
]
