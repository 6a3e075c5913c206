# users_ui/users/user_views.py
from django.conf import settings
from django.shortcuts import redirect

from core import queries
from users_ui.base_views import page_view
from users_ui.forms import UserForm
from utils.validators import parse_bool_filter, parse_positive_int

HOME_TEMPLATE = "users_templates/home.html"
ADD_TEMPLATE = "users_templates/adduser.html"
VIEW_TEMPLATE = "users_templates/userview.html"
EDIT_TEMPLATE = "users_templates/useredit.html"


def edit_url(user_id):
    return f"/users/edit/{user_id or ''}"


def _first_error(form):
    for errors in form.errors.values():
        return errors[0]
    return ""


# -------------------------------------------------------------------
# Listing with filters and pagination
# -------------------------------------------------------------------
@page_view(HOME_TEMPLATE)
def user_list(request):
    q = request.GET.get("q") or ""
    newsletter = request.GET.get("newsletter") or ""
    try:
        page = parse_positive_int(request.GET.get("page"), 1)
        limit = parse_positive_int(request.GET.get("limit"), settings.USERS_PAGE_SIZE)

        result = queries.list_users(
            page=page,
            limit=limit,
            q=q or None,
            newsletter=parse_bool_filter(newsletter),
        )
    except Exception:
        request.logger.exception("Error loading users")
        return {"users": [], "error": "Error loading users"}

    return {
        "users": result.users,
        "count": result.count,
        "currentPage": result.current_page,
        "totalPages": result.total_pages,
        "limit": result.limit,
        "q": q,
        "newsletter": newsletter,
    }


# -------------------------------------------------------------------
# Create
# -------------------------------------------------------------------
@page_view(ADD_TEMPLATE, methods=("GET", "POST"))
def create_user(request):
    """
    GET renders the empty form.
    POST validates, stores the trimmed values and goes back to the listing;
    on any error the form is shown again with what was typed.
    """
    if request.method == "GET":
        return {}

    form_data = {
        "name": request.POST.get("name"),
        "occupation": request.POST.get("occupation"),
        "newsletter": request.POST.get("newsletter"),
    }
    form = UserForm(request.POST)
    if not form.is_valid():
        return {"error": _first_error(form), "formData": form_data}

    try:
        user = queries.create_user(**form.cleaned_data)
    except Exception as e:
        request.logger.exception("Error creating user")
        return {"error": f"Error creating user: {e}", "formData": request.POST.dict()}

    request.logger.info("User created %s", user.to_dict())
    return redirect("home")


# -------------------------------------------------------------------
# Detail
# -------------------------------------------------------------------
@page_view(VIEW_TEMPLATE)
def user_detail(request, user_id):
    try:
        user = queries.get_user_with_addresses(user_id)
    except Exception:
        request.logger.exception("Error loading user %s", user_id)
        return {"error": "Error loading user"}

    if user is None:
        return {"error": "User not found"}
    return {"user": user}


# -------------------------------------------------------------------
# Edit page
# -------------------------------------------------------------------
@page_view(EDIT_TEMPLATE)
def user_edit(request, user_id):
    try:
        user = queries.get_user_with_addresses(user_id, newest_first=True)
    except Exception:
        request.logger.exception("Error loading user %s for edit", user_id)
        return redirect("home")

    if user is None:
        return redirect("home")
    return {"user": user}


# -------------------------------------------------------------------
# Update
# -------------------------------------------------------------------
@page_view(methods=("POST",))
def update_user(request):
    user_id = request.POST.get("id")
    form = UserForm(request.POST)
    if not form.is_valid():
        return redirect(edit_url(user_id))

    try:
        updated = queries.update_user(user_id, **form.cleaned_data)
    except Exception:
        request.logger.exception("Error updating user %s", user_id)
        return redirect(edit_url(user_id))

    if updated > 0:
        request.logger.info("User %s updated", user_id)
    return redirect("home")


def update_or_detail(request):
    """POST updates; any other method is a detail lookup for the id "update"."""
    if request.method == "POST":
        return update_user(request)
    return user_detail(request, "update")


# -------------------------------------------------------------------
# Delete (addresses first, then the user)
# -------------------------------------------------------------------
@page_view(methods=("POST",))
def delete_user(request, user_id):
    try:
        addresses_deleted, users_deleted = queries.delete_user(user_id)
        if users_deleted > 0:
            request.logger.info("User %s and %d address(es) deleted", user_id, addresses_deleted)
    except Exception:
        request.logger.exception("Error deleting user %s", user_id)
    return redirect("home")
