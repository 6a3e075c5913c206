# users_ui/address/address_views.py
from django.shortcuts import redirect

from core import queries
from users_ui.base_views import page_view
from users_ui.forms import AddressForm
from users_ui.users.user_views import edit_url


@page_view(methods=("POST",))
def create_address(request):
    """Add an address to a user and go back to that user's edit page."""
    user_id = request.POST.get("userId")
    form = AddressForm(request.POST)
    if not form.is_valid():
        return redirect(edit_url(user_id))

    try:
        address = queries.create_address(user_id, **form.cleaned_data)
    except Exception:
        request.logger.exception("Error creating address for user %s", user_id)
        return redirect(edit_url(user_id))

    request.logger.info("Address created %s", address.to_dict())
    return redirect(edit_url(user_id))


@page_view(methods=("POST",))
def delete_address(request):
    address_id = request.POST.get("id")
    user_id = request.POST.get("userId")
    try:
        queries.delete_address(address_id)
        request.logger.info("Address %s deleted", address_id)
    except Exception:
        request.logger.exception("Error deleting address %s", address_id)
        return redirect("home")

    return redirect(edit_url(user_id) if user_id else "home")
