# users_ui/forms.py
from django import forms

from utils.validators import clean_optional, parse_checkbox

NAME_ERROR = "Name must be at least 2 characters"


class UserForm(forms.Form):
    name = forms.CharField(
        label="Name",
        min_length=2,
        max_length=255,
        error_messages={"required": NAME_ERROR, "min_length": NAME_ERROR},
        widget=forms.TextInput(attrs={
            "placeholder": "Full name",
            "class": "form-control"
        })
    )
    occupation = forms.CharField(
        label="Occupation",
        required=False,
        max_length=255,
        widget=forms.TextInput(attrs={
            "placeholder": "Occupation",
            "class": "form-control"
        })
    )
    # Raw checkbox value; see clean_newsletter
    newsletter = forms.CharField(required=False, strip=False)

    def clean_occupation(self):
        return clean_optional(self.cleaned_data.get("occupation"))

    def clean_newsletter(self):
        return parse_checkbox(self.data.get("newsletter"))


class AddressForm(forms.Form):
    street = forms.CharField(min_length=5, max_length=255)
    number = forms.CharField(required=False, max_length=255)
    city = forms.CharField(min_length=2, max_length=255)

    def clean_number(self):
        return clean_optional(self.cleaned_data.get("number"))
