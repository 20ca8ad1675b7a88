# users_ui/complainant/complainant_forms.py
from django import forms


class ComplaintForm(forms.Form):
    contact = forms.CharField(
        label="Contact number",
        max_length=50,
        error_messages={"required": "Contact is required"},
        widget=forms.TextInput(attrs={"class": "form-control", "placeholder": "e.g. 555-0100"}),
    )
    desc = forms.CharField(
        label="Description",
        max_length=5000,
        error_messages={"required": "Description is required"},
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 5}),
    )
