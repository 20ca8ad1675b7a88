# accounts/forms.py
from django import forms

from core import queries
from core.core_models import User
from utils.validators import normalize_string, password_problems

class LoginForm(forms.Form):
    username = forms.CharField(
        label="Username",
        widget=forms.TextInput(attrs={
            "placeholder": "Enter your username",
            "class": "form-control"
        })
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        widget=forms.PasswordInput(attrs={
            "placeholder": "Enter your password",
            "class": "form-control"
        })
    )

    def clean(self):
        cleaned_data = super().clean()
        username = cleaned_data.get("username")
        password = cleaned_data.get("password")

        if not username or not password:
            raise forms.ValidationError("Please enter username and password")

        return cleaned_data


class RegisterForm(forms.Form):
    """
    Registration form. Field errors are collected for every field, so a
    submission with several problems reports all of them at once.
    """
    name = forms.CharField(
        label="Name",
        max_length=150,
        error_messages={"required": "Name is required"},
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    email = forms.EmailField(
        label="Email",
        error_messages={"required": "Valid email is required", "invalid": "Valid email is required"},
        widget=forms.EmailInput(attrs={"class": "form-control"}),
    )
    username = forms.CharField(
        label="Username",
        max_length=150,
        error_messages={"required": "Username is required"},
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    password = forms.CharField(
        label="Password",
        strip=False,
        error_messages={"required": "Password must be at least 6 characters"},
        widget=forms.PasswordInput(attrs={"class": "form-control"}),
    )
    password2 = forms.CharField(
        label="Confirm password",
        strip=False,
        required=False,
        widget=forms.PasswordInput(attrs={"class": "form-control"}),
    )
    role = forms.ChoiceField(
        label="Role",
        choices=User.ROLE_CHOICES,
        error_messages={"required": "Role is required", "invalid_choice": "Select a valid role"},
        widget=forms.Select(attrs={"class": "form-control"}),
    )

    def clean_username(self):
        username = normalize_string(self.cleaned_data["username"])
        if not username:
            raise forms.ValidationError("Username is required")
        if queries.username_exists(username):
            raise forms.ValidationError("Username already in use")
        return username

    def clean_email(self):
        email = normalize_string(self.cleaned_data["email"])
        if queries.email_exists(email):
            raise forms.ValidationError("Email already in use")
        return email

    def clean_password(self):
        password = self.cleaned_data["password"]
        problems = password_problems(password)
        if problems:
            raise forms.ValidationError(problems)
        return password

    def clean(self):
        cleaned_data = super().clean()
        password = cleaned_data.get("password")
        if password is not None and cleaned_data.get("password2") != password:
            self.add_error("password2", "Passwords do not match")
        return cleaned_data
