# accounts/auth.py
"""
Credential checks and account creation.

Passwords are compared with bcrypt against the stored hash only. An unknown
username and a wrong password raise the same InvalidCredentials so the
response does not reveal which usernames exist.
"""
import logging

from django.db import IntegrityError, transaction

from accounts.forms import RegisterForm
from accounts.models import Identity
from core import queries
from core.exceptions import DuplicateKey, InvalidCredentials, ValidationError
from core.passwords import burn_check

logger = logging.getLogger(__name__)


def authenticate(username, password) -> Identity:
    """Return the Identity for a username/password pair or raise InvalidCredentials."""
    user = queries.get_user_by_username(username)
    if user is None:
        burn_check(password)
        logger.info("Login failed for %r", username)
        raise InvalidCredentials()

    if not user.check_password(password):
        logger.info("Login failed for %r", username)
        raise InvalidCredentials()

    return Identity.from_user(user)


def register_user(data):
    """
    Validate registration data and create the user.

    Raises ValidationError (carrying the bound form) when any field is
    invalid, and DuplicateKey when the unique index rejects the row after
    validation passed, e.g. a concurrent registration with the same name.
    """
    form = RegisterForm(data)
    if not form.is_valid():
        raise ValidationError(form.errors, form=form)

    cleaned = form.cleaned_data
    try:
        with transaction.atomic():
            user = queries.add_user(
                name=cleaned["name"],
                email=cleaned["email"],
                username=cleaned["username"],
                password=cleaned["password"],
                role=cleaned["role"],
            )
    except IntegrityError as e:
        logger.warning("Registration error for %r: %s", cleaned["username"], e)
        raise DuplicateKey() from e

    logger.info("Registered %s with role %s", user.username, user.role)
    return user
