# accounts/sessions.py
"""
Session identity binding.

The session key handed to the browser is an opaque token. The identity it
maps to lives in whichever Django session engine is configured
(settings.SESSION_ENGINE), so the backing store can be swapped without
touching callers. The default engine keeps sessions in the process-local
cache: they do not survive a restart and are not shared between processes.
"""
from importlib import import_module

from django.conf import settings

from accounts.models import Identity
from core import queries

USER_ID_KEY = "user_id"


class SessionManager:
    def __init__(self, engine=None, max_age=None):
        self.engine = engine or settings.SESSION_ENGINE
        self.max_age = max_age or settings.SESSION_COOKIE_AGE
        self._store_class = import_module(self.engine).SessionStore

    def open(self, token=None):
        """Session object for a token (a fresh, empty one when token is None)."""
        return self._store_class(session_key=token)

    def bind(self, session, identity: Identity) -> str:
        """
        Attach an identity to a session under a new key and return that key.
        The old key stops working.
        """
        session.cycle_key()
        session[USER_ID_KEY] = identity.id
        session["authenticated"] = True
        session["username"] = identity.username
        session["user_role"] = identity.role
        session.set_expiry(self.max_age)
        session.save()
        return session.session_key

    def restore(self, session):
        """
        Identity bound to a session, or None when the session is missing,
        expired, flushed, or its user no longer exists.
        """
        user_id = session.get(USER_ID_KEY)
        if user_id is None or not session.get("authenticated"):
            return None
        user = queries.get_user_by_id(user_id)
        if user is None:
            return None
        return Identity.from_user(user)

    def invalidate(self, session):
        """Delete the session; its key restores to None afterwards."""
        session.flush()


def default_manager() -> SessionManager:
    return SessionManager()
