# core/passwords.py
from functools import lru_cache

import bcrypt
from django.conf import settings

DEFAULT_ROUNDS = 10


def _rounds() -> int:
    return int(getattr(settings, "BCRYPT_ROUNDS", DEFAULT_ROUNDS))


def hash_password(raw_password: str) -> str:
    """Salted bcrypt hash of a plain password, as a utf-8 string."""
    salt = bcrypt.gensalt(rounds=_rounds())
    return bcrypt.hashpw(raw_password.encode(), salt).decode("utf-8")


def check_password(raw_password: str, hashed: str) -> bool:
    if not hashed or raw_password is None:
        return False
    try:
        return bcrypt.checkpw(raw_password.encode(), hashed.encode())
    except ValueError:
        # Malformed hash or a password bcrypt refuses (over 72 bytes)
        return False


@lru_cache(maxsize=None)
def _dummy_hash(rounds: int) -> str:
    return bcrypt.hashpw(b"complaint-tracker-dummy", bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def burn_check(raw_password: str) -> None:
    """Run a throwaway comparison so a missing user costs about as much as a wrong password."""
    check_password(raw_password or "", _dummy_hash(_rounds()))
