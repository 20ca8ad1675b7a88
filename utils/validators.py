# utils/validators.py


# -----------------------------
# String Normalization
# -----------------------------
def normalize_string(val):
    """Normalize strings (strip + lowercase). None becomes ''."""
    if isinstance(val, str):
        return val.strip().lower()
    elif val is not None:
        return str(val).strip().lower()
    return ''


def is_blank(val) -> bool:
    return val is None or not str(val).strip()


# -----------------------------
# Password rules
# -----------------------------
MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_BYTES = 72  # bcrypt only looks at the first 72 bytes


def password_problems(password: str) -> list:
    """Return the list of rule violations for a candidate password."""
    problems = []
    if password is None or len(password) < MIN_PASSWORD_LENGTH:
        problems.append(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    elif len(password.encode()) > MAX_PASSWORD_BYTES:
        problems.append(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return problems


# -----------------------------
# Client address (rate limiting key)
# -----------------------------
def client_address(meta: dict, trust_forwarded: bool = False) -> str:
    """
    Best-effort client IP from a request's META.
    X-Forwarded-For is only honoured when running behind a trusted proxy.
    """
    if trust_forwarded:
        forwarded = meta.get("HTTP_X_FORWARDED_FOR", "")
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return meta.get("REMOTE_ADDR") or "unknown"
