# core/exceptions.py


class ComplaintTrackerError(Exception):
    """Base class for errors raised by the complaint tracker."""

    default_message = "Something went wrong!"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ComplaintTrackerError):
    """
    Field-level validation failure.
    `errors` maps each invalid field to the list of its messages, so every
    violated field is reported, not just the first one.
    """

    default_message = "Validation failed"

    def __init__(self, errors, form=None):
        self.errors = {field: list(messages) for field, messages in errors.items()}
        self.form = form
        super().__init__(f"{self.default_message}: {', '.join(sorted(self.errors))}")

    def as_list(self):
        """Flat list of {"field", "msg"} dicts for templates."""
        return [
            {"field": field, "msg": msg}
            for field, messages in self.errors.items()
            for msg in messages
        ]


class InvalidCredentials(ComplaintTrackerError):
    # Unknown username and wrong password share this message.
    default_message = "Invalid credentials"


class DuplicateKey(ComplaintTrackerError):
    default_message = "Registration failed"


class StoreUnavailable(ComplaintTrackerError):
    default_message = "Database connection failed"


class Unauthorized(ComplaintTrackerError):
    default_message = "You are not authorized to access this page"

    def __init__(self, message=None, identity=None):
        self.identity = identity
        super().__init__(message)
