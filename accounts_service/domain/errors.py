"""Errors raised by the account use cases.

Every error carries the HTTP status it maps to and a ``payload()`` with the
extra, client-safe detail rendered next to the ``error`` reason.
"""


class AccountError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> dict:
        return {"error": self.message}


class ValidationError(AccountError):
    """Malformed or missing input."""

    status_code = 400

    def __init__(self, message: str, fields: list[str] | None = None,
                 allowed_values: list[str] | None = None):
        super().__init__(message)
        self.fields = fields or []
        self.allowed_values = allowed_values or []

    def payload(self) -> dict:
        body = super().payload()
        if self.fields:
            body["fields"] = self.fields
        if self.allowed_values:
            body["allowedValues"] = self.allowed_values
        return body


class ConflictError(AccountError):
    """An account with the same email already exists."""

    status_code = 400


class AuthError(AccountError):
    """No account matches the supplied credentials."""

    status_code = 401


class DatastoreError(AccountError):
    """The database rejected or failed a query."""

    def __init__(self, details: str):
        super().__init__("Database error")
        self.details = details

    def payload(self) -> dict:
        return {"error": self.message, "details": self.details}


class InternalError(AccountError):
    def __init__(self, details: str):
        super().__init__("Internal server error")
        self.details = details

    def payload(self) -> dict:
        return {"error": self.message, "details": self.details}
