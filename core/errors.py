"""
Error types shared by the API client, list controllers and forms.
"""


class ApiError(Exception):
    """
    Raised for any failed remote call.

    The message is safe to show to a user. The underlying cause is logged
    where the error is raised and chained via ``raise ... from``.
    """

    def __init__(self, message: str, status_code: int = None, errors: dict = None):
        self.message = message
        self.status_code = status_code
        self.errors = errors or {}
        super().__init__(message)


class ValidationError(ApiError):
    """Raised before any network call when a required local argument is missing."""
    pass


def normalize_field_errors(raw) -> dict:
    """
    Flatten a server error map into ``{field: message}``.

    The backend sends ``{"field": ["first", "second"]}``; only the first
    message per field is kept.
    """
    if not isinstance(raw, dict):
        return {}
    errors = {}
    for field, value in raw.items():
        if isinstance(value, (list, tuple)):
            if value:
                errors[field] = str(value[0])
        elif value:
            errors[field] = str(value)
    return errors
