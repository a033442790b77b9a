"""Errors raised while handling a grade scale management request.

None of them is retried: each aborts the request and is shown to the user
with the matching HTTP status.
"""


class GradingError(Exception):
    status_code = 500
    title = "Error"

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(GradingError):
    """A required routing parameter is missing or malformed."""
    status_code = 400
    title = "Invalid request"


class NotFoundError(GradingError):
    """A referenced school or grade scale row does not exist."""
    status_code = 404
    title = "Not found"


class AuthorizationError(GradingError):
    """Missing or invalid anti-forgery token on a mutating action."""
    status_code = 403
    title = "Forbidden"
