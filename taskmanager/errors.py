"""Error types rendered as ``{"error": true, "message": ...}`` responses."""


class APIError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequest(APIError):
    status_code = 400
    default_message = "Bad request"


class Unauthorized(APIError):
    status_code = 401
    default_message = "Unauthorized entry"


class Forbidden(APIError):
    status_code = 403
    default_message = "Invalid token"


class NotFound(APIError):
    status_code = 404
    default_message = "Not found"


class StoreError(APIError):
    status_code = 500
    default_message = "Store unavailable"
