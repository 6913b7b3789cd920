class RestaurantError(Exception):
    """Base for errors that map onto an HTTP status and a detail message."""

    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail=None):
        if detail is not None:
            self.detail = detail
        super().__init__(self.detail)


class Unauthorized(RestaurantError):
    status_code = 401
    detail = "Access Denied"


class InvalidToken(RestaurantError):
    status_code = 400
    detail = "Invalid Token"


class InvalidCredentials(RestaurantError):
    status_code = 400
    detail = "Invalid credentials"


class DuplicateItem(RestaurantError):
    status_code = 400
    detail = "Item already exists"


class NotFound(RestaurantError):
    status_code = 404
    detail = "Not found"


class StoreFailure(RestaurantError):
    status_code = 500
    detail = "Store operation failed"


__all__ = [
    "DuplicateItem",
    "InvalidCredentials",
    "InvalidToken",
    "NotFound",
    "RestaurantError",
    "StoreFailure",
    "Unauthorized",
]
