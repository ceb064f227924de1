# coding: utf8


class ApiError(Exception):
    status = 500
    message = "Internal Server Error"

    def __init__(self, message=None, status=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message
        if status is not None:
            self.status = status


class BadRequest(ApiError):
    status = 400
    message = "Bad Request"


class Unauthorized(ApiError):
    status = 401
    message = "Unauthorized"


class NotFound(ApiError):
    status = 404
    message = "Not Found"


class ProductNotFound(NotFound):
    def __init__(self, reference):
        super().__init__(message=f"Product not found: {reference}")
        self.reference = reference
