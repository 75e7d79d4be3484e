from __future__ import annotations


class CatalogApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class FilterError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BookingStateError(Exception):
    def __init__(self, message: str, status_code: int = 409):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class BookingValidationError(Exception):
    def __init__(self, errors: list):
        self.errors = errors
        fields = ", ".join(e.field for e in errors)
        super().__init__(f"Invalid booking fields: {fields}")
