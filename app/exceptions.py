from typing import Any, Optional


class BaseAPIException(Exception):
    """
    Base exception for all food log errors.

    Provides consistent structure with status_code, error_code, and details.
    """

    status_code: int = 500
    error_code: str = "INTERNAL_ERROR"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.details = details or {}


class ValidationException(BaseAPIException):
    """Invalid input data (HTTP 422)."""

    status_code = 422
    error_code = "VALIDATION_ERROR"


class NotFoundException(BaseAPIException):
    """Resource not found (HTTP 404)."""

    status_code = 404
    error_code = "RESOURCE_NOT_FOUND"


# Domain-specific exceptions
class RestaurantNotFoundException(NotFoundException):
    """Restaurant ID not found in the snapshot."""

    error_code = "RESTAURANT_NOT_FOUND"

    def __init__(self, restaurant_id: str):
        super().__init__(
            message=f"Restaurant not found: {restaurant_id}",
            details={"restaurant_id": restaurant_id},
        )


class VisitNotFoundException(NotFoundException):
    error_code = "VISIT_NOT_FOUND"

    def __init__(self, visit_id: str):
        super().__init__(
            message=f"Visit not found: {visit_id}",
            details={"visit_id": visit_id},
        )


class VisitItemNotFoundException(NotFoundException):
    error_code = "VISIT_ITEM_NOT_FOUND"

    def __init__(self, item_id: str):
        super().__init__(
            message=f"Visit item not found: {item_id}",
            details={"item_id": item_id},
        )


class VisitPhotoNotFoundException(NotFoundException):
    error_code = "VISIT_PHOTO_NOT_FOUND"

    def __init__(self, photo_id: str):
        super().__init__(
            message=f"Visit photo not found: {photo_id}",
            details={"photo_id": photo_id},
        )


class MissingVisitFieldsException(ValidationException):
    """Visit date, service type or overall thumb missing on visit creation."""

    error_code = "VISIT_MISSING_FIELDS"

    def __init__(self, missing_fields: list[str]):
        super().__init__(
            message=f"Missing required visit fields: {', '.join(missing_fields)}",
            details={"missing_fields": missing_fields},
        )
