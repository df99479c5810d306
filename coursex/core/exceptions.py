"""Domain errors raised by the services and mapped to HTTP responses at the boundary."""

from typing import Any, Dict, Optional

from fastapi import status


class DomainException(Exception):
    """Base class for every error the API reports with a specific status code."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    code: str = "BAD_REQUEST"
    default_message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def extra_content(self) -> Dict[str, Any]:
        """Top-level fields merged into the error body next to ``error``."""
        return {}


class UnauthorizedError(DomainException):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    default_message = "Unauthorized"


class ForbiddenError(DomainException):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    default_message = "You do not have permission to perform this action."


class NotFoundError(DomainException):
    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    default_message = "Resource not found"

    def __init__(self, resource_type: str, resource_id: Any = None) -> None:
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} not found")


class ValidationError(DomainException):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    default_message = "Invalid request"


class ConflictError(DomainException):
    status_code = status.HTTP_409_CONFLICT
    code = "CONFLICT"
    default_message = "Resource already exists"


class AlreadyEnrolledError(ConflictError):
    code = "ALREADY_ENROLLED"
    default_message = "Already enrolled in this course"


class AlreadyReviewedError(ConflictError):
    code = "ALREADY_REVIEWED"
    default_message = "Already reviewed this course"


class AlreadyWishlistedError(ConflictError):
    code = "ALREADY_WISHLISTED"
    default_message = "Course already in wishlist"


class AlreadyPurchasedError(ConflictError):
    code = "ALREADY_PURCHASED"
    default_message = "Course already purchased"


class PaymentRequiredError(DomainException):
    status_code = status.HTTP_402_PAYMENT_REQUIRED
    code = "PAYMENT_REQUIRED"
    default_message = "Payment required"

    def __init__(self, course_id: int, price: float) -> None:
        self.course_id = course_id
        self.price = price
        super().__init__()

    def extra_content(self) -> Dict[str, Any]:
        return {"requires_payment": True, "course_id": self.course_id, "price": self.price}


class CourseIsFreeError(DomainException):
    code = "COURSE_IS_FREE"
    default_message = "This course is free. Please use the enroll endpoint."


class PaymentConfirmationFailedError(DomainException):
    code = "PAYMENT_CONFIRMATION_FAILED"
    default_message = "Payment confirmation failed"


class UpstreamFailureError(DomainException):
    status_code = status.HTTP_502_BAD_GATEWAY
    code = "UPSTREAM_FAILURE"
    default_message = "Payment provider error"
