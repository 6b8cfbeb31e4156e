from typing import Optional

from rest_framework import status
from rest_framework.exceptions import APIException, NotFound


class UnknownCollection(Exception):
    """Thrown when a collection name has no registered model"""

    def __init__(
            self,
            name: Optional[str] = None,
            message: Optional[str] = None
    ) -> None:
        if message is None:
            message = f"Unknown collection: {name}" if name else "Unknown collection."
        super().__init__(message)
        self.name = name


class StoreUnavailable(APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "The record could not be saved. Please try again."
    default_code = "store_unavailable"


def raise_for_result(result, not_found_message: str = "Record not found.") -> None:
    """Translate a failed ``WriteResult`` into the matching API error."""
    if result.ok:
        return
    if result.not_found:
        raise NotFound(not_found_message)
    raise StoreUnavailable()
