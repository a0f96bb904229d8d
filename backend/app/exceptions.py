from fastapi import HTTPException, status


class RecordsAPIError(HTTPException):
    """Base for errors raised by the services; the detail is shown to the caller."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(status_code=self.status_code, detail=message)

    @property
    def message(self) -> str:
        return self.detail


class InvalidArgument(RecordsAPIError):
    """Malformed or missing path parameter."""
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(RecordsAPIError):
    """No matching record(s)."""
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(RecordsAPIError):
    """Store or unexpected failure."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
