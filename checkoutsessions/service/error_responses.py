from typing import Optional

from starlette import status


class APIErrorResponse(Exception):
    """Base class for other exceptions"""

    def __init__(self):
        pass

    def to_status_code(self) -> int:
        raise NotImplementedError

    def to_code(self) -> str:
        raise NotImplementedError

    def to_message(self) -> str:
        raise NotImplementedError


class ValidationError(APIErrorResponse):
    """Raised when the callable payload can't be processed"""

    def __init__(self, message_extra: Optional[str] = None):
        self.message_extra = message_extra

    def to_status_code(self) -> int:
        return status.HTTP_422_UNPROCESSABLE_ENTITY

    def to_code(self) -> str:
        return "unprocessable_entity"

    def to_message(self) -> str:
        result = "Can't process the data"
        if self.message_extra:
            result += f" - {self.message_extra}"
        return result


class InternalServerAPIError(APIErrorResponse):
    """Raised when an internal server error occurs"""

    def __init__(self):
        pass

    def to_status_code(self) -> int:
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    def to_code(self) -> str:
        return "internal_server_error"

    def to_message(self) -> str:
        return "The request could not be completed due to an internal server error."
