from fastapi import status
from group_invitations.domain import errors
from group_invitations.libs.result import Error

# Recognized conditions and the status they are rendered with
CONDITION_STATUS = {
    errors.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    errors.TOO_MANY_GROUP_INVITATIONS: status.HTTP_429_TOO_MANY_REQUESTS,
    errors.INVALID_GROUP_INVITATION_CODE: status.HTTP_400_BAD_REQUEST,
    errors.GROUP_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    errors.INVITATION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    """Server and transaction failures; the cause is logged, never rendered"""

    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def error_to_exception(error: Error) -> Exception:
    """Map a use case Error to the exception the API raises for it"""
    if error.is_condition() and error.code in CONDITION_STATUS:
        return ClientError(error, status_code=CONDITION_STATUS[error.code])
    return ServerError(error)
