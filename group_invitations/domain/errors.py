"""
Group invitation error codes and factories.

Recognized conditions are returned unchanged to the API layer, which maps them
to status codes. Server and transaction errors keep their cause for logging
only.
"""

from group_invitations.libs.result import Error, ErrorKind

FORBIDDEN = "FORBIDDEN"
TOO_MANY_GROUP_INVITATIONS = "TOO_MANY_GROUP_INVITATIONS"
INVALID_GROUP_INVITATION_CODE = "INVALID_GROUP_INVITATION_CODE"
GROUP_NOT_FOUND = "GROUP_NOT_FOUND"
INVITATION_NOT_FOUND = "INVITATION_NOT_FOUND"
SERVER_ERROR = "SERVER_ERROR"
TRANSACTION_ERROR = "TRANSACTION_ERROR"


def forbidden_error() -> Error:
    return Error(FORBIDDEN, "You are not allowed to perform this action")


def too_many_group_invitations_error() -> Error:
    return Error(
        TOO_MANY_GROUP_INVITATIONS,
        "This group has reached the maximum number of pending invitations",
    )


def invalid_group_invitation_code_error() -> Error:
    return Error(INVALID_GROUP_INVITATION_CODE, "Invalid invitation code")


def group_not_found_error() -> Error:
    return Error(GROUP_NOT_FOUND, "Group not found")


def invitation_not_found_error() -> Error:
    return Error(INVITATION_NOT_FOUND, "Invitation not found")


def server_error(cause: BaseException) -> Error:
    return Error(SERVER_ERROR, "Internal server error", ErrorKind.server, cause)


def transaction_error(cause: BaseException) -> Error:
    return Error(TRANSACTION_ERROR, "Transaction failed", ErrorKind.transaction, cause)
