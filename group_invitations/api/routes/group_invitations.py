import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, field_validator
from pydantic.networks import validate_email

from group_invitations.api.error import ClientError, error_to_exception
from group_invitations.app.services.invitation_notifier import InvitationNotifier
from group_invitations.app.services.unit_of_work import UnitOfWork
from group_invitations.app.use_cases.groups import (
    ActingUser,
    CreateGroupInvitationUseCase,
    DeliverGroupInvitationUseCase,
    GroupInvitationInfo,
    JoinedGroupResponse,
    JoinGroupByInvitationUseCase,
    ListGroupInvitationsResponse,
    ListGroupInvitationsUseCase,
)
from group_invitations.depends import (
    get_current_user,
    get_invitation_notifier,
    get_unit_of_work,
)
from group_invitations.libs.result import Error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/groups", tags=["Group Invitations"])


def parse_group_id(group_id: str) -> UUID:
    try:
        return UUID(group_id)
    except ValueError:
        raise ClientError(
            Error("INVALID_GROUP_ID", "Invalid group ID format"),
            status_code=status.HTTP_400_BAD_REQUEST,
        )


class CreateGroupInvitationRequest(BaseModel):
    """
    Create group invitation HTTP request payload

    Validates incoming request for inviting an email address to a group.
    The address is stored as submitted; redemption matches it exactly.
    """

    email: str = Field(..., description="Email address to invite")

    @field_validator("email")
    @classmethod
    def validate_email_address(cls, v: str) -> str:
        validate_email(v)
        return v


class JoinGroupRequest(BaseModel):
    """
    Join group HTTP request payload

    Carries the verification code received by email.
    """

    code: str = Field(..., description="Invitation code")


@router.post(
    "/{group_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=Optional[GroupInvitationInfo],
)
async def create_group_invitation(
    group_id: str,
    request: CreateGroupInvitationRequest,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: InvitationNotifier = Depends(get_invitation_notifier),
):
    """
    Create Group Invitation

    Invites an email address to the group. Only the owner can invite.
    The code is not part of the response; the notifier delivers it after
    the invitation is committed, and sent_at is set once it is handed off.
    A failed delivery leaves the invitation in place with sent_at null.
    Returns null when the group does not exist.

    Raises:
        - 400 Bad Request: Invalid group_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: FORBIDDEN (not the group owner)
        - 429 Too Many Requests: TOO_MANY_GROUP_INVITATIONS
        - 500 Internal Server Error: SERVER_ERROR, TRANSACTION_ERROR
    """
    group_uuid = parse_group_id(group_id)

    use_case = CreateGroupInvitationUseCase(uow)
    result = await use_case.execute(current_user, group_uuid, request.email)

    if result.is_err():
        raise error_to_exception(result.error)

    invitation = result.value
    if invitation is None:
        return None

    sent_at = invitation.sent_at
    delivery = await DeliverGroupInvitationUseCase(uow, notifier).execute(invitation)
    if delivery.is_ok():
        sent_at = delivery.value.sent_at
    else:
        logger.warning(
            "Group invitation %s created but not delivered: %s",
            invitation.invitation_id,
            delivery.error.code,
        )

    return GroupInvitationInfo(
        invitation_id=invitation.invitation_id,
        email=invitation.email,
        sent_at=sent_at,
        created_at=invitation.created_at,
    )


@router.get(
    "/{group_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=ListGroupInvitationsResponse,
)
async def list_group_invitations(
    group_id: str,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Group Invitations

    Raises:
        - 400 Bad Request: Invalid group_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: FORBIDDEN (not the group owner)
        - 404 Not Found: GROUP_NOT_FOUND
    """
    group_uuid = parse_group_id(group_id)

    use_case = ListGroupInvitationsUseCase(uow)
    result = await use_case.execute(current_user, group_uuid)

    if result.is_err():
        raise error_to_exception(result.error)

    return result.value


@router.post(
    "/{group_id}/join",
    status_code=status.HTTP_200_OK,
    response_model=Optional[JoinedGroupResponse],
)
async def join_group_by_invitation(
    group_id: str,
    request: JoinGroupRequest,
    current_user: ActingUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Join Group By Invitation

    Redeems the invitation addressed to the caller's email.
    Returns null when the group or the invitation does not exist.

    Raises:
        - 400 Bad Request: Invalid group_id format, INVALID_GROUP_INVITATION_CODE
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: TRANSACTION_ERROR
    """
    group_uuid = parse_group_id(group_id)

    use_case = JoinGroupByInvitationUseCase(uow)
    result = await use_case.execute(current_user, group_uuid, request.code)

    if result.is_err():
        raise error_to_exception(result.error)

    return result.value
