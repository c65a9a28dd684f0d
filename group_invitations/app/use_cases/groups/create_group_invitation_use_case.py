"""
Create Group Invitation Use Case

Handles a group owner inviting an email address to the group.
"""

import logging
from datetime import UTC, datetime
from typing import Optional
from uuid import UUID, uuid4

from group_invitations.app.services.unit_of_work import UnitOfWork, run_in_transaction
from group_invitations.app.services.verification_code import generate_verification_code
from group_invitations.domain.entities import GroupInvitation, MAX_GROUP_INVITATIONS
from group_invitations.domain.errors import (
    forbidden_error,
    too_many_group_invitations_error,
)
from group_invitations.libs.result import Result, Return

from .dtos import ActingUser, GroupInvitationResponse

logger = logging.getLogger(__name__)


class CreateGroupInvitationUseCase:
    """
    Use case for inviting an email address to a group.

    Business Rules:
    - A group holds at most MAX_GROUP_INVITATIONS outstanding invitations
    - Missing group is a no-op: Ok(None)
    - Only the group owner can invite
    - The code is a 4-digit verification code, delivered out of band
    - One invitation per (group, email); a concurrent duplicate fails the transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, group_id: UUID, email: str
    ) -> Result[Optional[GroupInvitationResponse]]:
        """
        Execute create group invitation use case.

        Args:
            acting_user: User issuing the invitation
            group_id: Target group ID
            email: Email address to invite

        Returns:
            Result with GroupInvitationResponse DTO (None if the group is
            missing), or Error
        """

        async def work(uow: UnitOfWork) -> Result[Optional[GroupInvitationResponse]]:
            # Row lock serializes concurrent issuance for the same group
            group = await uow.groups.get_by_id(group_id, for_update=True)

            count = await uow.group_invitations.count_by_group_id(group_id)
            if count >= MAX_GROUP_INVITATIONS:
                return Return.err(too_many_group_invitations_error())

            if group is None:
                return Return.ok(None)
            if group.user_id != acting_user.id:
                return Return.err(forbidden_error())

            code_result = generate_verification_code()
            if code_result.is_err():
                return Return.err(code_result.error)

            invitation = GroupInvitation(
                id=uuid4(),
                group_id=group.id,
                email=email,
                code=code_result.value,
                created_at=datetime.now(UTC),
            )
            await uow.group_invitations.create(invitation)

            return Return.ok(
                GroupInvitationResponse(
                    invitation_id=str(invitation.id),
                    group_id=str(invitation.group_id),
                    email=invitation.email,
                    code=invitation.code,
                    sent_at=None,
                    created_at=invitation.created_at.isoformat(),
                )
            )

        result = await run_in_transaction(self.uow, work)
        if result.is_ok() and result.value is not None:
            logger.info(
                "Group invitation %s created for group %s",
                result.value.invitation_id,
                group_id,
            )
        return result
