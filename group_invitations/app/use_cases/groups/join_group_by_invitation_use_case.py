"""
Join Group By Invitation Use Case

Redeems an invitation code and turns it into a group participant.
"""

import logging
from typing import Optional
from uuid import UUID

from group_invitations.app.services.unit_of_work import UnitOfWork, run_in_transaction
from group_invitations.domain.entities import (
    Participant,
    ParticipantRole,
    ParticipantSource,
)
from group_invitations.domain.errors import invalid_group_invitation_code_error
from group_invitations.libs.result import Result, Return

from .dtos import ActingUser, JoinedGroupResponse, OwnerInfo

logger = logging.getLogger(__name__)


class JoinGroupByInvitationUseCase:
    """
    Use case for joining a group with an invitation code.

    Business Rules:
    - Missing group or missing invitation for the user's email is a no-op: Ok(None)
    - The supplied code is compared after trimming surrounding whitespace
    - users_count is recounted from participants, never cached
    - Joiner becomes a VIP participant with source "invitation"
    - The invitation is consumed; everything commits together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, group_id: UUID, code: str
    ) -> Result[Optional[JoinedGroupResponse]]:
        """
        Execute join group by invitation use case.

        Args:
            acting_user: User redeeming the invitation
            group_id: Group to join
            code: Verification code received by email

        Returns:
            Result with JoinedGroupResponse DTO (None when there is nothing to
            redeem), or Error
        """

        async def work(uow: UnitOfWork) -> Result[Optional[JoinedGroupResponse]]:
            group = await uow.groups.get_by_id(group_id, for_update=True)
            if group is None:
                return Return.ok(None)

            invitation = await uow.group_invitations.get_by_group_and_email(
                group.id, acting_user.email
            )
            if invitation is None:
                return Return.ok(None)

            if invitation.code != code.strip():
                return Return.err(invalid_group_invitation_code_error())

            owner = await uow.users.get_by_id(group.user_id)

            count = await uow.participants.count_by_group_id(group.id)
            group.users_count = count + 1
            await uow.groups.update(group)

            await uow.participants.create(
                Participant(
                    group_id=group.id,
                    user_id=acting_user.id,
                    role=ParticipantRole.VIP,
                    source=ParticipantSource.invitation,
                )
            )
            await uow.group_invitations.delete_by_id(invitation.id)

            return Return.ok(
                JoinedGroupResponse(
                    group_id=str(group.id),
                    name=group.name,
                    users_count=group.users_count,
                    role=ParticipantRole.VIP.value,
                    owner=(
                        OwnerInfo(
                            id=str(owner.id), email=owner.email, nickname=owner.nickname
                        )
                        if owner
                        else None
                    ),
                )
            )

        result = await run_in_transaction(self.uow, work)
        if result.is_ok() and result.value is not None:
            logger.info("User %s joined group %s by invitation", acting_user.id, group_id)
        return result
