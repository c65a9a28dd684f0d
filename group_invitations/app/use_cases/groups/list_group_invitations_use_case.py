"""
List Group Invitations Use Case

Shows a group owner the invitations still waiting to be redeemed.
"""

from uuid import UUID

from group_invitations.app.services.unit_of_work import UnitOfWork
from group_invitations.domain.errors import forbidden_error, group_not_found_error
from group_invitations.libs.result import Result, Return

from .dtos import ActingUser, GroupInvitationInfo, ListGroupInvitationsResponse


class ListGroupInvitationsUseCase:
    """
    Use case for listing outstanding invitations of a group.

    Business Rules:
    - Only the group owner can list invitations
    - Codes are never exposed by the listing
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, acting_user: ActingUser, group_id: UUID
    ) -> Result[ListGroupInvitationsResponse]:
        async with self.uow:
            group = await self.uow.groups.get_by_id(group_id)
            if group is None:
                return Return.err(group_not_found_error())
            if group.user_id != acting_user.id:
                return Return.err(forbidden_error())

            invitations = await self.uow.group_invitations.get_by_group_id(group_id)

            return Return.ok(
                ListGroupInvitationsResponse(
                    invitations=[
                        GroupInvitationInfo(
                            invitation_id=str(invitation.id),
                            email=invitation.email,
                            sent_at=(
                                invitation.sent_at.isoformat()
                                if invitation.sent_at
                                else None
                            ),
                            created_at=invitation.created_at.isoformat(),
                        )
                        for invitation in invitations
                    ],
                    total=len(invitations),
                )
            )
