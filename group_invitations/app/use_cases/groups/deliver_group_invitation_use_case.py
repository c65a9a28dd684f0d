"""
Deliver Group Invitation Use Case

Hands a newly issued invitation to the notifier and records sent_at.
"""

import logging
from uuid import UUID

from group_invitations.app.services.invitation_notifier import InvitationNotifier
from group_invitations.app.services.unit_of_work import UnitOfWork
from group_invitations.domain.errors import server_error
from group_invitations.libs.result import Result, Return

from .dtos import GroupInvitationResponse, MarkGroupInvitationSentResponse
from .mark_group_invitation_sent_use_case import MarkGroupInvitationSentUseCase

logger = logging.getLogger(__name__)


class DeliverGroupInvitationUseCase:
    """
    Use case for delivering an invitation code to the invitee.

    Business Rules:
    - Runs after the issuing transaction has committed
    - sent_at is written only once the notifier accepted the invitation
    - A failed delivery leaves the invitation outstanding with sent_at unset
    """

    def __init__(self, uow: UnitOfWork, notifier: InvitationNotifier):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, invitation: GroupInvitationResponse
    ) -> Result[MarkGroupInvitationSentResponse]:
        invitation_id = UUID(invitation.invitation_id)
        try:
            await self.notifier.send_group_invitation(
                invitation_id=invitation_id,
                group_id=UUID(invitation.group_id),
                email=invitation.email,
                code=invitation.code,
            )
        except Exception as exc:
            logger.error(
                "Delivery of group invitation %s failed: %s: %s",
                invitation_id,
                type(exc).__name__,
                exc,
            )
            return Return.err(server_error(exc))

        return await MarkGroupInvitationSentUseCase(self.uow).execute(invitation_id)
