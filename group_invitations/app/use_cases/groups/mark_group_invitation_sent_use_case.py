"""
Mark Group Invitation Sent Use Case

Called once the notifier has accepted the invitation for delivery.
"""

from datetime import UTC, datetime
from typing import Optional
from uuid import UUID

from group_invitations.app.services.unit_of_work import UnitOfWork, run_in_transaction
from group_invitations.domain.errors import invitation_not_found_error
from group_invitations.libs.result import Result, Return

from .dtos import MarkGroupInvitationSentResponse


class MarkGroupInvitationSentUseCase:
    """Records sent_at on an outstanding invitation; nothing else changes."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, invitation_id: UUID, sent_at: Optional[datetime] = None
    ) -> Result[MarkGroupInvitationSentResponse]:
        sent_at = sent_at or datetime.now(UTC)

        async def work(uow: UnitOfWork) -> Result[MarkGroupInvitationSentResponse]:
            invitation = await uow.group_invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(invitation_not_found_error())

            await uow.group_invitations.mark_sent(invitation, sent_at)

            return Return.ok(
                MarkGroupInvitationSentResponse(
                    invitation_id=str(invitation_id),
                    sent_at=sent_at.isoformat(),
                )
            )

        return await run_in_transaction(self.uow, work)
