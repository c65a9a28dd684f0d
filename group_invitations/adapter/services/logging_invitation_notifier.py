import logging
from uuid import UUID

from group_invitations.app.services.invitation_notifier import InvitationNotifier

logger = logging.getLogger(__name__)


class LoggingInvitationNotifier(InvitationNotifier):
    """
    Notifier for local runs: records the dispatch in the log.

    Deployments that send email provide their own InvitationNotifier
    through the get_invitation_notifier dependency.
    """

    async def send_group_invitation(
        self, invitation_id: UUID, group_id: UUID, email: str, code: str
    ) -> None:
        logger.info("Group invitation %s for group %s sent to %s", invitation_id, group_id, email)
        logger.debug("Group invitation %s code: %s", invitation_id, code)
