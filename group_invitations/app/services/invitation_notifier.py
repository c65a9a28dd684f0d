from abc import ABC, abstractmethod
from uuid import UUID


class InvitationNotifier(ABC):
    """Delivers an invitation code to the invited address"""

    @abstractmethod
    async def send_group_invitation(
        self, invitation_id: UUID, group_id: UUID, email: str, code: str
    ) -> None:
        """Dispatch the invitation; raise if it could not be handed off"""
        pass
