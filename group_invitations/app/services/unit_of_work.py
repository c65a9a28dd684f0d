import logging
from abc import ABC, abstractmethod
from typing import Awaitable, Callable, TypeVar

from group_invitations.app.repositories.group_invitation_repository import (
    IGroupInvitationRepository,
)
from group_invitations.app.repositories.group_repository import IGroupRepository
from group_invitations.app.repositories.participant_repository import (
    IParticipantRepository,
)
from group_invitations.app.repositories.user_repository import IUserRepository
from group_invitations.domain.errors import transaction_error
from group_invitations.libs.result import Result, Return

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    groups: IGroupRepository
    participants: IParticipantRepository
    group_invitations: IGroupInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass


async def run_in_transaction(
    uow: UnitOfWork, work: Callable[[UnitOfWork], Awaitable[Result[T]]]
) -> Result[T]:
    """
    Run work inside one transaction of uow.

    An ok result is committed. An error result is rolled back and returned
    unchanged. Any exception is rolled back and returned as TRANSACTION_ERROR.
    Cancellation is not an Exception: it propagates after the rollback.
    """
    try:
        async with uow:
            result = await work(uow)
            if result.is_ok():
                await uow.commit()
            return result
    except Exception as exc:
        logger.error("Transaction rolled back: %s: %s", type(exc).__name__, exc)
        return Return.err(transaction_error(exc))
