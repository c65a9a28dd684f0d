import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_id = AsyncMock()

    uow.groups = MagicMock()
    uow.groups.get_by_id = AsyncMock()
    uow.groups.update = AsyncMock()

    uow.participants = MagicMock()
    uow.participants.count_by_group_id = AsyncMock()
    uow.participants.create = AsyncMock()

    uow.group_invitations = MagicMock()
    uow.group_invitations.get_by_id = AsyncMock()
    uow.group_invitations.get_by_group_and_email = AsyncMock()
    uow.group_invitations.get_by_group_id = AsyncMock()
    uow.group_invitations.count_by_group_id = AsyncMock()
    uow.group_invitations.create = AsyncMock()
    uow.group_invitations.mark_sent = AsyncMock()
    uow.group_invitations.delete_by_id = AsyncMock()

    return uow
