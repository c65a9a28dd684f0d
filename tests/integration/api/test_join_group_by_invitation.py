import asyncio
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import func
from sqlmodel import select

from group_invitations.adapter.repositories.participant_repository import (
    ParticipantRepository,
)
from group_invitations.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from group_invitations.app.use_cases.groups import (
    ActingUser,
    JoinGroupByInvitationUseCase,
)
from group_invitations.domain.entities import (
    Group,
    GroupInvitation,
    Participant,
    ParticipantRole,
    ParticipantSource,
)


async def invite(client, group_id, headers, email, notifier) -> str:
    """Issue an invitation through the API and take its code from the notifier"""
    response = await client.post(
        f"/groups/{group_id}/invitations", json={"email": email}, headers=headers
    )
    assert response.status_code == 201
    return notifier.code_for(email)


async def load_group(session_factory, group_id) -> Group:
    async with session_factory() as session:
        return (await session.exec(select(Group).where(Group.id == group_id))).one()


async def count_participants(session_factory, group_id) -> int:
    async with session_factory() as session:
        stmt = (
            select(func.count())
            .select_from(Participant)
            .where(Participant.group_id == group_id)
        )
        return (await session.exec(stmt)).one()


@pytest.mark.asyncio
async def test_invite_and_join(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    """
    Given U1 owns G and invites a@example.com
    When U2 with email a@example.com redeems the code
    Then G.users_count grows by one, U2 is a VIP participant from "invitation"
    And the invitation is gone, so a second redemption is a no-op
    """
    owner, group = owned_group
    group_id, owner_id = group.id, owner.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("a@example.com")
    joiner_id = joiner.id
    joiner_headers = auth_headers(joiner)

    code = await invite(client, group_id, owner_headers, "a@example.com", notifier)

    response = await client.post(
        f"/groups/{group_id}/join", json={"code": code}, headers=joiner_headers
    )

    assert response.status_code == 200
    data = response.json()
    assert data["group_id"] == str(group_id)
    assert data["name"] == "Readers"
    assert data["users_count"] == 2
    assert data["role"] == "VIP"
    assert data["owner"]["id"] == str(owner_id)
    assert data["owner"]["email"] == "owner@example.com"

    async with session_factory() as session:
        stmt = select(Participant).where(
            Participant.group_id == group_id, Participant.user_id == joiner_id
        )
        participant = (await session.exec(stmt)).one()
        remaining = (
            await session.exec(
                select(GroupInvitation).where(GroupInvitation.group_id == group_id)
            )
        ).all()
    assert participant.role == ParticipantRole.VIP
    assert participant.source == ParticipantSource.invitation
    assert remaining == []
    assert (await load_group(session_factory, group_id)).users_count == 2

    again = await client.post(
        f"/groups/{group_id}/join", json={"code": code}, headers=joiner_headers
    )
    assert again.status_code == 200
    assert again.json() is None
    assert (await load_group(session_factory, group_id)).users_count == 2


@pytest.mark.asyncio
async def test_join_with_wrong_code(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("a@example.com")
    joiner_headers = auth_headers(joiner)
    await invite(client, group_id, owner_headers, "a@example.com", notifier)

    response = await client.post(
        f"/groups/{group_id}/join", json={"code": " 12x3 "}, headers=joiner_headers
    )

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "INVALID_GROUP_INVITATION_CODE"
    assert (await load_group(session_factory, group_id)).users_count == 1
    assert await count_participants(session_factory, group_id) == 1


@pytest.mark.asyncio
async def test_join_with_padded_code(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("a@example.com")
    joiner_headers = auth_headers(joiner)
    code = await invite(client, group_id, owner_headers, "a@example.com", notifier)

    response = await client.post(
        f"/groups/{group_id}/join", json={"code": f"  {code} "}, headers=joiner_headers
    )

    assert response.status_code == 200
    assert response.json()["users_count"] == 2


@pytest.mark.asyncio
async def test_join_without_invitation_returns_null(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory
):
    _, group = owned_group
    group_id = group.id
    uninvited = await make_user("nobody@example.com")
    headers = auth_headers(uninvited)

    response = await client.post(
        f"/groups/{group_id}/join", json={"code": "1234"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json() is None
    assert await count_participants(session_factory, group_id) == 1


@pytest.mark.asyncio
async def test_join_missing_group_returns_null(
    client: AsyncClient, make_user, auth_headers
):
    joiner = await make_user("a@example.com")
    headers = auth_headers(joiner)

    response = await client.post(
        f"/groups/{uuid4()}/join", json={"code": "1234"}, headers=headers
    )

    assert response.status_code == 200
    assert response.json() is None


@pytest.mark.asyncio
async def test_failed_participant_creation_rolls_back_everything(
    client: AsyncClient,
    owned_group,
    make_user,
    auth_headers,
    session_factory,
    notifier,
    monkeypatch,
):
    """Neither users_count nor the invitation deletion survive a participant fault"""
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("a@example.com")
    acting_user = ActingUser(id=joiner.id, email=joiner.email)
    code = await invite(client, group_id, owner_headers, "a@example.com", notifier)

    async def broken_create(self, participant):
        raise RuntimeError("simulated participant insert failure")

    monkeypatch.setattr(ParticipantRepository, "create", broken_create)

    async with session_factory() as session:
        result = await JoinGroupByInvitationUseCase(SqlAlchemyUnitOfWork(session)).execute(
            acting_user, group_id, code
        )

    assert result.is_err()
    assert result.error.code == "TRANSACTION_ERROR"

    assert (await load_group(session_factory, group_id)).users_count == 1
    assert await count_participants(session_factory, group_id) == 1
    async with session_factory() as session:
        stmt = select(GroupInvitation).where(
            GroupInvitation.group_id == group_id,
            GroupInvitation.email == "a@example.com",
        )
        assert (await session.exec(stmt)).one_or_none() is not None


@pytest.mark.asyncio
async def test_users_count_matches_participants_after_many_joins(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    emails = ["a@example.com", "b@example.com", "c@example.com"]

    for email in emails:
        user = await make_user(email)
        headers = auth_headers(user)
        code = await invite(client, group_id, owner_headers, email, notifier)
        response = await client.post(
            f"/groups/{group_id}/join", json={"code": code}, headers=headers
        )
        assert response.status_code == 200

    group_row = await load_group(session_factory, group_id)
    assert group_row.users_count == 1 + len(emails)
    assert group_row.users_count == await count_participants(session_factory, group_id)


@pytest.mark.asyncio
async def test_join_with_mixed_case_email(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    """An address with an upper-case domain redeems the invitation issued to it"""
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("Ann@Example.COM")
    joiner_headers = auth_headers(joiner)
    code = await invite(client, group_id, owner_headers, "Ann@Example.COM", notifier)

    response = await client.post(
        f"/groups/{group_id}/join", json={"code": code}, headers=joiner_headers
    )

    assert response.status_code == 200
    assert response.json()["users_count"] == 2
    assert await count_participants(session_factory, group_id) == 2


@pytest.mark.asyncio
async def test_join_with_long_padding(
    client: AsyncClient, owned_group, make_user, auth_headers, notifier
):
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiner = await make_user("a@example.com")
    joiner_headers = auth_headers(joiner)
    code = await invite(client, group_id, owner_headers, "a@example.com", notifier)

    response = await client.post(
        f"/groups/{group_id}/join",
        json={"code": " " * 100 + code + " " * 100},
        headers=joiner_headers,
    )

    assert response.status_code == 200
    assert response.json()["users_count"] == 2


@pytest.mark.asyncio
async def test_concurrent_joins_keep_users_count_exact(
    client: AsyncClient, owned_group, make_user, auth_headers, session_factory, notifier
):
    """Two invitees redeem at the same time in separate transactions"""
    owner, group = owned_group
    group_id = group.id
    owner_headers = auth_headers(owner)
    joiners = []
    for email in ["a@example.com", "b@example.com"]:
        user = await make_user(email)
        code = await invite(client, group_id, owner_headers, email, notifier)
        joiners.append((ActingUser(id=user.id, email=user.email), code))

    async def join(acting_user, code):
        async with session_factory() as session:
            use_case = JoinGroupByInvitationUseCase(SqlAlchemyUnitOfWork(session))
            return await use_case.execute(acting_user, group_id, code)

    results = await asyncio.gather(*(join(user, code) for user, code in joiners))

    assert all(r.is_ok() and r.value is not None for r in results)
    group_row = await load_group(session_factory, group_id)
    assert group_row.users_count == 3
    assert group_row.users_count == await count_participants(session_factory, group_id)
