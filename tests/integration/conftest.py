import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from group_invitations.depends import (
    configure_sqlite,
    get_invitation_notifier,
    get_unit_of_work,
)
from group_invitations.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from group_invitations.api.utils.jwt import generate_jwt
from group_invitations.app.services.invitation_notifier import InvitationNotifier
from group_invitations.domain.entities import (
    Group,
    Participant,
    ParticipantRole,
    ParticipantSource,
    User,
)


class RecordingNotifier(InvitationNotifier):
    """Keeps every dispatched invitation; raises `error` instead when it is set"""

    def __init__(self):
        self.sent = []
        self.error = None

    async def send_group_invitation(self, invitation_id, group_id, email, code):
        if self.error is not None:
            raise self.error
        self.sent.append(
            {"invitation_id": invitation_id, "group_id": group_id, "email": email, "code": code}
        )

    def code_for(self, email: str) -> str:
        return next(s["code"] for s in reversed(self.sent) if s["email"] == email)


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test_group_invitations.db")
    configure_sqlite(engine)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
def notifier():
    return RecordingNotifier()


@pytest_asyncio.fixture
async def client(db_session, notifier):
    from httpx import ASGITransport
    from group_invitations.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_invitation_notifier] = lambda: notifier

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def owned_group(db_session):
    """Owner U1 with group G whose only participant is the owner"""
    owner = User(email="owner@example.com", nickname="Owner")
    db_session.add(owner)
    await db_session.flush()

    group = Group(user_id=owner.id, name="Readers", users_count=1)
    db_session.add(group)
    await db_session.flush()

    db_session.add(
        Participant(
            group_id=group.id,
            user_id=owner.id,
            role=ParticipantRole.ADMIN,
            source=ParticipantSource.admin,
        )
    )
    await db_session.commit()
    return owner, group


@pytest_asyncio.fixture
def make_user(db_session):
    async def _make_user(email: str) -> User:
        user = User(email=email, nickname=email.split("@")[0])
        db_session.add(user)
        await db_session.commit()
        return user

    return _make_user


@pytest_asyncio.fixture
def auth_headers():
    def _auth_headers(user: User) -> dict:
        return {"Authorization": f"Bearer {generate_jwt(user.id, user.email)}"}

    return _auth_headers
