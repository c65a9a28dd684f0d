from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from group_invitations.adapter.services.logging_invitation_notifier import (
    LoggingInvitationNotifier,
)
from group_invitations.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from group_invitations.api.utils.jwt import verify_jwt
from group_invitations.app.services.invitation_notifier import InvitationNotifier
from group_invitations.app.use_cases.groups import ActingUser


def configure_sqlite(engine: AsyncEngine) -> None:
    """
    Make SQLite behave like a locking store.

    - foreign keys on, so ON DELETE CASCADE applies
    - the driver stops issuing its own BEGIN; every transaction starts with
      BEGIN IMMEDIATE, which takes the write lock before the first read, so
      count-then-write sequences on the same group run one at a time
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(engine.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")


engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)
configure_sqlite(engine)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_invitation_notifier() -> InvitationNotifier:
    return LoggingInvitationNotifier()


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> ActingUser:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        ActingUser built from the user_id and email claims

    Raises:
        HTTPException: 401 if token is invalid, expired or missing claims
    """
    token = credentials.credentials
    payload = verify_jwt(token)

    if payload is None or "user_id" not in payload or "email" not in payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        user_id = UUID(payload["user_id"])
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    return ActingUser(id=user_id, email=payload["email"])
