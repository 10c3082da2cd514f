from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from team_service.adapter.services.notification_dispatcher import (
    LoggingNotificationDispatcher,
    WebhookNotificationDispatcher,
)
from team_service.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from team_service.api.utils.jwt import verify_jwt
from team_service.app.services.notification_dispatcher import NotificationDispatcher

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_notification_dispatcher() -> NotificationDispatcher:
    if ApplicationConfig.NOTIFICATION_WEBHOOK_URL:
        return WebhookNotificationDispatcher(
            ApplicationConfig.NOTIFICATION_WEBHOOK_URL,
            timeout=ApplicationConfig.NOTIFICATION_TIMEOUT_SECONDS,
        )
    return LoggingNotificationDispatcher()


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> UUID:
    """
    Dependency resolving the acting user from the Authorization header.

    Tokens are issued by the auth service; this only verifies them.

    Returns:
        UUID of the authenticated user (``user_id`` claim)

    Raises:
        HTTPException: 401 if token is invalid, expired or lacks a user id
    """
    payload = verify_jwt(credentials.credentials)

    try:
        return UUID(str(payload["user_id"]))
    except (TypeError, KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
