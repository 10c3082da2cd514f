from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.repositories.join_request_repository import IJoinRequestRepository
from team_service.domain.entities import JoinRequest, JoinRequestStatus


class JoinRequestRepository(IJoinRequestRepository):
    """JoinRequest repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, request_id: UUID) -> Optional[JoinRequest]:
        """Get join request by ID"""
        stmt = select(JoinRequest).where(JoinRequest.id == request_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_for_update(self, request_id: UUID) -> Optional[JoinRequest]:
        """Re-read join request from the store with a row lock"""
        stmt = (
            select(JoinRequest)
            .where(JoinRequest.id == request_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_team_and_user(
        self, team_id: UUID, user_id: UUID
    ) -> Optional[JoinRequest]:
        """Get the pending join request for a (team, applicant) pair"""
        stmt = select(JoinRequest).where(
            JoinRequest.team_id == team_id,
            JoinRequest.user_id == user_id,
            JoinRequest.status == JoinRequestStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_team_id(
        self, team_id: UUID, status: Optional[JoinRequestStatus] = None
    ) -> List[JoinRequest]:
        """Get join requests for a team, newest first"""
        stmt = select(JoinRequest).where(JoinRequest.team_id == team_id)
        if status is not None:
            stmt = stmt.where(JoinRequest.status == status)
        stmt = stmt.order_by(JoinRequest.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, join_request: JoinRequest) -> JoinRequest:
        """Create a new join request"""
        self.session.add(join_request)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueConstraintViolation(
                f"Pending join request already exists for team {join_request.team_id}"
            ) from exc
        await self.session.refresh(join_request)
        return join_request

    async def update(self, join_request: JoinRequest) -> JoinRequest:
        """Update existing join request"""
        self.session.add(join_request)
        await self.session.flush()
        await self.session.refresh(join_request)
        return join_request

    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all join requests of a team"""
        stmt = delete(JoinRequest).where(JoinRequest.team_id == team_id)
        result = await self.session.execute(stmt)
        return result.rowcount
