from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.repositories.invitation_repository import IInvitationRepository
from team_service.domain.entities import Invitation, InvitationStatus


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_id_for_update(self, invitation_id: UUID) -> Optional[Invitation]:
        """Re-read invitation from the store with a row lock"""
        stmt = (
            select(Invitation)
            .where(Invitation.id == invitation_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_team_and_invitee(
        self, team_id: UUID, invitee_id: UUID
    ) -> Optional[Invitation]:
        """Get the pending invitation for a (team, invitee) pair"""
        stmt = select(Invitation).where(
            Invitation.team_id == team_id,
            Invitation.invitee_id == invitee_id,
            Invitation.status == InvitationStatus.pending,
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_pending_by_invitee(
        self, invitee_id: UUID, now: datetime
    ) -> List[Invitation]:
        """Get an invitee's pending, unexpired invitations, newest first"""
        stmt = (
            select(Invitation)
            .where(
                Invitation.invitee_id == invitee_id,
                Invitation.status == InvitationStatus.pending,
                Invitation.expires_at > now,
            )
            .order_by(Invitation.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueConstraintViolation(
                f"Pending invitation already exists for team {invitation.team_id}"
            ) from exc
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all invitations of a team"""
        stmt = delete(Invitation).where(Invitation.team_id == team_id)
        result = await self.session.execute(stmt)
        return result.rowcount
