from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, func
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.repositories.team_member_repository import ITeamMemberRepository
from team_service.domain.entities import TeamMember


class TeamMemberRepository(ITeamMemberRepository):
    """TeamMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_team_and_user(
        self, team_id: UUID, user_id: UUID
    ) -> Optional[TeamMember]:
        """Get the member row for a user in a team, active or not"""
        stmt = (
            select(TeamMember)
            .where(TeamMember.team_id == team_id, TeamMember.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_active(self, team_id: UUID) -> int:
        """Count active members of a team"""
        stmt = (
            select(func.count())
            .select_from(TeamMember)
            .where(TeamMember.team_id == team_id, TeamMember.is_active == True)  # noqa: E712
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def get_active_by_team_id(self, team_id: UUID) -> List[TeamMember]:
        """Get active members of a team ordered by joined_at"""
        stmt = (
            select(TeamMember)
            .where(TeamMember.team_id == team_id, TeamMember.is_active == True)  # noqa: E712
            .order_by(TeamMember.joined_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_active_by_user_id(self, user_id: UUID) -> List[TeamMember]:
        """Get a user's active seats across teams, most recent first"""
        stmt = (
            select(TeamMember)
            .where(TeamMember.user_id == user_id, TeamMember.is_active == True)  # noqa: E712
            .order_by(TeamMember.joined_at.desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, member: TeamMember) -> TeamMember:
        """Create a new member row"""
        self.session.add(member)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            raise UniqueConstraintViolation(
                f"Member row already exists for team {member.team_id}"
            ) from exc
        await self.session.refresh(member)
        return member

    async def update(self, member: TeamMember) -> TeamMember:
        """Update existing member row"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all member rows of a team"""
        stmt = delete(TeamMember).where(TeamMember.team_id == team_id)
        result = await self.session.execute(stmt)
        return result.rowcount
