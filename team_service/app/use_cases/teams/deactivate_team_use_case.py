"""
Deactivate Team Use Case

Soft-deletes a team: it stays readable but takes no new members.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.base import utcnow
from team_service.domain.errors import ErrorCode

from .dtos import TeamResponse


class DeactivateTeamUseCase:
    """
    Use case for deactivating a team (owner only).

    Business Rules:
    - Takes the team lock so no seat is granted after deactivation commits
    - Pending join requests and invitations are left in place; responding to
      them fails with TEAM_INACTIVE
    - Deactivating an inactive team succeeds without change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, team_id: UUID) -> Result[TeamResponse]:
        async with self.uow:
            team = await self.uow.lock_team(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_owned_by(actor_id):
                return Return.err(
                    Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can deactivate the team")
                )

            if team.is_active:
                team.is_active = False
                team.updated_at = utcnow()
                team = await self.uow.teams.update(team)

            member_count = await self.uow.team_members.count_active(team_id)
            await self.uow.commit()

            return Return.ok(TeamResponse.from_entity(team, member_count))
