from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.errors import ErrorCode

from .dtos import TeamDetailResponse


class GetTeamUseCase:
    """Read a team with its active members and free slots"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, team_id: UUID) -> Result[TeamDetailResponse]:
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            members = await self.uow.team_members.get_active_by_team_id(team_id)
            return Return.ok(TeamDetailResponse.from_members(team, members))
