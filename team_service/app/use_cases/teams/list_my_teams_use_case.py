from uuid import UUID

from libs.result import Result, Return
from team_service.app.services.unit_of_work import UnitOfWork

from .dtos import MyTeamResponse, MyTeamsResponse, TeamResponse


class ListMyTeamsUseCase:
    """
    Active teams the user owns or is an active member of.

    Owners hold a seat in their own team, so one pass over the user's
    active seats covers both. Deactivated teams are left out.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[MyTeamsResponse]:
        async with self.uow:
            seats = await self.uow.team_members.get_active_by_user_id(user_id)

            teams = []
            for seat in seats:
                team = await self.uow.teams.get_by_id(seat.team_id)
                if team is None or not team.is_active:
                    continue

                member_count = await self.uow.team_members.count_active(team.id)
                base = TeamResponse.from_entity(team, member_count)
                teams.append(MyTeamResponse(**base.model_dump(), role=seat.role.value))

            return Return.ok(MyTeamsResponse(teams=teams, count=len(teams)))
