from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.entities import JoinRequestStatus
from team_service.domain.errors import ErrorCode

from .dtos import JoinRequestListResponse, JoinRequestResponse


class ListJoinRequestsUseCase:
    """Owner-only listing of a team's join requests, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        actor_id: UUID,
        team_id: UUID,
        status: Optional[JoinRequestStatus] = None,
    ) -> Result[JoinRequestListResponse]:
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_owned_by(actor_id):
                return Return.err(
                    Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can view join requests")
                )

            requests = await self.uow.join_requests.get_by_team_id(team_id, status)
            return Return.ok(
                JoinRequestListResponse(
                    requests=[JoinRequestResponse.from_entity(r) for r in requests],
                    count=len(requests),
                )
            )
