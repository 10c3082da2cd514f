"""
Create Team Use Case

Creates a team and seats its owner.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.membership_coordinator import MembershipCoordinator
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.entities import Team, TeamRole
from team_service.domain.errors import ErrorCode

from .dtos import TeamDetailResponse


class CreateTeamUseCase:
    """
    Use case for creating a team.

    Business Rules:
    - Name must be non-blank
    - max_members between 1 and the configured team size limit
    - The owner is seated as the first member, through the coordinator
    """

    def __init__(self, uow: UnitOfWork, max_team_size: int = 20):
        self.uow = uow
        self.max_team_size = max_team_size

    async def execute(
        self,
        owner_id: UUID,
        name: str,
        max_members: int,
        description: str = "",
    ) -> Result[TeamDetailResponse]:
        name = (name or "").strip()
        if not name:
            return Return.err(Error(ErrorCode.INVALID_TEAM_NAME, "Team name is required"))

        if not 1 <= max_members <= self.max_team_size:
            return Return.err(
                Error(
                    ErrorCode.INVALID_MAX_MEMBERS,
                    f"max_members must be between 1 and {self.max_team_size}",
                )
            )

        async with self.uow:
            team = await self.uow.teams.create(
                Team(
                    name=name,
                    description=(description or "").strip(),
                    owner_id=owner_id,
                    max_members=max_members,
                )
            )

            seated = await MembershipCoordinator(self.uow).add_member(
                team.id, owner_id, TeamRole.owner
            )
            if seated.is_err():
                return Return.err(seated.error)

            await self.uow.commit()

            return Return.ok(TeamDetailResponse.from_members(team, [seated.value]))
