"""
Delete Team Use Case

Hard-deletes a team together with its members, join requests and
invitations. Nothing is archived.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.membership_coordinator import MembershipCoordinator
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.errors import ErrorCode

from .dtos import DeleteTeamResponse

logger = logging.getLogger(__name__)


class DeleteTeamUseCase:
    """
    Use case for deleting a team (owner only).

    Business Logic:
    1. Lock the team so no seat is granted concurrently
    2. Verify the actor owns the team
    3. Discard invitations and join requests of every status
    4. Discard member rows through the coordinator
    5. Delete the team row

    Responding to a discarded request or invitation afterwards fails with
    JOIN_REQUEST_NOT_FOUND / INVITATION_NOT_FOUND.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, team_id: UUID) -> Result[DeleteTeamResponse]:
        async with self.uow:
            team = await self.uow.lock_team(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_owned_by(actor_id):
                return Return.err(
                    Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can delete the team")
                )

            invitations_discarded = await self.uow.invitations.delete_by_team_id(team_id)
            join_requests_discarded = await self.uow.join_requests.delete_by_team_id(team_id)
            members_removed = await MembershipCoordinator(self.uow).purge_members(team)
            await self.uow.teams.delete(team)

            await self.uow.commit()

            logger.info(
                "Deleted team %s: %d members, %d join requests, %d invitations discarded",
                team_id,
                members_removed,
                join_requests_discarded,
                invitations_discarded,
            )

            return Return.ok(
                DeleteTeamResponse(
                    status="deleted",
                    members_removed=members_removed,
                    join_requests_discarded=join_requests_discarded,
                    invitations_discarded=invitations_discarded,
                )
            )
