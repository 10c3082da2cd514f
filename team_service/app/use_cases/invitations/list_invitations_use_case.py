from uuid import UUID

from libs.result import Result, Return
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.base import utcnow

from .dtos import InvitationListResponse, InvitationResponse


class ListInvitationsUseCase:
    """
    Pending, unexpired invitations addressed to the caller, newest first.

    Each carries the team's name, size limit and current member count.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, invitee_id: UUID) -> Result[InvitationListResponse]:
        async with self.uow:
            invitations = await self.uow.invitations.get_pending_by_invitee(
                invitee_id, utcnow()
            )

            responses = []
            for invitation in invitations:
                team = await self.uow.teams.get_by_id(invitation.team_id)
                member_count = await self.uow.team_members.count_active(invitation.team_id)
                responses.append(InvitationResponse.from_entity(invitation, team, member_count))

            return Return.ok(InvitationListResponse(invitations=responses, count=len(responses)))
