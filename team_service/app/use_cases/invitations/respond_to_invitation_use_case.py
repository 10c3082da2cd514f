"""
Respond to Invitation Use Case

Invitee accepts or rejects a pending invitation.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.services.membership_coordinator import MembershipCoordinator
from team_service.app.services.notification_dispatcher import (
    NotificationDispatcher,
    NotificationEvent,
    NotificationKind,
    dispatch_safely,
)
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.base import utcnow
from team_service.domain.entities import InvitationDecision, InvitationStatus
from team_service.domain.errors import ErrorCode
from team_service.domain.policies import INVITATION_OUTCOMES, check_invitation_transition

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


class RespondToInvitationUseCase:
    """
    Use case for accepting or rejecting an invitation.

    Business Rules:
    - Only the invitee responds (NOT_AUTHORIZED)
    - Only pending invitations transition (INVALID_STATE_TRANSITION)
    - A pending invitation past its expiry is marked expired and the response
      fails (INVITATION_EXPIRED)
    - Invitations of a deactivated team are frozen (TEAM_INACTIVE)
    - Acceptance seats the invitee through the coordinator in the same
      transaction; capacity is re-checked there since it may have changed
      since the invitation was sent. On failure the invitation stays pending
    - invitation.accepted / invitation.rejected go to the inviter after commit
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, actor_id: UUID, invitation_id: UUID, decision: InvitationDecision
    ) -> Result[InvitationResponse]:
        """
        Execute respond to invitation use case.

        Args:
            actor_id: User responding (must be the invitee)
            invitation_id: Invitation ID
            decision: accept or reject

        Returns:
            Result with the updated InvitationResponse, or Error
        """
        target_status = INVITATION_OUTCOMES[InvitationDecision(decision)]

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None:
                return Return.err(
                    Error(ErrorCode.INVITATION_NOT_FOUND, "Invitation not found")
                )

            if invitation.invitee_id != actor_id:
                return Return.err(
                    Error(
                        ErrorCode.NOT_AUTHORIZED,
                        "Only the invited user can respond to this invitation",
                    )
                )

            team = await self.uow.lock_team(invitation.team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            # Re-read under the team lock: a racing response may have settled it
            invitation = await self.uow.invitations.get_by_id_for_update(invitation_id)
            if invitation is None:
                return Return.err(
                    Error(ErrorCode.INVITATION_NOT_FOUND, "Invitation not found")
                )

            transition_error = check_invitation_transition(invitation.status, target_status)
            if transition_error is not None:
                return Return.err(transition_error)

            now = utcnow()
            if invitation.is_expired(now):
                invitation.status = InvitationStatus.expired
                invitation.updated_at = now
                await self.uow.invitations.update(invitation)
                await self.uow.commit()

                return Return.err(
                    Error(ErrorCode.INVITATION_EXPIRED, "This invitation has expired")
                )

            if not team.is_active:
                return Return.err(Error(ErrorCode.TEAM_INACTIVE, "Team is no longer active"))

            if target_status == InvitationStatus.accepted:
                seated = await MembershipCoordinator(self.uow).add_member(
                    team.id, invitation.invitee_id
                )
                if seated.is_err():
                    logger.info(
                        "Acceptance of invitation %s not applied: %s",
                        invitation_id,
                        seated.error.code,
                    )
                    return Return.err(seated.error)

            invitation.status = target_status
            invitation.responded_at = now
            invitation.updated_at = now
            invitation = await self.uow.invitations.update(invitation)

            await self.uow.commit()

        kind = (
            NotificationKind.invitation_accepted
            if target_status == InvitationStatus.accepted
            else NotificationKind.invitation_rejected
        )
        await dispatch_safely(
            self.notifier,
            NotificationEvent(
                kind=kind,
                team_id=invitation.team_id,
                actor_id=actor_id,
                recipient_id=invitation.inviter_id,
                subject_id=invitation.id,
            ),
        )

        return Return.ok(InvitationResponse.from_entity(invitation))
