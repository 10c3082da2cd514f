"""
Respond to Join Request Use Case

Owner approves or rejects a pending join request.
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
from team_service.domain.entities import JoinRequestDecision, JoinRequestStatus
from team_service.domain.errors import ErrorCode
from team_service.domain.policies import JOIN_REQUEST_OUTCOMES, check_join_request_transition

from .dtos import JoinRequestResponse

logger = logging.getLogger(__name__)


class RespondToJoinRequestUseCase:
    """
    Use case for approving or rejecting a join request.

    Business Rules:
    - Only the team owner responds (NOT_AUTHORIZED)
    - Only pending requests transition (INVALID_STATE_TRANSITION)
    - Requests of a deactivated team are frozen (TEAM_INACTIVE)
    - Approval seats the applicant through the coordinator in the same
      transaction; if seating fails (e.g. TEAM_FULL) nothing is committed and
      the request stays pending
    - Rejection always succeeds
    - request.approved / request.rejected go to the applicant after commit
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, actor_id: UUID, request_id: UUID, decision: JoinRequestDecision
    ) -> Result[JoinRequestResponse]:
        """
        Execute respond to join request use case.

        Args:
            actor_id: User responding (must own the team)
            request_id: Join request ID
            decision: approve or reject

        Returns:
            Result with the updated JoinRequestResponse, or Error
        """
        target_status = JOIN_REQUEST_OUTCOMES[JoinRequestDecision(decision)]

        async with self.uow:
            join_request = await self.uow.join_requests.get_by_id(request_id)
            if join_request is None:
                return Return.err(
                    Error(ErrorCode.JOIN_REQUEST_NOT_FOUND, "Join request not found")
                )

            team = await self.uow.lock_team(join_request.team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_owned_by(actor_id):
                return Return.err(
                    Error(
                        ErrorCode.NOT_AUTHORIZED,
                        "Only the team owner can respond to join requests",
                    )
                )

            # Re-read under the team lock: a racing response may have settled it
            join_request = await self.uow.join_requests.get_by_id_for_update(request_id)
            if join_request is None:
                return Return.err(
                    Error(ErrorCode.JOIN_REQUEST_NOT_FOUND, "Join request not found")
                )

            transition_error = check_join_request_transition(join_request.status, target_status)
            if transition_error is not None:
                return Return.err(transition_error)

            if not team.is_active:
                return Return.err(Error(ErrorCode.TEAM_INACTIVE, "Team is no longer active"))

            if target_status == JoinRequestStatus.approved:
                seated = await MembershipCoordinator(self.uow).add_member(
                    team.id, join_request.user_id
                )
                if seated.is_err():
                    logger.info(
                        "Approval of join request %s not applied: %s",
                        request_id,
                        seated.error.code,
                    )
                    return Return.err(seated.error)

            join_request.status = target_status
            join_request.updated_at = utcnow()
            join_request = await self.uow.join_requests.update(join_request)

            await self.uow.commit()

        kind = (
            NotificationKind.request_approved
            if target_status == JoinRequestStatus.approved
            else NotificationKind.request_rejected
        )
        await dispatch_safely(
            self.notifier,
            NotificationEvent(
                kind=kind,
                team_id=join_request.team_id,
                actor_id=actor_id,
                recipient_id=join_request.user_id,
                subject_id=join_request.id,
            ),
        )

        return Return.ok(JoinRequestResponse.from_entity(join_request))
