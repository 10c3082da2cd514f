"""
Create Invitation Use Case

Owner invites a specific user to join the team.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.services.notification_dispatcher import (
    NotificationDispatcher,
    NotificationEvent,
    NotificationKind,
    dispatch_safely,
)
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.base import utcnow
from team_service.domain.entities import Invitation, InvitationStatus
from team_service.domain.errors import ErrorCode
from team_service.domain.policies import normalize_message

from .dtos import InvitationResponse

logger = logging.getLogger(__name__)


class CreateInvitationUseCase:
    """
    Use case for inviting a user to a team.

    Business Rules:
    - Only the team owner invites (NOT_AUTHORIZED)
    - Team must exist and be active
    - Seated users, the owner included, cannot be invited (ALREADY_MEMBER)
    - One pending invitation per invitee and team
      (DUPLICATE_PENDING_INVITATION); a stale pending invitation past its
      expiry is marked expired and replaced
    - A full team refuses invitations (TEAM_FULL); advisory only, capacity
      is enforced again on acceptance
    - Invitations expire after ttl_days
    - invitation.sent goes to the invitee after commit
    """

    def __init__(
        self, uow: UnitOfWork, notifier: NotificationDispatcher, ttl_days: int = 7
    ):
        self.uow = uow
        self.notifier = notifier
        self.ttl_days = ttl_days

    async def execute(
        self,
        inviter_id: UUID,
        team_id: UUID,
        invitee_id: UUID,
        message: Optional[str] = None,
    ) -> Result[InvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            inviter_id: User sending the invitation (must own the team)
            team_id: Team to invite into
            invitee_id: User being invited
            message: Optional note; defaults to a generic invitation text

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_owned_by(inviter_id):
                return Return.err(
                    Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can send invitations")
                )

            if not team.is_active:
                return Return.err(Error(ErrorCode.TEAM_INACTIVE, "Team is no longer active"))

            membership = await self.uow.team_members.get_by_team_and_user(team_id, invitee_id)
            if team.is_owned_by(invitee_id) or (
                membership is not None and membership.is_active
            ):
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this team")
                )

            now = utcnow()
            pending = await self.uow.invitations.get_pending_by_team_and_invitee(
                team_id, invitee_id
            )
            if pending is not None:
                if not pending.is_expired(now):
                    return Return.err(
                        Error(
                            ErrorCode.DUPLICATE_PENDING_INVITATION,
                            "Invitation already sent to this user",
                        )
                    )
                pending.status = InvitationStatus.expired
                pending.updated_at = now
                await self.uow.invitations.update(pending)

            member_count = await self.uow.team_members.count_active(team_id)
            if member_count >= team.max_members:
                return Return.err(Error(ErrorCode.TEAM_FULL, "Team is already full"))

            try:
                invitation = await self.uow.invitations.create(
                    Invitation(
                        team_id=team_id,
                        inviter_id=inviter_id,
                        invitee_id=invitee_id,
                        message=(
                            normalize_message(message)
                            or f"You've been invited to join {team.name}!"
                        ),
                        expires_at=now + timedelta(days=self.ttl_days),
                    )
                )
            except UniqueConstraintViolation:
                return Return.err(
                    Error(
                        ErrorCode.DUPLICATE_PENDING_INVITATION,
                        "Invitation already sent to this user",
                    )
                )

            await self.uow.commit()

        logger.info("Invited user %s to team %s", invitee_id, team_id)
        await dispatch_safely(
            self.notifier,
            NotificationEvent(
                kind=NotificationKind.invitation_sent,
                team_id=team_id,
                actor_id=inviter_id,
                recipient_id=invitee_id,
                subject_id=invitation.id,
            ),
        )

        return Return.ok(InvitationResponse.from_entity(invitation, team, member_count))
