"""
Membership Coordinator

The only component that writes team_members rows. Every seat is taken inside
the caller's unit of work, under the team lock, so that the capacity check
and the insert form one atomic step and the caller's ledger transition
commits or rolls back together with it.
"""

import logging
from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.base import utcnow
from team_service.domain.entities import Team, TeamMember, TeamRole
from team_service.domain.errors import ErrorCode

logger = logging.getLogger(__name__)


class MembershipCoordinator:
    """
    Serialization point for membership mutations of a team.

    Never commits: the caller owns the transaction and commits once its own
    state change is recorded. Team locks taken here are held until that
    commit or rollback.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def add_member(
        self, team_id: UUID, user_id: UUID, role: TeamRole = TeamRole.member
    ) -> Result[TeamMember]:
        """
        Seat a user in a team if a slot is free.

        Errors:
            - TEAM_NOT_FOUND: Team does not exist (or was deleted)
            - TEAM_INACTIVE: Team was deactivated
            - NOT_AUTHORIZED: Owner role requested for someone other than the owner
            - TEAM_FULL: Active member count reached max_members
            - ALREADY_MEMBER: User already holds an active seat in a team with room

        A full team reports TEAM_FULL even to a user who already holds a seat.
        """
        team = await self.uow.lock_team(team_id)
        if team is None:
            return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

        if not team.is_active:
            return Return.err(Error(ErrorCode.TEAM_INACTIVE, "Team is no longer active"))

        if role == TeamRole.owner and not team.is_owned_by(user_id):
            return Return.err(
                Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can hold the owner role")
            )

        # Counted under the team lock; a count taken before the lock is stale
        active_count = await self.uow.team_members.count_active(team_id)
        if active_count >= team.max_members:
            logger.info(
                "Team %s is full (%d/%d), refusing seat for user %s",
                team_id,
                active_count,
                team.max_members,
                user_id,
            )
            return Return.err(
                Error(
                    ErrorCode.TEAM_FULL,
                    "Team is already full",
                    reason=f"{active_count}/{team.max_members} seats taken",
                )
            )

        existing = await self.uow.team_members.get_by_team_and_user(team_id, user_id)
        if existing is not None and existing.is_active:
            return Return.err(
                Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this team")
            )

        if existing is not None:
            existing.is_active = True
            existing.role = role
            existing.joined_at = utcnow()
            member = await self.uow.team_members.update(existing)
        else:
            try:
                member = await self.uow.team_members.create(
                    TeamMember(team_id=team_id, user_id=user_id, role=role)
                )
            except UniqueConstraintViolation:
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this team")
                )

        logger.info(
            "Seated user %s in team %s as %s (%d/%d)",
            user_id,
            team_id,
            role.value,
            active_count + 1,
            team.max_members,
        )
        return Return.ok(member)

    async def remove_member(
        self, team_id: UUID, user_id: UUID, requested_by: UUID
    ) -> Result[Optional[TeamMember]]:
        """
        Vacate a seat. Returns the deactivated row, or None when the user held
        no active seat (removal of a non-member succeeds as a no-op).

        Errors:
            - TEAM_NOT_FOUND: Team does not exist
            - CANNOT_REMOVE_OWNER: Target is the team owner, whoever asks
            - NOT_AUTHORIZED: Requester is not the team owner
        """
        team = await self.uow.lock_team(team_id)
        if team is None:
            return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

        if team.is_owned_by(user_id):
            return Return.err(
                Error(ErrorCode.CANNOT_REMOVE_OWNER, "The team owner cannot be removed")
            )

        if not team.is_owned_by(requested_by):
            return Return.err(
                Error(ErrorCode.NOT_AUTHORIZED, "Only the team owner can remove members")
            )

        member = await self.uow.team_members.get_by_team_and_user(team_id, user_id)
        if member is None or not member.is_active:
            return Return.ok(None)

        member.is_active = False
        member = await self.uow.team_members.update(member)

        logger.info("Removed user %s from team %s", user_id, team_id)
        return Return.ok(member)

    async def purge_members(self, team: Team) -> int:
        """Discard every member row of a team being deleted; caller holds the team lock"""
        return await self.uow.team_members.delete_by_team_id(team.id)
