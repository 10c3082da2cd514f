"""
Submit Join Request Use Case

Records an applicant's request to join a team.
"""

from typing import Optional
from uuid import UUID

from libs.result import Error, Result, Return
from team_service.app.repositories.errors import UniqueConstraintViolation
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.entities import JoinRequest
from team_service.domain.errors import ErrorCode
from team_service.domain.policies import normalize_message

from .dtos import JoinRequestResponse


class SubmitJoinRequestUseCase:
    """
    Use case for applying to a team.

    Business Rules:
    - Team must exist and be active
    - The owner cannot apply to their own team (IS_OWNER)
    - Active members cannot apply (ALREADY_MEMBER)
    - One pending request per applicant and team (DUPLICATE_PENDING_REQUEST);
      the partial unique index backs this check up under concurrency
    - A full team refuses new requests (TEAM_FULL); this is advisory only,
      capacity is enforced again when the owner approves
    - A message may be required by policy (MESSAGE_REQUIRED)
    """

    def __init__(self, uow: UnitOfWork, require_message: bool = False):
        self.uow = uow
        self.require_message = require_message

    async def execute(
        self, user_id: UUID, team_id: UUID, message: Optional[str] = None
    ) -> Result[JoinRequestResponse]:
        """
        Execute submit join request use case.

        Args:
            user_id: Applicant user ID
            team_id: Team applied to
            message: Free-text note for the owner

        Returns:
            Result with JoinRequestResponse DTO, or Error
        """
        message = normalize_message(message)
        if self.require_message and message is None:
            return Return.err(
                Error(ErrorCode.MESSAGE_REQUIRED, "A message to the team owner is required")
            )

        async with self.uow:
            team = await self.uow.teams.get_by_id(team_id)
            if team is None:
                return Return.err(Error(ErrorCode.TEAM_NOT_FOUND, "Team not found"))

            if not team.is_active:
                return Return.err(Error(ErrorCode.TEAM_INACTIVE, "Team is no longer active"))

            if team.is_owned_by(user_id):
                return Return.err(
                    Error(ErrorCode.IS_OWNER, "Team owners cannot request to join their own team")
                )

            membership = await self.uow.team_members.get_by_team_and_user(team_id, user_id)
            if membership is not None and membership.is_active:
                return Return.err(
                    Error(ErrorCode.ALREADY_MEMBER, "User is already a member of this team")
                )

            pending = await self.uow.join_requests.get_pending_by_team_and_user(
                team_id, user_id
            )
            if pending is not None:
                return Return.err(
                    Error(
                        ErrorCode.DUPLICATE_PENDING_REQUEST,
                        "A pending join request already exists for this team",
                    )
                )

            member_count = await self.uow.team_members.count_active(team_id)
            if member_count >= team.max_members:
                return Return.err(Error(ErrorCode.TEAM_FULL, "Team is already full"))

            try:
                join_request = await self.uow.join_requests.create(
                    JoinRequest(team_id=team_id, user_id=user_id, message=message)
                )
            except UniqueConstraintViolation:
                return Return.err(
                    Error(
                        ErrorCode.DUPLICATE_PENDING_REQUEST,
                        "A pending join request already exists for this team",
                    )
                )

            await self.uow.commit()

            return Return.ok(JoinRequestResponse.from_entity(join_request))
