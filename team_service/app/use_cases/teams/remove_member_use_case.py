"""
Remove Member from Team Use Case

Vacates a member's seat at the owner's request.
"""

from uuid import UUID

from libs.result import Result, Return
from team_service.app.services.membership_coordinator import MembershipCoordinator
from team_service.app.services.notification_dispatcher import (
    NotificationDispatcher,
    NotificationEvent,
    NotificationKind,
    dispatch_safely,
)
from team_service.app.services.unit_of_work import UnitOfWork

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing a member from a team.

    Business Rules:
    - The owner can never be removed this way (CANNOT_REMOVE_OWNER), whoever asks
    - Only the owner can remove members (NOT_AUTHORIZED)
    - Removing a non-member succeeds as a no-op, so callers can retry freely
    - member.removed is sent to the removed user after commit
    """

    def __init__(self, uow: UnitOfWork, notifier: NotificationDispatcher):
        self.uow = uow
        self.notifier = notifier

    async def execute(
        self, requested_by: UUID, team_id: UUID, user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            requested_by: User ID of the person asking for the removal
            team_id: Team to remove the member from
            user_id: User ID of the member to remove

        Returns:
            Result with RemoveMemberResponse DTO, or Error
        """
        async with self.uow:
            removed = await MembershipCoordinator(self.uow).remove_member(
                team_id, user_id, requested_by
            )
            if removed.is_err():
                return Return.err(removed.error)

            if removed.value is None:
                return Return.ok(RemoveMemberResponse(status="not_a_member"))

            await self.uow.commit()

        await dispatch_safely(
            self.notifier,
            NotificationEvent(
                kind=NotificationKind.member_removed,
                team_id=team_id,
                actor_id=requested_by,
                recipient_id=user_id,
                subject_id=user_id,
            ),
        )

        return Return.ok(RemoveMemberResponse(status="removed"))
