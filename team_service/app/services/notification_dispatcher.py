import logging
from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from team_service.domain.base import utcnow

logger = logging.getLogger(__name__)


class NotificationKind(str, Enum):
    request_approved = "request.approved"
    request_rejected = "request.rejected"
    invitation_sent = "invitation.sent"
    invitation_accepted = "invitation.accepted"
    invitation_rejected = "invitation.rejected"
    member_removed = "member.removed"


class NotificationEvent(BaseModel):
    """Membership change announced to the outside world after commit"""

    kind: NotificationKind
    team_id: UUID
    actor_id: UUID
    recipient_id: UUID
    subject_id: UUID
    occurred_at: datetime = Field(default_factory=utcnow)


class NotificationDispatcher(ABC):
    """Fire-and-forget channel for membership events"""

    @abstractmethod
    async def notify(self, event: NotificationEvent) -> None:
        pass


async def dispatch_safely(dispatcher: NotificationDispatcher, event: NotificationEvent) -> bool:
    """
    Deliver an event without letting delivery affect the caller.

    Runs after the triggering transaction has committed. Failures are logged
    and dropped; there is no synchronous retry.
    """
    try:
        await dispatcher.notify(event)
    except Exception:
        logger.exception(
            "Dropped notification %s for team %s (recipient %s)",
            event.kind.value,
            event.team_id,
            event.recipient_id,
        )
        return False
    return True
