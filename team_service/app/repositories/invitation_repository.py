from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from team_service.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, invitation_id: UUID) -> Optional[Invitation]:
        """Re-read invitation from the store with a row lock"""
        pass

    @abstractmethod
    async def get_pending_by_team_and_invitee(
        self, team_id: UUID, invitee_id: UUID
    ) -> Optional[Invitation]:
        """Get the pending invitation for a (team, invitee) pair"""
        pass

    @abstractmethod
    async def get_pending_by_invitee(
        self, invitee_id: UUID, now: datetime
    ) -> List[Invitation]:
        """Get an invitee's pending, unexpired invitations, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation. Raises UniqueConstraintViolation on duplicates."""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all invitations of a team. Returns count deleted."""
        pass
