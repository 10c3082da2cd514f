from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from team_service.domain.entities import JoinRequest, JoinRequestStatus


class IJoinRequestRepository(ABC):
    """JoinRequest repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, request_id: UUID) -> Optional[JoinRequest]:
        """Get join request by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, request_id: UUID) -> Optional[JoinRequest]:
        """Re-read join request from the store with a row lock"""
        pass

    @abstractmethod
    async def get_pending_by_team_and_user(
        self, team_id: UUID, user_id: UUID
    ) -> Optional[JoinRequest]:
        """Get the pending join request for a (team, applicant) pair"""
        pass

    @abstractmethod
    async def get_by_team_id(
        self, team_id: UUID, status: Optional[JoinRequestStatus] = None
    ) -> List[JoinRequest]:
        """Get join requests for a team, newest first"""
        pass

    @abstractmethod
    async def create(self, join_request: JoinRequest) -> JoinRequest:
        """Create a new join request. Raises UniqueConstraintViolation on duplicates."""
        pass

    @abstractmethod
    async def update(self, join_request: JoinRequest) -> JoinRequest:
        """Update existing join request"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all join requests of a team. Returns count deleted."""
        pass
