from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from team_service.domain.entities import TeamMember


class ITeamMemberRepository(ABC):
    """TeamMember repository interface - application layer"""

    @abstractmethod
    async def get_by_team_and_user(
        self, team_id: UUID, user_id: UUID
    ) -> Optional[TeamMember]:
        """Get the member row for a user in a team, active or not"""
        pass

    @abstractmethod
    async def count_active(self, team_id: UUID) -> int:
        """Count active members of a team"""
        pass

    @abstractmethod
    async def get_active_by_team_id(self, team_id: UUID) -> List[TeamMember]:
        """Get active members of a team ordered by joined_at"""
        pass

    @abstractmethod
    async def get_active_by_user_id(self, user_id: UUID) -> List[TeamMember]:
        """Get a user's active seats across teams, most recent first"""
        pass

    @abstractmethod
    async def create(self, member: TeamMember) -> TeamMember:
        """Create a new member row. Raises UniqueConstraintViolation on duplicates."""
        pass

    @abstractmethod
    async def update(self, member: TeamMember) -> TeamMember:
        """Update existing member row"""
        pass

    @abstractmethod
    async def delete_by_team_id(self, team_id: UUID) -> int:
        """Delete all member rows of a team. Returns count deleted."""
        pass
