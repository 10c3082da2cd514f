from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from team_service.domain.entities import Team


class ITeamRepository(ABC):
    """Team repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID"""
        pass

    @abstractmethod
    async def get_by_id_for_update(self, team_id: UUID) -> Optional[Team]:
        """Get team by ID, row-locked until the transaction ends"""
        pass

    @abstractmethod
    async def create(self, team: Team) -> Team:
        """Create a new team"""
        pass

    @abstractmethod
    async def update(self, team: Team) -> Team:
        """Update existing team"""
        pass

    @abstractmethod
    async def delete(self, team: Team) -> None:
        """Delete a team row"""
        pass
