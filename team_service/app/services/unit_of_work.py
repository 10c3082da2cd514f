from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from team_service.app.repositories.invitation_repository import IInvitationRepository
from team_service.app.repositories.join_request_repository import IJoinRequestRepository
from team_service.app.repositories.team_member_repository import ITeamMemberRepository
from team_service.app.repositories.team_repository import ITeamRepository
from team_service.domain.entities import Team


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    teams: ITeamRepository
    team_members: ITeamMemberRepository
    join_requests: IJoinRequestRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass

    @abstractmethod
    async def lock_team(self, team_id: UUID) -> Optional[Team]:
        """
        Serialize membership mutation for one team.

        Returns the freshly read team (None if missing) and holds the lock
        until commit or rollback. Locking the same team twice within one
        unit of work is a no-op.
        """
        pass
