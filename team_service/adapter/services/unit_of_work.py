import asyncio
import weakref
from typing import Dict, Optional
from uuid import UUID

from sqlmodel.ext.asyncio.session import AsyncSession

from team_service.adapter.repositories.invitation_repository import InvitationRepository
from team_service.adapter.repositories.join_request_repository import JoinRequestRepository
from team_service.adapter.repositories.team_member_repository import TeamMemberRepository
from team_service.adapter.repositories.team_repository import TeamRepository
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.domain.entities import Team


class TeamLockRegistry:
    """
    Process-local lock per team id.

    Complements the SELECT ... FOR UPDATE row lock on engines that ignore it
    (SQLite). Locks for different teams are independent. Entries disappear
    once no unit of work holds or waits on them.
    """

    def __init__(self):
        self._locks: "weakref.WeakValueDictionary[UUID, asyncio.Lock]" = (
            weakref.WeakValueDictionary()
        )

    def get(self, team_id: UUID) -> asyncio.Lock:
        lock = self._locks.get(team_id)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[team_id] = lock
        return lock


team_locks = TeamLockRegistry()


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession, lock_registry: TeamLockRegistry = team_locks):
        self.session = session
        self.lock_registry = lock_registry
        self._held_locks: Dict[UUID, asyncio.Lock] = {}

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.teams = TeamRepository(self.session)
        self.team_members = TeamMemberRepository(self.session)
        self.join_requests = JoinRequestRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        try:
            await self.session.commit()
        finally:
            self._release_locks()

    async def rollback(self):
        try:
            await self.session.rollback()
        finally:
            self._release_locks()

    async def lock_team(self, team_id: UUID) -> Optional[Team]:
        if team_id not in self._held_locks:
            lock = self.lock_registry.get(team_id)
            await lock.acquire()
            self._held_locks[team_id] = lock
        return await self.teams.get_by_id_for_update(team_id)

    def _release_locks(self):
        held, self._held_locks = self._held_locks, {}
        for lock in held.values():
            lock.release()
