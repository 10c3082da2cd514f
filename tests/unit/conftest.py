from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from team_service.domain.entities import Team, TeamMember, TeamRole


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()
    uow.lock_team = AsyncMock()

    uow.teams = MagicMock()
    uow.teams.get_by_id = AsyncMock()
    uow.teams.get_by_id_for_update = AsyncMock()
    uow.teams.create = AsyncMock(side_effect=lambda team: team)
    uow.teams.update = AsyncMock(side_effect=lambda team: team)
    uow.teams.delete = AsyncMock()

    uow.team_members = MagicMock()
    uow.team_members.get_by_team_and_user = AsyncMock(return_value=None)
    uow.team_members.count_active = AsyncMock(return_value=0)
    uow.team_members.get_active_by_team_id = AsyncMock(return_value=[])
    uow.team_members.get_active_by_user_id = AsyncMock(return_value=[])
    uow.team_members.create = AsyncMock(side_effect=lambda member: member)
    uow.team_members.update = AsyncMock(side_effect=lambda member: member)
    uow.team_members.delete_by_team_id = AsyncMock(return_value=0)

    uow.join_requests = MagicMock()
    uow.join_requests.get_by_id = AsyncMock()
    uow.join_requests.get_by_id_for_update = AsyncMock()
    uow.join_requests.get_pending_by_team_and_user = AsyncMock(return_value=None)
    uow.join_requests.get_by_team_id = AsyncMock(return_value=[])
    uow.join_requests.create = AsyncMock(side_effect=lambda request: request)
    uow.join_requests.update = AsyncMock(side_effect=lambda request: request)
    uow.join_requests.delete_by_team_id = AsyncMock(return_value=0)

    uow.invitations = MagicMock()
    uow.invitations.get_by_id = AsyncMock()
    uow.invitations.get_by_id_for_update = AsyncMock()
    uow.invitations.get_pending_by_team_and_invitee = AsyncMock(return_value=None)
    uow.invitations.get_pending_by_invitee = AsyncMock(return_value=[])
    uow.invitations.create = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.update = AsyncMock(side_effect=lambda invitation: invitation)
    uow.invitations.delete_by_team_id = AsyncMock(return_value=0)

    return uow


@pytest.fixture
def mock_notifier():
    notifier = MagicMock()
    notifier.notify = AsyncMock()
    return notifier


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def team(owner_id):
    return Team(id=uuid4(), name="Hackers", owner_id=owner_id, max_members=3)


@pytest.fixture
def make_member():
    def _make(team: Team, user_id, role: TeamRole = TeamRole.member, is_active: bool = True):
        return TeamMember(
            id=uuid4(), team_id=team.id, user_id=user_id, role=role, is_active=is_active
        )

    return _make
