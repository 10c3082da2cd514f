"""
Team Management Use Cases

Team lifecycle and seat removal.
"""

from .create_team_use_case import CreateTeamUseCase
from .deactivate_team_use_case import DeactivateTeamUseCase
from .delete_team_use_case import DeleteTeamUseCase
from .dtos import (
    DeleteTeamResponse,
    MyTeamResponse,
    MyTeamsResponse,
    RemoveMemberResponse,
    TeamDetailResponse,
    TeamMemberInfo,
    TeamResponse,
)
from .get_team_use_case import GetTeamUseCase
from .list_my_teams_use_case import ListMyTeamsUseCase
from .remove_member_use_case import RemoveMemberUseCase

__all__ = [
    "CreateTeamUseCase",
    "GetTeamUseCase",
    "ListMyTeamsUseCase",
    "DeactivateTeamUseCase",
    "DeleteTeamUseCase",
    "RemoveMemberUseCase",
    # DTOs
    "TeamResponse",
    "TeamDetailResponse",
    "TeamMemberInfo",
    "DeleteTeamResponse",
    "MyTeamResponse",
    "MyTeamsResponse",
    "RemoveMemberResponse",
]
