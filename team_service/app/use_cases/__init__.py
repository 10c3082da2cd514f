"""
Use Cases

Organized by domain folder:
- teams/: Team lifecycle and seat removal
- join_requests/: Applicant-initiated membership
- invitations/: Owner-initiated membership
"""

from .invitations import (
    CreateInvitationUseCase,
    ListInvitationsUseCase,
    RespondToInvitationUseCase,
)
from .join_requests import (
    ListJoinRequestsUseCase,
    RespondToJoinRequestUseCase,
    SubmitJoinRequestUseCase,
)
from .teams import (
    CreateTeamUseCase,
    DeactivateTeamUseCase,
    DeleteTeamUseCase,
    GetTeamUseCase,
    ListMyTeamsUseCase,
    RemoveMemberUseCase,
)

__all__ = [
    # Teams
    "CreateTeamUseCase",
    "GetTeamUseCase",
    "ListMyTeamsUseCase",
    "DeactivateTeamUseCase",
    "DeleteTeamUseCase",
    "RemoveMemberUseCase",
    # Join requests
    "SubmitJoinRequestUseCase",
    "RespondToJoinRequestUseCase",
    "ListJoinRequestsUseCase",
    # Invitations
    "CreateInvitationUseCase",
    "RespondToInvitationUseCase",
    "ListInvitationsUseCase",
]
