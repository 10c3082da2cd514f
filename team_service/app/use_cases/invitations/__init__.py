"""
Invitation Use Cases

Owner-initiated path into a team.
"""

from .create_invitation_use_case import CreateInvitationUseCase
from .dtos import InvitationListResponse, InvitationResponse
from .list_invitations_use_case import ListInvitationsUseCase
from .respond_to_invitation_use_case import RespondToInvitationUseCase

__all__ = [
    "CreateInvitationUseCase",
    "RespondToInvitationUseCase",
    "ListInvitationsUseCase",
    "InvitationResponse",
    "InvitationListResponse",
]
