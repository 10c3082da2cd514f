"""
Team Service Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    TeamRole,
    JoinRequestStatus,
    JoinRequestDecision,
    InvitationStatus,
    InvitationDecision,
)

# Export all entities
from .team import Team
from .team_member import TeamMember
from .join_request import JoinRequest
from .invitation import Invitation

__all__ = [
    # Enums
    "TeamRole",
    "JoinRequestStatus",
    "JoinRequestDecision",
    "InvitationStatus",
    "InvitationDecision",
    # Entities
    "Team",
    "TeamMember",
    "JoinRequest",
    "Invitation",
]
