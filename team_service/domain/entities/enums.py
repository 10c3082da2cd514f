"""
Team Service Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class TeamRole(str, Enum):
    """Role of a seated user within a team"""

    owner = "owner"
    member = "member"


class JoinRequestStatus(str, Enum):
    """Join request lifecycle status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"


class InvitationStatus(str, Enum):
    """Invitation lifecycle status"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"
    expired = "expired"


class JoinRequestDecision(str, Enum):
    approve = "approve"
    reject = "reject"


class InvitationDecision(str, Enum):
    accept = "accept"
    reject = "reject"
