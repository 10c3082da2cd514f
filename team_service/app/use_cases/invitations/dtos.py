"""
Invitation Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from team_service.domain.entities import Invitation, Team


class InvitationResponse(BaseModel):
    """Invitation state after a ledger operation"""

    id: str
    team_id: str
    inviter_id: str
    invitee_id: str
    message: Optional[str]
    status: str
    expires_at: str
    responded_at: Optional[str]
    created_at: str

    # Team summary, so the invitee can see whether a seat is still free
    team_name: Optional[str] = None
    max_members: Optional[int] = None
    member_count: Optional[int] = None

    @classmethod
    def from_entity(
        cls,
        invitation: Invitation,
        team: Optional[Team] = None,
        member_count: Optional[int] = None,
    ) -> "InvitationResponse":
        return cls(
            id=str(invitation.id),
            team_id=str(invitation.team_id),
            inviter_id=str(invitation.inviter_id),
            invitee_id=str(invitation.invitee_id),
            message=invitation.message,
            status=invitation.status.value,
            expires_at=invitation.expires_at.isoformat(),
            responded_at=(
                invitation.responded_at.isoformat() if invitation.responded_at else None
            ),
            created_at=invitation.created_at.isoformat(),
            team_name=team.name if team else None,
            max_members=team.max_members if team else None,
            member_count=member_count,
        )


class InvitationListResponse(BaseModel):
    """Pending invitations addressed to one user"""

    invitations: List[InvitationResponse]
    count: int
