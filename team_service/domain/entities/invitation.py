"""
Invitation Entity

An owner's invitation for a specific user to join a team.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import InvitationStatus


class Invitation(SQLModel, table=True):
    """
    Invitation entity - owner-initiated ask, resolved by the invitee.

    Business Rules:
    - inviter_id is always the team owner
    - At most one pending invitation per (team_id, invitee_id)
    - pending -> accepted | rejected, by the invitee only
    - A pending invitation past expires_at can only become expired
    """

    __tablename__ = "invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    inviter_id: UUID = Field(nullable=False, index=True)
    invitee_id: UUID = Field(nullable=False, index=True)

    message: Optional[str] = Field(default=None, max_length=500)
    status: InvitationStatus = Field(default=InvitationStatus.pending)

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    responded_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_invitation_pending_team_invitee",
            "team_id",
            "invitee_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
        Index("idx_invitation_status", "status"),
        Index("idx_invitation_expires_at", "expires_at"),
    )

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now
