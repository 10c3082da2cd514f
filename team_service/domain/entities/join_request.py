"""
JoinRequest Entity

An applicant's request to join a team, resolved by the team owner.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlalchemy import text
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import JoinRequestStatus


class JoinRequest(SQLModel, table=True):
    """
    JoinRequest entity - applicant-initiated ask to join a team.

    Business Rules:
    - At most one pending request per (team_id, user_id)
    - pending -> approved | rejected, by the team owner only
    - approved and rejected are terminal; a later request is a new row
    """

    __tablename__ = "join_requests"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    message: Optional[str] = Field(default=None, max_length=500)
    status: JoinRequestStatus = Field(default=JoinRequestStatus.pending)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index(
            "idx_join_request_pending_team_user",
            "team_id",
            "user_id",
            unique=True,
            sqlite_where=text("status = 'pending'"),
            postgresql_where=text("status = 'pending'"),
        ),
        Index("idx_join_request_status", "status"),
    )
