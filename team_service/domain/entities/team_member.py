"""
TeamMember Entity

Seats a user in a team.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import TeamRole


class TeamMember(SQLModel, table=True):
    """
    TeamMember entity - one row per (team_id, user_id).

    Business Rules:
    - Written only by MembershipCoordinator
    - (team_id, user_id) must be unique; removal deactivates the row and
      re-seating reactivates it
    - The owner row is created with the team and never removed by the
      "remove member" path
    """

    __tablename__ = "team_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    team_id: UUID = Field(foreign_key="teams.id", nullable=False, index=True)
    user_id: UUID = Field(nullable=False, index=True)

    role: TeamRole = Field(default=TeamRole.member, nullable=False)
    is_active: bool = Field(default=True)

    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_team_member_team_user", "team_id", "user_id", unique=True),
        Index("idx_team_member_team_active", "team_id", "is_active"),
    )
