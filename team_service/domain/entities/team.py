"""
Team Entity

A team an owner recruits members into, bounded by max_members.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import CheckConstraint
from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Team(SQLModel, table=True):
    """
    Team entity - capacity-bounded group owned by a single user.

    Business Rules:
    - Active member count never exceeds max_members
    - Only the owner approves requests, sends invitations and removes members
    - Deactivated teams accept no new members and no ledger responses
    - Deletion discards members, join requests and invitations
    """

    __tablename__ = "teams"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=120)
    description: str = Field(default="", max_length=2000)

    owner_id: UUID = Field(nullable=False, index=True)
    max_members: int = Field(nullable=False)
    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        CheckConstraint("max_members >= 1", name="ck_team_max_members_positive"),
        Index("idx_team_is_active", "is_active"),
    )

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.owner_id == user_id
