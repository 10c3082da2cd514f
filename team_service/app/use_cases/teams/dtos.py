"""
Team Use Case DTOs (Data Transfer Objects)

All Response classes for the team domain.
Provides type safety and clear contracts between layers.
"""

from typing import List

from pydantic import BaseModel

from team_service.domain.entities import Team, TeamMember


# ============================================================================
# Response DTOs
# ============================================================================


class TeamMemberInfo(BaseModel):
    """Seated member of a team"""

    user_id: str
    role: str
    joined_at: str

    @classmethod
    def from_entity(cls, member: TeamMember) -> "TeamMemberInfo":
        return cls(
            user_id=str(member.user_id),
            role=member.role.value,
            joined_at=member.joined_at.isoformat(),
        )


class TeamResponse(BaseModel):
    """Team state with its current occupancy"""

    id: str
    name: str
    description: str
    owner_id: str
    max_members: int
    member_count: int
    available_slots: int
    is_active: bool
    created_at: str

    @classmethod
    def from_entity(cls, team: Team, member_count: int) -> "TeamResponse":
        return cls(
            id=str(team.id),
            name=team.name,
            description=team.description,
            owner_id=str(team.owner_id),
            max_members=team.max_members,
            member_count=member_count,
            available_slots=max(team.max_members - member_count, 0),
            is_active=team.is_active,
            created_at=team.created_at.isoformat(),
        )


class TeamDetailResponse(TeamResponse):
    """Team state including the active member list"""

    members: List[TeamMemberInfo]

    @classmethod
    def from_members(cls, team: Team, members: List[TeamMember]) -> "TeamDetailResponse":
        base = TeamResponse.from_entity(team, len(members))
        return cls(
            **base.model_dump(),
            members=[TeamMemberInfo.from_entity(m) for m in members],
        )


class MyTeamResponse(TeamResponse):
    """Team the caller holds a seat in, with the caller's role"""

    role: str


class MyTeamsResponse(BaseModel):
    """Active teams the caller owns or belongs to"""

    teams: List[MyTeamResponse]
    count: int


class DeleteTeamResponse(BaseModel):
    """Response for delete team use case"""

    status: str
    members_removed: int
    join_requests_discarded: int
    invitations_discarded: int


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
