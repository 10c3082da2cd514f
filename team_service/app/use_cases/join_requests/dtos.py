"""
Join Request Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from team_service.domain.entities import JoinRequest


class JoinRequestResponse(BaseModel):
    """Join request state after a ledger operation"""

    id: str
    team_id: str
    user_id: str
    message: Optional[str]
    status: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, join_request: JoinRequest) -> "JoinRequestResponse":
        return cls(
            id=str(join_request.id),
            team_id=str(join_request.team_id),
            user_id=str(join_request.user_id),
            message=join_request.message,
            status=join_request.status.value,
            created_at=join_request.created_at.isoformat(),
            updated_at=join_request.updated_at.isoformat(),
        )


class JoinRequestListResponse(BaseModel):
    """Join requests of one team, newest first"""

    requests: List[JoinRequestResponse]
    count: int
