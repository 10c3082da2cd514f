from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from team_service.api.error import ClientError, ServerError
from team_service.api.utils.ids import parse_uuid
from team_service.app.services.notification_dispatcher import NotificationDispatcher
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.app.use_cases.teams import (
    CreateTeamUseCase,
    DeactivateTeamUseCase,
    DeleteTeamResponse,
    DeleteTeamUseCase,
    GetTeamUseCase,
    ListMyTeamsUseCase,
    MyTeamsResponse,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    TeamDetailResponse,
    TeamResponse,
)
from team_service.depends import (
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)
from team_service.domain.errors import NOT_FOUND_CODES, ErrorCode

router = APIRouter(prefix="/teams", tags=["Teams"])


class CreateTeamRequest(BaseModel):
    """
    Create team HTTP request payload
    """

    name: str = Field(..., max_length=120, description="Team name")
    description: str = Field("", max_length=2000, description="What the team is building")
    max_members: int = Field(..., description="Seat limit, owner included")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=TeamDetailResponse)
async def create_team(
    request: CreateTeamRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Team

    Creates a team owned by the caller and seats the caller as owner.

    Raises:
        - 400 Bad Request: INVALID_TEAM_NAME, INVALID_MAX_MEMBERS
        - 401 Unauthorized: Invalid or expired JWT
        - 500 Internal Server Error: Server error
    """
    use_case = CreateTeamUseCase(uow, max_team_size=ApplicationConfig.MAX_TEAM_SIZE)
    result = await use_case.execute(
        user_id, request.name, request.max_members, request.description
    )

    if result.is_err():
        error = result.error
        if error.code in (ErrorCode.INVALID_TEAM_NAME, ErrorCode.INVALID_MAX_MEMBERS):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.get("/mine", status_code=status.HTTP_200_OK, response_model=MyTeamsResponse)
async def list_my_teams(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Teams

    Active teams the caller owns or is an active member of, with the
    caller's role in each.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
    """
    result = await ListMyTeamsUseCase(uow).execute(user_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.get("/{team_id}", status_code=status.HTTP_200_OK, response_model=TeamDetailResponse)
async def get_team(
    team_id: str,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Team

    Returns the team with its active members and free slots.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 404 Not Found: TEAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    result = await GetTeamUseCase(uow).execute(team_uuid)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/{team_id}/deactivate", status_code=status.HTTP_200_OK, response_model=TeamResponse
)
async def deactivate_team(
    team_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Deactivate Team

    Stops the team from taking members. Pending requests and invitations
    stay but can no longer be answered.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the owner)
        - 404 Not Found: TEAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    result = await DeactivateTeamUseCase(uow).execute(user_id, team_uuid)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete("/{team_id}", status_code=status.HTTP_200_OK, response_model=DeleteTeamResponse)
async def delete_team(
    team_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Team

    Deletes the team with its members, join requests and invitations.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the owner)
        - 404 Not Found: TEAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    result = await DeleteTeamUseCase(uow).execute(user_id, team_uuid)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/{team_id}/members/{member_id}",
    status_code=status.HTTP_200_OK,
    response_model=RemoveMemberResponse,
)
async def remove_member(
    team_id: str,
    member_id: str,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Remove Member from Team

    Vacates a member's seat. Removing a non-member succeeds with
    status "not_a_member".

    Raises:
        - 400 Bad Request: Invalid team_id or member_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the owner)
        - 404 Not Found: TEAM_NOT_FOUND
        - 409 Conflict: CANNOT_REMOVE_OWNER
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")
    member_uuid = parse_uuid(member_id, "INVALID_USER_ID", "user ID")

    use_case = RemoveMemberUseCase(uow, notifier)
    result = await use_case.execute(user_id, team_uuid, member_uuid)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in NOT_FOUND_CODES:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == ErrorCode.CANNOT_REMOVE_OWNER:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
