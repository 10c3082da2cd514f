from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from team_service.api.error import ClientError, ServerError
from team_service.api.utils.ids import parse_uuid
from team_service.app.services.notification_dispatcher import NotificationDispatcher
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.app.use_cases.join_requests import (
    JoinRequestListResponse,
    JoinRequestResponse,
    ListJoinRequestsUseCase,
    RespondToJoinRequestUseCase,
    SubmitJoinRequestUseCase,
)
from team_service.depends import (
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)
from team_service.domain.entities import JoinRequestDecision, JoinRequestStatus
from team_service.domain.errors import NOT_FOUND_CODES, ErrorCode

router = APIRouter(tags=["Join Requests"])

# Conflicts with the current team/request state
CONFLICT_CODES = (
    ErrorCode.IS_OWNER,
    ErrorCode.ALREADY_MEMBER,
    ErrorCode.DUPLICATE_PENDING_REQUEST,
    ErrorCode.TEAM_FULL,
    ErrorCode.TEAM_INACTIVE,
    ErrorCode.INVALID_STATE_TRANSITION,
)


class SubmitJoinRequestRequest(BaseModel):
    """
    Submit join request HTTP request payload
    """

    message: Optional[str] = Field(None, max_length=500, description="Note to the team owner")


class RespondToJoinRequestRequest(BaseModel):
    """
    Respond to join request HTTP request payload
    """

    decision: JoinRequestDecision = Field(..., description="approve or reject")


@router.post(
    "/teams/{team_id}/join-requests",
    status_code=status.HTTP_201_CREATED,
    response_model=JoinRequestResponse,
)
async def submit_join_request(
    team_id: str,
    request: SubmitJoinRequestRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Join Request

    Asks the team owner to seat the caller.

    Raises:
        - 400 Bad Request: Invalid team_id format, MESSAGE_REQUIRED
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: TEAM_NOT_FOUND
        - 409 Conflict: IS_OWNER, ALREADY_MEMBER, DUPLICATE_PENDING_REQUEST,
                        TEAM_FULL, TEAM_INACTIVE
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    use_case = SubmitJoinRequestUseCase(
        uow, require_message=ApplicationConfig.JOIN_REQUEST_MESSAGE_REQUIRED
    )
    result = await use_case.execute(user_id, team_uuid, request.message)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.MESSAGE_REQUIRED:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in CONFLICT_CODES:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get(
    "/teams/{team_id}/join-requests",
    status_code=status.HTTP_200_OK,
    response_model=JoinRequestListResponse,
)
async def list_join_requests(
    team_id: str,
    status_filter: Optional[JoinRequestStatus] = Query(None, alias="status"),
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Join Requests

    Owner-only view of the team's join requests, newest first.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED
        - 404 Not Found: TEAM_NOT_FOUND
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    result = await ListJoinRequestsUseCase(uow).execute(user_id, team_uuid, status_filter)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.post(
    "/join-requests/{request_id}/respond",
    status_code=status.HTTP_200_OK,
    response_model=JoinRequestResponse,
)
async def respond_to_join_request(
    request_id: str,
    request: RespondToJoinRequestRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Respond to Join Request

    Owner approves (seating the applicant) or rejects a pending request.
    A failed approval leaves the request pending.

    Raises:
        - 400 Bad Request: Invalid request_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the owner)
        - 404 Not Found: JOIN_REQUEST_NOT_FOUND, TEAM_NOT_FOUND
        - 409 Conflict: TEAM_FULL, ALREADY_MEMBER, TEAM_INACTIVE,
                        INVALID_STATE_TRANSITION
    """
    request_uuid = parse_uuid(request_id, "INVALID_REQUEST_ID", "join request ID")

    use_case = RespondToJoinRequestUseCase(uow, notifier)
    result = await use_case.execute(user_id, request_uuid, request.decision)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in NOT_FOUND_CODES:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in CONFLICT_CODES:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
