from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from team_service.api.error import ClientError, ServerError
from team_service.api.utils.ids import parse_uuid
from team_service.app.services.notification_dispatcher import NotificationDispatcher
from team_service.app.services.unit_of_work import UnitOfWork
from team_service.app.use_cases.invitations import (
    CreateInvitationUseCase,
    InvitationListResponse,
    InvitationResponse,
    ListInvitationsUseCase,
    RespondToInvitationUseCase,
)
from team_service.depends import (
    get_current_user_id,
    get_notification_dispatcher,
    get_unit_of_work,
)
from team_service.domain.entities import InvitationDecision
from team_service.domain.errors import NOT_FOUND_CODES, ErrorCode

router = APIRouter(tags=["Invitations"])

# Conflicts with the current team/invitation state
CONFLICT_CODES = (
    ErrorCode.ALREADY_MEMBER,
    ErrorCode.DUPLICATE_PENDING_INVITATION,
    ErrorCode.TEAM_FULL,
    ErrorCode.TEAM_INACTIVE,
    ErrorCode.INVALID_STATE_TRANSITION,
)


class CreateInvitationRequest(BaseModel):
    """
    Create invitation HTTP request payload
    """

    invitee_id: UUID = Field(..., description="User to invite")
    message: Optional[str] = Field(None, max_length=500, description="Note to the invitee")


class RespondToInvitationRequest(BaseModel):
    """
    Respond to invitation HTTP request payload
    """

    decision: InvitationDecision = Field(..., description="accept or reject")


@router.post(
    "/teams/{team_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=InvitationResponse,
)
async def create_invitation(
    team_id: str,
    request: CreateInvitationRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Invite User to Team

    Owner invites a specific user. The invitation expires after the
    configured number of days.

    Raises:
        - 400 Bad Request: Invalid team_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the owner)
        - 404 Not Found: TEAM_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, DUPLICATE_PENDING_INVITATION,
                        TEAM_FULL, TEAM_INACTIVE
    """
    team_uuid = parse_uuid(team_id, "INVALID_TEAM_ID", "team ID")

    use_case = CreateInvitationUseCase(
        uow, notifier, ttl_days=ApplicationConfig.INVITATION_TTL_DAYS
    )
    result = await use_case.execute(user_id, team_uuid, request.invitee_id, request.message)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == ErrorCode.TEAM_NOT_FOUND:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in CONFLICT_CODES:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.get(
    "/invitations",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_my_invitations(
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List My Invitations

    Pending, unexpired invitations addressed to the caller, newest first.

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
    """
    result = await ListInvitationsUseCase(uow).execute(user_id)

    if result.is_err():
        raise ServerError(result.error)

    return result.value


@router.post(
    "/invitations/{invitation_id}/respond",
    status_code=status.HTTP_200_OK,
    response_model=InvitationResponse,
)
async def respond_to_invitation(
    invitation_id: str,
    request: RespondToInvitationRequest,
    user_id: UUID = Depends(get_current_user_id),
    uow: UnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Respond to Invitation

    Invitee accepts (taking a seat if one is free) or rejects. A failed
    acceptance leaves the invitation pending.

    Raises:
        - 400 Bad Request: Invalid invitation_id format
        - 401 Unauthorized: Invalid or expired JWT
        - 403 Forbidden: NOT_AUTHORIZED (caller is not the invitee)
        - 404 Not Found: INVITATION_NOT_FOUND, TEAM_NOT_FOUND
        - 409 Conflict: TEAM_FULL, ALREADY_MEMBER, TEAM_INACTIVE,
                        INVALID_STATE_TRANSITION
        - 410 Gone: INVITATION_EXPIRED
    """
    invitation_uuid = parse_uuid(invitation_id, "INVALID_INVITATION_ID", "invitation ID")

    use_case = RespondToInvitationUseCase(uow, notifier)
    result = await use_case.execute(user_id, invitation_uuid, request.decision)

    if result.is_err():
        error = result.error
        if error.code == ErrorCode.NOT_AUTHORIZED:
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in NOT_FOUND_CODES:
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == ErrorCode.INVITATION_EXPIRED:
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        elif error.code in CONFLICT_CODES:
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
