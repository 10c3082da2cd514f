from uuid import uuid4

import pytest

from team_service.app.services.notification_dispatcher import NotificationKind
from team_service.app.use_cases.join_requests import RespondToJoinRequestUseCase
from team_service.domain.entities import JoinRequest, JoinRequestDecision, JoinRequestStatus
from team_service.domain.errors import ErrorCode


@pytest.fixture
def join_request(team):
    return JoinRequest(id=uuid4(), team_id=team.id, user_id=uuid4())


@pytest.fixture
def uow(mock_uow, team, join_request):
    mock_uow.join_requests.get_by_id.return_value = join_request
    mock_uow.join_requests.get_by_id_for_update.return_value = join_request
    mock_uow.lock_team.return_value = team
    mock_uow.team_members.count_active.return_value = 1
    return mock_uow


@pytest.mark.asyncio
async def test_approve_seats_applicant(uow, mock_notifier, owner_id, join_request):
    use_case = RespondToJoinRequestUseCase(uow, mock_notifier)
    result = await use_case.execute(owner_id, join_request.id, JoinRequestDecision.approve)

    assert result.is_ok()
    assert result.value.status == "approved"
    assert join_request.status == JoinRequestStatus.approved
    uow.team_members.create.assert_awaited_once()
    uow.commit.assert_called_once()

    event = mock_notifier.notify.await_args.args[0]
    assert event.kind == NotificationKind.request_approved
    assert event.recipient_id == join_request.user_id


@pytest.mark.asyncio
async def test_reject_leaves_membership_untouched(uow, mock_notifier, owner_id, join_request):
    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.reject
    )

    assert result.is_ok()
    assert result.value.status == "rejected"
    uow.team_members.create.assert_not_called()
    uow.commit.assert_called_once()
    event = mock_notifier.notify.await_args.args[0]
    assert event.kind == NotificationKind.request_rejected


@pytest.mark.asyncio
async def test_approve_full_team_keeps_request_pending(
    uow, mock_notifier, team, owner_id, join_request
):
    uow.team_members.count_active.return_value = team.max_members

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.TEAM_FULL
    assert join_request.status == JoinRequestStatus.pending
    uow.join_requests.update.assert_not_called()
    uow.commit.assert_not_called()
    mock_notifier.notify.assert_not_called()


@pytest.mark.asyncio
async def test_reject_full_team_succeeds(uow, mock_notifier, team, owner_id, join_request):
    uow.team_members.count_active.return_value = team.max_members

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.reject
    )

    assert result.is_ok()


@pytest.mark.asyncio
async def test_non_owner_cannot_respond(uow, mock_notifier, join_request):
    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        uuid4(), join_request.id, JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_AUTHORIZED
    uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_applicant_cannot_approve_own_request(uow, mock_notifier, join_request):
    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        join_request.user_id, join_request.id, JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_AUTHORIZED


@pytest.mark.asyncio
async def test_request_not_found(mock_uow, mock_notifier, owner_id):
    mock_uow.join_requests.get_by_id.return_value = None

    result = await RespondToJoinRequestUseCase(mock_uow, mock_notifier).execute(
        owner_id, uuid4(), JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.JOIN_REQUEST_NOT_FOUND


@pytest.mark.asyncio
@pytest.mark.parametrize("settled", [JoinRequestStatus.approved, JoinRequestStatus.rejected])
async def test_settled_request_cannot_transition(
    uow, mock_notifier, owner_id, join_request, settled
):
    join_request.status = settled

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION
    uow.team_members.create.assert_not_called()


@pytest.mark.asyncio
async def test_request_settled_while_waiting_for_lock(
    uow, mock_notifier, owner_id, join_request
):
    """The re-read under the lock sees a response that won the race"""
    settled = JoinRequest(
        id=join_request.id,
        team_id=join_request.team_id,
        user_id=join_request.user_id,
        status=JoinRequestStatus.rejected,
    )
    uow.join_requests.get_by_id_for_update.return_value = settled

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.approve
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION


@pytest.mark.asyncio
async def test_inactive_team_freezes_request(uow, mock_notifier, team, owner_id, join_request):
    team.is_active = False

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.reject
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.TEAM_INACTIVE


@pytest.mark.asyncio
async def test_notification_failure_does_not_fail_approval(
    uow, mock_notifier, owner_id, join_request
):
    mock_notifier.notify.side_effect = RuntimeError("notification service down")

    result = await RespondToJoinRequestUseCase(uow, mock_notifier).execute(
        owner_id, join_request.id, JoinRequestDecision.approve
    )

    assert result.is_ok()
    assert result.value.status == "approved"
    uow.commit.assert_called_once()
