from datetime import timedelta
from uuid import uuid4

import pytest

from team_service.app.services.notification_dispatcher import NotificationKind
from team_service.app.use_cases.invitations import RespondToInvitationUseCase
from team_service.domain.base import utcnow
from team_service.domain.entities import Invitation, InvitationDecision, InvitationStatus
from team_service.domain.errors import ErrorCode


@pytest.fixture
def invitation(team, owner_id):
    return Invitation(
        id=uuid4(),
        team_id=team.id,
        inviter_id=owner_id,
        invitee_id=uuid4(),
        expires_at=utcnow() + timedelta(days=7),
    )


@pytest.fixture
def uow(mock_uow, team, invitation):
    mock_uow.invitations.get_by_id.return_value = invitation
    mock_uow.invitations.get_by_id_for_update.return_value = invitation
    mock_uow.lock_team.return_value = team
    mock_uow.team_members.count_active.return_value = 1
    return mock_uow


@pytest.mark.asyncio
async def test_accept_seats_invitee(uow, mock_notifier, invitation, owner_id):
    use_case = RespondToInvitationUseCase(uow, mock_notifier)
    result = await use_case.execute(
        invitation.invitee_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_ok()
    assert result.value.status == "accepted"
    assert result.value.responded_at is not None
    uow.team_members.create.assert_awaited_once()
    uow.commit.assert_called_once()

    event = mock_notifier.notify.await_args.args[0]
    assert event.kind == NotificationKind.invitation_accepted
    assert event.recipient_id == owner_id


@pytest.mark.asyncio
async def test_reject_invitation(uow, mock_notifier, invitation):
    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.reject
    )

    assert result.is_ok()
    assert result.value.status == "rejected"
    uow.team_members.create.assert_not_called()
    event = mock_notifier.notify.await_args.args[0]
    assert event.kind == NotificationKind.invitation_rejected


@pytest.mark.asyncio
async def test_accept_full_team_keeps_invitation_pending(
    uow, mock_notifier, team, invitation
):
    """Capacity may have changed since the invitation was sent"""
    uow.team_members.count_active.return_value = team.max_members

    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.TEAM_FULL
    assert invitation.status == InvitationStatus.pending
    uow.commit.assert_not_called()
    mock_notifier.notify.assert_not_called()


@pytest.mark.asyncio
async def test_only_invitee_can_respond(uow, mock_notifier, invitation, owner_id):
    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        owner_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.NOT_AUTHORIZED
    uow.lock_team.assert_not_called()


@pytest.mark.asyncio
async def test_invitation_not_found(mock_uow, mock_notifier):
    mock_uow.invitations.get_by_id.return_value = None

    result = await RespondToInvitationUseCase(mock_uow, mock_notifier).execute(
        uuid4(), uuid4(), InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVITATION_NOT_FOUND


@pytest.mark.asyncio
async def test_expired_invitation_is_marked_and_refused(uow, mock_notifier, invitation):
    invitation.expires_at = utcnow() - timedelta(seconds=1)

    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVITATION_EXPIRED
    assert invitation.status == InvitationStatus.expired
    uow.team_members.create.assert_not_called()
    # Expiry is recorded even though the response fails
    uow.commit.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "settled",
    [InvitationStatus.accepted, InvitationStatus.rejected, InvitationStatus.expired],
)
async def test_settled_invitation_cannot_transition(uow, mock_notifier, invitation, settled):
    invitation.status = settled

    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.reject
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.INVALID_STATE_TRANSITION


@pytest.mark.asyncio
async def test_inactive_team_freezes_invitation(uow, mock_notifier, team, invitation):
    team.is_active = False

    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == ErrorCode.TEAM_INACTIVE


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "active_count, expected",
    [(2, ErrorCode.ALREADY_MEMBER), (3, ErrorCode.TEAM_FULL)],
)
async def test_accept_when_already_member(
    uow, mock_notifier, team, invitation, make_member, active_count, expected
):
    """Seated through another path: full team reports TEAM_FULL, otherwise ALREADY_MEMBER"""
    uow.team_members.count_active.return_value = active_count
    uow.team_members.get_by_team_and_user.return_value = make_member(
        team, invitation.invitee_id
    )

    result = await RespondToInvitationUseCase(uow, mock_notifier).execute(
        invitation.invitee_id, invitation.id, InvitationDecision.accept
    )

    assert result.is_err()
    assert result.error.code == expected
    assert invitation.status == InvitationStatus.pending
    uow.commit.assert_not_called()
