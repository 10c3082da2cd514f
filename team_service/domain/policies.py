"""
Ledger transition rules.

Both ledgers share one shape: a single non-terminal ``pending`` state and
terminal states that accept no further transitions.
"""

from typing import Optional

from libs.result import Error
from .entities import (
    InvitationDecision,
    InvitationStatus,
    JoinRequestDecision,
    JoinRequestStatus,
)
from .errors import ErrorCode

JOIN_REQUEST_TRANSITIONS = {
    JoinRequestStatus.pending: {
        JoinRequestStatus.approved,
        JoinRequestStatus.rejected,
    },
    JoinRequestStatus.approved: set(),
    JoinRequestStatus.rejected: set(),
}

INVITATION_TRANSITIONS = {
    InvitationStatus.pending: {
        InvitationStatus.accepted,
        InvitationStatus.rejected,
        InvitationStatus.expired,
    },
    InvitationStatus.accepted: set(),
    InvitationStatus.rejected: set(),
    InvitationStatus.expired: set(),
}

JOIN_REQUEST_OUTCOMES = {
    JoinRequestDecision.approve: JoinRequestStatus.approved,
    JoinRequestDecision.reject: JoinRequestStatus.rejected,
}

INVITATION_OUTCOMES = {
    InvitationDecision.accept: InvitationStatus.accepted,
    InvitationDecision.reject: InvitationStatus.rejected,
}


def check_join_request_transition(
    current: JoinRequestStatus, target: JoinRequestStatus
) -> Optional[Error]:
    if target in JOIN_REQUEST_TRANSITIONS[current]:
        return None
    return Error(
        ErrorCode.INVALID_STATE_TRANSITION,
        f"Join request is already {current.value}",
        reason=f"Cannot move join request from {current.value} to {target.value}",
    )


def check_invitation_transition(
    current: InvitationStatus, target: InvitationStatus
) -> Optional[Error]:
    if target in INVITATION_TRANSITIONS[current]:
        return None
    return Error(
        ErrorCode.INVALID_STATE_TRANSITION,
        f"Invitation is already {current.value}",
        reason=f"Cannot move invitation from {current.value} to {target.value}",
    )


def normalize_message(message: Optional[str]) -> Optional[str]:
    if message is None:
        return None
    message = message.strip()
    return message or None
