"""
Team Service Error Codes

Closed set of expected failure kinds returned in Result errors.
The HTTP layer maps each code to a status; callers branch on the code.
"""

from enum import StrEnum


class ErrorCode(StrEnum):
    NOT_AUTHORIZED = "NOT_AUTHORIZED"
    TEAM_FULL = "TEAM_FULL"
    TEAM_INACTIVE = "TEAM_INACTIVE"
    ALREADY_MEMBER = "ALREADY_MEMBER"
    IS_OWNER = "IS_OWNER"
    DUPLICATE_PENDING_REQUEST = "DUPLICATE_PENDING_REQUEST"
    DUPLICATE_PENDING_INVITATION = "DUPLICATE_PENDING_INVITATION"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    CANNOT_REMOVE_OWNER = "CANNOT_REMOVE_OWNER"

    # Not found, one code per missing entity
    TEAM_NOT_FOUND = "TEAM_NOT_FOUND"
    JOIN_REQUEST_NOT_FOUND = "JOIN_REQUEST_NOT_FOUND"
    INVITATION_NOT_FOUND = "INVITATION_NOT_FOUND"

    INVITATION_EXPIRED = "INVITATION_EXPIRED"

    # Input validation
    MESSAGE_REQUIRED = "MESSAGE_REQUIRED"
    INVALID_MAX_MEMBERS = "INVALID_MAX_MEMBERS"
    INVALID_TEAM_NAME = "INVALID_TEAM_NAME"


NOT_FOUND_CODES = frozenset(
    {
        ErrorCode.TEAM_NOT_FOUND,
        ErrorCode.JOIN_REQUEST_NOT_FOUND,
        ErrorCode.INVITATION_NOT_FOUND,
    }
)
