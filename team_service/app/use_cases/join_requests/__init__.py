"""
Join Request Use Cases

Applicant-initiated path into a team.
"""

from .dtos import JoinRequestListResponse, JoinRequestResponse
from .list_join_requests_use_case import ListJoinRequestsUseCase
from .respond_to_join_request_use_case import RespondToJoinRequestUseCase
from .submit_join_request_use_case import SubmitJoinRequestUseCase

__all__ = [
    "SubmitJoinRequestUseCase",
    "RespondToJoinRequestUseCase",
    "ListJoinRequestsUseCase",
    "JoinRequestResponse",
    "JoinRequestListResponse",
]
