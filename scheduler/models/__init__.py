"""Pydantic request/response models for the API."""

from .appointments import BookInterviewRequest, ErrorResponse
from .common import Appointment, Day, Interview, Interviewer
from .sessions import SessionInfoResponse, SessionInitResponse

__all__ = [
    "Appointment",
    "Day",
    "Interview",
    "Interviewer",
    "BookInterviewRequest",
    "ErrorResponse",
    "SessionInitResponse",
    "SessionInfoResponse",
]
