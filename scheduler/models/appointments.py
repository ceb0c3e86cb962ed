"""Request/response models for booking and cancelling appointments."""

from pydantic import BaseModel

from .common import Interview


class BookInterviewRequest(BaseModel):
    """Request body for PUT /api/appointments/{id}."""

    interview: Interview


class ErrorResponse(BaseModel):
    error: str
