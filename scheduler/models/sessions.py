"""Session-related Pydantic models."""

from pydantic import BaseModel, ConfigDict, Field


class SessionInitResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")


class SessionInfoResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(alias="sessionId")
    exists: bool
