"""Schedule models shared by the session store, routes and client."""

from typing import List, Optional

from pydantic import BaseModel, Field


class Interview(BaseModel):
    student: str = Field(min_length=1)
    interviewer: int


class Appointment(BaseModel):
    id: int
    time: str
    interview: Optional[Interview] = None


class Interviewer(BaseModel):
    id: int
    name: str
    avatar: str


class Day(BaseModel):
    id: int
    name: str
    appointments: List[int] = []
    interviewers: List[int] = []
    spots: int = 0  # derived: count of member appointments without an interview
