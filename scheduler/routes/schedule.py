"""Session-scoped schedule endpoints: days, appointments, interviewers, book, cancel."""

from typing import Dict, List

from fastapi import APIRouter, Depends, Response

from ..models import Appointment, BookInterviewRequest, Day, ErrorResponse, Interviewer
from ..services import Session, book_appointment, cancel_appointment
from .deps import resolve_session

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Appointment not found"}}


@router.get("/days", response_model=List[Day])
def list_days(session: Session = Depends(resolve_session)):
    return session.days


@router.get("/appointments", response_model=Dict[str, Appointment])
def list_appointments(session: Session = Depends(resolve_session)):
    return session.appointments


@router.get("/interviewers", response_model=Dict[str, Interviewer])
def list_interviewers(session: Session = Depends(resolve_session)):
    return session.interviewers


@router.put("/appointments/{appointment_id}", status_code=204, response_class=Response, responses=_NOT_FOUND)
def book_interview(
    appointment_id: str,
    request: BookInterviewRequest,
    session: Session = Depends(resolve_session),
):
    """
    Book an interview into an appointment.
    Responds 204 with no body; fetch /api/days again for updated spots.
    """
    book_appointment(session, appointment_id, request.interview)
    return Response(status_code=204)


@router.delete("/appointments/{appointment_id}", status_code=204, response_class=Response, responses=_NOT_FOUND)
def cancel_interview(appointment_id: str, session: Session = Depends(resolve_session)):
    """Cancel the interview in an appointment. Cancelling an empty slot also succeeds."""
    cancel_appointment(session, appointment_id)
    return Response(status_code=204)
