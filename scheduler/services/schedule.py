"""
Schedule mutations within one session: book and cancel an interview, then
recompute every day's remaining spots from its member appointments.

The appointment id is checked before anything changes, so a failed call never
leaves a partial mutation behind.
"""

import logging
from typing import Dict, Union

from ..models import Appointment, Day, Interview
from .session_store import Session

logger = logging.getLogger(__name__)

AppointmentId = Union[int, str]


class AppointmentNotFound(LookupError):
    """Raised when an appointment id is not part of the session's schedule."""

    def __init__(self, appointment_id: AppointmentId):
        self.appointment_id = appointment_id
        super().__init__(f"Appointment not found: {appointment_id}")


def _lookup(session: Session, appointment_id: AppointmentId) -> Appointment:
    appointment = session.appointments.get(str(appointment_id))
    if appointment is None:
        raise AppointmentNotFound(appointment_id)
    return appointment


def count_spots(day: Day, appointments: Dict[str, Appointment]) -> int:
    """Number of the day's appointments that have no interview."""
    spots = 0
    for appointment_id in day.appointments:
        appointment = appointments.get(str(appointment_id))
        if appointment is not None and appointment.interview is None:
            spots += 1
    return spots


def update_spots(session: Session) -> None:
    """Recompute spots for every day (not only the one that changed)."""
    for day in session.days:
        day.spots = count_spots(day, session.appointments)


def book_appointment(session: Session, appointment_id: AppointmentId, interview: Interview) -> Appointment:
    """
    Set the interview on an appointment and refresh spots.

    The interviewer id is not checked against the session's interviewers;
    an unknown id only affects how the booking is displayed.
    """
    appointment = _lookup(session, appointment_id)
    if str(interview.interviewer) not in session.interviewers:
        logger.warning(
            "Session %s: booking appointment %s with unknown interviewer %s",
            session.id,
            appointment_id,
            interview.interviewer,
        )
    appointment.interview = interview.model_copy(deep=True)
    update_spots(session)
    return appointment


def cancel_appointment(session: Session, appointment_id: AppointmentId) -> Appointment:
    """Clear the interview on an appointment and refresh spots. Cancelling a free slot is a no-op."""
    appointment = _lookup(session, appointment_id)
    appointment.interview = None
    update_spots(session)
    return appointment
