"""Client-held schedule state: selected day, cached collections, book/cancel with day refresh."""

import logging
from typing import Dict, List, Optional

from ..models import Appointment, Day, Interview, Interviewer
from .api import SchedulerClient
from .appointment import AppointmentSlot

logger = logging.getLogger(__name__)

DEFAULT_DAY = "Monday"


def format_spots(spots: int) -> str:
    if spots == 0:
        return "no spots remaining"
    if spots == 1:
        return "1 spot remaining"
    return f"{spots} spots remaining"


def short_session_id(session_id: Optional[str]) -> str:
    return (session_id or "")[:8]


class SchedulerApp:
    """
    Holds what the user sees. Mutations go to the server first; on success the
    appointment is merged locally and the day list is fetched again so spot
    counts come from the server.
    """

    def __init__(self, client: SchedulerClient, day: str = DEFAULT_DAY):
        self.client = client
        self.day = day
        self.days: List[Day] = []
        self.appointments: Dict[str, Appointment] = {}
        self.interviewers: Dict[str, Interviewer] = {}
        self.loading = True

    @property
    def session_id(self) -> Optional[str]:
        return self.client.session_id

    def start(self) -> None:
        """Open a new session and load the schedule."""
        try:
            self.client.init_session()
        except Exception as e:
            self.loading = False
            logger.error("Failed to initialize session: %s", e)
            raise
        self.load()

    def load(self) -> None:
        """Fetch days, appointments and interviewers for the current session."""
        try:
            days = self.client.get_days()
            appointments = self.client.get_appointments()
            interviewers = self.client.get_interviewers()
        except Exception as e:
            logger.error("Failed to load schedule: %s", e)
            raise
        finally:
            self.loading = False
        self.days = days
        self.appointments = appointments
        self.interviewers = interviewers

    def set_day(self, name: str) -> None:
        self.day = name

    def _merge(self, appointment_id, interview: Optional[Interview]) -> None:
        key = str(appointment_id)
        current = self.appointments.get(key)
        if current is None:
            return
        appointments = dict(self.appointments)
        appointments[key] = current.model_copy(update={"interview": interview})
        self.appointments = appointments

    def book_interview(self, appointment_id, interview: Interview) -> None:
        try:
            self.client.book_interview(appointment_id, interview)
            days = self.client.get_days()
            self._merge(appointment_id, interview)
            self.days = days
        except Exception as e:
            logger.error("Failed to book interview: %s", e)
            raise

    def cancel_interview(self, appointment_id) -> None:
        try:
            self.client.cancel_interview(appointment_id)
            days = self.client.get_days()
            self._merge(appointment_id, None)
            self.days = days
        except Exception as e:
            logger.error("Failed to cancel interview: %s", e)
            raise

    def selected_day(self) -> Optional[Day]:
        return next((d for d in self.days if d.name == self.day), None)

    def day_of(self, appointment_id) -> Optional[Day]:
        try:
            wanted = int(appointment_id)
        except (TypeError, ValueError):
            return None
        return next((d for d in self.days if wanted in d.appointments), None)

    def appointments_for_day(self) -> List[Appointment]:
        day = self.selected_day()
        if not day:
            return []
        return [self.appointments[str(i)] for i in day.appointments if str(i) in self.appointments]

    def interviewers_for_day(self) -> List[Interviewer]:
        day = self.selected_day()
        if not day:
            return []
        return [self.interviewers[str(i)] for i in day.interviewers if str(i) in self.interviewers]

    def make_slot(self, appointment: Appointment) -> AppointmentSlot:
        return AppointmentSlot(
            id=appointment.id,
            time=appointment.time,
            interview=appointment.interview,
            interviewers=self.interviewers_for_day(),
            book=self.book_interview,
            cancel=self.cancel_interview,
        )

    def slots_for_day(self) -> List[AppointmentSlot]:
        return [self.make_slot(a) for a in self.appointments_for_day()]

    def slot_for(self, appointment_id) -> Optional[AppointmentSlot]:
        """Select the day holding appointment_id and return its slot."""
        day = self.day_of(appointment_id)
        appointment = self.appointments.get(str(appointment_id))
        if day is None or appointment is None:
            return None
        self.set_day(day.name)
        return self.make_slot(appointment)
