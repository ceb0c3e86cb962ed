"""
HTTP client for the scheduler API.

After init_session() (or when constructed with a session id) every call carries
the session header. When the server answers with a different session id (the
old one was evicted or never existed), the client adopts the new one.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..models import Appointment, Day, Interview, Interviewer
from .settings import ClientSettings

logger = logging.getLogger(__name__)


class SchedulerClientError(Exception):
    """Base error for failed scheduler API calls."""


class NetworkFailure(SchedulerClientError):
    """Transport failure or a response that could not be parsed."""


class ApiError(SchedulerClientError):
    """The server answered with an error status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")


class SchedulerClient:
    """Session-aware client. `http` may be any requests-compatible session (e.g. a test client)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session_id: Optional[str] = None,
        timeout: Optional[float] = None,
        http: Any = None,
        settings: Optional[ClientSettings] = None,
    ):
        settings = settings or ClientSettings.from_env()
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.session_id = session_id or settings.session_id
        self.timeout = timeout if timeout is not None else settings.timeout
        self.session_header = settings.session_header
        self.http = http or requests.Session()

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        headers = {}
        if self.session_id:
            headers[self.session_header] = self.session_id
        try:
            response = self.http.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except requests.exceptions.ConnectionError:
            raise NetworkFailure(f"Cannot connect to API at {self.base_url}. Is the server running?")
        except requests.exceptions.RequestException as e:
            raise NetworkFailure(f"API request failed: {e}") from e

        echoed = response.headers.get(self.session_header)
        if echoed and echoed != self.session_id:
            if self.session_id:
                logger.info("Session %s replaced by %s", self.session_id, echoed)
            self.session_id = echoed

        if response.status_code >= 400:
            raise ApiError(response.status_code, self._error_message(response))
        return response

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "request failed"
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body)
        return str(body)

    @staticmethod
    def _json(response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise NetworkFailure(f"Invalid JSON from API: {e}") from e

    def init_session(self) -> str:
        """Create a new server session and attach it to every later call."""
        data = self._json(self._request("POST", "/api/session/init"))
        try:
            self.session_id = data["sessionId"]
        except (KeyError, TypeError) as e:
            raise NetworkFailure(f"Unexpected session response: {data!r}") from e
        return self.session_id

    def check_session(self, session_id: Optional[str] = None) -> bool:
        session_id = session_id or self.session_id
        if not session_id:
            return False
        data = self._json(self._request("GET", f"/api/session/{session_id}"))
        return bool(data.get("exists"))

    def get_days(self) -> List[Day]:
        data = self._json(self._request("GET", "/api/days"))
        try:
            return [Day.model_validate(d) for d in data]
        except (TypeError, ValueError) as e:
            raise NetworkFailure(f"Unexpected days response: {e}") from e

    def get_appointments(self) -> Dict[str, Appointment]:
        data = self._json(self._request("GET", "/api/appointments"))
        try:
            return {str(k): Appointment.model_validate(v) for k, v in data.items()}
        except (AttributeError, TypeError, ValueError) as e:
            raise NetworkFailure(f"Unexpected appointments response: {e}") from e

    def get_interviewers(self) -> Dict[str, Interviewer]:
        data = self._json(self._request("GET", "/api/interviewers"))
        try:
            return {str(k): Interviewer.model_validate(v) for k, v in data.items()}
        except (AttributeError, TypeError, ValueError) as e:
            raise NetworkFailure(f"Unexpected interviewers response: {e}") from e

    def book_interview(self, appointment_id, interview: Interview) -> None:
        self._request(
            "PUT",
            f"/api/appointments/{appointment_id}",
            json={"interview": interview.model_dump()},
        )

    def cancel_interview(self, appointment_id) -> None:
        self._request("DELETE", f"/api/appointments/{appointment_id}")
