"""
Per-slot interaction state machine.

Each appointment shown to the user gets one AppointmentSlot. The slot tracks
its display mode and a form draft, and calls the book/cancel callbacks it was
given. Modes form a closed set; an action that is not valid in the current
mode raises InvalidTransition and changes nothing.

    EMPTY        --add-->      CREATE
    CREATE/EDIT  --save-->     SHOW | ERROR_SAVE
    CREATE       --cancel-->   EMPTY
    SHOW         --edit-->     EDIT
    EDIT         --cancel-->   SHOW
    SHOW         --delete-->   CONFIRM
    CONFIRM      --confirm-->  DELETING --> EMPTY | ERROR_DELETE
    CONFIRM      --cancel-->   SHOW
    ERROR_SAVE   --close-->    CREATE
    ERROR_DELETE --close-->    SHOW

There is no loading mode for save; only DELETING suspends interaction.
"""

import logging
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from ..models import Interview, Interviewer
from .api import SchedulerClientError

logger = logging.getLogger(__name__)

BookFn = Callable[[int, Interview], None]
CancelFn = Callable[[int], None]


class Mode(str, Enum):
    EMPTY = "EMPTY"
    SHOW = "SHOW"
    CREATE = "CREATE"
    EDIT = "EDIT"
    CONFIRM = "CONFIRM"
    DELETING = "DELETING"
    ERROR_SAVE = "ERROR_SAVE"
    ERROR_DELETE = "ERROR_DELETE"


class Action(str, Enum):
    ADD = "add"
    EDIT = "edit"
    SAVE = "save"
    CANCEL = "cancel"
    DELETE = "delete"
    CONFIRM = "confirm"
    CLOSE = "close"


# Modes in which each action is accepted
ALLOWED: Dict[Action, frozenset] = {
    Action.ADD: frozenset({Mode.EMPTY}),
    Action.EDIT: frozenset({Mode.SHOW}),
    Action.SAVE: frozenset({Mode.CREATE, Mode.EDIT}),
    Action.CANCEL: frozenset({Mode.CREATE, Mode.EDIT, Mode.CONFIRM}),
    Action.DELETE: frozenset({Mode.SHOW}),
    Action.CONFIRM: frozenset({Mode.CONFIRM}),
    Action.CLOSE: frozenset({Mode.ERROR_SAVE, Mode.ERROR_DELETE}),
}

FORM_MODES = frozenset({Mode.CREATE, Mode.EDIT})

MESSAGES = {
    Mode.CONFIRM: "Are you sure you want to delete?",
    Mode.DELETING: "Deleting...",
    Mode.ERROR_SAVE: "Could not save appointment",
    Mode.ERROR_DELETE: "Could not cancel appointment",
}


class InvalidTransition(Exception):
    def __init__(self, mode: Mode, action: Optional[Action], message: Optional[str] = None):
        self.mode = mode
        self.action = action
        super().__init__(message or f"cannot {action.value} while {mode.value}")


class FormClosed(InvalidTransition):
    """Form input was given while the slot is not showing a form."""

    def __init__(self, mode: Mode):
        super().__init__(mode, None, f"cannot edit the form while {mode.value}")


class AppointmentSlot:
    """Display/editing state for one appointment."""

    def __init__(
        self,
        id: int,
        time: str,
        interview: Optional[Interview] = None,
        interviewers: Iterable[Interviewer] = (),
        book: Optional[BookFn] = None,
        cancel: Optional[CancelFn] = None,
    ):
        self.id = id
        self.time = time
        self.interview = interview
        self.interviewers: List[Interviewer] = list(interviewers)
        self._book = book
        self._cancel = cancel
        self.mode = Mode.SHOW if interview else Mode.EMPTY
        self.student = interview.student if interview else ""
        self.interviewer: Optional[int] = interview.interviewer if interview else None

    def __repr__(self) -> str:
        return f"AppointmentSlot(id={self.id!r}, time={self.time!r}, mode={self.mode.value})"

    @property
    def interactive(self) -> bool:
        return self.mode is not Mode.DELETING

    @property
    def can_save(self) -> bool:
        return bool(self.student) and self.interviewer is not None

    def _require(self, action: Action) -> None:
        if self.mode not in ALLOWED[action]:
            raise InvalidTransition(self.mode, action)

    def _clear_draft(self) -> None:
        self.student = ""
        self.interviewer = None

    # Form input

    def set_student(self, name: str) -> None:
        if self.mode not in FORM_MODES:
            raise FormClosed(self.mode)
        self.student = name

    def select_interviewer(self, interviewer_id: Optional[int]) -> None:
        if self.mode not in FORM_MODES:
            raise FormClosed(self.mode)
        self.interviewer = interviewer_id

    # Transitions

    def add(self) -> None:
        self._require(Action.ADD)
        self.mode = Mode.CREATE

    def edit(self) -> None:
        self._require(Action.EDIT)
        self.student = self.interview.student
        self.interviewer = self.interview.interviewer
        self.mode = Mode.EDIT

    def cancel(self) -> None:
        self._require(Action.CANCEL)
        if self.mode is Mode.CONFIRM:
            self.mode = Mode.SHOW
            return
        self._clear_draft()
        self.mode = Mode.SHOW if self.interview else Mode.EMPTY

    def save(self) -> bool:
        """
        Submit the draft. Returns False, without a request or a mode change,
        unless both a student name and an interviewer are set.
        """
        self._require(Action.SAVE)
        if not self.can_save:
            return False
        interview = Interview(student=self.student, interviewer=self.interviewer)
        try:
            self._book(self.id, interview)
        except SchedulerClientError as e:
            logger.debug("Save failed for appointment %s: %s", self.id, e)
            self.mode = Mode.ERROR_SAVE
            return True
        self.interview = interview
        self.mode = Mode.SHOW
        return True

    def delete(self) -> None:
        self._require(Action.DELETE)
        self.mode = Mode.CONFIRM

    def confirm(self) -> None:
        self._require(Action.CONFIRM)
        self.mode = Mode.DELETING
        try:
            self._cancel(self.id)
        except SchedulerClientError as e:
            logger.debug("Cancel failed for appointment %s: %s", self.id, e)
            self.mode = Mode.ERROR_DELETE
            return
        self.interview = None
        self._clear_draft()
        self.mode = Mode.EMPTY

    def close(self) -> None:
        self._require(Action.CLOSE)
        self.mode = Mode.CREATE if self.mode is Mode.ERROR_SAVE else Mode.SHOW

    def dispatch(self, action: Action):
        """Apply an action by name."""
        handlers = {
            Action.ADD: self.add,
            Action.EDIT: self.edit,
            Action.SAVE: self.save,
            Action.CANCEL: self.cancel,
            Action.DELETE: self.delete,
            Action.CONFIRM: self.confirm,
            Action.CLOSE: self.close,
        }
        return handlers[Action(action)]()

    # Views

    def interviewer_name(self, interviewer_id: Optional[int]) -> Optional[str]:
        for interviewer in self.interviewers:
            if interviewer.id == interviewer_id:
                return interviewer.name
        return None

    def render(self) -> str:
        """One-line text view of the current mode."""
        if self.mode is Mode.EMPTY:
            body = "+ Add"
        elif self.mode is Mode.SHOW:
            name = self.interviewer_name(self.interview.interviewer)
            body = self.interview.student + (f" (Interviewer: {name})" if name else "")
        elif self.mode in FORM_MODES:
            name = self.interviewer_name(self.interviewer) or "-"
            body = f"[{self.mode.value.lower()}] student={self.student!r} interviewer={name}"
        else:
            body = MESSAGES[self.mode]
        return f"{self.time:>5}  {body}"
