"""
Client-side state for the student manager page.

``StudentManager`` holds the fetched list, the in-progress form and the
request status. Every user action is a method; UI code only reads the
fields and calls the methods, so the same container backs any front end.

Status moves ``idle -> loading -> success | error``. While ``loading``
the manager is busy and further actions are ignored, so at most one
request is in flight.
"""
import logging
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

import httpx

from app.client.api import StudentAPI

logger = logging.getLogger(__name__)

GENDER_CHOICES = ["Male", "Female", "Other", "Prefer not to say"]

FETCH_ERROR = "Failed to fetch students. Please try again."
ADD_ERROR = "Failed to add student. Please try again."
UPDATE_ERROR = "Failed to update student. Please try again."
DELETE_ERROR = "Failed to delete student. Please try again."


class Status(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class StudentForm:
    name: str = ""
    email: str = ""
    age: str = ""
    gender: str = ""

    @classmethod
    def from_student(cls, student: Dict[str, Any]) -> "StudentForm":
        return cls(
            name=student["name"],
            email=student["email"],
            age=str(student["age"]),
            gender=student["gender"],
        )

    def to_payload(self) -> Dict[str, str]:
        return asdict(self)


@dataclass
class StudentManager:
    api: StudentAPI
    students: List[Dict[str, Any]] = field(default_factory=list)
    form: StudentForm = field(default_factory=StudentForm)
    edit_id: Optional[int] = None
    pending_delete_id: Optional[int] = None
    status: Status = Status.IDLE
    error: Optional[str] = None
    message: Optional[str] = None

    @property
    def busy(self) -> bool:
        return self.status == Status.LOADING

    @property
    def editing(self) -> bool:
        return self.edit_id is not None

    @property
    def form_title(self) -> str:
        return "Edit Student" if self.editing else "Add New Student"

    @property
    def submit_label(self) -> str:
        if self.busy:
            return "Processing..."
        return "Update Student" if self.editing else "Add Student"

    def _run(self, request: Callable[[], Any], error_message: str, progress: str) -> bool:
        """Run one request through loading -> success/error. Returns True on success."""
        if self.busy:
            logger.debug("Ignoring action while a request is in flight")
            return False

        self.status = Status.LOADING
        self.error = None
        self.message = progress
        try:
            request()
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"{error_message} ({e})")
            self.status = Status.ERROR
            self.error = error_message
            return False
        finally:
            self.message = None

        self.status = Status.SUCCESS
        return True

    def _reset_form(self):
        self.form = StudentForm()
        self.edit_id = None

    def load(self) -> bool:
        """Fetch the full student list."""
        def request():
            self.students = self.api.list_students()

        return self._run(request, FETCH_ERROR, "Loading students...")

    def submit(self) -> bool:
        """Create, or update the bound record in edit mode, then reload the list."""
        payload = self.form.to_payload()
        if self.editing:
            student_id = self.edit_id
            ok = self._run(
                lambda: self.api.update_student(student_id, payload),
                UPDATE_ERROR,
                "Updating student...",
            )
        else:
            ok = self._run(
                lambda: self.api.create_student(payload),
                ADD_ERROR,
                "Adding student...",
            )

        if not ok:
            return False
        self._reset_form()
        return self.load()

    def edit(self, student: Dict[str, Any]):
        """Copy a record into the form and switch to edit mode."""
        if self.busy:
            return
        self.form = StudentForm.from_student(student)
        self.edit_id = student["id"]

    def cancel(self):
        """Leave edit mode without sending anything."""
        self._reset_form()

    def request_delete(self, student_id: int):
        if self.busy:
            return
        self.pending_delete_id = student_id

    def cancel_delete(self):
        self.pending_delete_id = None

    def confirm_delete(self) -> bool:
        """Delete the record awaiting confirmation, then reload the list."""
        student_id = self.pending_delete_id
        if student_id is None:
            return False
        self.pending_delete_id = None

        ok = self._run(
            lambda: self.api.delete_student(student_id),
            DELETE_ERROR,
            "Deleting student...",
        )
        if not ok:
            return False
        return self.load()
