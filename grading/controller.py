"""Grade scale management: list/add/edit/delete rows scoped by school.

Each request is classified on its own from ``action`` and ``confirm``; there
is no state carried between requests. Collaborators are injected:

- ``store``: ``get_school``, ``list_schools``, ``get_scale``, ``list_scales``,
  ``insert_scale``, ``update_scale``, ``delete_scale`` (getters raise
  ``NotFoundError`` when the row is missing)
- ``session``: ``current_token()``, ``validate_token(candidate)``
- ``renderer``: ``process_form(initial)``, ``render_list``, ``render_form``,
  ``render_confirm``

A handled request yields either a ``Page`` to show or a ``Redirect``. Every
successful write ends in a ``Redirect`` so a refresh never resubmits.
"""
import logging
from dataclasses import dataclass
from urllib.parse import urlencode

from django.utils import timezone

from .exceptions import ValidationError, AuthorizationError
from .records import GradeScaleRecord

logger = logging.getLogger(__name__)

LIST = "LIST"
ADD = "ADD"
EDIT = "EDIT"
DELETE_CONFIRM = "DELETE_CONFIRM"
DELETE_EXECUTE = "DELETE_EXECUTE"

ACTIONS = ("", "add", "edit", "delete")

MSG_ADDED = "Grade scale added successfully."
MSG_UPDATED = "Grade scale updated successfully."
MSG_DELETED = "Grade scale deleted successfully."
MSG_SCHOOL_REQUIRED = "A school is required to add a grade scale."
MSG_ID_REQUIRED = "A grade scale id is required."


def _int_param(data, name):
    raw = data.get(name) or 0
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid value for '{name}': {raw!r}")


def _bool_param(data, name):
    return str(data.get(name) or "").strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class RequestParams:
    action: str = ""
    id: int = 0
    schoolid: int = 0
    confirm: bool = False
    sesskey: str = ""

    @classmethod
    def parse(cls, data):
        """Build params from a mapping (QueryDict or dict)."""
        action = (data.get("action") or "").strip().lower()
        if action not in ACTIONS:
            raise ValidationError(f"Unknown action: {action!r}")
        return cls(
            action=action,
            id=_int_param(data, "id"),
            schoolid=_int_param(data, "schoolid"),
            confirm=_bool_param(data, "confirm"),
            sesskey=data.get("sesskey") or "",
        )


def classify(params: RequestParams) -> str:
    if params.action == "add":
        return ADD
    if params.action == "edit":
        return EDIT
    if params.action == "delete":
        return DELETE_EXECUTE if params.confirm else DELETE_CONFIRM
    return LIST


@dataclass
class Page:
    content: str


@dataclass
class Redirect:
    url: str
    message: str = ""


class ScopedEntityController:

    def __init__(self, store, session, renderer, base_url, clock=timezone.now):
        self.store = store
        self.session = session
        self.renderer = renderer
        self.base_url = base_url
        self.clock = clock

    def url(self, **params):
        params = {k: v for k, v in params.items() if v not in (None, "", 0)}
        if not params:
            return self.base_url
        return f"{self.base_url}?{urlencode(params)}"

    def list_url(self, schoolid):
        return self.url(schoolid=schoolid)

    def handle(self, params: RequestParams):
        state = classify(params)
        logger.debug("grade scale request %s (id=%s, schoolid=%s)", state, params.id, params.schoolid)
        if state == ADD:
            return self.add(params)
        if state == EDIT:
            return self.edit(params)
        if state == DELETE_CONFIRM:
            return self.delete_confirm(params)
        if state == DELETE_EXECUTE:
            return self.delete_execute(params)
        return self.list(params.schoolid)

    def require_token(self, params):
        if not self.session.validate_token(params.sesskey):
            raise AuthorizationError("Invalid or missing session key.")

    # --- LIST ---

    def list(self, schoolid=0):
        schools = self.store.list_schools()
        if not schools:
            return Page(self.renderer.render_list(picker=[], no_schools=True))

        picker = [
            {"school": s, "url": self.list_url(s.id), "selected": s.id == schoolid}
            for s in schools
        ]
        if not schoolid:
            return Page(self.renderer.render_list(picker=picker))

        school = self.store.get_school(schoolid)
        token = self.session.current_token()
        rows = [
            {
                "scale": scale,
                "edit_url": self.url(action="edit", id=scale.id, schoolid=school.id),
                "delete_url": self.url(action="delete", id=scale.id, schoolid=school.id, sesskey=token),
            }
            for scale in self.store.list_scales(school.id)
        ]
        return Page(self.renderer.render_list(
            picker=picker,
            school=school,
            rows=rows,
            add_url=self.url(action="add", schoolid=school.id),
        ))

    # --- ADD / EDIT ---

    def add(self, params):
        if not params.schoolid and not params.id:
            raise ValidationError(MSG_SCHOOL_REQUIRED)
        if params.id:
            # an id on "add" means the row already exists: edit it instead
            return self.edit(params)
        school = self.store.get_school(params.schoolid)
        return self._process_form(params, school, existing=None)

    def edit(self, params):
        if not params.id:
            raise ValidationError(MSG_ID_REQUIRED)
        existing = self.store.get_scale(params.id)
        school = self.store.get_school(existing.school_id)
        return self._process_form(params, school, existing=existing)

    def _process_form(self, params, school, existing):
        initial = {"schoolid": school.id, "sesskey": self.session.current_token()}
        if existing is not None:
            initial.update(existing.form_values())
        submission = self.renderer.process_form(initial)

        if submission.cancelled:
            return Redirect(self.list_url(school.id))

        if submission.submitted:
            self.require_token(params)
            now = self.clock()
            if existing is not None:
                record = existing.with_values(time_modified=now, **submission.data)
                self.store.update_scale(record)
                return Redirect(self.list_url(school.id), MSG_UPDATED)
            record = self._new_record(school.id, submission.data, now)
            self.store.insert_scale(record)
            return Redirect(self.list_url(school.id), MSG_ADDED)

        editing = existing is not None
        action_url = self.url(action="edit" if editing else "add",
                              id=existing.id if editing else 0,
                              schoolid=school.id)
        return Page(self.renderer.render_form(
            school=school,
            form=submission.form,
            action_url=action_url,
            editing=editing,
        ))

    def _new_record(self, school_id, data, now):
        return GradeScaleRecord(school_id=school_id, time_created=now, time_modified=now, **data)

    # --- DELETE ---

    def delete_confirm(self, params):
        if not params.id:
            raise ValidationError(MSG_ID_REQUIRED)
        self.require_token(params)
        scale = self.store.get_scale(params.id)
        return Page(self.renderer.render_confirm(
            message=f'Are you sure you want to delete the grade scale "{scale.label}"? This action cannot be undone.',
            confirm_url=self.url(action="delete", id=scale.id, schoolid=scale.school_id,
                                 confirm=1, sesskey=self.session.current_token()),
            cancel_url=self.list_url(scale.school_id),
        ))

    def delete_execute(self, params):
        if not params.id:
            raise ValidationError(MSG_ID_REQUIRED)
        self.require_token(params)
        self.store.delete_scale(params.id)
        return Redirect(self.list_url(params.schoolid), MSG_DELETED)
