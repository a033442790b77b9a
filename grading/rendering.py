from dataclasses import dataclass
from typing import Any, Optional

from django.template.loader import render_to_string

from .forms import GradeScaleForm


@dataclass
class FormSubmission:
    """Result of processing the grade scale form for one request."""
    CANCELLED = "cancelled"
    SUBMITTED = "submitted"
    DISPLAY = "display"

    outcome: str
    data: Optional[dict] = None
    form: Any = None

    @property
    def cancelled(self):
        return self.outcome == self.CANCELLED

    @property
    def submitted(self):
        return self.outcome == self.SUBMITTED


class TemplateRenderer:
    """Renders the management pages with Django templates for one request."""

    def __init__(self, request):
        self.request = request

    def process_form(self, initial: dict) -> FormSubmission:
        if self.request.method != "POST":
            return FormSubmission(FormSubmission.DISPLAY, form=GradeScaleForm(initial=initial))
        if "cancel" in self.request.POST:
            return FormSubmission(FormSubmission.CANCELLED)
        form = GradeScaleForm(self.request.POST, initial=initial)
        if form.is_valid():
            data = {name: value for name, value in form.cleaned_data.items() if name not in ("schoolid", "sesskey")}
            return FormSubmission(FormSubmission.SUBMITTED, data=data, form=form)
        # invalid: redisplay with the submitted values and the errors
        return FormSubmission(FormSubmission.DISPLAY, form=form)

    def _render(self, template, ctx):
        return render_to_string(f"grading/{template}", ctx, request=self.request)

    def render_list(self, *, picker, school=None, rows=None, add_url=None, no_schools=False):
        return self._render("list.html", {
            "picker": picker,
            "school": school,
            "rows": rows or [],
            "add_url": add_url,
            "no_schools": no_schools,
        })

    def render_form(self, *, school, form, action_url, editing):
        return self._render("form.html", {
            "school": school,
            "form": form,
            "action_url": action_url,
            "editing": editing,
        })

    def render_confirm(self, *, message, confirm_url, cancel_url):
        return self._render("confirm.html", {
            "message": message,
            "confirm_url": confirm_url,
            "cancel_url": cancel_url,
        })

    def render_error(self, error):
        return self._render("error.html", {"error": error})
