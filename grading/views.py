import logging

from django.contrib import messages
from django.contrib.auth.mixins import LoginRequiredMixin, UserPassesTestMixin
from django.http import HttpResponse, HttpResponseRedirect
from django.urls import reverse
from django.views import View

from core.permissions import can_manage_grading
from .controller import ScopedEntityController, RequestParams, Redirect
from .exceptions import GradingError
from .rendering import TemplateRenderer
from .session import SessionTokenGuard
from .storage import GradeScaleStore

logger = logging.getLogger(__name__)


class ManageGradeScaleView(LoginRequiredMixin, UserPassesTestMixin, View):
    """
    Page de gestion des barèmes:
    GET|POST /grading/manage/?action=&id=&schoolid=&confirm=&sesskey=
    """

    def test_func(self):
        return can_manage_grading(self.request.user)

    def get(self, request):
        return self.dispatch_action(request)

    def post(self, request):
        return self.dispatch_action(request)

    def dispatch_action(self, request):
        renderer = TemplateRenderer(request)
        controller = ScopedEntityController(
            store=GradeScaleStore(),
            session=SessionTokenGuard(request.session),
            renderer=renderer,
            base_url=reverse("manage-gradescale"),
        )
        data = request.GET.copy()
        if request.POST.get("sesskey"):
            data["sesskey"] = request.POST["sesskey"]
        try:
            result = controller.handle(RequestParams.parse(data))
        except GradingError as exc:
            logger.warning("Grade scale request failed (%s): %s", exc.status_code, exc.message)
            return HttpResponse(renderer.render_error(exc), status=exc.status_code)

        if isinstance(result, Redirect):
            if result.message:
                messages.success(request, result.message)
            return HttpResponseRedirect(result.url)
        return HttpResponse(result.content)
