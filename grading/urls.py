from django.urls import path
from rest_framework.routers import DefaultRouter
from .api import GradeScaleViewSet
from .views import ManageGradeScaleView

router = DefaultRouter()
router.register(r"api/grading/scales", GradeScaleViewSet, basename="grade-scales")

urlpatterns = [
    path("grading/manage/", ManageGradeScaleView.as_view(), name="manage-gradescale"),
] + router.urls
