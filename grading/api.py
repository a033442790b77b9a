# grading/api.py
import logging

from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import viewsets, status
from rest_framework.decorators import action
from rest_framework.response import Response

from core.permissions import IsRegistrarOrAdmin
from .models import GradeScale
from .serializers import GradeScaleSerializer, GradeLookupSerializer
from .services import grade_for_percentage

logger = logging.getLogger(__name__)

class GradeScaleViewSet(viewsets.ModelViewSet):
    queryset = GradeScale.objects.select_related("school").order_by("sort_order", "id")
    serializer_class = GradeScaleSerializer
    permission_classes = [IsRegistrarOrAdmin]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["school"]  # GET /api/grading/scales/?school=<id>

    def perform_create(self, serializer):
        now = timezone.now()
        scale = serializer.save(time_created=now, time_modified=now)
        logger.info("API created grade scale %s for school %s", scale.id, scale.school_id)

    def perform_update(self, serializer):
        scale = serializer.save(time_modified=timezone.now())
        logger.info("API updated grade scale %s", scale.id)

    def perform_destroy(self, instance):
        logger.info("API deleted grade scale %s", instance.id)
        instance.delete()

    @action(detail=False, methods=["get"], url_path="lookup")
    def lookup(self, request):
        """GET /api/grading/scales/lookup/?school=<id>&percentage=<pct> -> ligne du barème (404 si aucune)."""
        ser = GradeLookupSerializer(data=request.query_params)
        ser.is_valid(raise_exception=True)
        scale = grade_for_percentage(ser.validated_data["school"], ser.validated_data["percentage"])
        if scale is None:
            return Response({"detail": "No matching grade scale."}, status=status.HTTP_404_NOT_FOUND)
        return Response(GradeScaleSerializer(scale).data)
