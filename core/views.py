from rest_framework import viewsets, permissions
from django_filters.rest_framework import DjangoFilterBackend
from .models import School
from .serializers import SchoolSerializer
# Create your views here.

class SchoolViewSet(viewsets.ReadOnlyModelViewSet):
    """Les écoles sont gérées dans l'admin; l'API ne fait que les lister."""
    queryset = School.objects.all()
    serializer_class = SchoolSerializer
    permission_classes = [permissions.IsAuthenticated]
    filter_backends = [DjangoFilterBackend]
    filterset_fields = ["name"]
