from decimal import Decimal, ROUND_HALF_UP

from django.db import transaction
from django.utils import timezone

from grading.defaults import DEFAULT_BANDS
from grading.models import GradeScale

def _q(x):
    return Decimal(str(x)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)

def grade_for_percentage(school_id, percentage):
    """Retourne la première ligne du barème de l'école contenant le pourcentage (ou None)."""
    pct = _q(percentage)
    return (GradeScale.objects
            .filter(school_id=school_id, min_percentage__lte=pct, max_percentage__gte=pct)
            .order_by("sort_order", "id")
            .first())

@transaction.atomic
def seed_default_scale(school):
    """
    Crée le barème A-F par défaut si l'école n'en a pas encore.
    Retourne la liste des lignes créées (vide si rien à faire).
    """
    if GradeScale.objects.filter(school=school).exists():
        return []
    now = timezone.now()
    return [
        GradeScale.objects.create(
            school=school, letter_grade=letter, min_percentage=lo, max_percentage=hi,
            grade_points=points, quality=quality, sort_order=i,
            time_created=now, time_modified=now,
        )
        for i, (letter, lo, hi, points, quality) in enumerate(DEFAULT_BANDS, start=1)
    ]
