from django.db import migrations
from django.utils import timezone

from grading.defaults import DEFAULT_BANDS

def seed(apps, schema_editor):
    School = apps.get_model("core", "School")
    GradeScale = apps.get_model("grading", "GradeScale")

    now = timezone.now()
    for school in School.objects.all():
        if GradeScale.objects.filter(school=school).exists():
            continue
        for i, (letter, lo, hi, points, quality) in enumerate(DEFAULT_BANDS, start=1):
            GradeScale.objects.create(
                school=school, letter_grade=letter, min_percentage=lo, max_percentage=hi,
                grade_points=points, quality=quality, sort_order=i,
                time_created=now, time_modified=now,
            )

def unseed(apps, schema_editor):
    GradeScale = apps.get_model("grading", "GradeScale")
    seeded = [
        (letter, lo, hi, points, quality, i)
        for i, (letter, lo, hi, points, quality) in enumerate(DEFAULT_BANDS, start=1)
    ]
    # une école n'est vidée que si son barème est exactement celui semé
    for school_id in GradeScale.objects.order_by().values_list("school_id", flat=True).distinct():
        rows = GradeScale.objects.filter(school_id=school_id)
        current = sorted(rows.values_list(
            "letter_grade", "min_percentage", "max_percentage", "grade_points", "quality", "sort_order",
        ), key=lambda row: row[-1])
        if current == seeded:
            rows.delete()

class Migration(migrations.Migration):

    dependencies = [
        ("grading", "0001_initial"),
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(seed, reverse_code=unseed),
    ]
