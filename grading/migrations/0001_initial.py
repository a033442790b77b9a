import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("core", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="GradeScale",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("letter_grade", models.CharField(max_length=10)),
                ("min_percentage", models.DecimalField(decimal_places=2, max_digits=5, validators=[
                    django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ("max_percentage", models.DecimalField(decimal_places=2, max_digits=5, validators=[
                    django.core.validators.MinValueValidator(0), django.core.validators.MaxValueValidator(100)])),
                ("grade_points", models.DecimalField(decimal_places=2, default=0, max_digits=4, validators=[
                    django.core.validators.MinValueValidator(0)])),
                ("quality", models.CharField(blank=True, max_length=100)),
                ("sort_order", models.IntegerField(default=0)),
                ("time_created", models.DateTimeField()),
                ("time_modified", models.DateTimeField()),
                ("school", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE,
                                             related_name="grade_scales", to="core.school")),
            ],
            options={
                "ordering": ["sort_order", "id"],
            },
        ),
    ]
