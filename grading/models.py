from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from core.models import School
# Create your models here.

class GradeScale(models.Model):
    """Une ligne du barème d'une école (lettre <-> plage de pourcentages)."""
    school = models.ForeignKey(School, on_delete=models.CASCADE, related_name="grade_scales")
    letter_grade = models.CharField(max_length=10)  # A, B+, C, ...
    min_percentage = models.DecimalField(max_digits=5, decimal_places=2,
                                         validators=[MinValueValidator(0), MaxValueValidator(100)])  # inclusif
    max_percentage = models.DecimalField(max_digits=5, decimal_places=2,
                                         validators=[MinValueValidator(0), MaxValueValidator(100)])  # inclusif
    grade_points = models.DecimalField(max_digits=4, decimal_places=2, default=0,
                                       validators=[MinValueValidator(0)])
    quality = models.CharField(max_length=100, blank=True)  # Excellent, Good, ...
    sort_order = models.IntegerField(default=0)
    time_created = models.DateTimeField()
    time_modified = models.DateTimeField()

    class Meta:
        ordering = ["sort_order", "id"]

    def clean(self):
        if (self.min_percentage is not None and self.max_percentage is not None
                and self.min_percentage > self.max_percentage):
            raise ValidationError({"min_percentage": "Minimum must be less than or equal to maximum."})

    def __str__(self):
        return f"{self.letter_grade}: {self.min_percentage}-{self.max_percentage}"
