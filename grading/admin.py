from django.contrib import admin
from django.utils import timezone
from .models import GradeScale
# Register your models here.

@admin.register(GradeScale)
class GradeScaleAdmin(admin.ModelAdmin):
    list_display = ("school", "letter_grade", "min_percentage", "max_percentage", "grade_points", "quality", "sort_order")
    list_filter = ("school",)
    search_fields = ("school__name", "letter_grade", "quality")
    readonly_fields = ("time_created", "time_modified")

    def save_model(self, request, obj, form, change):
        now = timezone.now()
        if not change:
            obj.time_created = now
        obj.time_modified = now
        super().save_model(request, obj, form, change)
