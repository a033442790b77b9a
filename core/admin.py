from django.contrib import admin, messages
from django.utils import timezone
from .models import School
from grading.models import GradeScale
from grading.services import seed_default_scale
# Register your models here.
class GradeScaleInline(admin.TabularInline):
    model = GradeScale
    extra = 0
    fields = ("letter_grade", "min_percentage", "max_percentage", "grade_points", "quality", "sort_order")

@admin.register(School)
class SchoolAdmin(admin.ModelAdmin):
    list_display = ("name", "phone", "website")
    search_fields = ("name",)
    inlines = [GradeScaleInline]
    actions = ["seed_grade_scale"]

    def save_formset(self, request, form, formset, change):
        now = timezone.now()
        for obj in formset.save(commit=False):
            if obj.pk is None:
                obj.time_created = now
            obj.time_modified = now
            obj.save()
        for obj in formset.deleted_objects:
            obj.delete()

    @admin.action(description="Seed default A-F grade scale")
    def seed_grade_scale(self, request, queryset):
        created = 0
        for school in queryset:
            created += len(seed_default_scale(school))
        self.message_user(request, f"{created} grade scale row(s) created.", messages.SUCCESS)
