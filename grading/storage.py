"""Django ORM storage for schools and grade scale rows.

Model instances are converted to records here, once, so the controller only
ever sees ``SchoolRecord`` / ``GradeScaleRecord``.
"""
import logging

from core.models import School
from .exceptions import NotFoundError
from .models import GradeScale
from .records import SchoolRecord, GradeScaleRecord

logger = logging.getLogger(__name__)


def _school_record(school):
    return SchoolRecord(id=school.id, name=school.name)


def _scale_record(scale):
    return GradeScaleRecord(
        id=scale.id,
        school_id=scale.school_id,
        letter_grade=scale.letter_grade,
        min_percentage=scale.min_percentage,
        max_percentage=scale.max_percentage,
        grade_points=scale.grade_points,
        quality=scale.quality,
        sort_order=scale.sort_order,
        time_created=scale.time_created,
        time_modified=scale.time_modified,
    )


class GradeScaleStore:
    """Lookups have MUST_EXIST semantics: a missing row raises NotFoundError."""

    def get_school(self, school_id: int) -> SchoolRecord:
        try:
            return _school_record(School.objects.only("id", "name").get(id=school_id))
        except School.DoesNotExist:
            raise NotFoundError(f"School {school_id} not found.")

    def list_schools(self) -> list:
        return [_school_record(s) for s in School.objects.only("id", "name").order_by("name")]

    def get_scale(self, scale_id: int) -> GradeScaleRecord:
        try:
            return _scale_record(GradeScale.objects.get(id=scale_id))
        except GradeScale.DoesNotExist:
            raise NotFoundError(f"Grade scale {scale_id} not found.")

    def list_scales(self, school_id: int) -> list:
        qs = GradeScale.objects.filter(school_id=school_id).order_by("sort_order", "id")
        return [_scale_record(s) for s in qs]

    def insert_scale(self, record: GradeScaleRecord) -> int:
        values = record.form_values()
        scale = GradeScale.objects.create(
            school_id=record.school_id,
            time_created=record.time_created,
            time_modified=record.time_modified,
            **values,
        )
        logger.info("Inserted grade scale %s for school %s", scale.id, record.school_id)
        return scale.id

    def update_scale(self, record: GradeScaleRecord) -> None:
        # school_id is never part of the update: the owning school is immutable
        updated = GradeScale.objects.filter(id=record.id).update(
            time_modified=record.time_modified,
            **record.form_values(),
        )
        if not updated:
            raise NotFoundError(f"Grade scale {record.id} not found.")
        logger.info("Updated grade scale %s", record.id)

    def delete_scale(self, scale_id: int) -> None:
        deleted, _ = GradeScale.objects.filter(id=scale_id).delete()
        logger.info("Deleted grade scale %s (%d row(s))", scale_id, deleted)
