from rest_framework import serializers
from .models import GradeScale

class GradeScaleSerializer(serializers.ModelSerializer):
    class Meta:
        model = GradeScale
        fields = ["id", "school", "letter_grade", "min_percentage", "max_percentage",
                  "grade_points", "quality", "sort_order", "time_created", "time_modified"]
        read_only_fields = ["time_created", "time_modified"]

    def validate_letter_grade(self, value):
        if not value.strip():
            raise serializers.ValidationError("Letter grade cannot be empty.")
        return value.strip()

    def validate_school(self, value):
        # l'école propriétaire ne change jamais après la création
        if self.instance is not None and value.id != self.instance.school_id:
            raise serializers.ValidationError("The school of a grade scale cannot be changed.")
        return value

    def validate(self, data):
        lo = data.get("min_percentage", getattr(self.instance, "min_percentage", None))
        hi = data.get("max_percentage", getattr(self.instance, "max_percentage", None))
        if lo is not None and hi is not None and lo > hi:
            raise serializers.ValidationError(
                {"min_percentage": "Minimum must be less than or equal to maximum."}
            )
        return data


class GradeLookupSerializer(serializers.Serializer):
    school = serializers.IntegerField()
    percentage = serializers.DecimalField(max_digits=6, decimal_places=2,
                                          min_value=0, max_value=100)
