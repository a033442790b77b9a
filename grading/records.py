from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional


@dataclass(frozen=True)
class SchoolRecord:
    id: int
    name: str


@dataclass(frozen=True)
class GradeScaleRecord:
    school_id: int
    letter_grade: str
    min_percentage: Decimal
    max_percentage: Decimal
    grade_points: Decimal = Decimal("0")
    quality: str = ""
    sort_order: int = 0
    time_created: Optional[datetime] = None
    time_modified: Optional[datetime] = None
    id: Optional[int] = field(default=None)

    EDITABLE_FIELDS = ("letter_grade", "min_percentage", "max_percentage",
                       "grade_points", "quality", "sort_order")

    @property
    def label(self):
        return self.letter_grade

    @property
    def percentage_range(self):
        lo, hi = (Decimal(str(v)).quantize(Decimal("1"), rounding=ROUND_HALF_UP) for v in (self.min_percentage, self.max_percentage))
        return f"{lo}-{hi}%"

    def form_values(self):
        return {name: getattr(self, name) for name in self.EDITABLE_FIELDS}

    def with_values(self, **values):
        return replace(self, **values)
