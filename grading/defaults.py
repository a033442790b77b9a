from decimal import Decimal

# (lettre, min, max, points, qualité) - barème A-F standard
DEFAULT_BANDS = [
    ("A", Decimal("90"), Decimal("100"), Decimal("4.0"), "Excellent"),
    ("B", Decimal("80"), Decimal("89.99"), Decimal("3.0"), "Good"),
    ("C", Decimal("70"), Decimal("79.99"), Decimal("2.0"), "Satisfactory"),
    ("D", Decimal("60"), Decimal("69.99"), Decimal("1.0"), "Poor"),
    ("F", Decimal("0"), Decimal("59.99"), Decimal("0.0"), "Failing"),
]
