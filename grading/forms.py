from decimal import Decimal

from django import forms


class GradeScaleForm(forms.Form):
    """
    Saisie d'une ligne de barème (ajout ou modification).
    Les champs cachés schoolid/sesskey reviennent avec la soumission.
    """
    schoolid = forms.IntegerField(widget=forms.HiddenInput, required=False)
    sesskey = forms.CharField(widget=forms.HiddenInput, required=False)

    letter_grade = forms.CharField(label="Letter grade", max_length=10,
                                   widget=forms.TextInput(attrs={"size": 5}))
    min_percentage = forms.DecimalField(label="Minimum percentage", max_digits=5, decimal_places=2,
                                        min_value=Decimal("0"), max_value=Decimal("100"))
    max_percentage = forms.DecimalField(label="Maximum percentage", max_digits=5, decimal_places=2,
                                        min_value=Decimal("0"), max_value=Decimal("100"))
    grade_points = forms.DecimalField(label="Grade points", max_digits=4, decimal_places=2,
                                      min_value=Decimal("0"))
    quality = forms.CharField(label="Quality", max_length=100, required=False,
                              widget=forms.TextInput(attrs={"size": 30}))
    sort_order = forms.IntegerField(label="Sort order", required=False, initial=0)

    def clean_sort_order(self):
        value = self.cleaned_data.get("sort_order")
        return 0 if value is None else value

    def clean(self):
        cleaned = super().clean()
        lo = cleaned.get("min_percentage")
        hi = cleaned.get("max_percentage")
        if lo is not None and hi is not None and lo > hi:
            self.add_error("min_percentage", "Minimum must be less than or equal to maximum.")
        return cleaned
