"""Forms for gallery interactions.

- a category filter for the gallery index,
- the customization controls of the threshold chart,
- the tap payload posted by time-sheet charts.
"""

from __future__ import annotations

from django import forms
from django.core.validators import RegexValidator

from analysis.sales import (
    DEFAULT_ABOVE_COLOR,
    DEFAULT_BELOW_COLOR,
    DEFAULT_THRESHOLD,
    THRESHOLD_MAX,
    THRESHOLD_MIN,
    ThresholdSettings,
)
from core.charting.configs import displayed_categories
from core.charting.schema import ChartCategory

_hex_color = RegexValidator(r"^#[0-9A-Fa-f]{6}\Z", "Enter a color as #RRGGBB.")


class GalleryFilterForm(forms.Form):
    """Optional category filter for the gallery index."""

    category = forms.ChoiceField(required=False, label="Filter")

    def __init__(self, *args, **kwargs) -> None:
        """Populate choices from the categories that have chart types."""

        super().__init__(*args, **kwargs)
        choices = [(category.value, category.label) for category in displayed_categories()]
        choices.append((ChartCategory.all.value, "Show all"))
        self.fields["category"].choices = choices

    def selected_category(self) -> ChartCategory:
        """Return the validated category, or `all` when missing or invalid."""

        if not self.is_valid():
            return ChartCategory.all
        value = self.cleaned_data.get("category") or ChartCategory.all.value
        return ChartCategory(value)


class ThresholdForm(forms.Form):
    """Customization controls for the threshold bar chart."""

    threshold = forms.FloatField(
        required=False,
        min_value=THRESHOLD_MIN,
        max_value=THRESHOLD_MAX,
        label="Threshold",
        widget=forms.NumberInput(attrs={"type": "range", "min": 0, "max": 275, "step": 1}),
    )
    below_color = forms.CharField(
        required=False,
        label="Below Threshold Color",
        validators=[_hex_color],
        widget=forms.TextInput(attrs={"type": "color"}),
    )
    above_color = forms.CharField(
        required=False,
        label="Above Threshold Color",
        validators=[_hex_color],
        widget=forms.TextInput(attrs={"type": "color"}),
    )

    def settings(self) -> ThresholdSettings:
        """Return ThresholdSettings from valid input, falling back to defaults.

        Must be called after `is_valid()` returned True.
        """

        data = self.cleaned_data
        threshold = data.get("threshold")
        return ThresholdSettings(
            threshold=DEFAULT_THRESHOLD if threshold is None else threshold,
            below_color=data.get("below_color") or DEFAULT_BELOW_COLOR,
            above_color=data.get("above_color") or DEFAULT_ABOVE_COLOR,
        )


class TapForm(forms.Form):
    """A tap on a time-sheet chart, in plot-area pixel coordinates."""

    pixel_x = forms.FloatField()
    plot_width = forms.FloatField()

    def clean_plot_width(self) -> float:
        """Reject non-positive plot widths."""

        value = self.cleaned_data["plot_width"]
        if value <= 0:
            raise forms.ValidationError("plot_width must be positive.")
        return value
