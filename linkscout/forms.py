"""Forms for the link scout app.

The endpoints accept a handful of optional tuning parameters; these forms
validate them before they reach the miner.
"""

from __future__ import annotations

from django import forms


class LinkSuggestionOptionsForm(forms.Form):
    """Optional budgets for an on-demand mining run."""

    max_per_blog = forms.IntegerField(
        required=False,
        min_value=1,
        max_value=25,
        label='Suggestions per blog page',
        help_text='The maximum number of suggestions per source page (default 3).',
    )
    max_per_project = forms.IntegerField(
        required=False,
        min_value=1,
        max_value=200,
        label='Suggestions per run',
        help_text='The maximum number of suggestions created in one run (default 40).',
    )

    def clean(self) -> dict[str, int | None]:  # type: ignore[override]
        cleaned_data = super().clean()
        per_blog = cleaned_data.get('max_per_blog')
        per_project = cleaned_data.get('max_per_project')
        if per_blog and per_project and per_blog > per_project:
            raise forms.ValidationError(
                'Suggestions per blog page cannot exceed suggestions per run.'
            )
        return cleaned_data
