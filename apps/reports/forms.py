from django import forms

from config.constants import COUNSELOR_NAMES, as_choices
from core.forms import style_fields
from .services import ReportError, ReportService


class ReportForm(forms.Form):
    counselor = forms.ChoiceField(choices=[('', 'Select a counselor')] + as_choices(COUNSELOR_NAMES), required=False)
    start_date = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}))
    end_date = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}))

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        # Counselors only report on themselves.
        if user is not None and not user.is_admin:
            self.fields['counselor'].choices = as_choices([user.counselor_name]) if user.counselor_name else []
            self.fields['counselor'].initial = user.counselor_name
        style_fields(self)

    def clean(self):
        cleaned = super().clean()
        try:
            ReportService.validate(cleaned.get('counselor'), cleaned.get('start_date'), cleaned.get('end_date'))
        except ReportError as e:
            raise forms.ValidationError(str(e))
        return cleaned
