import re

from django import forms

from config.constants import (
    COUNSELOR_NAMES, EDUCATION_LEVELS, ENGLISH_TESTS, MAX_CSV_SIZE, MAX_CSV_SIZE_MB,
    MSG_CSV_INVALID_TYPE, MSG_CSV_TOO_LARGE, PHONE_PATTERN, STUDY_DESTINATIONS, as_choices,
)
from core.forms import style_fields
from .models import Student
from .services import ALL

BLANK = [('', '---------')]


def _with_current(choices, current):
    """Keep a legacy value selectable when editing an older record."""
    if current and current not in {value for value, _ in choices}:
        return choices + [(current, current)]
    return choices


class StudentForm(forms.ModelForm):
    assigned_to = forms.ChoiceField(choices=as_choices(COUNSELOR_NAMES))
    last_completed_education = forms.ChoiceField(choices=BLANK + as_choices(EDUCATION_LEVELS), required=False)
    english_proficiency_test = forms.ChoiceField(choices=BLANK + as_choices(ENGLISH_TESTS), required=False)
    preferred_study_destination = forms.ChoiceField(choices=BLANK + as_choices(STUDY_DESTINATIONS), required=False)

    class Meta:
        model = Student
        fields = [
            'full_name', 'email', 'mobile_number', 'emergency_contact',
            'visa_status', 'visa_status_update_date',
            'service_fee_status', 'service_fee_paid_date',
            'assigned_to', 'inquiry_type', 'appointment_date',
            'last_completed_education', 'english_proficiency_test',
            'preferred_study_destination', 'college_university_name',
            'additional_notes',
        ]
        widgets = {
            'visa_status_update_date': forms.DateInput(attrs={'type': 'date'}),
            'service_fee_paid_date': forms.DateInput(attrs={'type': 'date'}),
            'appointment_date': forms.DateTimeInput(attrs={'type': 'datetime-local'}, format='%Y-%m-%dT%H:%M'),
            'additional_notes': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, user=None, **kwargs):
        super().__init__(*args, **kwargs)
        for name in ('assigned_to', 'last_completed_education', 'english_proficiency_test', 'preferred_study_destination'):
            field = self.fields[name]
            field.choices = _with_current(list(field.choices), getattr(self.instance, name, ''))

        # Counselors keep their students; only admins reassign.
        if user is not None and not user.is_admin:
            self.fields['assigned_to'].disabled = True
            if not self.instance.pk:
                self.initial['assigned_to'] = user.counselor_name
        style_fields(self)

    def clean_mobile_number(self):
        number = self.cleaned_data['mobile_number'].strip()
        if number and not re.match(PHONE_PATTERN, number):
            raise forms.ValidationError("Enter a valid phone number.")
        return number


class StudentFilterForm(forms.Form):
    visa_status = forms.ChoiceField(choices=[(ALL, 'All visa statuses')] + Student.VisaStatus.choices, required=False)
    service_fee_status = forms.ChoiceField(choices=[(ALL, 'All fee statuses')] + Student.FeeStatus.choices, required=False)
    assigned_to = forms.ChoiceField(choices=[(ALL, 'All counselors')] + as_choices(COUNSELOR_NAMES), required=False)

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)

    def filters(self):
        if not self.is_valid():
            return {}
        return {name: value for name, value in self.cleaned_data.items() if value and value != ALL}


class StudentCSVUploadForm(forms.Form):
    csv_file = forms.FileField(
        label="Upload CSV File",
        help_text="Google Forms export with columns: Timestamp, Email Address, Full Name, Mobile Number, "
                  "Last Completed Education, English Proficiency Test, Preferred Study Destination, "
                  "Additional Notes / Specific Questions",
    )

    def clean_csv_file(self):
        csv_file = self.cleaned_data['csv_file']
        if not csv_file.name.lower().endswith('.csv'):
            raise forms.ValidationError(MSG_CSV_INVALID_TYPE)
        if csv_file.size > MAX_CSV_SIZE:
            raise forms.ValidationError(MSG_CSV_TOO_LARGE.format(max_mb=MAX_CSV_SIZE_MB))
        return csv_file
