from django import forms
from django.core.validators import RegexValidator
from django.utils import timezone

from config.constants import (
    EDUCATION_LEVELS, ENGLISH_TESTS, NAME_MAX_LENGTH, NAME_MIN_LENGTH, NOTES_MAX_LENGTH,
    PHONE_MAX_LENGTH, PHONE_MIN_LENGTH, PHONE_PATTERN, STUDY_DESTINATIONS, as_choices,
)
from core.forms import style_fields
from .content import APPOINTMENT_SERVICES, APPOINTMENT_STAFF, APPOINTMENT_TIME_SLOTS
from .models import ClassBooking

BLANK = [('', 'Select...')]

phone_validator = RegexValidator(PHONE_PATTERN, "Invalid phone number format.")


def name_field():
    return forms.CharField(
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        error_messages={
            'min_length': "Name must be at least 2 characters.",
            'max_length': "Name must be at most 50 characters.",
        },
    )


def phone_field():
    return forms.CharField(
        min_length=PHONE_MIN_LENGTH,
        max_length=PHONE_MAX_LENGTH,
        validators=[phone_validator],
        error_messages={
            'min_length': "Phone number seems too short.",
            'max_length': "Phone number seems too long.",
        },
    )


class GeneralContactForm(forms.Form):
    OFFICE = 'office'
    REMOTE = 'remote'
    VISIT = 'visit'
    PHONE = 'phone'

    name = name_field()
    email = forms.EmailField(error_messages={'invalid': "Invalid email address."})
    phone = phone_field()
    last_completed_education = forms.ChoiceField(choices=BLANK + as_choices(EDUCATION_LEVELS))
    english_proficiency_test = forms.ChoiceField(choices=BLANK + as_choices(ENGLISH_TESTS))
    preferred_study_destination = forms.ChoiceField(choices=BLANK + as_choices(STUDY_DESTINATIONS))
    additional_notes = forms.CharField(
        max_length=NOTES_MAX_LENGTH, required=False, widget=forms.Textarea(attrs={'rows': 3}),
        error_messages={'max_length': "Additional notes are too long."},
    )
    connection_type = forms.ChoiceField(
        choices=[(OFFICE, "I'm at the office"), (REMOTE, "I'm contacting remotely")],
        initial=OFFICE,
        widget=forms.RadioSelect,
    )
    follow_up_type = forms.ChoiceField(
        choices=[('', 'Select...'), (VISIT, 'Schedule an office visit'), (PHONE, 'Request a phone call')],
        required=False,
    )
    appointment_date = forms.DateField(required=False, widget=forms.DateInput(attrs={'type': 'date'}))

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)

    def clean(self):
        cleaned_data = super().clean()
        if cleaned_data.get('connection_type') != self.REMOTE:
            cleaned_data['follow_up_type'] = ''
            cleaned_data['appointment_date'] = None
            return cleaned_data

        follow_up = cleaned_data.get('follow_up_type')
        if not follow_up:
            self.add_error('follow_up_type', "Please select how you'd like to follow up.")
        elif follow_up == self.VISIT and not cleaned_data.get('appointment_date'):
            self.add_error('appointment_date', "Please choose a date for your office visit.")
        return cleaned_data


class PrepClassBookingForm(forms.ModelForm):
    name = name_field()
    phone = phone_field()

    class Meta:
        model = ClassBooking
        fields = ['name', 'email', 'phone', 'preferred_test', 'preferred_start_date', 'notes']
        widgets = {
            'preferred_start_date': forms.DateInput(attrs={'type': 'date'}),
            'notes': forms.Textarea(attrs={'rows': 3}),
        }

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)


class AppointmentForm(forms.Form):
    service = forms.ChoiceField(choices=BLANK + APPOINTMENT_SERVICES)
    staff = forms.ChoiceField(choices=BLANK + APPOINTMENT_STAFF)
    date = forms.DateField(widget=forms.DateInput(attrs={'type': 'date'}))
    time_slot = forms.ChoiceField(choices=BLANK + as_choices(APPOINTMENT_TIME_SLOTS))
    name = name_field()
    email = forms.EmailField(error_messages={'invalid': "Invalid email address."})
    phone = phone_field()
    notes = forms.CharField(
        max_length=NOTES_MAX_LENGTH, required=False, widget=forms.Textarea(attrs={'rows': 3}),
    )

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        style_fields(self)

    def clean_date(self):
        date = self.cleaned_data['date']
        if date < timezone.localdate():
            raise forms.ValidationError("Please choose a date in the future.")
        return date
