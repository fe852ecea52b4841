import logging
from datetime import datetime, time

from django.utils import timezone

from config.constants import (
    MSG_APPOINTMENT_NOTE, MSG_ORIGINAL_NOTES, MSG_REMOTE_PHONE_NOTE, MSG_REMOTE_VISIT_NOTE, UNASSIGNED,
)
from students.models import Student
from .content import APPOINTMENT_SERVICES, APPOINTMENT_STAFF

logger = logging.getLogger("apps.public")


def slot_start(date, slot):
    """'09:30 AM - 10:00 AM' on a date -> aware datetime at 09:30 local time."""
    start = datetime.strptime(slot.split(' - ')[0], '%I:%M %p').time()
    return timezone.make_aware(datetime.combine(date, start))


def ordinal(day):
    if 11 <= day % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f"{day}{suffix}"


def long_date(value):
    """date(2026, 10, 5) -> 'October 5th, 2026'."""
    return f"{value:%B} {ordinal(value.day)}, {value.year}"


def remote_note(follow_up_type, appointment_date, notes):
    if follow_up_type == Student.InquiryType.VISIT:
        prefix = MSG_REMOTE_VISIT_NOTE.format(date=long_date(appointment_date))
    else:
        prefix = MSG_REMOTE_PHONE_NOTE
    if notes:
        return MSG_ORIGINAL_NOTES.format(prefix=prefix, notes=notes)
    return prefix


class LeadService:
    """Turns public form submissions into Student records."""

    @staticmethod
    def create_inquiry(data):
        notes = (data.get('additional_notes') or '').strip()
        inquiry_type = Student.InquiryType.OFFICE_WALK_IN
        appointment_date = None

        if data['connection_type'] == 'remote':
            inquiry_type = data['follow_up_type']
            if data.get('appointment_date'):
                appointment_date = timezone.make_aware(datetime.combine(data['appointment_date'], time.min))
            notes = remote_note(inquiry_type, data.get('appointment_date'), notes)

        student = Student.objects.create(
            full_name=data['name'],
            email=data['email'],
            mobile_number=data['phone'],
            last_completed_education=data['last_completed_education'],
            english_proficiency_test=data['english_proficiency_test'],
            preferred_study_destination=data['preferred_study_destination'],
            additional_notes=notes,
            visa_status=Student.VisaStatus.NOT_APPLIED,
            service_fee_status=Student.FeeStatus.UNPAID,
            assigned_to=UNASSIGNED,
            inquiry_type=inquiry_type,
            appointment_date=appointment_date,
        )
        logger.info(f"Inquiry saved as student {student.pk} ({inquiry_type})")
        return student

    @staticmethod
    def book_appointment(data):
        note = MSG_APPOINTMENT_NOTE.format(
            service=dict(APPOINTMENT_SERVICES)[data['service']],
            staff=dict(APPOINTMENT_STAFF)[data['staff']],
            date=long_date(data['date']),
            slot=data['time_slot'],
        )
        extra = (data.get('notes') or '').strip()
        if extra:
            note = MSG_ORIGINAL_NOTES.format(prefix=note, notes=extra)

        student = Student.objects.create(
            full_name=data['name'],
            email=data['email'],
            mobile_number=data['phone'],
            additional_notes=note,
            assigned_to=UNASSIGNED,
            inquiry_type=Student.InquiryType.VISIT,
            appointment_date=slot_start(data['date'], data['time_slot']),
        )
        logger.info(f"Appointment booked as student {student.pk} for {data['date']} {data['time_slot']}")
        return student
