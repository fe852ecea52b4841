"""
Counselor performance report for a date range.

Student timestamps are compared from the start of `start` to the last
microsecond of `end`; the visa / fee dates are plain dates compared
inclusively on both ends.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, time
from typing import List

from django.utils import timezone

from config.constants import (
    MSG_REPORT_COUNSELOR_REQUIRED, MSG_REPORT_DATE_ORDER, MSG_REPORT_DATES_REQUIRED,
    MSG_REPORT_UNASSIGNED, UNASSIGNED,
)
from students.models import Student

logger = logging.getLogger("apps.reports")


class ReportError(ValueError):
    pass


def format_rate(numerator, denominator):
    if not denominator:
        return "0.0"
    return f"{numerator / denominator * 100:.1f}"


@dataclass
class CounselorReport:
    counselor: str
    start_date: object
    end_date: object
    newly_assigned: List[Student] = field(default_factory=list)
    visas_approved: List[Student] = field(default_factory=list)
    visas_rejected: List[Student] = field(default_factory=list)
    fees_paid_in_period: List[Student] = field(default_factory=list)
    total_fees_paid_count: int = 0

    @property
    def visa_approval_rate(self):
        approved = len(self.visas_approved)
        return format_rate(approved, approved + len(self.visas_rejected))

    @property
    def fee_conversion_rate(self):
        paid = sum(1 for s in self.newly_assigned if s.service_fee_status == Student.FeeStatus.PAID)
        return format_rate(paid, len(self.newly_assigned))

    def summary_rows(self):
        return [
            ("Newly Assigned Students", len(self.newly_assigned)),
            ("Visas Approved", len(self.visas_approved)),
            ("Visas Rejected", len(self.visas_rejected)),
            ("Fees Paid in Period", len(self.fees_paid_in_period)),
            ("Total Fees Paid (All Time)", self.total_fees_paid_count),
            ("Visa Approval Rate", f"{self.visa_approval_rate}%"),
            ("Fee Conversion Rate", f"{self.fee_conversion_rate}%"),
        ]


class ReportService:

    @staticmethod
    def validate(counselor, start_date, end_date):
        if not counselor:
            raise ReportError(MSG_REPORT_COUNSELOR_REQUIRED)
        if counselor == UNASSIGNED:
            raise ReportError(MSG_REPORT_UNASSIGNED)
        if not start_date or not end_date:
            raise ReportError(MSG_REPORT_DATES_REQUIRED)
        if end_date < start_date:
            raise ReportError(MSG_REPORT_DATE_ORDER)

    @staticmethod
    def build(counselor, start_date, end_date):
        ReportService.validate(counselor, start_date, end_date)

        start_dt = timezone.make_aware(datetime.combine(start_date, time.min))
        end_dt = timezone.make_aware(datetime.combine(end_date, time.max))
        students = Student.objects.filter(assigned_to=counselor)
        date_range = (start_date, end_date)

        report = CounselorReport(
            counselor=counselor,
            start_date=start_date,
            end_date=end_date,
            newly_assigned=list(
                students.filter(timestamp__range=(start_dt, end_dt)).order_by('-timestamp', '-id')
            ),
            visas_approved=list(students.filter(
                visa_status=Student.VisaStatus.APPROVED, visa_status_update_date__range=date_range,
            ).order_by('-visa_status_update_date', '-id')),
            visas_rejected=list(students.filter(
                visa_status=Student.VisaStatus.REJECTED, visa_status_update_date__range=date_range,
            ).order_by('-visa_status_update_date', '-id')),
            fees_paid_in_period=list(students.filter(
                service_fee_status=Student.FeeStatus.PAID, service_fee_paid_date__range=date_range,
            ).order_by('-service_fee_paid_date', '-id')),
            total_fees_paid_count=students.filter(service_fee_status=Student.FeeStatus.PAID).count(),
        )
        logger.info(
            "Report for %s (%s to %s): %s new, %s approved, %s rejected",
            counselor, start_date, end_date,
            len(report.newly_assigned), len(report.visas_approved), len(report.visas_rejected),
        )
        return report
