import time

from django.db import connections
from django.db.utils import OperationalError
from django.test import Client
from django.urls import reverse

from students.models import Student
from analytics.models import DashboardMetrics


class SystemMonitor:
    # Public pages must answer 200; staff pages redirect anonymous visitors.
    CRITICAL_PAGES = [
        ('Home Page', 'home'),
        ('Contact Page', 'contact'),
        ('Book Appointment', 'book-appointment'),
        ('SOP Generator', 'sop-generator'),
        ('Document Checklist', 'document-checklist'),
        ('Staff Login', 'login'),
        ('Student Table', 'student-table'),
        ('Analytics Dashboard', 'analytics-dashboard'),
        ('Welcome Screen', 'welcome-screen'),
        ('Counselor Report', 'report'),
    ]

    def check_all(self):
        """
        Run all system checks and return a dict of results.
        """
        return {
            'database': self.check_database(),
            'metrics': self.check_metrics(),
            'pages': self.check_critical_pages(),
        }

    def check_database(self):
        start = time.time()
        status = "Operational"
        error = None
        try:
            connections['default'].cursor()
        except OperationalError as e:
            status = "Failed"
            error = str(e)

        return {
            'name': 'Default Database',
            'status': status,
            'duration_ms': round((time.time() - start) * 1000, 2),
            'error': error,
        }

    def check_metrics(self):
        """
        Compare the stored dashboard total with a live count. A mismatch means
        a bulk write skipped the counters and `aggregate_stats` should be run.
        """
        metrics = DashboardMetrics.load()
        live_total = Student.objects.count()
        if metrics is None:
            return {'status': 'Missing', 'stored_total': None, 'live_total': live_total}
        status = "Operational" if metrics.total_students == live_total else "Drifted"
        return {
            'status': status,
            'stored_total': metrics.total_students,
            'live_total': live_total,
            'updated_at': metrics.updated_at,
        }

    def check_critical_pages(self):
        """
        Ping critical internal URLs to ensure they load (200 or 302).
        Uses Django Test Client to avoid network overhead.
        """
        client = Client()
        results = []
        for name, url_name in self.CRITICAL_PAGES:
            url = reverse(url_name)
            start = time.time()
            try:
                response = client.get(url, HTTP_HOST='localhost')
                status_code = response.status_code
                if status_code in (200, 302):
                    status, error = "Operational", None
                else:
                    status, error = "Failed", f"HTTP {status_code}"
            except Exception as e:
                status, status_code, error = "Failed", 0, str(e)

            results.append({
                'name': name,
                'url': url,
                'status': status,
                'status_code': status_code,
                'duration_ms': round((time.time() - start) * 1000, 2),
                'error': error,
            })
        return results
