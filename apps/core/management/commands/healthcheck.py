"""
==========================================================
SELF-DIAGNOSTIC HEALTH CHECK COMMAND
==========================================================
Run: python manage.py healthcheck

Checks:
  ✅ Database connection and migrations
  ✅ Templates for the public site and the back office
  ✅ Required packages (Django stack, OpenAI, python-docx, reportlab)
  ✅ Log directory
  ✅ URL configuration
  ✅ Production settings (SECRET_KEY, DEBUG)
  ✅ OpenAI key and monthly token usage
  ✅ Counselor logins for every counselor name
  ✅ Student data hygiene (legacy names, future timestamps, search names)
  ✅ Dashboard metrics match the student table

Data problems point at the management command that repairs them.
"""

import importlib
import logging
from io import StringIO
from pathlib import Path

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import OperationalError, connections
from django.db.models import Q
from django.template import TemplateDoesNotExist, engines
from django.urls import NoReverseMatch, reverse
from django.utils import timezone

logger = logging.getLogger('diagnostics')

INSECURE_KEY_PREFIX = 'django-insecure'

REQUIRED_PACKAGES = [
    ('django', 'Django'),
    ('decouple', 'python-decouple'),
    ('widget_tweaks', 'django-widget-tweaks'),
    ('django_browser_reload', 'django-browser-reload'),
    ('cryptography', 'cryptography'),
    ('openai', 'openai'),
    ('docx', 'python-docx'),
    ('reportlab', 'reportlab'),
]

KEY_TEMPLATES = [
    'base.html',
    'public/home.html',
    'public/contact.html',
    'assistants/sop_generator.html',
    'students/student_table.html',
    'analytics/dashboard.html',
    'reports/report.html',
]

KEY_URLS = [
    'home', 'contact', 'country-guides', 'book-appointment', 'prep-classes', 'sop-generator', 'chatbot',
    'login', 'staff-home', 'student-table', 'students-all', 'analytics-dashboard', 'welcome-screen', 'report',
]


class Command(BaseCommand):
    help = 'Check the platform and its student data for problems.'

    CHECKS = [
        'check_database',
        'check_migrations',
        'check_templates',
        'check_required_packages',
        'check_log_files',
        'check_urls',
        'check_settings',
        'check_llm',
        'check_counselor_accounts',
        'check_legacy_counselor_names',
        'check_future_timestamps',
        'check_searchable_names',
        'check_dashboard_metrics',
    ]

    def handle(self, *args, **options):
        self.stdout.write(self.style.HTTP_INFO('\n' + '=' * 60))
        self.stdout.write(self.style.HTTP_INFO('  🏥  PLATFORM HEALTH CHECK'))
        self.stdout.write(self.style.HTTP_INFO('=' * 60 + '\n'))

        results = {'pass': 0, 'warn': 0, 'fail': 0}
        for check_name in self.CHECKS:
            try:
                result = getattr(self, check_name)()
            except Exception as e:
                self.report_fail(check_name.replace('check_', '').replace('_', ' ').title(), str(e))
                result = 'fail'
            results[result] += 1

        self.stdout.write('\n' + '=' * 60)
        self.stdout.write(
            f"  RESULTS: ✅ {results['pass']} passed | ⚠️  {results['warn']} warnings | ❌ {results['fail']} failed"
        )
        self.stdout.write('=' * 60 + '\n')

        if results['fail']:
            self.stdout.write(self.style.ERROR('⛔ Some checks FAILED. Review the output above.'))
            logger.error(f"Health check: {results['fail']} checks failed, {results['warn']} warnings")
        elif results['warn']:
            self.stdout.write(self.style.WARNING('⚠️  All checks passed with warnings.'))
            logger.warning(f"Health check: {results['warn']} warnings")
        else:
            self.stdout.write(self.style.SUCCESS('🎉 All checks PASSED! Platform is healthy.'))
            logger.info('Health check: All checks passed')

    def _report(self, icon, style, name, detail):
        msg = f'  {icon} {name}'
        if detail:
            msg += f': {detail}'
        self.stdout.write(style(msg))

    def report_pass(self, name, detail=''):
        self._report('✅', self.style.SUCCESS, name, detail)
        return 'pass'

    def report_warn(self, name, detail=''):
        self._report('⚠️ ', self.style.WARNING, name, detail)
        return 'warn'

    def report_fail(self, name, detail=''):
        self._report('❌', self.style.ERROR, name, detail)
        return 'fail'

    # -------------------------------------------------------
    # Platform
    # -------------------------------------------------------

    def check_database(self):
        try:
            connections['default'].cursor()
        except OperationalError as e:
            return self.report_fail('Database', f'Cannot connect: {e}')
        engine = settings.DATABASES['default']['ENGINE']
        return self.report_pass('Database', f'Connected ({engine.split(".")[-1]})')

    def check_migrations(self):
        out = StringIO()
        call_command('showmigrations', '--plan', stdout=out)
        unapplied = [line.strip() for line in out.getvalue().splitlines() if line.strip().startswith('[ ]')]
        if unapplied:
            for line in unapplied[:5]:
                self.stdout.write(f'         {line}')
            return self.report_warn('Migrations', f'{len(unapplied)} unapplied. Run: python manage.py migrate')
        return self.report_pass('Migrations', 'All applied')

    def check_templates(self):
        engine = engines['django']
        missing = []
        for name in KEY_TEMPLATES:
            try:
                engine.get_template(name)
            except TemplateDoesNotExist:
                missing.append(name)
        if missing:
            return self.report_fail('Templates', f'Missing: {", ".join(missing)}')
        return self.report_pass('Templates', f'{len(KEY_TEMPLATES)} key templates load')

    def check_required_packages(self):
        missing = []
        for module_name, display_name in REQUIRED_PACKAGES:
            try:
                importlib.import_module(module_name)
            except ImportError:
                missing.append(display_name)
        if missing:
            return self.report_fail('Required Packages', f'Missing: {", ".join(missing)}')
        return self.report_pass('Required Packages', f'All {len(REQUIRED_PACKAGES)} packages installed')

    def check_log_files(self):
        log_dir = Path(settings.BASE_DIR) / 'logs'
        if not log_dir.exists():
            return self.report_warn('Log Files', f'{log_dir} does not exist yet')
        log_files = sorted(p.name for p in log_dir.glob('*.log'))
        return self.report_pass('Log Files', f'{len(log_files)} log file(s): {", ".join(log_files) or "none"}')

    def check_urls(self):
        broken = []
        for url_name in KEY_URLS:
            try:
                reverse(url_name)
            except NoReverseMatch:
                broken.append(url_name)
        if broken:
            return self.report_fail('URL Config', f'Cannot resolve: {", ".join(broken)}')
        return self.report_pass('URL Config', f'{len(KEY_URLS)} routes verified')

    def check_settings(self):
        problems = []
        if settings.SECRET_KEY.startswith(INSECURE_KEY_PREFIX):
            problems.append('SECRET_KEY is the development default')
        if settings.DEBUG:
            problems.append('DEBUG is on')
        if not settings.LLM_ENCRYPTION_KEY:
            problems.append('LLM_ENCRYPTION_KEY is derived from SECRET_KEY')
        if problems:
            return self.report_warn('Settings', '; '.join(problems))
        return self.report_pass('Settings', f'Production ready (TIME_ZONE={settings.TIME_ZONE})')

    def check_llm(self):
        from core.llm import LLMService

        service = LLMService()
        if not service.api_key:
            return self.report_warn('OpenAI', 'No API key stored; assistants use rule-based answers')
        if not service.config.generation_enabled:
            return self.report_warn('OpenAI', 'Generation is switched off')

        used = service.tokens_used_this_month()
        cap = service.config.monthly_token_cap
        usage = f'{used:,} tokens this month' + (f' of {cap:,}' if cap else '')
        if cap and used >= cap:
            return self.report_warn('OpenAI', f'Cap reached: {usage}')
        return self.report_pass('OpenAI', f'{service.model}, {usage}')

    # -------------------------------------------------------
    # Student data
    # -------------------------------------------------------

    def check_counselor_accounts(self):
        from config.constants import COUNSELOR_NAMES, UNASSIGNED
        from users.models import User

        linked = set(User.objects.exclude(counselor_name='').values_list('counselor_name', flat=True))
        without_login = [name for name in COUNSELOR_NAMES if name != UNASSIGNED and name not in linked]
        if without_login:
            return self.report_warn(
                'Counselor Accounts',
                f'No login for {", ".join(without_login)}. Run: python manage.py seed_counselors',
            )
        return self.report_pass('Counselor Accounts', 'Every counselor has a login')

    def check_legacy_counselor_names(self):
        from config.constants import COUNSELOR_RENAMES
        from students.models import Student

        count = Student.objects.filter(assigned_to__in=COUNSELOR_RENAMES).count()
        if count:
            return self.report_warn(
                'Counselor Names', f'{count} student(s) use old names. Run: python manage.py update_counselor_names',
            )
        return self.report_pass('Counselor Names', 'No old counselor names in use')

    def check_future_timestamps(self):
        from students.models import Student

        count = Student.objects.filter(timestamp__gt=timezone.now()).count()
        if count:
            return self.report_warn(
                'Timestamps', f'{count} student(s) dated in the future. Run: python manage.py fix_future_timestamps',
            )
        return self.report_pass('Timestamps', 'No future-dated students')

    def check_searchable_names(self):
        from students.models import Student

        count = Student.objects.filter(Q(searchable_name='') & ~Q(full_name='')).count()
        if count:
            return self.report_warn(
                'Search Names', f'{count} student(s) missing. Run: python manage.py add_searchable_names',
            )
        return self.report_pass('Search Names', 'Every student is searchable')

    def check_dashboard_metrics(self):
        from analytics.models import DashboardMetrics
        from students.models import Student

        metrics = DashboardMetrics.load()
        actual = Student.objects.count()
        if metrics is None:
            return self.report_warn('Dashboard Metrics', 'Not built yet. Run: python manage.py aggregate_stats')
        if metrics.total_students != actual:
            return self.report_warn(
                'Dashboard Metrics',
                f'Drift: stored {metrics.total_students}, actual {actual}. Run: python manage.py aggregate_stats',
            )
        return self.report_pass('Dashboard Metrics', f'{actual} students, in sync')
