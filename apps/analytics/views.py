import json

from django.core.serializers.json import DjangoJSONEncoder
from django.views.generic import TemplateView

from core.permissions import StaffRequiredMixin
from core.services import PlatformConfigService
from students.services import StudentService
from .services import MetricsService, dashboard_data


def _chart(pairs):
    return {
        'labels': json.dumps([label for label, _ in pairs], cls=DjangoJSONEncoder),
        'data': json.dumps([count for _, count in pairs], cls=DjangoJSONEncoder),
    }


class AnalyticsDashboardView(StaffRequiredMixin, TemplateView):
    template_name = 'analytics/dashboard.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        metrics = MetricsService.get_or_rebuild()
        data = dashboard_data(metrics)

        context['metrics'] = metrics
        context['stat_cards'] = data['stat_cards']
        context['destinations'] = data['destinations']
        context['counselors'] = data['counselors']

        context['destination_chart'] = _chart(data['destinations'])
        context['english_test_chart'] = _chart(data['english_tests'])
        context['visa_chart'] = _chart(data['visa_statuses'])
        context['fee_chart'] = _chart(data['fee_statuses'])
        context['counselor_chart'] = _chart(data['counselors'])
        context['education_chart'] = _chart(data['education'])
        context['monthly_chart'] = _chart(data['monthly'])
        return context


class WelcomeScreenView(TemplateView):
    """Office TV: newest walk-ins still waiting for a counselor."""
    template_name = 'analytics/welcome_screen.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['names'] = StudentService.unassigned_recent_names()
        context['refresh_seconds'] = PlatformConfigService.get_config().welcome_screen_refresh_seconds
        return context

    def get_template_names(self):
        if self.request.headers.get('HX-Request'):
            return ['analytics/_welcome_names.html']
        return super().get_template_names()
