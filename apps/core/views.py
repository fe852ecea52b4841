from datetime import timedelta

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.db.models import Sum
from django.shortcuts import render, redirect
from django.urls import reverse_lazy
from django.utils import timezone
from django.views.generic import TemplateView, UpdateView, View, ListView, DetailView

from config.constants import MSG_NO_COUNSELOR_PROFILE, PAGINATION_LLM_LOGS
from .forms import PlatformConfigForm, LLMConfigForm
from .llm import PRICING_PER_1M, list_openai_models, model_choices
from .models import PlatformConfig, LLMConfig, LLMUsageLog
from .monitor import SystemMonitor
from .permissions import AdminRequiredMixin
from .security import decrypt_value, mask_secret


@login_required
def staff_home(request):
    """Send each role to their own landing page after login."""
    user = request.user
    if user.is_admin:
        return redirect('student-table')
    if user.is_counselor:
        if not user.counselor_name:
            messages.warning(request, MSG_NO_COUNSELOR_PROFILE)
        return redirect('counselor-dashboard')
    return redirect('home')


class SystemStatusView(AdminRequiredMixin, TemplateView):
    template_name = 'core/system_status.html'

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['health_check'] = SystemMonitor().check_all()
        return context


class PlatformConfigView(AdminRequiredMixin, UpdateView):
    model = PlatformConfig
    form_class = PlatformConfigForm
    template_name = 'core/platform_config.html'
    success_url = reverse_lazy('platform-config')

    def get_object(self, queryset=None):
        return PlatformConfig.load()

    def form_valid(self, form):
        messages.success(self.request, "Platform configuration updated successfully.")
        return super().form_valid(form)


class LLMConfigView(AdminRequiredMixin, View):
    template_name = 'core/llm_config.html'

    def _choices(self, api_key):
        self.model_error = ''
        ids = []
        if api_key:
            try:
                ids = list_openai_models(api_key)
            except Exception as exc:
                self.model_error = str(exc)
        return model_choices(ids or list(PRICING_PER_1M.keys()))

    def _render(self, request, form, api_key):
        context = self._build_metrics_context()
        context.update({
            'form': form,
            'api_key_masked': mask_secret(api_key),
            'model_error': self.model_error,
        })
        return render(request, self.template_name, context)

    def get(self, request):
        config = LLMConfig.load()
        api_key = decrypt_value(config.encrypted_api_key)
        form = LLMConfigForm(instance=config, model_choices=self._choices(api_key))
        return self._render(request, form, api_key)

    def post(self, request):
        config = LLMConfig.load()
        api_key = decrypt_value(config.encrypted_api_key)
        candidate_key = request.POST.get('api_key', '').strip() or api_key
        form = LLMConfigForm(request.POST, instance=config, model_choices=self._choices(candidate_key))

        if request.POST.get('action') == 'test_key':
            if not candidate_key:
                messages.error(request, "Please enter an API key to test.")
            elif self.model_error:
                messages.error(request, f"API key test failed: {self.model_error}")
            else:
                messages.success(request, "API key is valid. Models fetched successfully.")
            return self._render(request, form, api_key)

        if form.is_valid():
            form.save()
            messages.success(request, "LLM configuration updated successfully.")
            return redirect('llm-config')

        return self._render(request, form, api_key)

    def _build_metrics_context(self):
        now = timezone.now()
        start_month = now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)

        logs = LLMUsageLog.objects.all()
        totals = logs.aggregate(
            tokens=Sum('total_tokens'), cost=Sum('cost_total'), latency=Sum('latency_ms')
        )
        total_calls = logs.count()

        return {
            'llm_config': LLMConfig.load(),
            'total_calls': total_calls,
            'success_calls': logs.filter(success=True).count(),
            'failed_calls': logs.filter(success=False).count(),
            'total_tokens': totals['tokens'] or 0,
            'total_cost': totals['cost'] or 0,
            'avg_latency': int((totals['latency'] or 0) / total_calls) if total_calls else 0,
            'calls_today': logs.filter(created_at__gte=now - timedelta(days=1)).count(),
            'calls_week': logs.filter(created_at__gte=now - timedelta(days=7)).count(),
            'calls_month': logs.filter(created_at__gte=start_month).count(),
            'recent_logs': logs[:10],
        }


class LLMLogListView(AdminRequiredMixin, ListView):
    model = LLMUsageLog
    template_name = 'core/llm_logs.html'
    context_object_name = 'logs'
    paginate_by = PAGINATION_LLM_LOGS

    def get_queryset(self):
        qs = super().get_queryset().select_related('actor')
        request_type = self.request.GET.get('type')
        if request_type in LLMUsageLog.RequestType.values:
            qs = qs.filter(request_type=request_type)
        if self.request.GET.get('failed') == '1':
            qs = qs.filter(success=False)
        return qs

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['request_types'] = LLMUsageLog.RequestType.choices
        context['current_type'] = self.request.GET.get('type', '')
        return context


class LLMLogDetailView(AdminRequiredMixin, DetailView):
    model = LLMUsageLog
    template_name = 'core/llm_log_detail.html'
    context_object_name = 'log'
