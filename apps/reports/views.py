import logging

from django.contrib import messages
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.views.generic import View

from core.permissions import StaffRequiredMixin
from .forms import ReportForm
from .pdf import render_report_pdf
from .services import ReportError, ReportService

logger = logging.getLogger("apps.reports")


class ReportFormMixin(StaffRequiredMixin):

    def get_form(self):
        return ReportForm(self.request.GET or None, user=self.request.user)

    def build_report(self, form):
        data = form.cleaned_data
        return ReportService.build(data['counselor'], data['start_date'], data['end_date'])


class ReportView(ReportFormMixin, View):
    template_name = 'reports/report.html'

    def get(self, request):
        form = self.get_form()
        report = None
        if form.is_bound:
            if form.is_valid():
                report = self.build_report(form)
            else:
                for error in form.non_field_errors():
                    messages.error(request, error)
        return render(request, self.template_name, {
            'form': form,
            'report': report,
            'query': request.GET.urlencode(),
        })


class ReportPdfView(ReportFormMixin, View):

    def get(self, request):
        form = self.get_form()
        if not form.is_bound or not form.is_valid():
            for error in form.non_field_errors():
                messages.error(request, error)
            return redirect('report')
        try:
            report = self.build_report(form)
        except ReportError as e:
            messages.error(request, str(e))
            return redirect('report')

        pdf = render_report_pdf(report)
        filename = f"report-{report.counselor.lower().replace(' ', '-')}-{report.start_date}-{report.end_date}.pdf"
        logger.info(f"Report PDF generated for {report.counselor} by {request.user.username}")
        response = HttpResponse(pdf, content_type='application/pdf')
        response['Content-Disposition'] = f'attachment; filename="{filename}"'
        return response
