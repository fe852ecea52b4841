import logging
from urllib.parse import urlencode

from django.contrib import messages
from django.db.models import Count, Q
from django.shortcuts import redirect, render
from django.urls import reverse, reverse_lazy
from django.views.generic import CreateView, DeleteView, ListView, TemplateView, UpdateView, View

from config.constants import (
    COUNSELOR_NAMES, MSG_CSV_ENCODING, MSG_CSV_ERROR, MSG_CSV_MISSING_HEADERS, MSG_CSV_SKIPPED,
    MSG_CSV_SUCCESS, MSG_INVALID_CURSOR, MSG_NO_COUNSELOR_PROFILE, MSG_NO_MORE_STUDENTS,
    MSG_REACHED_BEGINNING, MSG_STUDENT_CREATED, MSG_STUDENT_DELETED, MSG_STUDENT_UPDATED,
    CSV_REQUIRED_HEADERS, UNASSIGNED,
)
from core.permissions import AdminRequiredMixin, CounselorScopedMixin
from .forms import StudentCSVUploadForm, StudentFilterForm, StudentForm
from .importer import CSVImportError, import_csv_text
from .models import Student
from .services import SORTABLE_COLUMNS, InvalidCursor, StudentService

logger = logging.getLogger("apps.students")


class StudentTableView(CounselorScopedMixin, ListView):
    """Newest students, narrowed by a name prefix typed into the search box."""
    model = Student
    template_name = 'students/student_table.html'
    context_object_name = 'students'

    def get_queryset(self):
        query = self.request.GET.get('q', '')
        return StudentService.search(query, queryset=super().get_queryset())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['query'] = self.request.GET.get('q', '')
        return context

    def get_template_names(self):
        if self.request.headers.get('HX-Request'):
            return ['students/_student_rows.html']
        return super().get_template_names()


class StudentFormMixin:
    model = Student
    form_class = StudentForm
    template_name = 'students/student_form.html'
    success_url = reverse_lazy('student-table')

    def get_form_kwargs(self):
        kwargs = super().get_form_kwargs()
        kwargs['user'] = self.request.user
        return kwargs


class StudentCreateView(CounselorScopedMixin, StudentFormMixin, CreateView):

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Student {self.object.pk} created by {self.request.user.username}")
        messages.success(self.request, MSG_STUDENT_CREATED)
        return response


class StudentUpdateView(CounselorScopedMixin, StudentFormMixin, UpdateView):

    def form_valid(self, form):
        response = super().form_valid(form)
        logger.info(f"Student {self.object.pk} updated by {self.request.user.username}: {form.changed_data}")
        messages.success(self.request, MSG_STUDENT_UPDATED)
        return response


class StudentDeleteView(CounselorScopedMixin, DeleteView):
    model = Student
    template_name = 'students/student_confirm_delete.html'
    success_url = reverse_lazy('student-table')

    def form_valid(self, form):
        logger.info(f"Student {self.object.pk} deleted by {self.request.user.username}")
        messages.success(self.request, MSG_STUDENT_DELETED)
        return super().form_valid(form)


class StudentsAllView(CounselorScopedMixin, View):
    """Every student, 50 per page, walked with next / prev cursors."""
    template_name = 'students/students_all.html'

    def get(self, request):
        filter_form = StudentFilterForm(request.GET or None)
        filters = filter_form.filters() if filter_form.is_bound else {}
        cursor = request.GET.get('cursor')
        direction = request.GET.get('direction', 'next')
        first_page_url = f"{reverse('students-all')}?{urlencode(filters)}" if filters else reverse('students-all')

        queryset = self.scope_queryset(Student.objects.all())
        try:
            page = StudentService.paginate(filters, cursor=cursor, direction=direction, queryset=queryset)
        except InvalidCursor:
            messages.warning(request, MSG_INVALID_CURSOR)
            return redirect(first_page_url)

        if cursor and page.is_empty:
            messages.info(request, MSG_REACHED_BEGINNING if direction == 'prev' else MSG_NO_MORE_STUDENTS)
            return redirect(first_page_url)

        return render(request, self.template_name, {
            'page': page,
            'students': page.students,
            'filter_form': filter_form,
            'filter_query': urlencode(filters),
        })


class StudentsFullView(AdminRequiredMixin, ListView):
    """Every record with every column, sortable by any of them."""
    model = Student
    template_name = 'students/students_full.html'
    context_object_name = 'students'

    def get_queryset(self):
        return StudentService.full_table(self.sort, self.direction)

    def get(self, request, *args, **kwargs):
        self.sort = request.GET.get('sort', 'timestamp')
        self.direction = 'asc' if request.GET.get('dir') == 'asc' else 'desc'
        return super().get(request, *args, **kwargs)

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context['columns'] = [
            (name, Student._meta.get_field(name).verbose_name.title()) for name in SORTABLE_COLUMNS
        ]
        context['sort'] = self.sort if self.sort in SORTABLE_COLUMNS else 'timestamp'
        context['direction'] = self.direction
        return context


class StudentBulkUploadView(AdminRequiredMixin, View):
    template_name = 'students/student_bulk_upload.html'

    def get(self, request):
        return render(request, self.template_name, {'form': StudentCSVUploadForm()})

    def post(self, request):
        form = StudentCSVUploadForm(request.POST, request.FILES)
        if not form.is_valid():
            return render(request, self.template_name, {'form': form})

        try:
            text = form.cleaned_data['csv_file'].read().decode('utf-8')
        except UnicodeDecodeError:
            messages.error(request, MSG_CSV_ENCODING)
            return render(request, self.template_name, {'form': form})

        try:
            result = import_csv_text(text)
        except CSVImportError as e:
            messages.error(request, MSG_CSV_MISSING_HEADERS.format(found=e.args[0], required=CSV_REQUIRED_HEADERS))
            return render(request, self.template_name, {'form': form})
        except Exception as e:
            logger.error(f"Student CSV upload failed: {e}", exc_info=True)
            messages.error(request, MSG_CSV_ERROR)
            return render(request, self.template_name, {'form': form})

        if result.created:
            messages.success(request, MSG_CSV_SUCCESS.format(count=result.created))
        if result.errors:
            shown = '; '.join(result.errors[:5])
            if len(result.errors) > 5:
                shown += f" (and {len(result.errors) - 5} more)"
            messages.warning(request, MSG_CSV_SKIPPED.format(errors=shown))
        return redirect('students-all')


class CounselorDashboardView(CounselorScopedMixin, TemplateView):
    """
    A counselor's own caseload. Admins can look at any counselor through
    ?counselor=<name>.
    """
    template_name = 'students/counselor_dashboard.html'

    def get_counselor(self):
        user = self.request.user
        if user.is_admin:
            requested = self.request.GET.get('counselor')
            if requested in COUNSELOR_NAMES:
                return requested
            return user.counselor_name or UNASSIGNED
        return user.counselor_name

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        counselor = self.get_counselor()
        if not counselor:
            messages.warning(self.request, MSG_NO_COUNSELOR_PROFILE)
            students = Student.objects.none()
        else:
            students = StudentService.for_counselor(counselor)

        context['counselor'] = counselor
        context['students'] = students
        context['counselor_names'] = COUNSELOR_NAMES
        context['summary'] = students.aggregate(
            total=Count('id'),
            visas_approved=Count('id', filter=Q(visa_status=Student.VisaStatus.APPROVED)),
            visas_pending=Count('id', filter=Q(visa_status=Student.VisaStatus.PENDING)),
            fees_paid=Count('id', filter=Q(service_fee_status=Student.FeeStatus.PAID)),
        )
        return context
