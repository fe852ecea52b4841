from django.urls import path
from .views import (
    StudentTableView, StudentCreateView, StudentUpdateView, StudentDeleteView,
    StudentsAllView, StudentsFullView, StudentBulkUploadView, CounselorDashboardView,
)

urlpatterns = [
    path('', StudentTableView.as_view(), name='student-table'),
    path('new/', StudentCreateView.as_view(), name='student-create'),
    path('<int:pk>/edit/', StudentUpdateView.as_view(), name='student-update'),
    path('<int:pk>/delete/', StudentDeleteView.as_view(), name='student-delete'),
    path('all/', StudentsAllView.as_view(), name='students-all'),
    path('full/', StudentsFullView.as_view(), name='students-full'),
    path('upload/', StudentBulkUploadView.as_view(), name='student-bulk-upload'),
    path('counselor/', CounselorDashboardView.as_view(), name='counselor-dashboard'),
]
