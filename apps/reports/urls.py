from django.urls import path
from .views import ReportView, ReportPdfView

urlpatterns = [
    path('', ReportView.as_view(), name='report'),
    path('pdf/', ReportPdfView.as_view(), name='report-pdf'),
]
