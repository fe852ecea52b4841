from django.urls import path
from .views import AnalyticsDashboardView, WelcomeScreenView

urlpatterns = [
    path('', AnalyticsDashboardView.as_view(), name='analytics-dashboard'),
    path('welcome/', WelcomeScreenView.as_view(), name='welcome-screen'),
]
