from django.urls import path

from . import views

urlpatterns = [
    path('', views.HomeView.as_view(), name='home'),
    path('about/', views.AboutView.as_view(), name='about'),
    path('services/', views.ServicesView.as_view(), name='services'),
    path('country-guides/', views.CountryGuidesView.as_view(), name='country-guides'),
    path('countries/<slug:slug>/', views.CountryDetailView.as_view(), name='country-detail'),
    path('faq/', views.FAQView.as_view(), name='faq'),
    path('interview-qa/', views.InterviewQAView.as_view(), name='interview-qa'),
    path('english-test-guide/', views.EnglishTestGuideView.as_view(), name='english-test-guide'),
    path('pre-departure-toolkit/', views.PreDepartureToolkitView.as_view(), name='pre-departure-toolkit'),
    path('success-stories/', views.SuccessStoriesView.as_view(), name='success-stories'),
    path('connect/', views.ConnectView.as_view(), name='connect'),
    path('contact/', views.ContactView.as_view(), name='contact'),
    path('prep-classes/', views.PrepClassBookingView.as_view(), name='prep-classes'),
    path('book-appointment/', views.AppointmentView.as_view(), name='book-appointment'),
]
