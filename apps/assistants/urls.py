from django.urls import path

from . import views

urlpatterns = [
    path('', views.AssistantsHomeView.as_view(), name='assistants-home'),
    path('sop-generator/', views.SopGeneratorView.as_view(), name='sop-generator'),
    path('sop-generator/download/', views.SopDownloadView.as_view(), name='sop-download'),
    path('document-checklist/', views.DocumentChecklistView.as_view(), name='document-checklist'),
    path('test-advisor/', views.TestAdvisorView.as_view(), name='test-advisor'),
    path('pathway-planner/', views.PathwayPlannerView.as_view(), name='pathway-planner'),
    path('chat/', views.ChatbotView.as_view(), name='chatbot'),
]
