"""
Dashboard app URLs
"""
from django.urls import path
from .views import ProjectDraftView

urlpatterns = [
    path('project-draft/', ProjectDraftView.as_view(), name='project-draft'),
]
