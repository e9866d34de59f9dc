"""
Frontend URLs for dashboard app.
"""
from django.urls import path
from . import frontend_views

app_name = 'dashboard'

urlpatterns = [
    path('profile/save/', frontend_views.profile_save, name='profile_save'),
    path('skills/add/', frontend_views.skill_add, name='skill_add'),
    path('skills/<str:skill_id>/delete/', frontend_views.skill_delete, name='skill_delete'),
    path('journey/add/', frontend_views.journey_add, name='journey_add'),
    path('journey/<str:entry_id>/delete/', frontend_views.journey_delete, name='journey_delete'),
    path('banners/<str:editor_name>/<str:kind>/dismiss/', frontend_views.banner_dismiss, name='banner_dismiss'),
    path('projects/toggle-add/', frontend_views.project_toggle_add, name='project_toggle_add'),
    path('projects/add/', frontend_views.project_add, name='project_add'),
    path('projects/cancel-edit/', frontend_views.project_cancel_edit, name='project_cancel_edit'),
    path('projects/<str:project_id>/start-edit/', frontend_views.project_start_edit, name='project_start_edit'),
    path('projects/<str:project_id>/edit/', frontend_views.project_edit, name='project_edit'),
    path('projects/<str:project_id>/delete/', frontend_views.project_delete, name='project_delete'),
    path('refresh/', frontend_views.refresh, name='refresh'),
]
