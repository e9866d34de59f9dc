"""
Frontend URLs for portfolio app.
"""
from django.urls import path
from . import frontend_views

urlpatterns = [
    path('', frontend_views.home, name='home'),
    path('contact/', frontend_views.contact, name='contact'),
]
