"""
Portfolio app URLs
"""
from django.urls import path
from .views import PortfolioSnapshotView

urlpatterns = [
    path('', PortfolioSnapshotView.as_view(), name='portfolio-snapshot'),
]
