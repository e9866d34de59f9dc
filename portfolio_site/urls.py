"""
URL configuration for portfolio_site project.

Public page at the root, admin login and dashboard under /admin/, JSON
endpoints under /api/ and /admin/api/.
"""
from django.urls import path, include

from portfolio_site.views import login_view, logout_view, dashboard

urlpatterns = [
    # Frontend views
    path('', include('portfolio.frontend_urls')),
    path('admin/', login_view, name='admin_login'),
    path('admin/logout/', logout_view, name='admin_logout'),
    path('admin/dashboard/', dashboard, name='admin_dashboard'),
    path('admin/dashboard/', include('dashboard.frontend_urls')),

    # API views
    path('api/portfolio/', include('portfolio.urls')),
    path('admin/api/', include('dashboard.urls')),
]
