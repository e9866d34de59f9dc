"""
Main project views for the admin login and dashboard pages.
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect, render

from backend.auth import session_provider_for
from backend.client import DataServiceError, get_data_service
from dashboard.gate import DASHBOARD_ROUTE, LOGIN_ROUTE, session_gate
from dashboard.services import ProfileEditor, ProjectEditor

logger = logging.getLogger(__name__)

DASHBOARD_TABS = ['projects', 'profile']


def _clear_editor_state(session) -> None:
    session.pop(ProfileEditor.STATE_KEY, None)
    session.pop(ProjectEditor.STATE_KEY, None)


@session_gate(LOGIN_ROUTE)
def login_view(request):
    """Handle admin sign-in against the data service."""
    gate = request.admin_gate
    email = ''

    if request.method == 'POST':
        email = (request.POST.get('email') or '').strip()
        password = request.POST.get('password') or ''
        try:
            gate.provider.sign_in_with_password(email, password)
        except DataServiceError as exc:
            logger.warning("Admin sign-in failed for %s: %s", email, exc)
            messages.error(request, exc.message or 'An error occurred during login')
        else:
            # Editors load fresh on the next dashboard visit.
            _clear_editor_state(request.session)
            return redirect(gate.landing_route())

    return render(request, 'dashboard/login.html', {'email': email})


def logout_view(request):
    """Sign the admin out and drop the editors' local copies."""
    session_provider_for(request).sign_out()
    _clear_editor_state(request.session)
    messages.success(request, 'Successfully logged out.')
    return redirect(LOGIN_ROUTE)


@session_gate(DASHBOARD_ROUTE)
def dashboard(request):
    """Admin dashboard with the projects and profile editors."""
    gate = request.admin_gate
    service = get_data_service()

    profile_editor = ProfileEditor.from_session(request.session, service, access_token=gate.access_token)
    project_editor = ProjectEditor.from_session(request.session, service, access_token=gate.access_token)

    profile_success = profile_editor.banners.visible_success()
    profile_editor.banners.prune()
    profile_editor.save_to(request.session)
    project_editor.save_to(request.session)

    tab = request.GET.get('tab')
    if tab not in DASHBOARD_TABS:
        tab = DASHBOARD_TABS[0]

    context = {
        'tab': tab,
        'admin_email': gate.session.email if gate.session else '',
        'profile_editor': profile_editor,
        'profile': profile_editor.profile,
        'skills': profile_editor.skills,
        'journey': profile_editor.journey,
        'profile_error': profile_editor.banners.error,
        'profile_success': profile_success,
        'project_editor': project_editor,
        'projects': project_editor.projects,
        'editing': project_editor.editing,
        'new_project': project_editor.new_project,
        'project_error': project_editor.banners.error,
    }
    return render(request, 'dashboard/dashboard.html', context)
