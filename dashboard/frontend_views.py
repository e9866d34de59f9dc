"""
Frontend views for the admin editors.

Every view here belongs to the dashboard route: visitors without an admin
session are sent to the login page before anything runs.
"""
from dataclasses import asdict

from django.shortcuts import redirect, render
from django.urls import reverse

from backend.client import get_data_service
from .gate import DASHBOARD_ROUTE, session_gate
from .services import ProfileEditor, ProjectEditor, join_comma_list


def _profile_editor(request) -> ProfileEditor:
    return ProfileEditor.from_session(
        request.session, get_data_service(), access_token=request.admin_gate.access_token
    )


def _project_editor(request) -> ProjectEditor:
    return ProjectEditor.from_session(
        request.session, get_data_service(), access_token=request.admin_gate.access_token
    )


def _back_to(tab: str):
    return redirect(f"{reverse(DASHBOARD_ROUTE)}?tab={tab}")


def _apply_project_form(editor: ProjectEditor, data, target: str = 'new') -> None:
    """
    Copy submitted project fields into the draft or the editing copy.

    List fields are already parsed as the admin types; one whose text still
    matches the stored list is left alone so an untouched blank input does not
    become ``['']``.
    """
    current = editor.new_project if target == 'new' else asdict(editor.editing)
    for field in ProjectEditor.TEXT_FIELDS:
        if field in data:
            editor.set_draft_field(field, data[field], target=target)
    for field in ProjectEditor.LIST_FIELDS:
        if field in data and data[field].strip() != join_comma_list(current.get(field)):
            editor.set_draft_field(field, data[field], target=target)


@session_gate(DASHBOARD_ROUTE)
def profile_save(request):
    """Insert or update the profile from the basic info form."""
    if request.method == 'POST':
        editor = _profile_editor(request)
        editor.save_profile({
            'name': request.POST.get('name', ''),
            'tagline': request.POST.get('tagline', ''),
            'description': request.POST.get('description', ''),
            'profile_image': request.POST.get('profile_image', ''),
            'resume_url': request.POST.get('resume_url', ''),
            'github': request.POST.get('github', ''),
            'linkedin': request.POST.get('linkedin', ''),
            'twitter': request.POST.get('twitter', ''),
        })
        editor.save_to(request.session)
    return _back_to('profile')


@session_gate(DASHBOARD_ROUTE)
def skill_add(request):
    if request.method == 'POST':
        editor = _profile_editor(request)
        editor.add_skill(request.POST.get('name', ''), request.POST.get('level', 50))
        editor.save_to(request.session)
    return _back_to('profile')


@session_gate(DASHBOARD_ROUTE)
def skill_delete(request, skill_id):
    if request.method == 'POST':
        editor = _profile_editor(request)
        editor.delete_skill(skill_id)
        editor.save_to(request.session)
    return _back_to('profile')


@session_gate(DASHBOARD_ROUTE)
def journey_add(request):
    if request.method == 'POST':
        editor = _profile_editor(request)
        editor.add_journey_entry(request.POST.get('description', ''))
        editor.save_to(request.session)
    return _back_to('profile')


@session_gate(DASHBOARD_ROUTE)
def journey_delete(request, entry_id):
    if request.method == 'POST':
        editor = _profile_editor(request)
        editor.delete_journey_entry(entry_id)
        editor.save_to(request.session)
    return _back_to('profile')


@session_gate(DASHBOARD_ROUTE)
def banner_dismiss(request, editor_name, kind):
    """Dismiss the error or success banner of one editor."""
    tab = 'profile' if editor_name == 'profile' else 'projects'
    if request.method == 'POST':
        editor = _profile_editor(request) if tab == 'profile' else _project_editor(request)
        if kind == 'success':
            editor.banners.dismiss_success()
        else:
            editor.banners.dismiss_error()
        editor.save_to(request.session)
    return _back_to(tab)


@session_gate(DASHBOARD_ROUTE)
def project_toggle_add(request):
    if request.method == 'POST':
        editor = _project_editor(request)
        editor.toggle_adding()
        editor.save_to(request.session)
    return _back_to('projects')


@session_gate(DASHBOARD_ROUTE)
def project_add(request):
    """Create a project from the add form."""
    if request.method == 'POST':
        editor = _project_editor(request)
        _apply_project_form(editor, request.POST)
        editor.add_project()
        editor.save_to(request.session)
    return _back_to('projects')


@session_gate(DASHBOARD_ROUTE)
def project_start_edit(request, project_id):
    """Put the project in edit mode, replacing any other one."""
    if request.method == 'POST':
        editor = _project_editor(request)
        editor.start_editing(project_id)
        editor.save_to(request.session)
    return _back_to('projects')


@session_gate(DASHBOARD_ROUTE)
def project_edit(request, project_id):
    """Save the edited copy of a project."""
    if request.method == 'POST':
        editor = _project_editor(request)
        if editor.editing is None or str(editor.editing.id) != str(project_id):
            editor.start_editing(project_id)
        if editor.editing is not None:
            _apply_project_form(editor, request.POST, target='editing')
            editor.update_project()
        editor.save_to(request.session)
    return _back_to('projects')


@session_gate(DASHBOARD_ROUTE)
def project_cancel_edit(request):
    if request.method == 'POST':
        editor = _project_editor(request)
        editor.cancel_editing()
        editor.save_to(request.session)
    return _back_to('projects')


@session_gate(DASHBOARD_ROUTE)
def project_delete(request, project_id):
    """Ask for confirmation on GET; delete on POST."""
    editor = _project_editor(request)
    project = editor.find(project_id)
    if project is None:
        editor.banners.fail('Project not found')
        editor.save_to(request.session)
        return _back_to('projects')

    if request.method == 'POST':
        editor.delete_project(project_id, confirmed=True)
        editor.save_to(request.session)
        return _back_to('projects')

    return render(request, 'dashboard/project_delete.html', {'project': project})


@session_gate(DASHBOARD_ROUTE)
def refresh(request):
    """Re-read every collection from the data service."""
    if request.method == 'POST':
        profile_editor = _profile_editor(request)
        profile_editor.load()
        profile_editor.save_to(request.session)

        project_editor = _project_editor(request)
        project_editor.fetch_all()
        project_editor.save_to(request.session)
    return _back_to(request.POST.get('tab', 'projects'))
