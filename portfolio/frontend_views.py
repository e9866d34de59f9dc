"""
Frontend views for the public portfolio page.
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.urls import reverse

from backend.client import get_data_service
from .forms import ContactForm
from .services import ALL_CATEGORIES, PortfolioService

logger = logging.getLogger(__name__)


def _page_context(request, form):
    snapshot = PortfolioService.load_snapshot(get_data_service())

    category = request.GET.get('category') or ALL_CATEGORIES
    projects = PortfolioService.filter_projects(snapshot.projects, category)

    selected = None
    carousel = None
    project_id = request.GET.get('project')
    if project_id:
        selected = PortfolioService.find_project(snapshot.projects, project_id)
    if selected is not None:
        count = len(selected.images)
        try:
            index = int(request.GET.get('image', 0))
        except ValueError:
            index = 0
        index = PortfolioService.wrap_image_index(index, count)
        carousel = {
            'index': index,
            'image': selected.images[index] if count else selected.image,
            'count': count,
            'prev': PortfolioService.wrap_image_index(index - 1, count),
            'next': PortfolioService.wrap_image_index(index + 1, count),
            'positions': list(range(count)),
        }

    return {
        'snapshot': snapshot,
        'sections': PortfolioService.build_sections(snapshot),
        'categories': PortfolioService.category_options(snapshot.projects),
        'active_category': category,
        'projects': projects,
        'selected_project': selected,
        'carousel': carousel,
        'form': form,
        'nav_links': [
            ('Home', 'home'),
            ('Projects', 'projects'),
            ('About', 'about'),
            ('Contact', 'contact'),
        ],
    }


def home(request):
    """Single page with hero, projects, about and contact sections."""
    return render(request, 'portfolio/home.html', _page_context(request, ContactForm()))


def contact(request):
    """
    Validate the contact form.

    A valid message is only logged and confirmed; it is not stored or sent.
    """
    if request.method != 'POST':
        return redirect(reverse('home') + '#contact')

    form = ContactForm(request.POST)
    if form.is_valid():
        logger.info("Contact form submitted: %s", form.cleaned_data)
        messages.success(request, 'Message sent successfully!')
        return redirect(reverse('home') + '#contact')

    return render(request, 'portfolio/home.html', _page_context(request, form))
